"""
Live webcam loop: capture, pose, lunge pipeline, overlay window.
Keys: q = quit, r = reset session, s = snapshot.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Optional

import cv2

from .config import LungeConfig
from .features import JointSet
from .io_stream import webcam_frames
from .overlay import draw_realtime_overlay
from .pipeline import LungePipeline
from .pose import create_pose_detector, process_frame

logger = logging.getLogger(__name__)

# No-pose warning after this many seconds
NO_POSE_WARN_SEC = 2.0
# How long the "Rep N" banner stays up
REP_BANNER_SEC = 1.0


def run_live_pipeline(
    camera_id: int = 0,
    target_fps: float = 30,
    record: bool = False,
    output_dir: str = "outputs",
    config: Optional[LungeConfig] = None,
) -> int:
    """Run the capture loop until q; returns the session's rep count."""
    os.makedirs(output_dir, exist_ok=True)
    pose = create_pose_detector()

    last_progress: Optional[float] = None
    last_rep_time = 0.0

    def on_progress(progress: float) -> None:
        nonlocal last_progress
        last_progress = progress

    def on_rep(total: int) -> None:
        nonlocal last_rep_time
        last_rep_time = time.perf_counter()
        logger.info("live: rep %s", total)

    pipeline = LungePipeline(config or LungeConfig.from_env(), on_progress=on_progress, on_rep=on_rep)
    last_pose_time = time.perf_counter()
    video_writer: Optional[cv2.VideoWriter] = None
    win_name = "Lunge Counter (q=quit, r=reset, s=snapshot)"
    cv2.namedWindow(win_name, cv2.WINDOW_NORMAL)

    try:
        for frame_bgr, frame_idx, fps_est in webcam_frames(camera_id, target_fps=target_fps):
            joints: Optional[JointSet] = process_frame(frame_bgr, pose)
            if joints is not None:
                last_pose_time = time.perf_counter()
            update = pipeline.push(joints)

            now = time.perf_counter()
            message = None
            if now - last_pose_time > NO_POSE_WARN_SEC:
                message = "Move into frame"
            elif pipeline.rep_count and now - last_rep_time < REP_BANNER_SEC:
                message = f"Rep {pipeline.rep_count}!"

            out_frame = frame_bgr.copy()
            draw_realtime_overlay(out_frame, joints, update, last_progress, message)

            if record and video_writer is None:
                fourcc = cv2.VideoWriter_fourcc(*"mp4v")
                rec_path = os.path.join(output_dir, "live_recording.mp4")
                video_writer = cv2.VideoWriter(
                    rec_path, fourcc, max(1, int(fps_est)), (out_frame.shape[1], out_frame.shape[0])
                )
            if video_writer is not None:
                video_writer.write(out_frame)

            cv2.imshow(win_name, out_frame)
            key = cv2.waitKey(1) & 0xFF
            if key == ord("q"):
                break
            if key == ord("r"):
                pipeline.reset()
                last_progress = None
            if key == ord("s"):
                snap_path = os.path.join(output_dir, f"snapshot_{frame_idx}.jpg")
                cv2.imwrite(snap_path, out_frame)
                logger.info("live: saved %s", snap_path)
    finally:
        cv2.destroyAllWindows()
        if video_writer is not None:
            video_writer.release()

    logger.info(
        "live: done, reps=%s processed=%s skipped=%s",
        pipeline.rep_count, pipeline.frames_processed, pipeline.frames_skipped,
    )
    return pipeline.rep_count
