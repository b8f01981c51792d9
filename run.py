#!/usr/bin/env python3
"""
Lunge rep counting: offline (video) or live (webcam).
Usage:
  Offline: python run.py --video path/to/video.mp4
  Live:    python run.py --live [--camera 0] [--record]
"""
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import os
import sys
from typing import Any, Optional

from lungesense.config import LungeConfig
from lungesense.errors import ConfigError
from lungesense.io_stream import video_frames
from lungesense.live import run_live_pipeline
from lungesense.pipeline import LungePipeline
from lungesense.pose import create_pose_detector, process_frame

logger = logging.getLogger("lungesense.run")


def run_offline(video_path: str, output_dir: str = "outputs", config: Optional[LungeConfig] = None) -> int:
    """Process video file: pose -> lunge pipeline -> lunge_metrics.json. Returns rep count."""
    os.makedirs(output_dir, exist_ok=True)
    pose = create_pose_detector()
    pipeline = LungePipeline(config or LungeConfig.from_env())
    frames: list[dict[str, Any]] = []
    reps: list[dict[str, Any]] = []
    fps = 30.0
    for frame_bgr, frame_idx, fps in video_frames(video_path):
        update = pipeline.push(process_frame(frame_bgr, pose))
        frames.append({
            "frame": frame_idx,
            "state": update["state"],
            "progress": round(update["progress"], 4) if update["progress"] is not None else None,
            "status": update["status"],
        })
        if update["rep_completed"]:
            reps.append({"rep": update["rep_count"], "end_frame": frame_idx, "time_sec": frame_idx / fps})

    metrics_path = os.path.join(output_dir, "lunge_metrics.json")
    with open(metrics_path, "w") as f:
        json.dump(
            {
                "rep_count": pipeline.rep_count,
                "reps": reps,
                "fps": fps,
                "frames_processed": pipeline.frames_processed,
                "frames_skipped": pipeline.frames_skipped,
                "frames": frames,
            },
            f,
            indent=2,
        )
    logger.info("offline: %s frames, metrics written to %s", len(frames), metrics_path)
    return pipeline.rep_count


def main() -> None:
    ap = argparse.ArgumentParser(description="Lunge rep counter: offline video or live webcam")
    ap.add_argument("--video", type=str, default=None, help="Path to video file (offline mode)")
    ap.add_argument("--live", action="store_true", help="Use live webcam")
    ap.add_argument("--camera", type=int, default=0, help="Camera device id (default 0)")
    ap.add_argument("--record", action="store_true", help="Save live_recording.mp4 in live mode")
    ap.add_argument("--output-dir", type=str, default="outputs", help="Output directory")
    ap.add_argument("--window", type=int, default=None, help="Smoothing window in frames (default from env or 5)")
    ap.add_argument("--log-level", type=str, default="INFO", help="Logging level (default INFO)")
    args = ap.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.live and args.video:
        print("Error: provide exactly one of --video or --live", file=sys.stderr)
        sys.exit(1)
    if not args.live and not args.video:
        print("Error: provide --video PATH or --live", file=sys.stderr)
        sys.exit(1)

    try:
        config = LungeConfig.from_env()
        if args.window is not None:
            config = dataclasses.replace(config, smoothing_window=args.window)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.live:
        reps = run_live_pipeline(
            camera_id=args.camera,
            record=args.record,
            output_dir=args.output_dir,
            config=config,
        )
    else:
        if not os.path.isfile(args.video):
            print(f"Error: video file not found: {args.video}", file=sys.stderr)
            sys.exit(1)
        reps = run_offline(args.video, output_dir=args.output_dir, config=config)
    print(f"Done. Reps: {reps}")


if __name__ == "__main__":
    main()
