import json

import run


def test_run_offline_writes_metrics(make_joints, monkeypatch, tmp_path):
    # frame 0 has no pose; the remaining 20 lunge once with a 5-frame window
    frames = (
        [None]
        + [make_joints(0.0, 0.0)] * 5
        + [make_joints(110.0, 110.0)] * 5
        + [make_joints(2.0, 2.0)] * 10
    )

    def fake_frames(path):
        for idx, joints in enumerate(frames):
            yield (joints, idx, 20.0)

    monkeypatch.setattr(run, "video_frames", fake_frames)
    monkeypatch.setattr(run, "create_pose_detector", lambda: None)
    monkeypatch.setattr(run, "process_frame", lambda frame, pose: frame)

    reps = run.run_offline("clip.mp4", output_dir=str(tmp_path))

    data = json.loads((tmp_path / "lunge_metrics.json").read_text())
    assert reps == 1
    assert data["rep_count"] == 1
    assert [r["end_frame"] for r in data["reps"]] == [16]
    assert data["reps"][0]["time_sec"] == 16 / 20.0
    assert data["frames_skipped"] == 1
    assert data["frames_processed"] == 20
    assert len(data["frames"]) == len(frames)
    assert data["frames"][0] == {"frame": 0, "state": "STANDING", "progress": None, "status": "No pose"}
    assert data["frames"][15]["state"] == "LUNGE_UP"
    assert data["frames"][16]["progress"] is None
    assert data["frames"][-1]["state"] == "STANDING"
    assert all(
        f["progress"] is None or 0.0 <= f["progress"] <= 1.0 for f in data["frames"]
    )
