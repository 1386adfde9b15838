"""
Tests for the CLI entrypoint.
"""

import json
from pathlib import Path
from runpy import run_path

import cv2
import numpy as np

_MAIN = run_path(str(Path(__file__).resolve().parent.parent / "main.py"))["main"]


def _write_inputs(tmp_path):
    image_path = tmp_path / "photo.png"
    cv2.imwrite(str(image_path), np.full((300, 400, 3), 128, dtype=np.uint8))

    faces_path = tmp_path / "faces.json"
    faces_path.write_text(json.dumps([
        {"faceId": "a", "faceRectangle": {"left": 50, "top": 60, "width": 80, "height": 80}},
        {"faceId": "b", "faceRectangle": {"left": 200, "top": 100, "width": 0, "height": 0}},
        {"faceId": "c", "faceRectangle": {"left": 300, "top": 200, "width": 60, "height": 60}},
    ]), encoding="utf-8")
    return image_path, faces_path


def test_main_end_to_end(tmp_path):
    """Test a full run: one degenerate face skipped, two thumbnails written."""
    image_path, faces_path = _write_inputs(tmp_path)
    out_dir = tmp_path / "out"

    code = _MAIN([
        "--image", str(image_path),
        "--faces", str(faces_path),
        "--output-mode", "save_image,save_json",
        "--output-path", str(out_dir),
    ])

    assert code == 0
    assert sorted(p.name for p in out_dir.glob("*.png")) == [
        "thumbnail_000.png", "thumbnail_001.png",
    ]
    manifest = json.loads((out_dir / "thumbnails.json").read_text(encoding="utf-8"))
    assert manifest["total_faces"] == 3
    assert manifest["total_thumbnails"] == 2
    assert manifest["thumbnails"][0]["width"] == 104


def test_main_requires_inputs(tmp_path):
    """Test that missing --image/--faces is a configuration error."""
    assert _MAIN(["--output-path", str(tmp_path)]) == 1


def test_main_rejects_bad_ratio(tmp_path):
    """Test that CLI overrides are validated."""
    image_path, faces_path = _write_inputs(tmp_path)
    code = _MAIN([
        "--image", str(image_path),
        "--faces", str(faces_path),
        "--ratio", "-1",
        "--output-path", str(tmp_path / "out"),
    ])
    assert code == 1


def test_main_missing_image(tmp_path):
    """Test that a missing input file fails initialization."""
    _, faces_path = _write_inputs(tmp_path)
    code = _MAIN([
        "--image", str(tmp_path / "nope.png"),
        "--faces", str(faces_path),
        "--output-path", str(tmp_path / "out"),
    ])
    assert code == 1
