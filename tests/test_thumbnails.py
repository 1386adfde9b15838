"""
Tests for the thumbnails module.
"""

import logging

import numpy as np

from face_framing.bitmap import FrameBitmap
from face_framing.face import DetectedFace
from face_framing.geometry import Rectangle
from face_framing.thumbnails import crop_thumbnails


class _RecordingBitmap:
    """Bitmap stand-in that records crops and fails on demand."""

    def __init__(self, width, height, fail_on=()):
        self.width = width
        self.height = height
        self.fail_on = set(fail_on)
        self.crops = []

    def copy(self):
        return _RecordingBitmap(self.width, self.height, self.fail_on)

    def crop(self, rect):
        self.crops.append(rect)
        if rect.left in self.fail_on:
            raise RuntimeError(f"simulated crop failure at left={rect.left}")
        return ("thumb", rect.left)


def _face(left, top=100, size=50, face_id=None):
    return DetectedFace(
        face_rectangle=Rectangle(left=left, top=top, width=size, height=size),
        face_id=face_id,
    )


def test_empty_faces_returns_empty_list(caplog):
    """Test that no faces yields no thumbnails and no errors."""
    image = _RecordingBitmap(500, 500)

    with caplog.at_level(logging.INFO):
        assert crop_thumbnails([], image) == []
        assert crop_thumbnails(None, image) == []

    assert image.crops == []
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_thumbnails_follow_input_order():
    """Test one thumbnail per face, in input order, using enlarged rects."""
    image = _RecordingBitmap(1000, 500)
    faces = [_face(100), _face(300), _face(600)]

    thumbnails = crop_thumbnails(faces, image)

    assert thumbnails == [("thumb", 92), ("thumb", 292), ("thumb", 592)]
    assert image.crops[0] == Rectangle(left=92, top=90, width=65, height=65)


def test_failed_crop_is_skipped_and_logged(caplog):
    """Test partial-failure policy: the failing face is dropped, batch continues."""
    image = _RecordingBitmap(1000, 500, fail_on={292})
    faces = [_face(100), _face(300, face_id="bad-face"), _face(600)]

    with caplog.at_level(logging.ERROR, logger="face_framing.thumbnails"):
        thumbnails = crop_thumbnails(faces, image)

    assert thumbnails == [("thumb", 92), ("thumb", 592)]
    assert len(image.crops) == 3

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "bad-face" in errors[0].getMessage()
    assert errors[0].exc_info is not None


def test_custom_ratio_is_applied():
    """Test that the ratio argument reaches the enlarger."""
    image = _RecordingBitmap(500, 500)

    crop_thumbnails([_face(100)], image, ratio=1.0)

    assert image.crops == [Rectangle(left=100, top=100, width=50, height=50)]


def test_frame_bitmap_batch_with_degenerate_face(caplog):
    """Test a real frame where a zero-width detection cannot be cropped."""
    frame = np.zeros((200, 300, 3), dtype=np.uint8)
    frame[:, :, 2] = 255
    image = FrameBitmap(frame)
    faces = [
        _face(20, top=20, size=40),
        _face(150, top=50, size=0),
        _face(200, top=80, size=60),
    ]

    with caplog.at_level(logging.ERROR):
        thumbnails = crop_thumbnails(faces, image)

    assert [(t.width, t.height) for t in thumbnails] == [(52, 52), (78, 78)]
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1


def test_source_image_not_modified():
    """Test that cropping leaves the source frame untouched."""
    frame = np.arange(100 * 100 * 3, dtype=np.uint8).reshape(100, 100, 3)
    original = frame.copy()
    image = FrameBitmap(frame)

    thumbnails = crop_thumbnails([_face(20, top=20, size=40)], image)
    thumbnails[0].frame[:] = 0

    np.testing.assert_array_equal(image.frame, original)
