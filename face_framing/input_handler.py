"""
Input handling for face framing.

Responsibility:
    Load the source photo from disk into a FrameBitmap.

Non-goals:
    - No video, webcam, or directory sources.
    - No face detection; faces come from serializer.load_faces().
"""

import logging
from pathlib import Path

import cv2

from face_framing.bitmap import FrameBitmap

logger = logging.getLogger(__name__)

# Image extensions recognized by this handler
_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".tiff", ".tif", ".webp"}


def load_image(path: str) -> FrameBitmap:
    """Read an image file as a BGR FrameBitmap.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the extension is unsupported or OpenCV cannot
                    decode the file.
    """
    resolved = Path(path)
    if not resolved.is_file():
        raise FileNotFoundError(
            f"Input image not found: '{resolved}'. Provide a valid file path."
        )

    ext = resolved.suffix.lower()
    if ext not in _IMAGE_EXTENSIONS:
        raise ValueError(
            f"Unrecognized image extension: '{ext}' for '{resolved}'. "
            f"Supported images: {_IMAGE_EXTENSIONS}."
        )

    frame = cv2.imread(str(resolved))
    if frame is None:
        raise ValueError(f"Unreadable image: '{resolved}'.")

    h, w = frame.shape[:2]
    logger.info("Loaded image %s (%dx%d)", resolved, w, h)
    return FrameBitmap(frame)
