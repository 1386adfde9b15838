"""
Batch thumbnail cropping.

Responsibility:
    Produce one thumbnail per detected face by enlarging each face
    rectangle and cropping that region out of the source image.

Failure behavior:
    - A face whose crop fails is logged and skipped; the batch continues.
      The result may therefore be shorter than the input, and positions
      in the result do not correspond to positions in the input.
    - The source image is never modified.
"""

import logging
from typing import Iterable, List, Optional

from face_framing.bitmap import Bitmap
from face_framing.enlarger import FACE_RECT_SCALE_RATIO, enlarge_face_rectangle
from face_framing.face import DetectedFace
from face_framing.geometry import ImageBounds

logger = logging.getLogger(__name__)


def crop_thumbnails(
    faces: Optional[Iterable[DetectedFace]],
    image: Bitmap,
    ratio: float = FACE_RECT_SCALE_RATIO,
) -> List[Bitmap]:
    """Crop an enlarged thumbnail for each face, in input order.

    Args:
        faces: Detected faces. None or empty yields an empty list.
        image: Source image to crop from.
        ratio: Enlargement ratio passed to enlarge_face_rectangle.

    Returns:
        Thumbnails for every face that could be cropped.
    """
    if not faces:
        return []

    bounds = ImageBounds(width=image.width, height=image.height)
    thumbnails: List[Bitmap] = []
    total = 0

    for index, face in enumerate(faces):
        total += 1
        try:
            rect = enlarge_face_rectangle(face.face_rectangle, bounds, ratio)
            thumbnails.append(image.crop(rect))
        except Exception:
            logger.exception(
                "Skipping face %d (face_id=%s): thumbnail crop failed.",
                index, getattr(face, "face_id", None),
            )

    logger.info(
        "Cropped %d thumbnails from %d faces (%d skipped).",
        len(thumbnails), total, total - len(thumbnails),
    )
    return thumbnails
