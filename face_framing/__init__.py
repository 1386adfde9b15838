"""
Face Framing: framing and thumbnail helpers for face-detection results.

Public API:
    - enlarge_face_rectangle: Enlarged, image-clamped square around a face.
    - crop_thumbnails: One thumbnail per detected face, skipping failures.
    - Rectangle, ImageBounds: Geometry value types.
    - DetectedFace: The face-detection result consumed by the cropper.
    - FrameBitmap: Bitmap implementation over numpy image arrays.

Usage:
    from face_framing import FrameBitmap, crop_thumbnails

    thumbnails = crop_thumbnails(faces, FrameBitmap(frame))
"""

from face_framing.bitmap import Bitmap, FrameBitmap
from face_framing.enlarger import FACE_RECT_SCALE_RATIO, enlarge_face_rectangle
from face_framing.face import DetectedFace
from face_framing.geometry import ImageBounds, Rectangle
from face_framing.thumbnails import crop_thumbnails

__all__ = [
    "Bitmap",
    "DetectedFace",
    "FACE_RECT_SCALE_RATIO",
    "FrameBitmap",
    "ImageBounds",
    "Rectangle",
    "crop_thumbnails",
    "enlarge_face_rectangle",
]
