"""
Bitmap capability used by the thumbnail cropper.

Responsibility:
    Define the minimal pixel-buffer contract the cropper depends on
    (Bitmap) and provide FrameBitmap, an implementation over OpenCV-style
    numpy arrays.

Constraints:
    - crop() and copy() always return a new, independently owned bitmap.
      The source array is never modified.

Non-goals:
    - No decoding, encoding, or file I/O.
    - No drawing or color handling.
"""

from typing import Protocol

import numpy as np

from face_framing.geometry import ImageBounds, Rectangle


class Bitmap(Protocol):
    """Pixel buffer that can be duplicated and cropped."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def copy(self) -> "Bitmap": ...

    def crop(self, rect: Rectangle) -> "Bitmap": ...


class FrameBitmap:
    """Bitmap backed by a numpy image array of shape (H, W) or (H, W, C).

    Usage:
        bitmap = FrameBitmap(cv2.imread("photo.jpg"))
        face = bitmap.crop(Rectangle(left=10, top=10, width=64, height=64))
        cv2.imwrite("face.png", face.frame)
    """

    def __init__(self, frame: np.ndarray) -> None:
        """Wrap a frame.

        Raises:
            TypeError: If frame is not a numpy ndarray.
            ValueError: If frame is empty or has unsupported dimensions.
        """
        self._validate_frame(frame)
        self._frame = frame

    @property
    def frame(self) -> np.ndarray:
        """The underlying array. Treat as read-only."""
        return self._frame

    @property
    def width(self) -> int:
        return int(self._frame.shape[1])

    @property
    def height(self) -> int:
        return int(self._frame.shape[0])

    @property
    def bounds(self) -> ImageBounds:
        """Image dimensions as an ImageBounds value."""
        return ImageBounds(width=self.width, height=self.height)

    def copy(self) -> "FrameBitmap":
        """Return a full-resolution, independently owned duplicate."""
        return FrameBitmap(self._frame.copy())

    def crop(self, rect: Rectangle) -> "FrameBitmap":
        """Return a new bitmap holding only the pixels inside rect.

        Fractional coordinates are truncated to whole pixels.

        Raises:
            ValueError: If rect has non-positive size or is not fully
                        inside the frame.
        """
        left, top = int(rect.left), int(rect.top)
        width, height = int(rect.width), int(rect.height)

        if width <= 0 or height <= 0:
            raise ValueError(
                f"Crop region must have positive size, got {width}x{height}."
            )

        if left < 0 or top < 0 or left + width > self.width or top + height > self.height:
            raise ValueError(
                f"Crop region (left={left}, top={top}, width={width}, height={height}) "
                f"is outside the {self.width}x{self.height} frame."
            )

        region = self._frame[top:top + height, left:left + width]
        return FrameBitmap(region.copy())

    @staticmethod
    def _validate_frame(frame: np.ndarray) -> None:
        if not isinstance(frame, np.ndarray):
            raise TypeError(
                f"Expected frame to be a numpy ndarray, "
                f"got {type(frame).__name__}. "
                f"Use cv2.imread() to obtain frames."
            )

        if frame.size == 0:
            raise ValueError("Frame is empty (zero size).")

        if frame.ndim not in (2, 3):
            raise ValueError(
                f"Expected a 2- or 3-dimensional frame (H, W[, C]), "
                f"got {frame.ndim} dimensions with shape {frame.shape}."
            )
