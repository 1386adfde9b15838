"""
Geometry value types for face framing.

This module defines Rectangle and ImageBounds, the immutable inputs and
outputs of the framing computations. Both are frozen, serializable
containers with no behavior beyond data access.

Coordinates are image pixels: origin top-left, x to the right, y down.
Values may be fractional while a computation is in progress; final
framing results carry whole-pixel values.

Non-goals:
    - No rendering logic.
    - No clamping or enlargement (that belongs in enlarger).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle in image-pixel coordinates.

    Attributes:
        left: X coordinate of the left edge.
        top: Y coordinate of the top edge.
        width: Horizontal extent in pixels.
        height: Vertical extent in pixels.
    """

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.left + self.width

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.top + self.height

    def to_dict(self) -> dict:
        """Return a plain dict suitable for JSON serialization."""
        return {
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, raw: dict) -> "Rectangle":
        """Build a Rectangle from a dict with left/top/width/height keys.

        Raises:
            ValueError: If a key is missing or a value is not numeric.
        """
        try:
            return cls(
                left=float(raw["left"]),
                top=float(raw["top"]),
                width=float(raw["width"]),
                height=float(raw["height"]),
            )
        except KeyError as e:
            raise ValueError(f"Rectangle is missing key {e}: {raw}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"Rectangle values must be numeric: {raw}") from e


@dataclass(frozen=True, slots=True)
class ImageBounds:
    """Dimensions of the image a rectangle lives in."""

    width: float
    height: float
