"""
Face rectangle enlargement.

Responsibility:
    Turn a raw detection box into a larger square region that frames the
    face more naturally: grown around the original box, nudged upward to
    include more forehead and hair, and kept inside the image.

Non-goals:
    - No pixel access or cropping.
    - No input validation; the face rectangle is expected to lie inside
      the image bounds.

Hard-coded:
    - Upward shift factor of 0.15 face heights per unit of enlargement,
      capped at one unit.
"""

from face_framing.geometry import ImageBounds, Rectangle

# A face rectangle scaled up by this ratio looks more natural.
FACE_RECT_SCALE_RATIO = 1.3

_SHIFT_UP_FACTOR = 0.15


def enlarge_face_rectangle(
    face_rectangle: Rectangle,
    image_bounds: ImageBounds,
    ratio: float = FACE_RECT_SCALE_RATIO,
) -> Rectangle:
    """Compute an enlarged square rectangle around a detected face.

    Args:
        face_rectangle: Detected face box, inside image_bounds.
        image_bounds: Size of the image containing the face.
        ratio: Enlargement factor. Values above 1.0 grow the box, 1.0
               keeps the face width, values below 1.0 shrink it.

    Returns:
        A square Rectangle with whole-pixel (truncated) coordinates,
        contained in image_bounds. Never raises; degenerate bounds
        produce a degenerate rectangle.
    """
    side_length = face_rectangle.width * ratio
    side_length = min(side_length, image_bounds.width, image_bounds.height)

    # Grow outward by half of the size increase on each side
    left = face_rectangle.left - face_rectangle.width * (ratio - 1.0) * 0.5
    left = max(left, 0.0)
    left = min(left, image_bounds.width - side_length)

    top = face_rectangle.top - face_rectangle.height * (ratio - 1.0) * 0.5
    top = max(top, 0.0)
    top = min(top, image_bounds.height - side_length)

    # Shift up so the box sits better on a human face
    shift_top = min(max(ratio - 1.0, 0.0), 1.0)
    top -= _SHIFT_UP_FACTOR * shift_top * face_rectangle.height
    top = max(top, 0.0)

    side = int(side_length)
    return Rectangle(left=int(left), top=int(top), width=side, height=side)
