"""
Detected face model.

A DetectedFace is the slice of a face-detection API result that the
framing code consumes: the face rectangle, plus the service-assigned
identifier for diagnostics.

Non-goals:
    - No landmarks or attributes (only drawing code would use them).
"""

from dataclasses import dataclass
from typing import Optional

from face_framing.geometry import Rectangle


@dataclass(frozen=True, slots=True)
class DetectedFace:
    """A single face reported by the detection service.

    Attributes:
        face_rectangle: Bounding box of the face in source-image pixels.
        face_id: Identifier assigned by the detection service, if any.
    """

    face_rectangle: Rectangle
    face_id: Optional[str] = None
