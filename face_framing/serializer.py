"""
Serialization for face framing.

Responsibility:
    Read face-detection API responses (JSON) into DetectedFace objects,
    and export a JSON manifest describing the thumbnails of a run.

Non-goals:
    - No network access; responses are read from files.
    - No image encoding or decoding.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from face_framing.face import DetectedFace
from face_framing.geometry import Rectangle

logger = logging.getLogger(__name__)


def parse_faces(payload: Union[list, dict]) -> List[DetectedFace]:
    """Convert a decoded detection response into DetectedFace objects.

    Accepted shapes:
        [{"faceId": "...", "faceRectangle": {"left": .., "top": .., "width": .., "height": ..}}, ...]
        {"faces": [ ...same elements... ]}

    Keys other than faceId and faceRectangle are ignored.

    Raises:
        ValueError: If the payload shape is wrong or a face has no
                    usable faceRectangle.
    """
    if isinstance(payload, dict):
        payload = payload.get("faces")

    if not isinstance(payload, list):
        raise ValueError(
            "Face payload must be a list of faces or an object with a 'faces' list."
        )

    faces: List[DetectedFace] = []
    for idx, item in enumerate(payload):
        if not isinstance(item, dict) or not isinstance(item.get("faceRectangle"), dict):
            raise ValueError(f"Face {idx} has no 'faceRectangle' object.")

        try:
            rect = Rectangle.from_dict(item["faceRectangle"])
        except ValueError as e:
            raise ValueError(f"Face {idx} has an invalid faceRectangle: {e}") from e

        face_id = item.get("faceId")
        faces.append(DetectedFace(
            face_rectangle=rect,
            face_id=str(face_id) if face_id is not None else None,
        ))

    return faces


def load_faces(path: str) -> List[DetectedFace]:
    """Load detected faces from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or has the wrong shape.
    """
    resolved = Path(path)
    if not resolved.is_file():
        raise FileNotFoundError(
            f"Faces file not found: {resolved}. "
            f"Provide the JSON response saved from the detection service."
        )

    with open(resolved, "r", encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Faces file is not valid JSON: {resolved} ({e})") from e

    faces = parse_faces(payload)
    logger.info("Loaded %d faces from %s", len(faces), resolved)
    return faces


def save_manifest(
    entries: List[Dict],
    total_faces: int,
    output_path: str,
) -> None:
    """Export a JSON manifest of the thumbnails written in a run.

    Output schema:
        {
            "thumbnails": [{"file": "thumbnail_000.png", "width": 65, "height": 65}],
            "total_faces": N,
            "total_thumbnails": M,
            "skipped_faces": N - M
        }

    Args:
        entries: One dict per written thumbnail.
        total_faces: Number of faces the thumbnails were cropped from.
        output_path: Path to the output JSON file.

    Raises:
        OSError: If the output path is not writable.
    """
    _ensure_parent_dir(output_path)

    payload = {
        "thumbnails": entries,
        "total_faces": total_faces,
        "total_thumbnails": len(entries),
        "skipped_faces": total_faces - len(entries),
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    logger.info(
        "JSON manifest saved: %s (%d thumbnails, %d faces)",
        output_path, len(entries), total_faces,
    )


def _ensure_parent_dir(path: str) -> None:
    """Create parent directories if they don't exist."""
    parent = Path(path).parent
    parent.mkdir(parents=True, exist_ok=True)
