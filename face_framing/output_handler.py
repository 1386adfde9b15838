"""
Output handling for face framing.

Responsibility:
    Route cropped thumbnails to the configured output sinks: image files
    and a JSON manifest. Multiple modes may be active at once.

Non-goals:
    - No cropping or framing logic.
    - No display windows.
"""

import logging
from pathlib import Path
from typing import List

import cv2

from face_framing.bitmap import FrameBitmap
from face_framing.config import AppConfig, parse_modes
from face_framing.serializer import save_manifest

logger = logging.getLogger(__name__)

_MANIFEST_NAME = "thumbnails.json"


class OutputHandler:
    """Writes thumbnails according to the output configuration.

    Supported modes:
        - 'save_image': Write each thumbnail as an image file.
        - 'save_json': Write a manifest describing the thumbnails.

    Usage:
        handler = OutputHandler(config)
        paths = handler.save(thumbnails, total_faces=len(faces))
    """

    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._modes = parse_modes(config.output.mode)
        self._save_path = Path(config.output.save_path)
        self._save_path.mkdir(parents=True, exist_ok=True)

        logger.info("OutputHandler initialized: modes=%s, save_path=%s",
                    self._modes, self._save_path)

    @property
    def save_path(self) -> Path:
        return self._save_path

    def save(self, thumbnails: List[FrameBitmap], total_faces: int) -> List[Path]:
        """Write thumbnails and/or the manifest.

        Args:
            thumbnails: Cropped thumbnails, in output order.
            total_faces: Number of faces the thumbnails were cropped from.

        Returns:
            Paths of the thumbnail files (written or, without
            'save_image', the names the manifest refers to).

        Raises:
            OSError: If OpenCV fails to write an image.
        """
        output = self._config.output
        paths = [
            self._save_path / f"{output.filename_prefix}_{idx:03d}.{output.image_format}"
            for idx in range(len(thumbnails))
        ]

        if "save_image" in self._modes:
            for path, thumbnail in zip(paths, thumbnails):
                if not cv2.imwrite(str(path), thumbnail.frame):
                    raise OSError(f"Failed to write thumbnail: {path}")
                logger.debug("Saved thumbnail to %s", path)
            logger.info("Saved %d thumbnails to %s", len(paths), self._save_path)

        if "save_json" in self._modes:
            entries = [
                {"file": path.name, "width": thumbnail.width, "height": thumbnail.height}
                for path, thumbnail in zip(paths, thumbnails)
            ]
            save_manifest(entries, total_faces, str(self._save_path / _MANIFEST_NAME))

        return paths
