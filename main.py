"""
Face Framing CLI Entrypoint.

Responsibility:
    Parse command-line arguments, configure the application, load the
    photo and its face-detection results, crop one thumbnail per face,
    and write the configured outputs.

Usage:
    python main.py --image photo.jpg --faces faces.json
    python main.py --image photo.jpg --faces faces.json --ratio 1.5
    python main.py --config my_config.yaml --output-mode save_image,save_json

This module is the executable entry point. It should not be imported
by other modules.
"""

import argparse
import logging
import sys
from typing import List, Optional

# Configure logging before importing local modules
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("main")

from face_framing.config import load_config, validate_config
from face_framing.input_handler import load_image
from face_framing.output_handler import OutputHandler
from face_framing.serializer import load_faces
from face_framing.thumbnails import crop_thumbnails


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Face Framing: crop face thumbnails from detection results",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--image",
        type=str,
        help="Path to the source photo. Overrides config.",
    )
    parser.add_argument(
        "--faces",
        type=str,
        help="Path to the face-detection JSON response. Overrides config.",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--ratio",
        type=float,
        help="Face rectangle enlarge ratio. Overrides config.",
    )
    parser.add_argument(
        "--output-mode",
        type=str,
        help="Output mode(s), comma-separated: save_image, save_json. "
             "Overrides config.",
    )
    parser.add_argument(
        "--output-path",
        type=str,
        help="Directory for thumbnails and manifest. Overrides config.",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one framing job."""
    args = parse_args(argv)

    # 1. Load Configuration (CLI args > ENV > YAML > Defaults)
    try:
        config = load_config(args.config)

        # Apply CLI overrides
        # We must use object.__setattr__ because the dataclass is frozen
        if args.image is not None:
            object.__setattr__(config.input, "image_path", args.image)

        if args.faces is not None:
            object.__setattr__(config.input, "faces_path", args.faces)

        if args.ratio is not None:
            object.__setattr__(config.framing, "enlarge_ratio", args.ratio)

        if args.output_mode is not None:
            object.__setattr__(config.output, "mode", args.output_mode)

        if args.output_path is not None:
            object.__setattr__(config.output, "save_path", args.output_path)

        validate_config(config)

        if config.input.image_path is None or config.input.faces_path is None:
            raise ValueError(
                "Both an image (--image) and a faces file (--faces) are required."
            )

        logger.info("Configuration active for this run.")

    except Exception as e:
        logger.error("Configuration error: %s", e)
        return 1

    # 2. Load inputs
    try:
        image = load_image(config.input.image_path)
        faces = load_faces(config.input.faces_path)
        output_handler = OutputHandler(config)

    except (FileNotFoundError, ValueError, OSError) as e:
        logger.error("Initialization failed: %s", e)
        return 1

    # 3. Crop and write
    try:
        thumbnails = crop_thumbnails(faces, image, config.framing.enlarge_ratio)
        output_handler.save(thumbnails, total_faces=len(faces))
    except Exception as e:
        logger.exception("Runtime error during processing: %s", e)
        return 1

    logger.info(
        "Processing finished. Faces: %d. Thumbnails: %d.",
        len(faces), len(thumbnails),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
