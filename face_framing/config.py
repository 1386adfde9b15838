"""
Configuration management for face framing.

Provides a layered configuration system with the following precedence
(highest to lowest):

    CLI arguments > Environment variables > YAML config file > Defaults

Design constraints:
    - The library MUST run with zero configuration (safe defaults only).
    - Missing or invalid values fail early and loudly.
    - No framing logic or image I/O belongs here.

Non-goals:
    - No dynamic reloading.
    - No remote configuration.
"""

import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from face_framing.enlarger import FACE_RECT_SCALE_RATIO

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Configuration dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FramingConfig:
    """Face framing parameters.

    Attributes:
        enlarge_ratio: How much larger the thumbnail region is than the
                       detected face box.
    """

    enlarge_ratio: float = FACE_RECT_SCALE_RATIO


@dataclass(frozen=True)
class InputConfig:
    """Input locations.

    Attributes:
        image_path: Source photo the faces were detected in.
        faces_path: JSON file holding the face-detection API response.
    """

    image_path: Optional[str] = None
    faces_path: Optional[str] = None


@dataclass(frozen=True)
class OutputConfig:
    """Output behavior configuration.

    Attributes:
        mode: Output mode(s), comma-separated: 'save_image', 'save_json'.
        save_path: Directory where thumbnails and the manifest are written.
        image_format: File extension used for thumbnails.
        filename_prefix: Prefix of thumbnail file names.
    """

    mode: str = "save_image"
    save_path: str = "output/"
    image_format: str = "png"
    filename_prefix: str = "thumbnail"


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    framing: FramingConfig = field(default_factory=FramingConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

_VALID_OUTPUT_MODES = {"save_image", "save_json"}
_VALID_IMAGE_FORMATS = {"png", "jpg", "jpeg", "bmp", "webp"}


def parse_modes(mode: str) -> set:
    """Split a comma-separated mode string into a set of mode names."""
    return {m.strip() for m in mode.split(",") if m.strip()}


def validate_config(config: AppConfig) -> None:
    """Validate configuration values. Raises ValueError on invalid state."""

    ratio = config.framing.enlarge_ratio
    if not math.isfinite(ratio) or ratio <= 0:
        raise ValueError(
            f"framing.enlarge_ratio must be a positive finite number, got {ratio}."
        )

    modes = parse_modes(config.output.mode)
    if not modes:
        raise ValueError("output.mode must name at least one output mode.")

    invalid_modes = modes - _VALID_OUTPUT_MODES
    if invalid_modes:
        raise ValueError(
            f"Invalid output.mode(s): {invalid_modes}. "
            f"Valid modes: {_VALID_OUTPUT_MODES}. "
            f"Use comma-separated values for multiple outputs."
        )

    if config.output.image_format not in _VALID_IMAGE_FORMATS:
        raise ValueError(
            f"Invalid output.image_format: '{config.output.image_format}'. "
            f"Must be one of {_VALID_IMAGE_FORMATS}."
        )

    if not config.output.filename_prefix:
        raise ValueError("output.filename_prefix must not be empty.")


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------

def _optional_str(value) -> Optional[str]:
    return str(value) if value is not None else None


def _build_framing_config(raw: dict) -> FramingConfig:
    """Build FramingConfig from a raw YAML dict."""
    kwargs = {}
    if "enlarge_ratio" in raw:
        kwargs["enlarge_ratio"] = float(raw["enlarge_ratio"])
    return FramingConfig(**kwargs)


def _build_input_config(raw: dict) -> InputConfig:
    """Build InputConfig from a raw YAML dict."""
    kwargs = {}
    if "image_path" in raw:
        kwargs["image_path"] = _optional_str(raw["image_path"])
    if "faces_path" in raw:
        kwargs["faces_path"] = _optional_str(raw["faces_path"])
    return InputConfig(**kwargs)


def _build_output_config(raw: dict) -> OutputConfig:
    """Build OutputConfig from a raw YAML dict."""
    kwargs = {}
    if "mode" in raw:
        kwargs["mode"] = str(raw["mode"]).lower()
    if "save_path" in raw:
        kwargs["save_path"] = str(raw["save_path"])
    if "image_format" in raw:
        kwargs["image_format"] = str(raw["image_format"]).lower().lstrip(".")
    if "filename_prefix" in raw:
        kwargs["filename_prefix"] = str(raw["filename_prefix"])
    return OutputConfig(**kwargs)


# ---------------------------------------------------------------------------
# Environment variable overrides
# ---------------------------------------------------------------------------

_ENV_PREFIX = "FACE_FRAMING_"


def _apply_env_overrides(raw: dict) -> dict:
    """Apply environment variable overrides to the raw config dict.

    Environment variables follow the pattern:
        FACE_FRAMING_FRAMING_ENLARGE_RATIO=1.5
        FACE_FRAMING_OUTPUT_SAVE_PATH=/tmp/thumbs
    """
    env_map = {
        f"{_ENV_PREFIX}FRAMING_ENLARGE_RATIO": ("framing", "enlarge_ratio"),
        f"{_ENV_PREFIX}INPUT_IMAGE_PATH": ("input", "image_path"),
        f"{_ENV_PREFIX}INPUT_FACES_PATH": ("input", "faces_path"),
        f"{_ENV_PREFIX}OUTPUT_MODE": ("output", "mode"),
        f"{_ENV_PREFIX}OUTPUT_SAVE_PATH": ("output", "save_path"),
        f"{_ENV_PREFIX}OUTPUT_IMAGE_FORMAT": ("output", "image_format"),
        f"{_ENV_PREFIX}OUTPUT_FILENAME_PREFIX": ("output", "filename_prefix"),
    }

    for env_var, (section, key) in env_map.items():
        value = os.environ.get(env_var)
        if value is not None:
            section_raw = raw.get(section)
            if not isinstance(section_raw, dict):
                section_raw = raw[section] = {}
            section_raw[key] = value
            logger.debug("Config override from env: %s=%s", env_var, value)

    return raw


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------

def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load and validate application configuration.

    Precedence (highest → lowest):
        Environment variables > YAML file > Hard-coded defaults

    Args:
        config_path: Path to a YAML configuration file. If None, the
                     defaults are used (safe for programmatic usage).

    Returns:
        A validated, frozen AppConfig instance.

    Raises:
        FileNotFoundError: If config_path is provided but does not exist.
        ValueError: If any configuration value is invalid.
        yaml.YAMLError: If the YAML file is malformed.
    """
    raw: dict = {}

    # --- Layer 1: YAML file ---
    if config_path is not None:
        resolved = Path(config_path)
        if not resolved.is_file():
            raise FileNotFoundError(
                f"Configuration file not found: {resolved}. "
                f"Provide a valid path or omit to use defaults."
            )

        logger.info("Loading config from: %s", resolved)
        with open(resolved, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError(
                f"Configuration file must contain a mapping, got {type(raw).__name__}."
            )

    # --- Layer 2: Environment variable overrides ---
    raw = _apply_env_overrides(raw)

    # --- Build typed configs ---
    config = AppConfig(
        framing=_build_framing_config(raw.get("framing") or {}),
        input=_build_input_config(raw.get("input") or {}),
        output=_build_output_config(raw.get("output") or {}),
    )

    # --- Validate ---
    validate_config(config)

    logger.debug("Configuration loaded: %s", config)
    return config
