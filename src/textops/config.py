"""Configuration loading and validation."""

from __future__ import annotations

import os
from typing import Any

from textops.types import TextOpsConfig


def _flag(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def load_config(**overrides: Any) -> TextOpsConfig:
    """Load configuration from environment variables and overrides."""
    env_mappings: dict[str, str | tuple[str, Any]] = {
        "TEXTOPS_SEPARATOR": "separator",
        "TEXTOPS_LEGACY_COLOR_STRIP": ("legacy_color_strip", _flag),
        "TEXTOPS_VERBOSE": ("verbose", _flag),
    }

    config_data: dict[str, Any] = {}
    for env_var, mapping in env_mappings.items():
        val = os.environ.get(env_var)
        if val is not None:
            if isinstance(mapping, str):
                config_data[mapping] = val
            else:
                field_name, converter = mapping
                config_data[field_name] = converter(val)

    config_data.update({k: v for k, v in overrides.items() if v is not None})
    return TextOpsConfig(**config_data)
