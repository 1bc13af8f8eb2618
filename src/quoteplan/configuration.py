# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

from quoteplan.errors import ConfigurationError
from quoteplan.model.layout import DEFAULT_LAYOUT_CONFIGURATION, LayoutConfiguration

APP_NAME = "quoteplan"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    show_header: bool
    work_on_saturday: bool
    work_on_sunday: bool
    cells_per_day: int
    log_level: str
    layout: LayoutConfiguration


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "work_on_saturday": False,
        "work_on_sunday": False,
        "cells_per_day": 2,
        "log_level": "WARNING",
        "layout": dict(DEFAULT_LAYOUT_CONFIGURATION),  # type: ignore[typeddict-item]
    }


def layout_configuration_from(config: Configuration) -> LayoutConfiguration:
    """
    Build the layout constants from a configuration, filling in defaults.

    Every dimension must be strictly positive so that pixel math never divides
    by zero; the minimum segment width may be zero.

    Raises:
        ConfigurationError: If a constant is missing a usable numeric value
    """
    layout = LayoutConfiguration(**DEFAULT_LAYOUT_CONFIGURATION)
    overrides = config.get("layout") or {}
    for key, value in overrides.items():
        if key not in DEFAULT_LAYOUT_CONFIGURATION:
            raise ConfigurationError(f"Unknown layout setting '{key}'")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"Layout setting '{key}' must be a number")
        layout[key] = value  # type: ignore[literal-required]

    for key, value in layout.items():
        if key == "minimum_width":
            if value < 0:
                raise ConfigurationError("Layout setting 'minimum_width' must be >= 0")
        elif value <= 0:
            raise ConfigurationError(f"Layout setting '{key}' must be > 0")

    return layout
