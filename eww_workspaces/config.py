"""Configuration loader for the workspace strip.

The widget look is configured through an optional JSON file whose keys are
the fields of WidgetConfig, e.g.:

    {
      "box_class": "sway-workspaces",
      "onclick_template": "swaymsg workspace number {key}"
    }
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .errors import ConfigError
from .models import WidgetConfig

logger = logging.getLogger(__name__)


def load_widget_config(path: Optional[Path] = None) -> WidgetConfig:
    """Load widget configuration.

    Args:
        path: JSON file to read. None returns the defaults.

    Returns:
        Validated WidgetConfig

    Raises:
        ConfigError: If the file is missing, not JSON, or fails validation
    """
    if path is None:
        return WidgetConfig()

    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    try:
        config = WidgetConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}")

    logger.info(f"Loaded widget config from {path}")
    return config
