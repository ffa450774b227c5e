"""Engine configuration with support for environment variables and YAML files.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load_config()
2. Environment variables (KWTABLE_*)
3. YAML config file (explicit path, or kwtable.config.yaml discovered from cwd)
4. Default values
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from shared.config import find_config_file, load_yaml_file, read_section

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Keyword table engine configuration.

    Attributes:
        page_size: Rows visible after every reset (default: 30).
        page_increment: Rows added per load_more (default: 20).
        batch_size: Records generated per category by the synthetic source (default: 500).
        load_delay: Simulated dataset load latency in seconds (default: 0.8).
        load_more_delay: Simulated latency of load_more in seconds (default: 0.3).
        scroll_threshold: Distance from the bottom, in pixels, that triggers load_more (default: 200).
        default_category: Category loaded when a session starts (default: "1").
        source_url: Keyword backend URL. When unset the synthetic source is used.
        api_key: Optional API key for the keyword backend.
        http_timeout: Keyword backend request timeout in seconds (default: 10.0).
        taxonomy_file: Optional YAML file replacing the bundled category taxonomy.
    """

    page_size: int = 30
    page_increment: int = 20
    batch_size: int = 500
    load_delay: float = 0.8
    load_more_delay: float = 0.3
    scroll_threshold: int = 200
    default_category: str = "1"
    source_url: str | None = None
    api_key: str | None = None
    http_timeout: float = 10.0
    taxonomy_file: str | None = None


_INT_FIELDS = ("page_size", "page_increment", "batch_size", "scroll_threshold")
_FLOAT_FIELDS = ("load_delay", "load_more_delay", "http_timeout")


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> EngineConfig:
    """Load engine configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: Optional path to YAML config file. Settings are read from
            its `engine:` section, or from the top level when it has none.
            Unknown keys are ignored with a warning.
        **overrides: Direct config overrides (highest priority).

    Returns:
        EngineConfig instance.

    Example:
        # From environment variables
        config = load_config()

        # From YAML file with overrides
        config = load_config("kwtable.config.yaml", page_size=50)
    """
    config: dict[str, Any] = {}

    # 1. Load from YAML file (lowest priority after defaults)
    path = config_file or find_config_file()
    if path:
        settings = read_section(load_yaml_file(path), "engine")
        known = {f.name for f in fields(EngineConfig)}
        unknown = sorted(str(k) for k in settings if k not in known)
        if unknown:
            logger.warning("Ignoring unknown engine settings in %s: %s", path, ", ".join(unknown))
        config.update({k: v for k, v in settings.items() if k in known and v is not None})

    # 2. Override with environment variables
    env_mapping = {
        "page_size": "KWTABLE_PAGE_SIZE",
        "page_increment": "KWTABLE_PAGE_INCREMENT",
        "batch_size": "KWTABLE_BATCH_SIZE",
        "load_delay": "KWTABLE_LOAD_DELAY",
        "load_more_delay": "KWTABLE_LOAD_MORE_DELAY",
        "scroll_threshold": "KWTABLE_SCROLL_THRESHOLD",
        "default_category": "KWTABLE_DEFAULT_CATEGORY",
        "source_url": "KWTABLE_SOURCE_URL",
        "api_key": "KWTABLE_API_KEY",
        "http_timeout": "KWTABLE_HTTP_TIMEOUT",
        "taxonomy_file": "KWTABLE_TAXONOMY_FILE",
    }

    for key, env_var in env_mapping.items():
        if env_val := os.getenv(env_var):
            config[key] = env_val

    # 3. Override with explicit kwargs (highest priority)
    config.update({k: v for k, v in overrides.items() if v is not None})

    # Type conversions
    for key in _INT_FIELDS:
        if key in config:
            config[key] = int(config[key])
    for key in _FLOAT_FIELDS:
        if key in config:
            config[key] = float(config[key])
    if "default_category" in config:
        config["default_category"] = str(config["default_category"])

    return EngineConfig(**config)
