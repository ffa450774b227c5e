"""Shared configuration utilities for the keyword table engine.

Configuration lives in a single file: `kwtable.config.yaml` in the project root.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load functions
2. KWTABLE_* environment variables
3. kwtable.config.yaml file (auto-discovered from cwd)
4. Default values

Example kwtable.config.yaml:
```yaml
engine:
  page_size: 30
  page_increment: 20
  batch_size: 500
  source_url: http://localhost:8000
  api_key: your-api-key
  taxonomy_file: taxonomy.yaml
```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "kwtable.config.yaml"


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find kwtable.config.yaml by searching from start_path up to root.

    Args:
        start_path: Directory to start search from (default: cwd).

    Returns:
        Path to config file if found, None otherwise.
    """
    current = Path(start_path) if start_path else Path.cwd()

    for parent in [current, *current.parents]:
        config_path = parent / CONFIG_FILENAME
        if config_path.exists():
            return config_path

    return None


def load_yaml_file(config_file: str | Path) -> Any:
    """Load a YAML file.

    Args:
        config_file: Path to YAML file.

    Returns:
        Parsed YAML content, or empty dict if the file doesn't exist or is empty.
    """
    path = Path(config_file)
    if not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def read_section(config: Any, section: str) -> dict[str, Any]:
    """Extract the settings of one section from a parsed config file.

    A file may nest settings under `section:` or keep them at the top level.
    When the section key is present its value is used, and a null or
    non-mapping value counts as no settings. Otherwise top-level scalar
    entries are used and other sections (mapping values) are skipped.

    Args:
        config: Parsed YAML content.
        section: Section name (e.g. 'engine').

    Returns:
        Settings dict, possibly empty.
    """
    if not isinstance(config, dict):
        return {}
    if section in config:
        value = config[section]
        return dict(value) if isinstance(value, dict) else {}
    return {k: v for k, v in config.items() if not isinstance(v, dict)}
