"""YAML configuration loading for siwk.

Uses ``yaml.safe_load`` so a message request file can never instantiate
arbitrary Python objects through YAML tags.

Examples:
    ```python
    from siwk.core.yaml import load_yaml

    data = load_yaml("config/message.yaml")
    ```

See Also:
    [SiwkConfig.from_yaml()][siwk.message.config.SiwkConfig.from_yaml]:
        Parses the returned dictionary into typed configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a dictionary. Returns an empty dict if the
        file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.

    Warning:
        The structure of the returned dictionary is not validated here.
        Pass it to [SiwkConfig][siwk.message.config.SiwkConfig] for schema
        validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
