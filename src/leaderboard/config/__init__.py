"\"\"\"Configuration file loading.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping, treating an empty document as ``{}``.

    Unreadable or malformed files raise ``ValueError``.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ValueError(f"Config file is not valid UTF-8: {path}") from exc
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must be a YAML mapping: {path}")
    return loaded


__all__ = ["load_yaml"]
