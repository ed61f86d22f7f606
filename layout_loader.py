"""YAML / JSON loader for alternative mansion layouts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from models import MansionLayout

logger = logging.getLogger("detective_quest.layout_loader")

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


def load_layout_file(filepath: Path) -> Dict[str, Any]:
    """Read a single layout file into a plain dict."""
    suffix = filepath.suffix.lower()
    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise ValueError(
            f"Unsupported layout format {suffix!r}; use .yaml, .yml or .json"
        )
    with open(filepath, "r", encoding="utf-8") as f:
        if suffix in JSON_SUFFIXES:
            return json.load(f) or {}
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {filepath}: {exc}") from exc


def load_layout(path: Union[str, Path]) -> MansionLayout:
    """
    Load and validate a mansion layout.

    Raises:
        FileNotFoundError: the file does not exist.
        ValueError:        the extension is not supported, or the file is
                           not well-formed YAML or JSON.
        pydantic.ValidationError: the content is not a valid out-tree layout.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Layout file not found: {filepath}")

    data = load_layout_file(filepath)
    layout = MansionLayout.model_validate(data)
    logger.info(
        "Loaded layout %s — rooms=%d, associations=%d",
        filepath,
        len(layout.rooms),
        len(layout.associations),
    )
    return layout
