"""Utility helpers for reading tag documents and reporting problems."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

from .models import TagDocument


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def load_tag_document(path: Path) -> TagDocument:
    """Load and validate a tag document; ``.json`` files are parsed as JSON, anything else as YAML."""
    if path.suffix == ".json":
        data = read_json(path)
    else:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return TagDocument.model_validate(data or {})


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
