"""AfmLoader - reads AFM documents from JSON or YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}


class AfmLoader:
    """
    Load a single AFM-related document.

    Handles:
    - `.json` files via json
    - `.yml` / `.yaml` files via yaml.safe_load
    - empty files (loaded as an empty dict)
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Any:
        """Parse the file and return the raw document."""
        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")

        content = self.path.read_text(encoding="utf-8")
        if not content.strip():
            logger.debug("Empty document %s", self.path)
            return {}

        if self.path.suffix.lower() in YAML_SUFFIXES:
            document = yaml.safe_load(content)
        else:
            document = json.loads(content)

        logger.debug("Loaded %s", self.path)
        return {} if document is None else document

    def load_dict(self) -> dict[str, Any]:
        """Parse the file, requiring a mapping at the root."""
        document = self.load()
        if not isinstance(document, dict):
            raise ValueError(
                f"Expected dict at root of {self.path}, got {type(document)}"
            )
        return document
