"""
File loading shared by configuration and snapshot input.
Reads a YAML or JSON document and returns its parsed content.
"""

from typing import Any
import json
import os

import yaml


def read_document(path: str, kind: str, missing_hint: str = "") -> Any:
    """
    Read and parse a YAML or JSON file.

    Paths ending in .json are parsed with json, everything else as YAML.

    Args:
        path: Path to the file
        kind: Human-readable name for messages (e.g. "Configuration file")
        missing_hint: Extra line appended when the file doesn't exist

    Returns:
        Parsed document (never None)

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML syntax is invalid
        ValueError: If JSON syntax is invalid or the file is empty
    """
    if not os.path.exists(path):
        message = f"{kind} not found: {path}"
        if missing_hint:
            message += f"\n{missing_hint}"
        raise FileNotFoundError(message)

    with open(path, 'r') as f:
        text = f.read()

    if not text.strip():
        raise ValueError(f"{kind} {path} is empty")

    if path.lower().endswith(".json"):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Invalid JSON syntax in {path}: {e}"
            )
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Invalid YAML syntax in {path}: {e}"
            )

    if data is None:
        raise ValueError(f"{kind} {path} is empty")
    return data
