"""
Input document loading and validation for Shamir Reconstruction Kit.

An input document looks like:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

STDIN_PATH = "-"


class InputError(Exception):
    """Raised when an input document is missing, malformed or incomplete."""


def load_input(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Load a JSON input document from `path`, or from stdin when path is None or "-"."""
    if path is None or str(path) == STDIN_PATH:
        raw = sys.stdin.read()
        source = "stdin"
    else:
        p = Path(path)
        if not p.exists():
            raise InputError(f"Input not found: {path}")
        raw = p.read_text(encoding="utf-8")
        source = str(p)

    if not raw.strip():
        raise InputError(f"No JSON input found in {source}")
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON: {e}") from e
    if not isinstance(document, dict):
        raise InputError("Input must be a JSON object")
    return document


def verify_input(document: Dict[str, Any]) -> None:
    """Structural checks on an input document; does not decode share values."""
    keys = document.get("keys")
    if not isinstance(keys, dict):
        raise InputError("Missing required field: keys")
    for name in ("n", "k"):
        if name not in keys:
            raise InputError(f"keys.{name} missing")
        value = keys[name]
        if isinstance(value, bool) or not isinstance(value, int):
            raise InputError(f"keys.{name} must be an integer, got {value!r}")

    for index, entry in document.items():
        if index == "keys":
            continue
        if not (index.isascii() and index.isdecimal()):
            raise InputError(f"Share index must be a decimal string, got {index!r}")
        if not isinstance(entry, dict):
            raise InputError(f"Share {index} must be an object")
        if "value" not in entry or "base" not in entry:
            raise InputError(f"Share {index} missing value or base")


def split_input(document: Dict[str, Any]) -> Tuple[int, int, Dict[str, Dict[str, Any]]]:
    """Verify a document and split it into (n, k, raw_shares)."""
    verify_input(document)
    keys = document["keys"]
    raw_shares = {index: entry for index, entry in document.items() if index != "keys"}
    return keys["n"], keys["k"], raw_shares
