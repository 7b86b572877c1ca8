# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Tolerant reader and writer for ``binding.gyp`` build descriptors.

A gyp descriptor is JSON with ``#`` line comments allowed. Comments are
stripped before handing the text to the JSON parser; the rewritten file is
plain JSON, which gyp accepts as well.
"""

import json
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

ACTIONS_MARKER = '"actions"'
"""Textual marker for a pre-build actions list, checked before parsing."""

# A double-quoted string literal is matched first so a '#' inside it is kept.
_COMMENT_RE = re.compile(r'("(?:\\.|[^"\\\n])*")|#[^\n]*')


class DescriptorError(ValueError):
    """Raised when a build descriptor cannot be parsed."""


def strip_comments(text: str) -> str:
    """Remove ``#`` comments running to end of line, outside string literals."""
    return _COMMENT_RE.sub(lambda m: m.group(1) or "", text)


def parse_descriptor(text: str, source: Optional[str] = None) -> Dict[str, Any]:
    """
    Parse descriptor text into a dict.

    Args:
        text: Raw descriptor content, comments allowed
        source: Where the text came from, used in error messages

    Returns:
        The parsed top-level object

    Raises:
        DescriptorError: If the text is not valid JSON once comments are removed,
            or its top level is not an object
    """
    where = source or "<descriptor>"
    try:
        document = json.loads(strip_comments(text))
    except json.JSONDecodeError as e:
        raise DescriptorError(
            f"Malformed build descriptor {where}: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e

    if not isinstance(document, dict):
        raise DescriptorError(
            f"Malformed build descriptor {where}: expected an object, got {type(document).__name__}"
        )
    return document


def load_descriptor(path: Union[str, Path]) -> Dict[str, Any]:
    """Read and parse the descriptor at *path*."""
    path = Path(path)
    return parse_descriptor(path.read_text(encoding="utf-8"), source=str(path))


def remove_first_target_actions(document: Dict[str, Any]) -> bool:
    """
    Delete the ``actions`` field of the first declared target.

    Only the first target is inspected. Returns True if the field was present
    and removed, False if there was nothing to do.
    """
    targets = document.get("targets")
    if not isinstance(targets, list) or not targets:
        return False

    first = targets[0]
    if not isinstance(first, dict) or first.get("actions") is None:
        return False

    del first["actions"]
    return True


def dump_descriptor(document: Dict[str, Any]) -> str:
    """Serialize *document* as two-space indented JSON with a trailing newline."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def write_descriptor(path: Union[str, Path], document: Dict[str, Any]) -> None:
    """
    Replace the descriptor at *path* with the serialized *document*.

    The text goes to a temporary file in the same directory which is then
    renamed over *path*, so a failed write leaves the old descriptor intact.
    File permissions of an existing descriptor are kept.
    """
    path = Path(path)
    text = dump_descriptor(document)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
