from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path resolution and text I/O helpers shared by the corpus walker and the
locale rewriter. All files are treated as UTF-8.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and '~'. Empty input resolves to the
    fallback.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_project_path(root_dir: str, path: str) -> str:
    """
    Resolve a configured path against the project root.

    Absolute paths are returned unchanged (normalized).
    """
    expanded = os.path.expandvars(os.path.expanduser(path))
    if os.path.isabs(expanded):
        return os.path.normpath(expanded)
    return os.path.normpath(os.path.join(root_dir, expanded))

# -----------------------------------------------------------------------------
# TEXT I/O API
# -----------------------------------------------------------------------------

def read_text(path: str) -> str:
    """
    Read a whole file strictly as UTF-8.

    Raises:
        OSError: If the file cannot be opened.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def read_source_text(path: str) -> str:
    """
    Read a corpus file, replacing undecodable bytes.

    Scanning is best-effort, so a stray binary sequence must not stop it.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def write_text(path: str, content: str) -> None:
    """
    Overwrite a file with the given content, creating parent directories.

    Raises:
        OSError: If the file cannot be written.
    """
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    logger.debug(f"Wrote {len(content)} chars to {path}")
