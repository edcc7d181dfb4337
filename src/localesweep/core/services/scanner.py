from __future__ import annotations

"""
Source Corpus Discovery Service.

Walks the source tree and yields every file with a targeted extension.
There is no ignore list: every directory is descended, so the tool is meant
to be pointed at an application's own source directory.
"""

import logging
import os
from typing import Iterable, Iterator, Tuple

from localesweep.domain.constants import DEFAULT_EXTENSIONS
from localesweep.domain.errors import CorpusReadError
from localesweep.infra.fs import read_source_text

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_source_files(root: str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> Iterator[str]:
    """
    Recursively yield absolute paths of source files under `root`.

    Directory entries are visited in sorted order so runs are reproducible.

    Args:
        root: Corpus root directory.
        extensions: Accepted file extensions (with leading dot).

    Yields:
        str: Absolute file path.

    Raises:
        CorpusReadError: The root does not exist or a directory cannot be listed.
    """
    root_abs = os.path.abspath(root)
    if not os.path.isdir(root_abs):
        raise CorpusReadError(f"Source directory does not exist: {root_abs}")

    wanted = frozenset(extensions)

    def _on_walk_error(err: OSError) -> None:
        raise CorpusReadError(f"Cannot read directory '{err.filename}': {err.strerror}") from err

    for dirpath, dirs, files in os.walk(root_abs, onerror=_on_walk_error):
        dirs.sort()
        files.sort()
        for file_name in files:
            _, ext = os.path.splitext(file_name)
            if ext in wanted:
                yield os.path.join(dirpath, file_name)


def iter_corpus(root: str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> Iterator[Tuple[str, str]]:
    """
    Yield `(path, text)` for every source file, one read at a time.

    Raises:
        CorpusReadError: The tree or one of its files cannot be read.
    """
    for path in yield_source_files(root, extensions):
        try:
            text = read_source_text(path)
        except OSError as e:
            raise CorpusReadError(f"Cannot read source file '{path}': {e}") from e
        yield path, text
