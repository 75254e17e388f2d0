"""
Classpath assembly — the host's resolved entries as one joined string.

Entry order is classpath precedence for the generator's own class
loading, so it is never changed.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from fluxgen.core.errors import ClasspathError

logger = logging.getLogger(__name__)


def build_classpath(entries: Sequence[str], separator: str | None = None) -> str:
    """Join classpath entries with the platform path-list separator.

    Args:
        entries: Ordered, non-empty classpath entries from the host.
        separator: Override for ``os.pathsep``.

    Returns:
        The joined classpath, with no leading or trailing separator.

    Raises:
        ClasspathError: If ``entries`` is empty or holds an empty entry.
    """
    if not entries:
        raise ClasspathError("No runtime classpath entries supplied; cannot build a classpath")

    sep = separator or os.pathsep
    elements: list[str] = []
    for index, entry in enumerate(entries):
        element = os.fspath(entry)
        if not element.strip():
            raise ClasspathError(f"Classpath entry {index} is empty")
        logger.debug("Adding element from runtime to classpath: %s", element)
        elements.append(element)

    classpath = sep.join(elements)
    logger.debug("classpath: %s", classpath)
    return classpath


def read_classpath_file(path: Path, separator: str | None = None) -> list[str]:
    """Read classpath entries written by the host build.

    Accepts the single-line output of
    ``mvn dependency:build-classpath -Dmdep.outputFile=...`` as well as a
    file with one entry per line.  Blank lines and blank segments are
    dropped.

    Raises:
        ClasspathError: If the file cannot be read.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ClasspathError(f"Cannot read classpath file {path}: {e}") from e

    sep = separator or os.pathsep
    entries: list[str] = []
    for line in raw.splitlines():
        for segment in line.split(sep):
            segment = segment.strip()
            if segment:
                entries.append(segment)

    logger.debug("Read %d classpath entries from %s", len(entries), path)
    return entries
