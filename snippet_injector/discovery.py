"""
File discovery and reading for codesnippet runs.

Glob results are sorted so that duplicate detection and error messages are
reproducible between runs.
"""

import logging
from pathlib import Path
from typing import List, Optional

from utils.exceptions import ConfigError, FileReadError

logger = logging.getLogger(__name__)


def glob_files(root: Optional[Path], pattern: str, required: bool = False) -> List[Path]:
    """
    Find the files under ``root`` matching ``pattern``.

    Args:
        root: Directory to search.
        pattern: Glob relative to ``root`` (e.g. ``**/*.java``).
        required: If True a missing directory is an error, otherwise it
            yields no files.

    Returns:
        Absolute file paths in sorted order.

    Raises:
        ConfigError: If ``required`` and ``root`` is not a directory.
    """
    if root is None or not Path(root).is_dir():
        if required:
            raise ConfigError(f"Expected '{root}' to be a directory but it wasn't.")
        logger.debug(f"Skipping {root}: not a directory")
        return []

    root = Path(root).resolve()
    files = sorted(p for p in root.glob(pattern) if p.is_file())
    logger.debug(f"Found {len(files)} file(s) matching '{pattern}' under {root}")
    return files


def split_lines(text: str) -> List[str]:
    """Split text into lines without terminators; a trailing newline adds no empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(path: Path) -> List[str]:
    """Read a UTF-8 file as a list of lines (universal newlines).

    Raises:
        FileReadError: If the file is not valid UTF-8.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileReadError(f"Unable to read '{path}' as UTF-8: {e}") from e
    return split_lines(text)
