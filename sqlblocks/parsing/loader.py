"""Read SQL files from disk into named sources."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlblocks.parsing.errors import SourceDecodeError
from sqlblocks.parsing.schemas import Source

logger = logging.getLogger(__name__)


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a file's text.

    Raises:
        SourceDecodeError: If the bytes do not decode with the encoding.
    """
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise SourceDecodeError(str(path), encoding, e.reason) from e


def load_file(path: Path | str, encoding: str = "utf-8") -> Source:
    """Read one file into a source named after the file."""
    path = Path(path)
    return Source(content=read_text(path, encoding), name=path.name)


def find_files(directory: Path | str, pattern: str = "*.sql", recursive: bool = True) -> list[Path]:
    """Find files matching a glob pattern, sorted by path."""
    directory = Path(directory)
    matches = directory.rglob(pattern) if recursive else directory.glob(pattern)
    return sorted(path for path in matches if path.is_file())


def load_sources(
    directory: Path | str,
    pattern: str = "*.sql",
    recursive: bool = True,
    encoding: str = "utf-8",
) -> list[Source]:
    """Load every matching file under a directory.

    Sources are named by their path relative to the directory so files
    with the same name in different folders stay distinguishable.

    Args:
        directory: Directory to search.
        pattern: Glob pattern for SQL files.
        recursive: Whether to descend into sub-directories.
        encoding: Text encoding of the files.

    Returns:
        Sources in sorted path order.

    Raises:
        FileNotFoundError: If the directory does not exist.
        SourceDecodeError: If a file does not decode with the encoding.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Directory not found: {directory}")

    sources = []
    for path in find_files(directory, pattern, recursive):
        name = path.relative_to(directory).as_posix()
        sources.append(Source(content=read_text(path, encoding), name=name))

    logger.debug("Loaded %d source(s) from %s", len(sources), directory)
    return sources


def load_paths(
    paths: list[Path | str],
    pattern: str = "*.sql",
    recursive: bool = True,
    encoding: str = "utf-8",
) -> list[Source]:
    """Load a mix of files and directories, keeping argument order.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    sources: list[Source] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            sources.extend(load_sources(path, pattern, recursive, encoding))
        elif path.is_file():
            sources.append(load_file(path, encoding))
        else:
            raise FileNotFoundError(f"Path not found: {path}")
    return sources
