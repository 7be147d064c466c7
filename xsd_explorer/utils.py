"""Utility functions for loading schema sources and writing generated code.

This module provides the I/O collaborators of the code generator: fetching
schema bytes over HTTP, enumerating schema files and preparing output
directories.
"""

from pathlib import Path
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoaderError(Exception):
    """Custom exception for schema loading and output errors."""

    pass


def is_valid_url(value: str) -> bool:
    """Check whether a string is a well-structured absolute URL.

    Args:
        value: Candidate URL.

    Returns:
        True if the URL has both a scheme and a host.
    """
    try:
        parsed_url = urlparse(value)
    except ValueError:
        return False
    return bool(parsed_url.scheme and parsed_url.netloc)


def fetch_schema(url: str, timeout: int = 30) -> bytes:
    """Fetch raw schema bytes from a URL.

    Any response other than 200 OK yields an empty body rather than an error.

    Args:
        url: URL to fetch the schema from.
        timeout: Request timeout in seconds.

    Returns:
        Response body, or ``b""`` for a non-OK status.

    Raises:
        SchemaLoaderError: If the URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to fetch schema from URL: {url}")

    if not is_valid_url(url):
        logger.error(f"Invalid URL format: {url}")
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    if response.status_code != requests.codes.ok:
        logger.warning(
            f"HTTP status {response.status_code} for URL {url}, using empty body"
        )
        return b""

    logger.info(f"Fetched {len(response.content)} bytes from {url}")
    return response.content


def _walk_lexical(path: Path, files: list[Path]) -> None:
    files.append(path)
    # Symlinked directories are listed but not descended into
    if path.is_dir() and not path.is_symlink():
        for entry in sorted(path.iterdir(), key=lambda p: p.name):
            _walk_lexical(entry, files)


def list_files(path: str | Path) -> list[Path]:
    """List schema files under a path.

    A file yields itself. A directory yields every entry of a recursive walk,
    the directory first and each directory's entries in lexical name order
    with files and subdirectories interleaved, followed by the directory path
    once more.

    Args:
        path: File or directory path.

    Returns:
        List of paths.

    Raises:
        SchemaLoaderError: If the path does not exist.
    """
    path = Path(path)
    if not path.exists():
        logger.error(f"Path not found: {path}")
        raise SchemaLoaderError(f"Path not found: {path}")

    files: list[Path] = []
    if path.is_dir():
        _walk_lexical(path, files)

    files.append(path)
    logger.debug(f"Listed {len(files)} entries under {path}")
    return files


def prepare_output_dir(path: str | Path | None) -> None:
    """Ensure an output directory exists, creating parents as needed.

    An empty path is a no-op.

    Raises:
        SchemaLoaderError: If the directory cannot be created.
    """
    if not path:
        return

    path = Path(path)
    if path.exists():
        return

    try:
        path.mkdir(mode=0o755, parents=True, exist_ok=True)
        logger.info(f"Created output directory {path}")
    except OSError as e:
        logger.error(f"Error creating directory {path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error creating directory {path}: {e}") from e


def write_output(file_path: str | Path, code: str) -> Path:
    """Write generated code to a file, creating its directory first.

    Returns:
        The path written.

    Raises:
        SchemaLoaderError: If the file cannot be written.
    """
    file_path = Path(file_path)
    prepare_output_dir(file_path.parent if str(file_path.parent) != "." else "")

    try:
        file_path.write_text(code, encoding="utf-8")
    except OSError as e:
        logger.error(f"Error writing file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error writing file {file_path}: {e}") from e

    logger.info(f"Wrote generated code to {file_path}")
    return file_path
