"""Reading schema documents and writing generated files.

A schema document is the DMMF JSON handed over by the host, read from a
local file, an HTTP(S) URL or standard input.
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Raised when a schema document cannot be read or decoded."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Read a schema document from disk.

    Returns:
        Tuple of (path as text, decoded document).

    Raises:
        FileNotFoundError: If the path does not exist.
        JSONLoaderError: If the file is unreadable or not JSON.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Schema document not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Schema document {file_path} is not valid JSON: {e}") from e
    except OSError as e:
        raise JSONLoaderError(f"Cannot read schema document {file_path}: {e}") from e

    logger.info("Read schema document %s", file_path)
    return str(file_path), document


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Fetch a schema document over HTTP(S).

    Raises:
        JSONLoaderError: On a malformed URL, a failed request or a non-JSON body.
    """
    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        raise JSONLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching schema document from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        document = response.json()
    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request timeout fetching {url}") from e
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} fetching {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise JSONLoaderError(f"Request for {url} failed: {e}") from e
    except ValueError as e:
        # Older requests releases raise a plain ValueError for undecodable bodies
        raise JSONLoaderError(f"Response from {url} is not valid JSON: {e}") from e

    logger.info("Fetched schema document from %s", url)
    return url, document


def load_json_from_stream(stream: TextIO | None = None) -> tuple[str, Any]:
    """Read a schema document from a text stream, standard input by default."""
    stream = stream or sys.stdin
    try:
        return "<stdin>", json.load(stream)
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Standard input is not valid JSON: {e}") from e


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Read a schema document from exactly one of ``file_path`` or ``url``."""
    if bool(file_path) == bool(url):
        raise JSONLoaderError("Exactly one of a file path or a URL is required")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)


def write_output(file_path: str | Path, content: str) -> Path:
    """Write generated code, creating parent directories as needed.

    An existing file is overwritten.

    Returns:
        The path written.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(content)

    logger.info("Wrote %d characters to %s", len(content), file_path)
    return file_path
