"""Utility functions for loading JSON documents.

Class spec documents, type catalogs and configuration files can come from a
local path or an http(s) URL. Both are handled here with consistent errors.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class DocumentLoaderError(Exception):
    """Raised when a JSON document cannot be loaded."""

    pass


def is_url(source: str | Path) -> bool:
    """Return True if ``source`` looks like an http(s) URL."""
    if isinstance(source, Path):
        return False
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def load_document_from_file(file_path: str | Path) -> Any:
    """Load a JSON document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Parsed JSON data.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        DocumentLoaderError: If the file cannot be read or parsed.
    """
    file_path = Path(file_path)
    logger.debug("Loading JSON document from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", file_path, e)
        raise DocumentLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error("File %s is not valid UTF-8: %s", file_path, e)
        raise DocumentLoaderError(f"File {file_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        logger.error("Error reading %s: %s", file_path, e)
        raise DocumentLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded JSON document from %s", file_path)
    return data


def load_document_from_url(url: str, timeout: int = 30) -> Any:
    """Load a JSON document from a URL.

    Args:
        url: http(s) URL to fetch.
        timeout: Request timeout in seconds.

    Returns:
        Parsed JSON data.

    Raises:
        DocumentLoaderError: If the URL is invalid, the request fails, or the
            response body isn't JSON.
    """
    logger.debug("Loading JSON document from URL: %s", url)

    if not is_url(url):
        logger.error("Invalid URL: %s", url)
        raise DocumentLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for %s", url)
        raise DocumentLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for %s: %s", url, e)
        raise DocumentLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        logger.error("HTTP error %s for %s", status, url)
        raise DocumentLoaderError(f"HTTP error {status} for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for %s: %s", url, e)
        raise DocumentLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        # json.JSONDecodeError and requests' JSON errors both derive from it
        logger.error("Invalid JSON response from %s: %s", url, e)
        raise DocumentLoaderError(f"Invalid JSON response from URL {url}: {e}") from e

    logger.info("Loaded JSON document from %s", url)
    return data


def load_document(source: str | Path, timeout: int = 30) -> Any:
    """Load a JSON document from a file path or an http(s) URL."""
    if not source:
        raise DocumentLoaderError("A file path or URL is required")

    if is_url(source):
        return load_document_from_url(str(source), timeout)
    return load_document_from_file(source)
