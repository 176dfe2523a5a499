"""
Load configuration documents for import from a local path or an http(s) URL.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict

import aiohttp
from loguru import logger

from ..exceptions import ConfigIOError, SchemaValidationError


def is_remote_source(source: str) -> bool:
    """Whether ``source`` should be fetched over HTTP."""
    return source.startswith(("http://", "https://"))


async def _fetch_remote(url: str, timeout: float) -> Any:
    async with aiohttp.ClientSession() as session:
        async with session.get(
            url,
            timeout=aiohttp.ClientTimeout(total=timeout)
        ) as response:
            response.raise_for_status()
            text = await response.text()

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaValidationError(f"Response from {url} is not valid JSON: {e}") from e


def _read_local(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(f"Failed to load configuration from {path}: {e}") from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise SchemaValidationError(f"{path} is not valid JSON: {e}") from e


async def load_config_source(source: str, timeout: float = 30.0) -> Dict[str, Any]:
    """
    Read a configuration document from a file path or URL.

    Both kinds of source normalize to the same in-memory document; version
    and schema checks are left to the caller.

    Raises:
        ConfigIOError: if the source cannot be read or fetched
        SchemaValidationError: if the content is not a JSON object
    """
    if is_remote_source(source):
        logger.debug(f"Fetching configuration from {source}")
        try:
            document = await _fetch_remote(source, timeout)
        except aiohttp.ClientResponseError as e:
            raise ConfigIOError(
                f"Failed to load configuration from {source}: HTTP {e.status}: {e.message}"
            ) from e
        except aiohttp.ClientError as e:
            raise ConfigIOError(f"Failed to load configuration from {source}: {e}") from e
        except asyncio.TimeoutError as e:
            raise ConfigIOError(
                f"Failed to load configuration from {source}: timed out after {timeout}s"
            ) from e
    else:
        logger.debug(f"Reading configuration from {source}")
        document = _read_local(Path(source).expanduser())

    if not isinstance(document, dict):
        raise SchemaValidationError(
            f"Configuration from {source} must be a JSON object, found {type(document).__name__}"
        )
    return document
