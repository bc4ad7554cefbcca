"""Extraction of the runtime config embedded in a bundle's index document.

The index document assigns the config as a percent-encoded JSON string:

    __meteor_runtime_config__ = JSON.parse(decodeURIComponent("%7B...%7D"))
"""

import json
import logging
import re
from pathlib import Path
from typing import Any
from urllib.parse import unquote

from .errors import RuntimeConfigError, RuntimeConfigNotFound

logger = logging.getLogger(__name__)

RUNTIME_CONFIG_PATTERN = re.compile(
    r'__meteor_runtime_config__ = JSON\.parse\(decodeURIComponent\("([^"]*)"\)\)'
)

# A percent sign not followed by two hex digits
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

RuntimeConfig = dict[str, Any]


def extract_runtime_config(content: str) -> RuntimeConfig:
    """Extract and decode the runtime config from index document text.

    Args:
        content: Full text of the index document

    Returns:
        The decoded runtime config object

    Raises:
        RuntimeConfigNotFound: If the text has no runtime config assignment
        RuntimeConfigError: If the payload isn't percent-encoded JSON object text
    """
    match = RUNTIME_CONFIG_PATTERN.search(content)
    if match is None:
        raise RuntimeConfigNotFound("Could not find runtime config in index file")

    payload = match.group(1)
    if MALFORMED_ESCAPE.search(payload):
        raise RuntimeConfigError("Could not decode runtime config: malformed percent escape")

    try:
        decoded = unquote(payload, errors="strict")
        config = json.loads(decoded)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RuntimeConfigError(f"Could not decode runtime config: {e}") from e

    if not isinstance(config, dict):
        raise RuntimeConfigError(
            f"Runtime config must be a JSON object, got {type(config).__name__}"
        )
    return config


def load_runtime_config(
    index_path: Path, log: logging.Logger | None = None
) -> RuntimeConfig | None:
    """Read an index document and extract its runtime config.

    Failures are logged and turned into None; a bundle without a readable
    runtime config is still able to serve its assets.

    Args:
        index_path: Location of the index document
        log: Logger receiving error events, defaults to this module's logger

    Returns:
        The runtime config, or None if it could not be determined
    """
    log = log or logger

    try:
        with Path(index_path).open("r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        log.error("Error loading index file: %s", e)
        return None

    try:
        return extract_runtime_config(content)
    except RuntimeConfigNotFound:
        log.error("Could not find runtime config in index file")
        return None
    except RuntimeConfigError as e:
        log.error("Could not find runtime config in index file")
        log.debug("Runtime config decoding failed: %s", e)
        return None
