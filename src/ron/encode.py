"""RON encoder entry points."""

import logging
from typing import Any

from .errors import SerializeError
from .serializer import Serializer
from .types import PrettyConfig
from .value import serialize_value

logger = logging.getLogger(__name__)


def encode(value: Any) -> str:
    """
    Encode a Python value to compact RON.

    No newlines, indentation or separator spaces are written, and struct
    names are left out.

    Args:
        value: The value to encode.

    Returns:
        The RON-formatted string.

    Raises:
        SerializeError: If the value cannot be represented.
    """
    return _run(value, PrettyConfig.basic(False))


def encode_pretty(value: Any, config: PrettyConfig) -> str:
    """
    Encode a Python value to RON using the given layout.

    Args:
        value: The value to encode.
        config: The layout options, used as given.

    Returns:
        The RON-formatted string.

    Raises:
        SerializeError: If the value cannot be represented.
    """
    return _run(value, config)


def _run(value: Any, config: PrettyConfig) -> str:
    logger.debug("Encoding %s value with %r", type(value).__name__, config)
    serializer = Serializer(config)
    try:
        serialize_value(value, serializer)
    except SerializeError as exc:
        logger.debug("Encoding aborted: %s", exc)
        raise
    return serializer.output
