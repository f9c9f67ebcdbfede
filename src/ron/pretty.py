"""Deprecated pretty-printing shortcut."""

import warnings
from typing import Any

from .encode import encode_pretty
from .types import PrettyConfig


def to_string(value: Any) -> str:
    """Encode ``value`` with the default pretty layout.

    Deprecated: call ``encode_pretty(value, PrettyConfig())`` instead.
    """
    warnings.warn(
        "ron.pretty.to_string is deprecated, use encode_pretty(value, PrettyConfig())",
        DeprecationWarning,
        stacklevel=2,
    )
    return encode_pretty(value, PrettyConfig())
