"""String utilities for RON encoding."""

# RON only escapes the backslash and the active quote character
ESCAPE_CHARS = frozenset("\\")


def escape_string(value: str, quote: str = '"') -> str:
    """
    Escape a string for use between RON quotes.

    Only the backslash and the surrounding quote character get a
    preceding backslash. Every other character, including newlines,
    tabs and other control characters, passes through verbatim.

    Args:
        value: The string to escape.
        quote: The delimiter the result will be wrapped in.

    Returns:
        The escaped string (without surrounding quotes).
    """
    result = []
    for char in value:
        if char in ESCAPE_CHARS or char == quote:
            result.append("\\")
        result.append(char)
    return "".join(result)


def quote_string(value: str) -> str:
    """Wrap a string in double quotes, escaping as needed."""
    return '"' + escape_string(value, quote='"') + '"'


def quote_char(value: str) -> str:
    """Wrap a single character in single quotes, escaping as needed."""
    return "'" + escape_string(value, quote="'") + "'"
