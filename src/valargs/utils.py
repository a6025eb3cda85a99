"""
Utility functions for the valargs package.
"""

from typing import Optional

# Longest prefix first: "--name" must never be read as "-" + "-name".
OPTION_PREFIXES: tuple[str, ...] = ("--", "-")


def strip_option_prefix(token: str) -> Optional[str]:
    """
    Return the option name carried by an option marker.

    Exactly one prefix is stripped, so "---x" yields "-x" and a bare "-"
    or "--" yields the empty name.

    Args:
        token: Raw command-line token

    Returns:
        The option name, or None if the token is not an option marker

    Examples:
        >>> strip_option_prefix("--verbose")
        'verbose'
        >>> strip_option_prefix("-o")
        'o'
        >>> strip_option_prefix("--")
        ''
        >>> strip_option_prefix("file.txt") is None
        True
    """
    for prefix in OPTION_PREFIXES:
        if token.startswith(prefix):
            return token[len(prefix):]
    return None


def is_option_marker(token: str) -> bool:
    """Check whether a token introduces an option (starts with a dash)."""
    return token.startswith("-")
