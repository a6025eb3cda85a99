"""Positional argument and option parsing for command-line tokens.

Example:
    args = parse()

    if (cat_name := args.nth(1)) is not None:
        print(f"the cat's name is {cat_name}")

    if args.has_option("orange"):
        print("the cat is an orange cat")

    if (favorite_food := args.option_value("favorite-food")) is not None:
        print(f"the cat likes {favorite_food} a lot")
"""

from __future__ import annotations

import sys
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from valargs.logger import get_logger
from valargs.utils import is_option_marker, strip_option_prefix

logger = get_logger("args")

__all__ = ["Args", "parse", "parse_raw"]


class Args(BaseModel):
    """Parsed command-line arguments.

    Tokens are split into positional arguments (``nth``) and options with an
    optional value (``has_option`` / ``option_value``). Instances are frozen
    and compare by value; options are stored as pairs so nothing can be
    changed in place.
    """

    positional: tuple[str, ...] = Field(
        default_factory=tuple, description="Positional tokens in input order"
    )
    options: tuple[tuple[str, str | None], ...] = Field(
        default_factory=tuple, description="(name, value) pairs, names without dashes and unique"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls) -> Args:
        """Build the ``Args`` for the arguments the program was started with."""
        return cls.from_tokens(sys.argv)

    @classmethod
    def from_tokens(cls, raw_args: Iterable[str]) -> Args:
        """
        Parse an explicit token sequence.

        A token starting with "--" or "-" is an option; the following token
        becomes its value unless it also starts with "-". Everything else is
        positional. Parsing never fails.

        Args:
            raw_args: Tokens to parse, usually including the program name first

        Returns:
            Args holding the positional tokens and options
        """
        tokens = list(raw_args)
        positional: list[str] = []
        options: dict[str, str | None] = {}

        i = 0
        while i < len(tokens):
            token = tokens[i]
            name = strip_option_prefix(token)
            if name is None:
                positional.append(token)
            else:
                value = None
                if i + 1 < len(tokens) and not is_option_marker(tokens[i + 1]):
                    value = tokens[i + 1]
                    # The value is consumed here and never classified on its own
                    i += 1
                options[name] = value
            i += 1

        logger.debug(f"Parsed {len(tokens)} tokens: {len(positional)} positional, {len(options)} options")
        return cls(positional=tuple(positional), options=tuple(options.items()))

    def nth(self, index: int) -> str | None:
        """Get the nth positional argument (including the executable name)."""
        if 0 <= index < len(self.positional):
            return self.positional[index]
        return None

    def has_option(self, name: str) -> bool:
        """Check if the given option name is present."""
        return any(option == name for option, _ in self.options)

    def option_value(self, name: str) -> str | None:
        """Get the value associated with the given option name if present."""
        return dict(self.options).get(name)

    def to_display_dict(self) -> dict[str, list[str] | dict[str, str | None]]:
        """Convert to plain data for display and JSON output.

        Returns:
            Dictionary with positional and options fields
        """
        return {
            "positional": list(self.positional),
            "options": dict(self.options),
        }


def parse() -> Args:
    """Build the ``Args`` for the arguments the program was started with."""
    return Args.parse()


def parse_raw(raw_args: Iterable[str]) -> Args:
    """Parse an explicit token sequence. See ``Args.from_tokens``."""
    return Args.from_tokens(raw_args)
