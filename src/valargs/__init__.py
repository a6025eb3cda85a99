"""A simple command-line argument helper for parsing positional arguments and options."""

from loguru import logger as _loguru_logger

from valargs.args import Args, parse, parse_raw

# Library code stays quiet until setup_logger() is called
_loguru_logger.disable("valargs")

__all__ = ["Args", "parse", "parse_raw"]
