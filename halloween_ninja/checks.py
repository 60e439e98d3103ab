"""Runtime checks that describe where they failed, and log or raise."""

from __future__ import annotations

import logging
import traceback

logger = logging.getLogger(__name__)


class CheckError(RuntimeError):
    """Raised when a checked condition does not hold."""


def _code_position() -> str:
    """Describe the first stack frame outside this module as file::func()::line."""
    for frame in reversed(traceback.extract_stack()):
        if frame.filename != __file__:
            return f"{frame.filename}::{frame.name}()::{frame.lineno}"
    return "<unknown>"


def _with_message(text: str, message: object) -> str:
    extra = str(message)
    return f'{text} "{extra}"' if extra else text


def describe(macro_name: str, expression: str, message: object = "") -> str:
    """Build the failure description for a check named *macro_name*."""
    text = f"{macro_name}({expression}) FAILED at:  {_code_position()}"
    return _with_message(text, message)


def log(message: object) -> str:
    """Log *message* with the caller's code position and return the logged line."""
    line = _with_message(f"M_LOG::{_code_position()}", message)
    logger.info(line)
    return line


def check_log(condition: object, expression: str = "", message: object = "") -> bool:
    """Log a description when *condition* is false; return whether it held."""
    if condition:
        return True
    logger.warning(describe("M_CHECK_LOG", expression, message))
    return False


def check_throw(condition: object, expression: str = "", message: object = "") -> None:
    """Raise :class:`CheckError` when *condition* is false."""
    if not condition:
        description = describe("M_CHECK_THROW", expression, message)
        logger.error(description)
        raise CheckError(description)


def check(condition: object, expression: str = "", message: object = "") -> None:
    """Raise :class:`CheckError` when *condition* is false."""
    if not condition:
        description = describe("M_CHECK", expression, message)
        logger.error(description)
        raise CheckError(description)