"""Logger object for the OSC message builder."""

import logging

from colorlog import ColoredFormatter
from typing import Callable, Dict, Optional

__all__ = ("install", "log", "styles")

log = logging.getLogger("oscmsg")

#: The handler installed by install(), if any
_handler: Optional[logging.Handler] = None

_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def _create_fancy_formatter() -> logging.Formatter:
    return ColoredFormatter(
        "%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
    )


def _create_plain_formatter() -> logging.Formatter:
    return logging.Formatter(_FORMAT)


#: Formatter factories for the supported log styles
styles: Dict[str, Callable[[], logging.Formatter]] = {
    "fancy": _create_fancy_formatter,
    "plain": _create_plain_formatter,
}


def install(level: int = logging.INFO, style: str = "fancy") -> None:
    """Installs a handler on the root logger that writes log messages to the
    standard error stream, replacing the handler installed by an earlier call.

    Parameters:
        level: the minimum level of log messages to show
        style: the style of the log output; one of the keys of ``styles``
    """
    global _handler

    try:
        formatter = styles[style]()
    except KeyError:
        raise ValueError(f"Unknown log style: {style!r}") from None

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    _handler = handler
    root.setLevel(level)
