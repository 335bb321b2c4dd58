"""Pre-configured Loguru logger with Rich output."""

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

# beautify tracebacks with Rich
install()

console = Console()

DEFAULT_LEVEL = "WARNING"

_handler_id: int | None = None


def set_level(level: str | int = DEFAULT_LEVEL) -> None:
    """(Re-)register the rich handler at ``level``."""
    global _handler_id
    if _handler_id is not None:
        logger.remove(_handler_id)
    _handler_id = logger.add(
        RichHandler(
            console=console,
            markup=False,
            show_time=True,
            show_level=True,
            show_path=True,
        ),
        level=level,
        format="{message}",
    )


# remove default handler
logger.remove()
set_level(DEFAULT_LEVEL)

__all__ = ["logger", "console", "set_level", "DEFAULT_LEVEL"]
