
import logging
from logging.config import dictConfig

from rich.console import Console
from rich.logging import RichHandler


def stderr_rich_handler(level: int = logging.NOTSET) -> RichHandler:
    # stdout carries the stdio protocol stream
    return RichHandler(
        level=level,
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )


def setup_logging(level: int | str = logging.INFO) -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "rich": {
                    "format": "%(name)s | %(message)s",
                    "datefmt": "[%X]",
                }
            },
            "handlers": {
                "console": {
                    "()": stderr_rich_handler,
                    "formatter": "rich",
                    "level": level,
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": level,
                }
            },
        }
    )
