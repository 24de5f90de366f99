import logging as stdlib_logging
import os
from typing import TextIO

import structlog
from rich.console import Console
from rich.traceback import Traceback
from structlog.types import EventDict
from structlog.types import ExcInfo
from structlog.types import Processor
from structlog.types import WrappedLogger


_ROOT_LOGGER = stdlib_logging.getLogger()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(_ROOT_LOGGER, logger_name=name or "osu_mods")


def log_as_text(app_env: str) -> bool:
    return app_env == "local"


def add_process_id(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    event_dict["process_id"] = os.getpid()
    return event_dict


def rich_traceback(sio: TextIO, exc_info: ExcInfo) -> None:
    """
    Replaces structlog's default exception formatter so that tracebacks are
    limited to the last 10 frames and rendered without locals.
    """
    sio.write("\n")
    Console(file=sio, color_system="truecolor").print(
        Traceback.from_exception(*exc_info, show_locals=False, max_frames=10)
    )


def configure_logging(app_env: str, log_level: str | int) -> None:
    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_process_id,
    ]

    if log_as_text(app_env):
        log_renderer = structlog.dev.ConsoleRenderer(exception_formatter=rich_traceback)
    else:
        log_renderer = structlog.processors.JSONRenderer()

        # format the exception only when using the json renderer
        # we want to pretty-print the exception when logging as text
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=(
            shared_processors
            # prepare for `ProcessorFormatter`
            + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter]
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = stdlib_logging.StreamHandler()
    handler.setFormatter(formatter)

    _ROOT_LOGGER.addHandler(handler)
    _ROOT_LOGGER.setLevel(log_level)


def debug(*args, **kwargs) -> None:
    return get_logger().debug(*args, **kwargs)


def info(*args, **kwargs) -> None:
    return get_logger().info(*args, **kwargs)


def warning(*args, **kwargs) -> None:
    return get_logger().warning(*args, **kwargs)


def error(*args, **kwargs) -> None:
    return get_logger().error(*args, **kwargs)
