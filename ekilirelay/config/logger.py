import logging
from functools import partial

import structlog
import ujson

from ekilirelay.settings import get_log_settings


LOGGER_NAME = "ekilirelay"
HANDLER_NAME = "ekilirelay-structlog"


def setup_logger(log_level: int, console_render: bool) -> logging.Logger:
    """Send the client's structlog events to stderr via the ``ekilirelay`` logger.

    Opt-in for applications that do not configure structlog themselves. Only
    the package logger gets a handler, and only once: repeated calls swap the
    renderer and level in place. The root logger is left untouched.
    """
    pre_chain = build_pre_chain(console_render)

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    handler = find_handler(package_logger)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        package_logger.addHandler(handler)
        package_logger.propagate = False

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                get_logs_renderer(console_render),
            ],
        ),
    )
    package_logger.setLevel(log_level)
    return package_logger


def setup_logger_from_env() -> logging.Logger:
    settings = get_log_settings()
    return setup_logger(
        log_level=logging.getLevelName(settings.log_level.upper()),
        console_render=settings.console_render,
    )


def find_handler(package_logger: logging.Logger) -> logging.Handler | None:
    return next((h for h in package_logger.handlers if h.get_name() == HANDLER_NAME), None)


def build_pre_chain(console_render: bool) -> list[structlog.typing.Processor]:
    processors: list[structlog.typing.Processor] = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.contextvars.merge_contextvars,
    ]
    if not console_render:
        processors.append(structlog.processors.dict_tracebacks)
    return processors


def get_logs_renderer(console_render: bool) -> structlog.typing.Processor:
    if not console_render:
        return structlog.processors.JSONRenderer(serializer=partial(ujson.dumps, ensure_ascii=False))

    console = structlog.dev.ConsoleRenderer(colors=False)

    def render(logger: structlog.typing.WrappedLogger, name: str, event_dict: structlog.typing.EventDict) -> str:
        # dict_tracebacks is off here, but foreign records may still carry a list
        if isinstance(event_dict.get("exception"), list):
            event_dict["exception"] = "".join(event_dict["exception"])
        return console(logger, name, event_dict)

    return render
