import logging
from typing import Any

import structlog
from structlog.types import EventDict, Processor


def drop_color_message_key(_, __, event_dict: EventDict) -> EventDict:
    """
    Some third party handlers log the message a second time in the extra
    `color_message`. This processor drops the key from the event dict if it exists.
    """
    event_dict.pop("color_message", None)
    return event_dict


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the orderfees package"""

    # Leave an already configured host application alone
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        drop_color_message_key,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Exceptions are pretty-printed by the ConsoleRenderer otherwise
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class OrderFeesStructLogger:
    """
    Structured logger for the orderfees package.

    Values passed to `bind` are stored on this logger instance only, so a
    component logger can be shared by many threads without leaking context
    between unrelated fee queries.
    """

    def __init__(self, log_name: str = "orderfees", **initial_values: Any):
        self._name = log_name
        self._values = dict(initial_values)
        self.logger = structlog.stdlib.get_logger(log_name).bind(**initial_values)

    def bind(self, **new_values: Any) -> "OrderFeesStructLogger":
        """
        Return a new logger with additional bound values.

        Args:
            **new_values: Key-value pairs to bind
        """
        values = dict(self._values)
        values.update(new_values)
        return OrderFeesStructLogger(self._name, **values)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)


_root_logger = None


def init_logger(config):
    """
    Initialize the structured logger for the orderfees package.

    Args:
        config: SystemConfig with the logging settings

    Returns:
        OrderFeesStructLogger: Configured structured logger instance
    """
    global _root_logger

    log_level = "DEBUG" if config.debug else config.log_level
    setup_logging(json_logs=config.json_logs, log_level=log_level)

    _root_logger = OrderFeesStructLogger("orderfees")
    return _root_logger


def get_orderfees_logger() -> OrderFeesStructLogger:
    """Return the package logger, creating an unconfigured one if needed."""
    if _root_logger is None:
        return OrderFeesStructLogger("orderfees")
    return _root_logger
