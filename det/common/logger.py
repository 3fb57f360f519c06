import logging
import traceback
from logging import Logger
from typing import Any, Protocol, TYPE_CHECKING

import json_logging

from det.common.typing import StrStr
from det.version import __version__

if TYPE_CHECKING:
    from det.common.configuration.specs import RunConfiguration

DET_LOGGER_NAME = "det"
LOGGER: Logger = None


class LogMethod(Protocol):
    def __call__(self, msg: str, *args: Any, **kwds: Any) -> None: ...


def __getattr__(name: str) -> LogMethod:
    """A catch all function for a module that forwards calls to unknown methods to LOGGER"""

    def wrapper(msg: str, *args: Any, **kwargs: Any) -> None:
        if LOGGER:
            # skip stack frames when displaying log so the original logging frame is displayed
            stacklevel = 2
            if name == "exception":
                # exception has one more frame
                stacklevel = 3
            getattr(LOGGER, name)(msg, *args, **kwargs, stacklevel=stacklevel)

    return wrapper


class _CustomJsonFormatter(json_logging.JSONLogFormatter):
    version: StrStr = None

    def _format_log_object(self, record: logging.LogRecord, request_util: Any) -> Any:
        json_log_object = super(_CustomJsonFormatter, self)._format_log_object(
            record, request_util
        )
        if self.version:
            json_log_object.update({"version": self.version})
        return json_log_object


def _init_logging(logger_name: str, level: str, fmt: str, component: str, version: StrStr) -> Logger:
    logger = logging.getLogger(logger_name)
    logger.propagate = False
    logger.setLevel(level)
    # get or create logging handler
    handler = next(iter(logger.handlers), None)
    if handler is None:
        handler = logging.StreamHandler()
        logger.addHandler(handler)

    # set right formatter
    if is_json_logging(fmt):
        json_logging.COMPONENT_NAME = component
        # set version as class variable as we cannot pass custom constructor parameters
        _CustomJsonFormatter.version = version
        # json_logging may be initialized only once per process
        if not json_logging.ENABLE_JSON_LOGGING:
            json_logging.init_non_web(enable_json=True, custom_formatter=_CustomJsonFormatter)
        handler.setFormatter(_CustomJsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=fmt, style="{"))

    return logger


def _extract_version_info() -> StrStr:
    return {"det_version": __version__}


def init_logging_from_config(C: "RunConfiguration") -> None:
    global LOGGER

    LOGGER = _init_logging(
        DET_LOGGER_NAME, C.log_level, C.log_format, DET_LOGGER_NAME, _extract_version_info()
    )


def is_logging() -> bool:
    return LOGGER is not None


def log_level() -> str:
    if not LOGGER:
        raise RuntimeError("Logger not initialized")
    return logging.getLevelName(LOGGER.level)  # type: ignore


def is_json_logging(log_format: str) -> bool:
    return log_format == "JSON"


def pretty_format_exception() -> str:
    return traceback.format_exc()
