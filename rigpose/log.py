"""
rigpose.log - logging facade for the pose pipeline.

Usage:
    from rigpose import log

    log.debug("[fk] 2 bone(s) unreachable")
    log.warn("Unknown easing, using linear")

    try:
        manager.save()
    except OSError as e:
        log.error(e, "Failed to save pose settings")  # includes traceback

Messages go to the "rigpose" logger of the standard logging module.
A host application can take them over with set_callback().
"""

import logging
import traceback

_logger = logging.getLogger("rigpose")


class Level:
    """Level names accepted by set_level()."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def _emit(level: int, msg_or_exc, context: str) -> None:
    if isinstance(msg_or_exc, BaseException):
        msg = _format_exception(msg_or_exc, context)
    else:
        msg = str(msg_or_exc)
    _logger.log(level, msg)


def _format_exception(exc: BaseException, context: str) -> str:
    """'<context>: <Type>: <message>' followed by the traceback."""
    head = f"{type(exc).__name__}: {exc}"
    if context:
        head = f"{context}: {head}"
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return f"{head}\n{tb}"


def debug(msg_or_exc, context: str = ""):
    """Per-frame pipeline diagnostics."""
    _emit(Level.DEBUG, msg_or_exc, context)


def info(msg_or_exc, context: str = ""):
    _emit(Level.INFO, msg_or_exc, context)


def warn(msg_or_exc, context: str = ""):
    """Recoverable problems in input data."""
    _emit(Level.WARN, msg_or_exc, context)


def error(msg_or_exc, context: str = ""):
    """Failed operations (settings I/O). Exceptions are logged with traceback."""
    _emit(Level.ERROR, msg_or_exc, context)


def set_level(level) -> None:
    """Set the minimum level for rigpose messages."""
    _logger.setLevel(level)


def set_callback(callback) -> None:
    """
    Route rigpose messages to callback(level_name, message).

    Passing None removes a previously installed callback.
    """
    for handler in list(_logger.handlers):
        if isinstance(handler, _CallbackHandler):
            _logger.removeHandler(handler)
    if callback is not None:
        _logger.addHandler(_CallbackHandler(callback))


class _CallbackHandler(logging.Handler):
    def __init__(self, callback):
        super().__init__()
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        self._callback(record.levelname, record.getMessage())
