import inspect
import logging
import os
from functools import wraps
from logging.handlers import TimedRotatingFileHandler
from types import FunctionType

from configuration import logging_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _file_handler(name: str, formatter: logging.Formatter) -> logging.Handler | None:
    """Daily rotated '<LOG_DIR>/<name>.log', None when LOG_DIR is empty."""
    log_dir = logging_settings.LOG_DIR
    if not log_dir:
        return None

    os.makedirs(log_dir, exist_ok=True)
    handler = TimedRotatingFileHandler(os.path.join(log_dir, f"{name}.log"), when="midnight", backupCount=7)
    handler.setFormatter(formatter)
    return handler


def setup_logger(name: str = __name__, level: int | str | None = None) -> logging.Logger:
    """
    Logger writing to the console and, unless LOG_DIR is empty, to a daily rotated file.
    Handlers are attached once per name, so modules can call this at import time.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else logging_settings.LOG_LEVEL)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    file_handler = _file_handler(name, formatter)
    if file_handler is not None:
        logger.addHandler(file_handler)

    return logger


def _switch_class(cls: type, on: bool) -> type:
    # getattr_static keeps staticmethod/classmethod wrappers, their '__func__' is the logged function
    for attr_name in dir(cls):
        attr = inspect.getattr_static(cls, attr_name)
        func = getattr(attr, "__func__", attr)
        if getattr(func, "_is_logs_wrapper", False):
            func._class_on = on
    return cls


def _logged(func: FunctionType, logger: logging.Logger, on: bool):
    @wraps(func)
    def wrapper(*args, **kwargs):
        enabled = wrapper._method_on and wrapper._class_on and logging_settings.LOGGING_ON

        # restored after the call, so nested calls keep their own switch
        state_disabled = logger.disabled
        logger.disabled = not enabled
        try:
            return func(*args, **kwargs)
        finally:
            logger.disabled = state_disabled

    wrapper._is_logs_wrapper = True
    wrapper._method_on = on
    wrapper._class_on = True
    return wrapper


def logs(logger: logging.Logger, *, on: bool = True):
    """
    Switch 'logger' on or off while the decorated code runs.

    On a function: the logger is enabled only if 'on', the owning class switch
    and the global LOGGING_ON setting all allow it.
    On a class: sets the class switch of every method already decorated by 'logs',
    so a class marked 'on=False' silences all of them.
    """

    def deco(obj):
        if isinstance(obj, type):
            return _switch_class(obj, on)
        if isinstance(obj, FunctionType):
            return _logged(obj, logger, on)
        raise TypeError("'logs' can be used only with classes and functions. Other cases raise TypeError.")

    return deco
