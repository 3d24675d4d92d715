"""Logging for capdo.

All modules log through :class:`Logger`, which wraps a standard
``logging.Logger`` writing plain messages to STDERR, so STDOUT stays free
for rendered scripts. The verbosity is shared by the whole application and
set once from the command line.
"""

import logging
import sys
import time

from capdo.util.hue import (bad, red, info as infomsg, yellow, run, grey,
                            good, green)

LOG_LEVELS = list(range(5))
DEFAULT_LOG_LEVEL = 3

# capdo verbosity -> python logging level, 0 disables the logger
PYTHON_LEVELS = {1: logging.ERROR,
                 2: logging.WARNING,
                 3: logging.INFO,
                 4: logging.DEBUG}

LEVEL_NAMES = {'quiet': 0,
               'error': 1,
               'warning': 2,
               'info': 3,
               'debug': 4}


def get_logger(name):
    """Returns a Python logger with a single STDERR handler.

    Calling this twice with the same name does not add a second handler.

    Args:
        name (str): The name of the Logger.

    Returns:
        A Python Logger.
    """

    log = logging.getLogger(name)
    set_level(log, Logger.LOG_LEVEL)

    if not log.handlers:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(sh)
        log.propagate = False

    return log


def set_level(logger, level):
    """Sets the logging level of a Python logger from a capdo level.

    Args:
        logger: A Python logger object.
        level (int): The capdo logging level (0-4).

    Raises:
        ValueError if log level is unsupported.
    """

    if level not in LOG_LEVELS:
        raise ValueError(f"log level {level} is not supported")

    logger.disabled = level == 0
    if level:
        logger.setLevel(PYTHON_LEVELS[level])


def to_level(level):
    """Convert a level name or number (as given on the command line) to int.

    Raises:
        ValueError if the level is neither a known name nor a number.
    """
    try:
        return LEVEL_NAMES[level]
    except KeyError:
        return int(level)


class Singleton(type):
    """Metaclass returning one instance per logger name.

    Asking twice for ``Logger("capdo.cli")`` gives the same object, so
    module level ``LOGGER`` objects and the CLI share their settings.
    """
    _instances = {}

    def __call__(cls, name, *args, **kwargs):
        key = (cls, name)
        if key not in cls._instances:
            cls._instances[key] = super(Singleton, cls).__call__(
                name, *args, **kwargs)
        else:
            cls._instances[key].__init__(name, *args, **kwargs)

        return cls._instances[key]


class Logger(metaclass=Singleton):
    """Proxy for ``logging.Logger`` with coloured, prefixed messages.

    Set ``Logger.LOG_LEVEL`` before creating loggers, or use the
    :attr:`level` setter on an existing one. The levels are:

    .. code:: shell

        * 0 - quiet (no output)
        * 1 - error
        * 2 - warning
        * 3 - info
        * 4 - debug

    All log methods support ``%``-style arguments.

    Example:
        >>> log = Logger(__name__)
        >>> log.info("rendering %s", "worker-0")
        [~] rendering worker-0

    Attributes:
        LOG_LEVEL (int): The log level used across the application.

    Args:
        name (str): The name of the logger.
    """

    LOG_LEVEL = DEFAULT_LOG_LEVEL

    def __init__(self, name):
        self.name = name
        self.logger = get_logger(name)

    @property
    def level(self):
        """Returns the Python log level equivalent, 0 when quiet."""
        if self.logger.disabled:
            return 0

        return self.logger.level

    @level.setter
    def level(self, level):
        set_level(self.logger, to_level(level))

    @classmethod
    def set_global_level(cls, level):
        """Set the level for all loggers created so far and all future ones.
        """
        level = to_level(level)
        if level not in LOG_LEVELS:
            raise ValueError(f"log level {level} is not supported")

        cls.LOG_LEVEL = level
        for (klass, _), instance in Singleton._instances.items():
            if issubclass(klass, cls):
                set_level(instance.logger, level)

    def error(self, msg, *args, color=True, **kwargs):
        """Logs a message on error level, prefixed with a red ``[-]``."""
        if color:
            msg = bad(red(msg))

        self.logger.error(msg, *args, **kwargs)

    def warning(self, msg, *args, color=True, **kwargs):
        """Logs a message on warning level, prefixed with a yellow ``[!]``."""
        if color:
            msg = infomsg(yellow(msg))

        self.logger.warning(msg, *args, **kwargs)

    def info(self, msg, *args, color=True, **kwargs):
        """Logs a message on info level, prefixed with ``[~]``."""
        if color:
            msg = run(grey(msg))

        self.logger.info(msg, *args, **kwargs)

    def debug(self, msg, *args, color=True, **kwargs):
        """Logs a message on debug level.

        Coloured messages carry the current timestamp as prefix, e.g.
        ``[20190426-155611] rendering template``.
        """
        if color:
            now = time.strftime("%Y%m%d-%H%M%S")
            msg = grey(f"[{now}] {msg}")

        self.logger.debug(msg, *args, **kwargs)

    def success(self, msg, *args, color=True, **kwargs):
        """Indicates a success on info level, prefixed with a green ``[+]``."""
        if color:
            msg = good(green(msg))

        self.logger.info(msg, *args, **kwargs)
