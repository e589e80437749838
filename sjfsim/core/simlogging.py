#===============================================================================
# MODULE simlogging
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Sets up / configures Python logging, and provides access via static methods
# in a SimLogging class.
#
# Every sjfsim logger sits below a single base logger named for the package.
# The base logger owns the one stderr handler; debug tracing of the event
# loop (interarrival, service, departure and response times) is emitted at
# DEBUG level by the simulation module and stays silent until the level is
# lowered via configuration or the command line verbosity option.
#
# Setting SJFSIM_DISABLE_LOGGING before sjfsim is imported replaces every
# module logger with a NullLogger, which removes the cost of the per-event
# debug calls from long runs.
#===============================================================================
__all__ = ['SimLogging']

import logging, os

_BASE_LOGGER_NAME = __name__.rsplit('.')[0]

_baseLogger = logging.getLogger(_BASE_LOGGER_NAME)
_baseLogger.setLevel(logging.WARNING)

_ch = logging.StreamHandler()
_ch.setFormatter(logging.Formatter('%(name)s %(levelname)s:\t%(lineno)d\t%(message)s'))
_baseLogger.addHandler(_ch)

_DISABLE_LOGGING_ENV_NAME = _BASE_LOGGER_NAME.upper() + '_DISABLE_LOGGING'
_useNullLogger = bool(os.getenv(_DISABLE_LOGGING_ENV_NAME))


class NullLogger(object):
    """
    Stands in for a module logger when logging is disabled: every
    attribute is the NullLogger itself, and calling it does nothing.
    """
    def __init__(self, *args, **kwargs): pass
    def __call__(self, *args, **kwargs): return self
    def __getattribute__(self, name): return self
    def __setattr__(self, name, value): pass


class SimLogging(object):
    """
    Static methods that hand out sjfsim module loggers and set the
    package logging level.
    """
    @staticmethod
    def get_logger(name):
        """
        Return the logger for a module, typically called as::

            logger = SimLogging.get_logger(__name__)

        Names outside the sjfsim package are placed below the sjfsim base
        logger. Returns a NullLogger if logging is disabled.
        """
        if _useNullLogger:
            return NullLogger()

        if name.rsplit('.')[0] != _BASE_LOGGER_NAME:
            name = _BASE_LOGGER_NAME + '.' + name
        return logging.getLogger(name)

    @staticmethod
    def set_level(lvl):
        """
        Set the sjfsim base logger level (logging.DEBUG, logging.INFO, ...);
        module loggers inherit it.
        """
        _baseLogger.setLevel(lvl)

    @staticmethod
    def get_level():
        """
        Return the level of the sjfsim base logger.
        """
        return _baseLogger.getEffectiveLevel()
