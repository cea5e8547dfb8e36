#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Logging level enumeration shared by the log configuration and the
``--log-level`` command-line option.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: This module is imported by the log configuration itself and hence
# must *NOT* import from application-specific modules at the top-level.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import enum, logging
from enum import IntEnum

# ....................{ ENUMS                             }....................
@enum.unique
class LogLevel(IntEnum):
    '''
    Enumeration of the logging levels selectable by users.

    Each member wraps the integer level of the same name in the standard
    :mod:`logging` module and hence is directly passable to
    :meth:`logging.Logger.setLevel` and comparable with
    :attr:`logging.LogRecord.levelno`. The lowercased member names are the
    accepted values of the ``--log-level`` option.

    Members with smaller values log more messages: e.g.,

        >>> LogLevel.DEBUG < LogLevel.WARNING
        True
    '''

    # Log everything, including records from third-party loggers.
    ALL = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    # Log nothing. Exceeds every level defined by the "logging" module.
    NONE = logging.CRITICAL + 1024
