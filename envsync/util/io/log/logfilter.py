#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
:class:`logging.Filter` subclasses attached to the root logger handlers.
'''

# ....................{ IMPORTS                           }....................
from envsync import metadata
from envsync.util.io.log.logenum import LogLevel
from envsync.util.type.types import type_check
from logging import Filter, LogRecord

# ....................{ CLASSES                           }....................
class LogFilterThirdPartyDebug(Filter):
    '''
    Filter dropping debug records emitted by loggers outside this package.

    Libraries used by this application (notably :mod:`ruamel.yaml`) may log
    at debug level. Those records are of no use when diagnosing environment
    synchronization and would otherwise swamp the logfile.
    '''

    @type_check
    def filter(self, log_record: LogRecord) -> bool:
        if log_record.levelno > LogLevel.DEBUG:
            return True

        return log_record.name.startswith(metadata.PACKAGE_NAME)


class LogFilterMoreThanInfo(Filter):
    '''
    Filter retaining only records of :attr:`LogLevel.INFO` or lower.

    Attached to the informational stream handler so that warnings and errors
    are emitted exactly once by the error stream handler.
    '''

    @type_check
    def filter(self, log_record: LogRecord) -> bool:
        return log_record.levelno <= LogLevel.INFO
