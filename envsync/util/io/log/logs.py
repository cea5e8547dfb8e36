#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Logging shorthands.

All messages are logged through the root logger, whose handlers are installed
by :mod:`envsync.util.io.log.logconfig`. Messages are ``%``-style format
strings whose arguments are interpolated only if a handler emits the record.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: Nearly every module imports this module. Import only from modules
# that never import this module at the top-level.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import logging
from envsync.util.type.types import type_check

# ....................{ LOGGERS                           }....................
@type_check
def log_debug(message: str, *args, **kwargs) -> None:
    '''
    Log the passed message at ``DEBUG`` level.
    '''

    logging.debug(message, *args, **kwargs)


@type_check
def log_info(message: str, *args, **kwargs) -> None:
    '''
    Log the passed message at ``INFO`` level.
    '''

    logging.info(message, *args, **kwargs)


@type_check
def log_warning(message: str, *args, **kwargs) -> None:
    '''
    Log the passed message at ``WARNING`` level.
    '''

    logging.warning(message, *args, **kwargs)

# ....................{ LOGGERS ~ exception               }....................
@type_check
def log_exception(exception: Exception) -> None:
    '''
    Log the passed exception with the root logger.

    Application-specific exceptions signify expected failure conditions (e.g.,
    a missing shell) and are logged as human-readable error messages *without*
    a traceback, which is logged at debug level instead. All other exceptions
    signify unexpected failure and are logged with their full traceback.
    '''

    # Avoid circular import dependencies.
    from envsync.exceptions import EnvsyncException

    # Exceptions raised without a message fall back to their classname.
    exception_message = str(exception) or type(exception).__name__

    if isinstance(exception, EnvsyncException):
        logging.debug('Exception traceback:', exc_info=exception)
        logging.error(exception_message)
    else:
        logging.error(exception_message, exc_info=exception)
