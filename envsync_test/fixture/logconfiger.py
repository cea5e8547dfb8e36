#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Fixtures restoring the logging configuration of the active Python process.
'''

# ....................{ IMPORTS                           }....................
from pytest import fixture

# ....................{ FIXTURES                          }....................
@fixture
def envsync_log_config() -> None:
    '''
    Per-test fixture removing all root logger handlers added by the logging
    configuration initialized by the requesting test (e.g., by running this
    application's CLI) on completing that test.

    These handlers print to the standard streams captured by :mod:`pytest` for
    that test only, which are closed after that test. Retaining these handlers
    would raise exceptions on subsequent logging.
    '''

    # Defer heavyweight imports.
    from envsync.util.io.log import logconfig

    yield

    log_config = logconfig.get()
    if log_config is None:
        return

    for handler in (
        log_config.handler_stdout,
        log_config.handler_stderr,
        log_config.handler_file,
    ):
        if handler is not None:
            log_config.logger_root.removeHandler(handler)
            handler.close()
