#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Process exit statuses.
'''

# ....................{ IMPORTS                           }....................
import sys
from envsync.util.type.types import type_check

# ....................{ CONSTANTS                         }....................
SUCCESS = 0


FAILURE_DEFAULT = 1
'''
Exit status returned by ``envsync`` on any error.
'''

# ....................{ TESTERS                           }....................
@type_check
def is_failure(exit_status: int) -> bool:
    '''
    ``True`` only if the passed exit status signifies failure.
    '''

    return exit_status != SUCCESS

# ....................{ EXITERS                           }....................
@type_check
def exit_with_status(exit_status: int) -> None:
    '''
    Exit this process with the passed status.
    '''

    sys.exit(exit_status)
