#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Skip markers for tests requiring an external shell.
'''

# ....................{ IMPORTS                           }....................
import pytest
from envsync.util.type.types import type_check

# ....................{ SKIP                              }....................
skip_if = pytest.mark.skipif
'''
Alias of :func:`pytest.mark.skipif`, accepting a boolean and a ``reason``.
'''

# ....................{ SKIP ~ command                    }....................
@type_check
def skip_unless_command(pathname: str):
    '''
    Skip the decorated test unless the passed command is found, either as a
    basename in the current ``PATH`` or as an executable path.
    '''

    # Defer heavyweight imports.
    from envsync.util.path.command import cmds

    return skip_if(
        not cmds.is_command(pathname),
        reason='Command "{}" not found.'.format(pathname))


def skip_unless_shell():
    '''
    Skip the decorated test unless the default subordinate shell required at
    runtime by this application exists.
    '''

    # Defer heavyweight imports.
    from envsync.metadeps import REQUIREMENT_COMMANDS

    return skip_unless_command(REQUIREMENT_COMMANDS[0].basename)
