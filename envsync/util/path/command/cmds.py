#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **command** (i.e., external executable file) facilities.
'''

# ....................{ IMPORTS                           }....................
import shutil
from envsync.util.type.types import type_check, StrOrNoneTypes

# ....................{ TESTERS                           }....................
@type_check
def is_command(filename: str) -> bool:
    '''
    ``True`` only if a command with the passed filename exists.

    This is the case if this path is either:

    * The basename of an executable file in the current ``${PATH}``.
    * The relative or absolute path of an executable file.
    '''

    return get_filename_or_none(filename) is not None

# ....................{ GETTERS                           }....................
@type_check
def get_filename_or_none(filename: str) -> StrOrNoneTypes:
    '''
    Absolute or relative filename of the executable file with the passed
    filename if found *or* ``None`` otherwise.

    If the passed filename is a basename, the current ``${PATH}`` is searched
    for the first executable file with this basename; else, the passed
    filename is returned as is if executable.
    '''

    return shutil.which(filename)
