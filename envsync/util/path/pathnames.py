#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Pathname string manipulation, independent of whether the named paths exist.
'''

# ....................{ IMPORTS                           }....................
import os
from envsync.util.type.types import type_check, StrOrNoneTypes
from os import path as os_path

# ....................{ CONSTANTS                         }....................
SEPARATOR_PATH_LIST = os.pathsep
'''
Character delimiting directories in ``${PATH}`` (e.g., ``:`` under POSIX).
'''

# ....................{ GETTERS                           }....................
@type_check
def get_dirname(pathname: str) -> str:
    '''
    Parent directory of the passed path, or the empty string for a bare
    basename.
    '''

    return os_path.dirname(pathname)


def get_home_dirname() -> str:
    '''
    Home directory of the current user.
    '''

    return os_path.expanduser('~')

# ....................{ GETTERS ~ filetype                }....................
@type_check
def get_filetype_undotted_or_none(pathname: str) -> StrOrNoneTypes:
    '''
    Filetype of the passed path without the leading ``.`` (e.g., ``yaml``
    for ``envsync.yaml``) *or* ``None`` if this path has no filetype.
    '''

    filetype = os_path.splitext(pathname)[1]
    return filetype[1:] if filetype else None

# ....................{ CONVERTERS                        }....................
@type_check
def canonicalize(pathname: str) -> str:
    '''
    Absolute path of the passed path after expanding a leading ``~`` and
    resolving symbolic links.
    '''

    return os_path.realpath(os_path.expanduser(pathname))


@type_check
def expand_home(pathname: str) -> str:
    '''
    Passed path with a leading ``~`` expanded to the home directory and no
    other change.
    '''

    return os_path.expanduser(pathname)


@type_check
def join(*partnames: str) -> str:
    '''
    Passed pathnames joined on the platform's directory separator.
    '''

    return os_path.join(*partnames)

