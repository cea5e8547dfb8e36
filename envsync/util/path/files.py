#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Non-directory file tests and removal.
'''

# ....................{ IMPORTS                           }....................
import os
from envsync.exceptions import EnvsyncFileException
from envsync.util.io.log import logs
from envsync.util.type.types import type_check
from os import path as os_path

# ....................{ EXCEPTIONS                        }....................
@type_check
def die_unless_file(*pathnames: str) -> None:
    '''
    Raise an exception unless all passed paths are existing non-directory files
    *after* following symbolic links.

    Raises
    ----------
    EnvsyncFileException
        If any passed path is *not* such a file.
    '''

    for pathname in pathnames:
        if not is_file(pathname):
            raise EnvsyncFileException(
                'File "{}" not found or unreadable.'.format(pathname))

# ....................{ TESTERS                           }....................
@type_check
def is_file(pathname: str) -> bool:
    '''
    ``True`` only if the passed path is an existing non-directory file *after*
    following symbolic links.
    '''

    return os_path.isfile(pathname)

# ....................{ REMOVERS                          }....................
@type_check
def remove_if_found(filename: str) -> None:
    '''
    Remove the non-directory file with the passed filename if this file exists
    *or* silently reduce to a noop otherwise.
    '''

    if is_file(filename):
        remove(filename)


@type_check
def remove(filename: str) -> None:
    '''
    Remove the passed non-directory file.

    Raises
    ----------
    EnvsyncFileException
        If this file does *not* exist.
    '''

    logs.log_debug('Removing file: %s', filename)

    die_unless_file(filename)

    os.remove(filename)
