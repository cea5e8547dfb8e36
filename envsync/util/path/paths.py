#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Existence and modification time tests applicable to files and directories
alike.
'''

# ....................{ IMPORTS                           }....................
from envsync.exceptions import EnvsyncPathException
from envsync.util.type.types import (
    type_check, IterableTypes, NumericSimpleTypes)
from os import path as os_path

# ....................{ EXCEPTIONS                        }....................
@type_check
def die_unless_path(*pathnames: str) -> None:
    '''
    Raise an exception unless all passed paths exist.

    Raises
    ----------
    EnvsyncPathException
        If any passed path does *not* exist.
    '''

    for pathname in pathnames:
        if not is_path(pathname):
            raise EnvsyncPathException(
                'Path "{}" not found or unreadable.'.format(pathname))

# ....................{ TESTERS                           }....................
@type_check
def is_path(pathname: str) -> bool:
    '''
    ``True`` only if the passed path exists *after* following symbolic links.
    '''

    return os_path.exists(pathname)


@type_check
def is_mtime_newer_than_path(
    pathname: str, other_pathname: str) -> bool:
    '''
    ``True`` only if both passed paths exist *and* the first path was modified
    strictly more recently than the second path.

    Since a nonexistent path cannot be newer than anything, this function
    returns ``False`` if the first path does *not* exist. Since every existing
    path is newer than a nonexistent path, this function returns ``True`` if
    only the second path does *not* exist.
    '''

    if not is_path(pathname):
        return False
    if not is_path(other_pathname):
        return True

    return (
        get_mtime_nonrecursive(pathname) >
        get_mtime_nonrecursive(other_pathname))


@type_check
def is_mtime_newer_than_paths(
    pathnames: IterableTypes, other_pathname: str) -> bool:
    '''
    ``True`` only if at least one of the passed paths was modified strictly
    more recently than the other passed path.

    Nonexistent paths in the passed iterable are silently ignored.

    See Also
    ----------
    :func:`is_mtime_newer_than_path`
        Further details.
    '''

    return any(
        is_mtime_newer_than_path(pathname, other_pathname)
        for pathname in pathnames)

# ....................{ GETTERS ~ mtime                   }....................
@type_check
def get_mtime_nonrecursive(pathname: str) -> NumericSimpleTypes:
    '''
    Modification time in seconds since the epoch of the passed path itself,
    following symbolic links but not descending into directories.

    Raises
    ----------
    EnvsyncPathException
        If this path does *not* exist.
    '''

    die_unless_path(pathname)

    return os_path.getmtime(pathname)
