#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Text file handles opened in UTF-8 for the YAML configuration and cache files.
'''

# ....................{ IMPORTS                           }....................
from envsync.util.io.log import logs
from envsync.util.type.types import type_check
from io import TextIOWrapper

# ....................{ GETTERS                           }....................
@type_check
def get_mode_write_chars(is_overwritable: bool = False) -> str:
    '''
    Text mode string passed to :func:`open` when writing.

    Exclusive creation (``xt``) is requested unless the caller explicitly
    permits an existing file to be truncated.
    '''

    if is_overwritable:
        return 'wt'
    return 'xt'

# ....................{ READERS                           }....................
@type_check
def reading_chars(filename: str, encoding: str = 'utf-8') -> TextIOWrapper:
    '''
    Text handle reading the existing file with the passed filename, intended
    to be used as a context manager.

    Raises
    ----------
    EnvsyncFileException
        If no such file exists.
    '''

    # Avoid circular import dependencies.
    from envsync.util.path import files

    files.die_unless_file(filename)
    logs.log_debug('Opening "%s" for reading.', filename)

    return open(filename, mode='rt', encoding=encoding)

# ....................{ WRITERS                           }....................
@type_check
def writing_chars(
    filename: str,
    is_overwritable: bool = False,
    encoding: str = 'utf-8',
) -> TextIOWrapper:
    '''
    Text handle writing the file with the passed filename, intended to be
    used as a context manager.

    Missing parent directories of this file are created first.

    Parameters
    ----------
    filename : str
        Relative or absolute path of the file to be written.
    is_overwritable : optional[bool]
        ``True`` if an existing file is to be truncated. Defaults to
        ``False``, in which case an existing file raises
        :class:`FileExistsError`.
    encoding : optional[str]
        Text encoding. Defaults to UTF-8.
    '''

    # Avoid circular import dependencies.
    from envsync.util.path import dirs

    dirs.make_parent_unless_dir(filename)
    logs.log_debug('Opening "%s" for writing.', filename)

    return open(
        filename, mode=get_mode_write_chars(is_overwritable), encoding=encoding)
