#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Directory tests and creation.
'''

# ....................{ IMPORTS                           }....................
import os
from envsync.util.io.log import logs
from envsync.util.type.types import type_check
from os import path as os_path

# ....................{ TESTERS                           }....................
@type_check
def is_dir(dirname: str) -> bool:
    '''
    ``True`` only if the passed directory exists *after* following symbolic
    links.
    '''

    return os_path.isdir(dirname)

# ....................{ MAKERS                            }....................
@type_check
def make_unless_dir(*dirnames: str) -> None:
    '''
    Create all passed directories that do *not* already exist, silently
    ignoring those that *do* already exist.

    All nonexistent parents of this directory are also recursively created,
    reproducing the action of the POSIX-compliant ``mkdir -p`` shell command.
    '''

    for dirname in dirnames:
        if not is_dir(dirname):
            logs.log_debug('Creating directory: %s', dirname)
            os.makedirs(dirname, exist_ok=True)


@type_check
def make_parent_unless_dir(*pathnames: str) -> None:
    '''
    Create the parent directories of all passed paths that do *not* already
    exist, silently ignoring those that *do* already exist.
    '''

    # Avoid circular import dependencies.
    from envsync.util.path.pathnames import canonicalize, get_dirname

    # Canonicalize each pathname *BEFORE* attempting to get its dirname.
    # Relative pathnames do *NOT* have sane dirnames (e.g., the dirname for a
    # relative pathname "metatron" is the empty string) and hence *MUST* be
    # converted to absolute pathnames first.
    for pathname in pathnames:
        make_unless_dir(get_dirname(canonicalize(pathname)))
