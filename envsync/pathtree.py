#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Collection of the absolute paths of critical user-specific files and
directories describing the structure of this application on the local
filesystem.

All such paths reside in this application's **dot directory** (i.e.,
user-specific hidden directory), ``~/.envsync`` by default. Since this
directory is overridable at runtime by the ``${ENVSYNC_DOT_DIR}`` environment
variable (e.g., by tests isolating themselves from the current user), paths
returned by these getters are intentionally *not* cached.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid circular import dependencies, the top-level of this module
# should avoid importing application packages except where explicitly required.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from envsync import metadata

# ....................{ CONSTANTS                         }....................
DOT_DIR_VAR_NAME = 'ENVSYNC_DOT_DIR'
'''
Name of the environment variable overriding the default dot directory.
'''

# ....................{ GETTERS ~ dir                     }....................
def get_dot_dirname() -> str:
    '''
    Absolute dirname of this application's user-specific dot directory.

    This is the value of the ``${ENVSYNC_DOT_DIR}`` environment variable if
    set to a non-empty string *or* ``~/.envsync`` otherwise. This directory is
    *not* guaranteed to exist.
    '''

    # Avoid circular import dependencies.
    from envsync.util.os.shell import shellenv
    from envsync.util.path import pathnames

    dot_dirname = shellenv.get_var_or_none(DOT_DIR_VAR_NAME)

    if dot_dirname:
        return pathnames.canonicalize(dot_dirname)

    return pathnames.join(
        pathnames.get_home_dirname(), '.' + metadata.SCRIPT_BASENAME)

# ....................{ GETTERS ~ file                    }....................
def get_conf_default_filename() -> str:
    '''
    Absolute filename of this application's default user-specific YAML-formatted
    configuration file.

    This file is *not* guaranteed to exist, in which case default settings
    apply.
    '''

    # Avoid circular import dependencies.
    from envsync.util.path import pathnames

    return pathnames.join(
        get_dot_dirname(), metadata.SCRIPT_BASENAME + '.yaml')


def get_cache_default_filename() -> str:
    '''
    Absolute filename of this application's default user-specific
    YAML-formatted environment cache.
    '''

    # Avoid circular import dependencies.
    from envsync.util.path import pathnames

    return pathnames.join(get_dot_dirname(), 'cache', 'env.yaml')
