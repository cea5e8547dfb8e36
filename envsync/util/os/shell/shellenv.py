#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Access to the environment of this process.

Setters accept an optional ``env`` mapping, defaulting to :data:`os.environ`,
so that tests and :class:`envsync.env.envmerge.EnvTarget` may operate on a
detached copy instead.
'''

#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: Modify "os.environ" rather than calling os.putenv() or
# os.unsetenv(), which leave "os.environ" stale.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

# ....................{ IMPORTS                           }....................
from envsync.exceptions import EnvsyncShellEnvException
from envsync.util.type.types import (
    type_check,
    MappingMutableOrNoneTypes,
    StrOrNoneTypes,
)
from os import environ

# ....................{ EXCEPTIONS                        }....................
@type_check
def die_unless_var_name(name: str) -> None:
    '''
    Raise an exception unless the passed string is a syntactically valid
    environment variable name (i.e., is non-empty and contains neither ``=``
    nor newline characters).

    Raises
    ----------
    EnvsyncShellEnvException
        If this name is invalid.
    '''

    if not is_var_name(name):
        raise EnvsyncShellEnvException(
            'Environment variable name "{}" invalid.'.format(name))

# ....................{ TESTERS                           }....................
@type_check
def is_var_name(name: str) -> bool:
    '''
    ``True`` only if the passed string is a syntactically valid environment
    variable name.
    '''

    return bool(name) and '=' not in name and '\n' not in name and (
        '\0' not in name)

# ....................{ GETTERS                           }....................
def get_env() -> dict:
    '''
    Dictionary mapping the name of each environment variable to the string
    value of this variable.

    Mutating this copy leaves this process's environment unchanged.
    '''

    return environ.copy()


@type_check
def get_var_or_none(name: str) -> StrOrNoneTypes:
    '''
    String value of the environment variable with the passed name if defined
    *or* ``None`` otherwise.
    '''

    return environ.get(name, None)

# ....................{ SETTERS                           }....................
@type_check
def set_var(
    name: str, value: str, env: MappingMutableOrNoneTypes = None) -> None:
    '''
    Set the environment variable with the passed name to the passed value in
    the passed environment if any *or* the current process otherwise.
    '''

    if env is None:
        env = environ

    env[name] = value

# ....................{ UNSETTERS                         }....................
@type_check
def unset_var_if_set(
    name: str, env: MappingMutableOrNoneTypes = None) -> None:
    '''
    Unset the environment variable with the passed name (i.e., remove this
    variable from the passed environment if any *or* the environment of the
    current process otherwise) if defined *or* noop otherwise.
    '''

    if env is None:
        env = environ

    # If this variable is undefined, silently reduce to a noop.
    if name not in env:
        return

    # Reduce this variable to the empty string *BEFORE* unsetting this
    # variable, handling edge-case platforms whose kernels fail to support the
    # os.unsetenv() operation internally invoked by deleting keys from the
    # "os.environ" dictionary (e.g., AIX). Under such platforms, deleting
    # environment variables in Python fails to delete these variables from the
    # environment outside of Python. Although reducing this variable to the
    # empty string does *NOT* delete this variable, no alternatives exist.
    env[name] = ''

    del env[name]
