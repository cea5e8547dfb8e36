#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Environment merger** (i.e., functionality applying changesets to the
environment of the active Python interpreter *and* all state derived from that
environment).

Derived State
----------
Some environment variables have dependent state that must be updated
alongside the variable itself. Currently, only the ``${PATH}`` variable has
such state:

* The **executable dirnames** (i.e., ordered list of the absolute or relative
  dirnames of all directories searched for commands), which consumers
  typically prefer over re-splitting ``${PATH}`` on every lookup.
* The **emulated shell path** (i.e., private copy of the ``${PATH}`` string
  maintained by a shell emulator hosted by the current process, if any).

This state is encapsulated by the :class:`EnvTarget` context object passed to
the :func:`apply` function, permitting callers (e.g., tests) to merge into
isolated fake environments rather than the live environment.
'''

# ....................{ IMPORTS                           }....................
import os
from envsync.exceptions import EnvsyncShellEnvException
from envsync.shell import shellvalue
from envsync.shell.shellvalue import EnvVarValueTypes
from envsync.util.io.log import logs
from envsync.util.os.shell import shellenv
from envsync.util.path.pathnames import SEPARATOR_PATH_LIST
from envsync.util.type.types import (
    type_check,
    MappingType,
    MappingMutableOrNoneTypes,
    NoneType,
    SequenceMutableOrNoneTypes,
    StrOrNoneTypes,
)

# ....................{ CONSTANTS                         }....................
PATH_VAR_NAME = 'PATH'
'''
Name of the environment variable listing all directories searched for
commands.
'''


PATH_DIRNAME_CURRENT = '.'
'''
Dirname substituted for each empty component of the ``${PATH}`` variable,
which POSIX shells interpret as the current working directory.
'''

# ....................{ CLASSES                           }....................
class EnvTarget(object):
    '''
    **Environment target** (i.e., mutable environment *and* all state derived
    from that environment to be updated by merging changesets).

    Attributes
    ----------
    environ : MappingMutableType
        Mutable mapping from the name to the string value of each environment
        variable.
    exec_dirnames : list
        Ordered list of the dirnames of all directories searched for commands,
        replaced in place (rather than rebound) on each merge of ``${PATH}``.
        Callers retaining references to this list thus observe these merges.
    emulated_shell_path : StrOrNoneTypes
        Either the private copy of the ``${PATH}`` string maintained by an
        active shell emulator *or* ``None`` if no such emulator is active, in
        which case this attribute is left as is on merging ``${PATH}``.
    path_sep : str
        Character delimiting dirnames in ``${PATH}``.
    '''

    # ..................{ INITIALIZERS                      }..................
    @type_check
    def __init__(
        self,
        environ: MappingMutableOrNoneTypes = None,
        exec_dirnames: SequenceMutableOrNoneTypes = None,
        path_sep: str = SEPARATOR_PATH_LIST,
        emulated_shell_path: StrOrNoneTypes = None,
    ) -> None:
        '''
        Initialize this environment target.

        Parameters
        ----------
        environ : MappingMutableOrNoneTypes
            Mutable mapping to be merged into. Defaults to ``None``, in which
            case the live :data:`os.environ` dictionary is merged into.
        exec_dirnames : SequenceMutableOrNoneTypes
            Mutable sequence of executable dirnames to be updated. Defaults to
            ``None``, in which case this list is initialized by splitting the
            current ``${PATH}`` of this environment (if any).
        path_sep : str
            Character delimiting dirnames in ``${PATH}``. Defaults to the
            delimiter of the current platform.
        emulated_shell_path : StrOrNoneTypes
            Private ``${PATH}`` copy of an active shell emulator if any *or*
            ``None`` otherwise. Defaults to ``None``.
        '''

        if not path_sep:
            raise EnvsyncShellEnvException('Path separator empty.')

        self.environ = os.environ if environ is None else environ
        self.path_sep = path_sep
        self.emulated_shell_path = emulated_shell_path

        if exec_dirnames is None:
            path = self.environ.get(PATH_VAR_NAME)
            exec_dirnames = [] if path is None else split_path(path, path_sep)
        self.exec_dirnames = exec_dirnames

    # ..................{ DUNDERS                           }..................
    def __repr__(self) -> str:
        return '{}(exec_dirnames={!r}, emulated_shell_path={!r})'.format(
            type(self).__name__, self.exec_dirnames, self.emulated_shell_path)

# ....................{ GLOBALS                           }....................
_env_target = None
'''
Singleton environment target bound to the live environment, lazily created by
the :func:`get_env_target` function.
'''

# ....................{ GETTERS                           }....................
def get_env_target() -> EnvTarget:
    '''
    Singleton environment target bound to the live :data:`os.environ`
    dictionary, creating this target on the first call.
    '''

    global _env_target

    if _env_target is None:
        _env_target = EnvTarget()

    return _env_target

# ....................{ SPLITTERS                         }....................
@type_check
def split_path(path: str, path_sep: str = SEPARATOR_PATH_LIST) -> list:
    '''
    List of all dirnames in the passed ``${PATH}``-style string in order,
    replacing each empty dirname with :data:`PATH_DIRNAME_CURRENT`.

    The empty string is a path listing *no* dirnames and thus yields the empty
    list.
    '''

    if not path:
        return []

    return [
        dirname or PATH_DIRNAME_CURRENT for dirname in path.split(path_sep)]

# ....................{ APPLIERS                          }....................
@type_check
def apply(
    changeset: MappingType, target: (EnvTarget, NoneType) = None,
) -> MappingType:
    '''
    Apply the passed changeset to the passed environment target.

    For each variable in this changeset, this function either unsets this
    variable (silently reducing to a noop if this variable is already unset)
    *or* sets this variable to its new value. Setting ``${PATH}`` additionally
    updates all state derived from that variable. Since each entry describes
    an absolute final state, applying the same changeset twice is equivalent to
    applying that changeset once.

    All entries are validated *before* any are applied, guaranteeing invalid
    changesets to leave this target unmodified.

    Parameters
    ----------
    changeset : MappingType
        Dictionary mapping from the name of each variable to either its new
        string value *or* the :data:`envsync.shell.shellvalue.UNSET`
        singleton.
    target : optional[EnvTarget]
        Environment target to be merged into. Defaults to ``None``, in which
        case the singleton returned by :func:`get_env_target` is merged into.

    Returns
    ----------
    MappingType
        The passed changeset as is, simplifying chaining.

    Raises
    ----------
    EnvsyncShellEnvException
        If any variable name or value in this changeset is invalid.
    '''

    if target is None:
        target = get_env_target()

    _die_unless_changeset(changeset)

    for name, value in changeset.items():
        if shellvalue.is_unset(value):
            logs.log_debug('Unsetting variable "%s".', name)
            shellenv.unset_var_if_set(name, env=target.environ)
            continue

        logs.log_debug('Setting variable "%s" to "%s".', name, value)
        shellenv.set_var(name, value, env=target.environ)

        if name == PATH_VAR_NAME:
            _apply_path(value, target)

    return changeset

# ....................{ PRIVATE ~ validators              }....................
def _die_unless_changeset(changeset: MappingType) -> None:
    '''
    Raise an exception unless all names and values in the passed changeset are
    valid.
    '''

    for name, value in changeset.items():
        if not isinstance(name, str):
            raise EnvsyncShellEnvException(
                'Environment variable name {!r} not a string.'.format(name))

        shellenv.die_unless_var_name(name)

        if not isinstance(value, EnvVarValueTypes):
            raise EnvsyncShellEnvException(
                'Environment variable "{}" value {!r} '
                'neither a string nor UNSET.'.format(name, value))

        if isinstance(value, str) and '\0' in value:
            raise EnvsyncShellEnvException(
                'Environment variable "{}" value contains '
                'null characters.'.format(name))

# ....................{ PRIVATE ~ appliers                }....................
def _apply_path(path: str, target: EnvTarget) -> None:
    '''
    Update all state derived from ``${PATH}`` in the passed environment target
    to reflect the passed new value of that variable.
    '''

    # Replace the contents of this list in place, preserving references held
    # by external consumers.
    target.exec_dirnames[:] = split_path(path, target.path_sep)

    if target.emulated_shell_path is not None:
        target.emulated_shell_path = path

    logs.log_debug(
        'Executable dirnames updated: %s', target.exec_dirnames)
