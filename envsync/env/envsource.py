#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
High-level **environment sourcing** (i.e., importing the environment variables
set by sourcing shell startup files into the active Python interpreter)
facilities.

Each function defined by this submodule computes a changeset in full *before*
merging that changeset, guaranteeing that failures (e.g., shell timeouts)
never leave the environment partially updated.
'''

# ....................{ IMPORTS                           }....................
from envsync.envconf import EnvConf
from envsync.env import envdiff, envmerge
from envsync.env.envcache import EnvCache
from envsync.env.envmerge import EnvTarget
from envsync.exceptions import EnvsyncCacheReadException, EnvsyncShellException
from envsync.shell import shellexport, shellrun
from envsync.util.io.log import logs
from envsync.util.type.types import (
    type_check, IterableTypes, NoneType, StrOrNoneTypes)

# ....................{ TYPES                             }....................
EnvConfOrNoneTypes = (EnvConf, NoneType)
'''
Tuple of both the configuration type *and* the type of the ``None`` singleton.
'''


EnvTargetOrNoneTypes = (EnvTarget, NoneType)
'''
Tuple of both the environment target type *and* the type of the ``None``
singleton.
'''

# ....................{ SOURCERS                          }....................
@type_check
def source_file(
    filename: str,
    conf: EnvConfOrNoneTypes = None,
    target: EnvTargetOrNoneTypes = None,
) -> dict:
    '''
    Source the shell startup file with the passed filename in a subordinate
    shell *and* merge all environment variables changed by doing so into the
    passed environment target.

    Specifically, this function dumps the export listing of one subordinate
    shell *before* sourcing this file and of a second subordinate shell
    *after* sourcing this file, then merges the full diff of these listings.

    Parameters
    ----------
    filename : str
        Absolute or relative filename of the file to be sourced.
    conf : optional[EnvConf]
        Configuration specifying the shell to be run. Defaults to ``None``, in
        which case the default configuration is used.
    target : optional[EnvTarget]
        Environment target to be merged into. Defaults to ``None``, in which
        case the live environment is merged into.

    Returns
    ----------
    dict
        Changeset merged into this target.

    Raises
    ----------
    EnvsyncShellException
        If either subordinate shell fails to run.
    '''

    if conf is None:
        conf = EnvConf()

    changeset = _diff_file(filename, conf, target)
    return envmerge.apply(changeset, target)


@type_check
def source_files(
    filenames: IterableTypes,
    conf: EnvConfOrNoneTypes = None,
    target: EnvTargetOrNoneTypes = None,
) -> dict:
    '''
    Source each shell startup file with the passed filenames in the passed
    order *and* merge all environment variables changed by doing so into the
    passed environment target.

    Each file is sourced in a subordinate shell inheriting the environment
    left by all prior files, so later files observe and may override the
    variables set by earlier files. These intermediate environments are
    staged in a private copy of this target, which is merged into only after
    every file has been sourced. If any file fails, this target is thus left
    unmodified.

    Returns
    ----------
    dict
        Combined changeset merged into this target, mapping each variable to
        the value set by the last file changing that variable.

    See Also
    ----------
    :func:`source_file`
        Further details.
    '''

    if conf is None:
        conf = EnvConf()

    target_staged = _copy_target(target)
    changeset = {}

    for filename in filenames:
        changeset_file = _diff_file(filename, conf, target_staged)
        envmerge.apply(changeset_file, target_staged)
        changeset.update(changeset_file)

    return envmerge.apply(changeset, target)


@type_check
def import_vars(
    var_names: IterableTypes,
    filenames: IterableTypes,
    conf: EnvConfOrNoneTypes = None,
    target: EnvTargetOrNoneTypes = None,
) -> dict:
    '''
    Source all shell startup files with the passed filenames in the passed
    order in a single subordinate shell *and* merge only the environment
    variables with the passed names exported by that shell into the passed
    environment target.

    Unlike :func:`source_file`, this function never unsets variables; variables
    with the passed names *not* exported by that shell are left as is.

    Parameters
    ----------
    var_names : IterableTypes
        Iterable of the names of all variables to be imported.
    filenames : IterableTypes
        Iterable of the filenames of all files to be sourced.

    Returns
    ----------
    dict
        Changeset merged into this target.
    '''

    if conf is None:
        conf = EnvConf()

    filenames = tuple(filenames)
    logs.log_info('Importing variables from: %s', ', '.join(filenames))

    text = _run_shell(
        conf, target, command=shellrun.make_source_command(filenames))

    changeset = envdiff.snapshot_filtered(text, var_names)
    return envmerge.apply(changeset, target)

# ....................{ CACHERS                           }....................
@type_check
def rebuild(conf: EnvConf, target: EnvTargetOrNoneTypes = None) -> dict:
    '''
    Source all shell startup files listed by the passed configuration, merge
    the resulting changeset into the passed environment target, *and* cache
    this changeset if caching is enabled by this configuration.

    If this configuration lists an allow-list of variable names, only these
    variables are imported (see :func:`import_vars`); else, all variables
    changed by these files are imported (see :func:`source_files`).

    Raises
    ----------
    EnvsyncShellException
        If any subordinate shell fails to run.
    EnvsyncCacheWriteException
        If the cache could *not* be written.
    '''

    if conf.var_names:
        changeset = import_vars(
            conf.var_names, conf.source_files, conf=conf, target=target)
    else:
        changeset = source_files(conf.source_files, conf=conf, target=target)

    if conf.is_cache:
        EnvCache(conf.cache_filename).save(changeset)

    return changeset


@type_check
def load_or_rebuild(
    conf: EnvConf, target: EnvTargetOrNoneTypes = None) -> dict:
    '''
    Merge the changeset cached by the passed configuration into the passed
    environment target if caching is enabled *and* this cache is fresh with
    respect to all shell startup files listed by this configuration, else
    rebuild this changeset from these files (see :func:`rebuild`).

    Unusable caches (e.g., due to corruption) are logged and rebuilt.

    Returns
    ----------
    dict
        Changeset merged into this target.
    '''

    if conf.is_cache:
        env_cache = EnvCache(conf.cache_filename)

        if env_cache.is_fresh(conf.source_files):
            try:
                changeset = env_cache.load()
            except EnvsyncCacheReadException as exception:
                logs.log_warning(
                    'Environment cache unusable; rebuilding: %s', exception)
            else:
                logs.log_info(
                    'Loaded environment cache "%s".', conf.cache_filename)
                return envmerge.apply(changeset, target)
        else:
            logs.log_info('Environment cache stale or missing; rebuilding...')

    return rebuild(conf, target)

# ....................{ PRIVATE                           }....................
def _diff_file(
    filename: str, conf: EnvConf, target: EnvTargetOrNoneTypes) -> dict:
    '''
    Changeset produced by sourcing the passed file in a subordinate shell
    inheriting the environment of the passed target, *without* merging this
    changeset.

    Both shells run a command before dumping their export listings. Bash
    exports the ``${_}`` variable only to shells that have yet to run one, so
    this variable is absent from both listings rather than only one.
    '''

    logs.log_info('Sourcing "%s"...', filename)

    before_text = _run_shell(conf, target, command=shellrun.NOOP_COMMAND)
    after_text = _run_shell(
        conf, target, command=shellrun.make_source_command((filename,)))

    return envdiff.diff_listings(before_text, after_text)


def _copy_target(target: EnvTargetOrNoneTypes) -> EnvTarget:
    '''
    Environment target wrapping a private copy of the environment and derived
    state of the passed target, defaulting to the live environment.
    '''

    if target is None:
        target = envmerge.get_env_target()

    return EnvTarget(
        environ=dict(target.environ),
        exec_dirnames=list(target.exec_dirnames),
        path_sep=target.path_sep,
        emulated_shell_path=target.emulated_shell_path,
    )


def _run_shell(
    conf: EnvConf,
    target: EnvTargetOrNoneTypes,
    command: StrOrNoneTypes = None,
) -> str:
    '''
    Export listing dumped by a subordinate shell configured by the passed
    configuration *after* running the passed command if any, inheriting the
    environment of the passed target.

    Raises
    ----------
    EnvsyncShellException
        If that shell fails to run *or* exports no variables at all, which
        typically signifies that the passed command exited that shell
        prematurely (e.g., by calling the ``exit`` builtin). Diffing such an
        empty listing would otherwise unset every variable.
    '''

    env = None if target is None else dict(target.environ)

    text = shellrun.run(
        command=command,
        shell_filename=conf.shell,
        shell_args=conf.shell_args,
        timeout=conf.shell_timeout,
        env=env,
        duration_warn=conf.shell_duration_warn,
    )

    if not shellexport.parse(text):
        raise EnvsyncShellException(
            'Shell "{}" exported no variables '
            '(e.g., due to a sourced file calling "exit").'.format(conf.shell))

    return text
