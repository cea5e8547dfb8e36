#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`envsync.env.envsource` submodule.

Most of these tests source shell startup files in a subordinate Bash shell and
are thus skipped if Bash is unavailable.
'''

# ....................{ IMPORTS                           }....................
import logging, os, pytest
from envsync_test.util.mark.skip import skip_unless_shell

# ....................{ CONSTANTS                         }....................
PROFILE_TEXT = '''\
export ENVSYNC_SHIP="Defiant"
unset ENVSYNC_REMOVED
export PATH="/opt/envsync/bin:$PATH"
export ENVSYNC_QUOTED='say "hi" to $nobody'
export ENVSYNC_BLANK=""
'''
'''
Contents of the shell startup file sourced by most tests.
'''

# ....................{ HELPERS                           }....................
def _make_conf(envsync_temp_dir, *source_basenames):
    '''
    Configuration sourcing the files with the passed basenames in the passed
    temporary directory and caching to that directory.
    '''

    # Defer heavyweight imports.
    from envsync.envconf import EnvConf

    conf = EnvConf()
    conf.source_files = [
        str(envsync_temp_dir.join(source_basename))
        for source_basename in source_basenames
    ]
    conf.cache_filename = str(envsync_temp_dir.join('cache', 'env.yaml'))
    return conf


def _age_sources(conf) -> None:
    '''
    Set the modification times of all existing source files listed by the
    passed configuration to be older than its cache.
    '''

    cache_mtime = os.path.getmtime(conf.cache_filename)
    for source_filename in conf.source_files:
        if os.path.exists(source_filename):
            os.utime(source_filename, (cache_mtime - 10, cache_mtime - 10))

# ....................{ TESTS ~ source                    }....................
@skip_unless_shell()
def test_envsource_source_file(envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.source_file` function.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource
    from envsync.shell.shellvalue import UNSET

    profile_file = envsync_temp_dir.join('profile')
    profile_file.write(PROFILE_TEXT)

    target = envsync_env_target
    target.environ['ENVSYNC_REMOVED'] = 'Obsidian Order'
    path_old = target.environ.get('PATH', '')

    changeset = envsource.source_file(str(profile_file), target=target)

    # Variables the file never touched are absent, including "${_}".
    assert changeset == {
        'ENVSYNC_SHIP': 'Defiant',
        'ENVSYNC_REMOVED': UNSET,
        'ENVSYNC_QUOTED': 'say "hi" to $nobody',
        'ENVSYNC_BLANK': '',
        'PATH': '/opt/envsync/bin:' + path_old,
    }

    assert target.environ['ENVSYNC_SHIP'] == 'Defiant'
    assert target.environ['ENVSYNC_BLANK'] == ''
    assert 'ENVSYNC_REMOVED' not in target.environ
    assert target.exec_dirnames[0] == '/opt/envsync/bin'

    # The live environment is left untouched.
    assert 'ENVSYNC_SHIP' not in os.environ


@skip_unless_shell()
def test_envsource_source_file_c_locale(
    envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.source_file` function on a file
    exporting a non-ASCII value under the C locale, in which Bash escapes the
    bytes of that value.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource

    profile_file = envsync_temp_dir.join('profile')
    profile_file.write_binary(
        'export ENVSYNC_CAFE=café\n'.encode('utf-8'))

    target = envsync_env_target
    target.environ['LC_ALL'] = 'C'

    changeset = envsource.source_file(str(profile_file), target=target)

    assert changeset == {'ENVSYNC_CAFE': 'café'}
    assert target.environ['ENVSYNC_CAFE'] == 'café'


@skip_unless_shell()
def test_envsource_source_files(envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.source_files` function.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource

    profile_file = envsync_temp_dir.join('profile')
    profile_file.write(
        'export ENVSYNC_SHIP="Defiant"\n'
        'export ENVSYNC_RANK="Commander"\n'
    )
    bashrc_file = envsync_temp_dir.join('bashrc')
    bashrc_file.write(
        # Later files observe variables set by earlier files.
        'export ENVSYNC_RANK="Captain of the $ENVSYNC_SHIP"\n'
    )

    changeset = envsource.source_files(
        (str(profile_file), str(bashrc_file)), target=envsync_env_target)

    assert changeset['ENVSYNC_SHIP'] == 'Defiant'
    assert changeset['ENVSYNC_RANK'] == 'Captain of the Defiant'
    assert envsync_env_target.environ['ENVSYNC_RANK'] == (
        'Captain of the Defiant')


@skip_unless_shell()
def test_envsource_source_files_exit(
    envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.source_files` function on a
    later file prematurely exiting its shell after earlier files succeed.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource
    from envsync.exceptions import EnvsyncShellException

    profile_file = envsync_temp_dir.join('profile')
    profile_file.write('export ENVSYNC_SHIP="Defiant"\n')
    bashrc_file = envsync_temp_dir.join('bashrc')
    bashrc_file.write('exit 1\n')

    environ_old = dict(envsync_env_target.environ)
    exec_dirnames_old = list(envsync_env_target.exec_dirnames)

    with pytest.raises(EnvsyncShellException):
        envsource.source_files(
            (str(profile_file), str(bashrc_file)), target=envsync_env_target)

    # Changes from the earlier file are discarded rather than half-applied.
    assert envsync_env_target.environ == environ_old
    assert envsync_env_target.exec_dirnames == exec_dirnames_old


@skip_unless_shell()
def test_envsource_source_file_exit(
    envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.source_file` function on a file
    prematurely exiting its shell.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource
    from envsync.exceptions import EnvsyncShellException

    profile_file = envsync_temp_dir.join('profile')
    profile_file.write('export ENVSYNC_SHIP="Defiant"\nexit 0\n')

    environ_old = dict(envsync_env_target.environ)

    with pytest.raises(EnvsyncShellException):
        envsource.source_file(str(profile_file), target=envsync_env_target)

    # The target is left unmodified.
    assert envsync_env_target.environ == environ_old


@skip_unless_shell()
def test_envsource_import_vars(envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.import_vars` function.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource

    profile_file = envsync_temp_dir.join('profile')
    profile_file.write(PROFILE_TEXT)

    target = envsync_env_target
    target.environ['ENVSYNC_REMOVED'] = 'Obsidian Order'

    changeset = envsource.import_vars(
        var_names=('ENVSYNC_SHIP', 'ENVSYNC_REMOVED', 'ENVSYNC_MISSING'),
        filenames=(str(profile_file),),
        target=target,
    )

    # Variables absent from that shell are left as is rather than unset.
    assert changeset == {'ENVSYNC_SHIP': 'Defiant'}
    assert target.environ['ENVSYNC_SHIP'] == 'Defiant'
    assert target.environ['ENVSYNC_REMOVED'] == 'Obsidian Order'

# ....................{ TESTS ~ cache                     }....................
@skip_unless_shell()
def test_envsource_rebuild(envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.rebuild` function.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource
    from envsync.env.envcache import EnvCache

    envsync_temp_dir.join('profile').write(PROFILE_TEXT)
    conf = _make_conf(envsync_temp_dir, 'profile')

    changeset = envsource.rebuild(conf, target=envsync_env_target)

    assert changeset['ENVSYNC_SHIP'] == 'Defiant'
    assert EnvCache(conf.cache_filename).load() == changeset


@skip_unless_shell()
def test_envsource_rebuild_var_names(
    envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.rebuild` function with an
    allow-list of variable names.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource

    envsync_temp_dir.join('profile').write(PROFILE_TEXT)
    conf = _make_conf(envsync_temp_dir, 'profile')
    conf.var_names = ['ENVSYNC_SHIP', 'ENVSYNC_QUOTED']
    conf.is_cache = False

    changeset = envsource.rebuild(conf, target=envsync_env_target)

    assert changeset == {
        'ENVSYNC_SHIP': 'Defiant',
        'ENVSYNC_QUOTED': 'say "hi" to $nobody',
    }
    assert not os.path.exists(conf.cache_filename)


def test_envsource_load_or_rebuild_fresh(envsync_temp_dir) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.load_or_rebuild` function with
    a fresh cache, which must be loaded *without* running a shell.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource
    from envsync.env.envcache import EnvCache
    from envsync.env.envmerge import EnvTarget
    from envsync.shell.shellvalue import UNSET

    envsync_temp_dir.join('profile').write(PROFILE_TEXT)
    conf = _make_conf(envsync_temp_dir, 'profile', 'nonexistent_bashrc')
    conf.shell = str(envsync_temp_dir.join('nonexistent-shell'))

    EnvCache(conf.cache_filename).save({
        'ENVSYNC_SHIP': 'Cached',
        'ENVSYNC_REMOVED': UNSET,
        'PATH': '/cached/bin:/bin',
    })
    _age_sources(conf)

    target = EnvTarget(
        environ={'ENVSYNC_REMOVED': 'Obsidian Order'}, path_sep=':')
    changeset = envsource.load_or_rebuild(conf, target=target)

    assert changeset['ENVSYNC_SHIP'] == 'Cached'
    assert target.environ == {
        'ENVSYNC_SHIP': 'Cached',
        'PATH': '/cached/bin:/bin',
    }
    assert target.exec_dirnames == ['/cached/bin', '/bin']


@skip_unless_shell()
def test_envsource_load_or_rebuild_stale(
    envsync_temp_dir, envsync_env_target) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.load_or_rebuild` function with
    a stale cache.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource
    from envsync.env.envcache import EnvCache

    profile_filename = str(envsync_temp_dir.join('profile'))
    envsync_temp_dir.join('profile').write(PROFILE_TEXT)
    conf = _make_conf(envsync_temp_dir, 'profile')

    env_cache = EnvCache(conf.cache_filename)
    env_cache.save({'ENVSYNC_SHIP': 'Stale'})

    # Render the source file newer than the cache.
    cache_mtime = os.path.getmtime(conf.cache_filename)
    os.utime(profile_filename, (cache_mtime + 10, cache_mtime + 10))

    changeset = envsource.load_or_rebuild(conf, target=envsync_env_target)

    assert changeset['ENVSYNC_SHIP'] == 'Defiant'
    assert env_cache.load()['ENVSYNC_SHIP'] == 'Defiant'


@skip_unless_shell()
def test_envsource_load_or_rebuild_corrupt(
    envsync_temp_dir, envsync_env_target, caplog) -> None:
    '''
    Unit test the :func:`envsync.env.envsource.load_or_rebuild` function with
    a fresh but corrupt cache.
    '''

    # Defer heavyweight imports.
    from envsync.env import envsource
    from envsync.env.envcache import EnvCache

    envsync_temp_dir.join('profile').write(PROFILE_TEXT)
    conf = _make_conf(envsync_temp_dir, 'profile')

    cache_file = envsync_temp_dir.join('cache', 'env.yaml')
    cache_file.write('ENVSYNC_SHIP: [Defiant\n', ensure=True)
    _age_sources(conf)

    with caplog.at_level(logging.WARNING):
        changeset = envsource.load_or_rebuild(
            conf, target=envsync_env_target)

    assert 'unusable' in caplog.text
    assert changeset['ENVSYNC_SHIP'] == 'Defiant'
    assert EnvCache(conf.cache_filename).load() == changeset
