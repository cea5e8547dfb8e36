#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Fixtures isolating tests from the environment of the active Python process.
'''

# ....................{ IMPORTS                           }....................
from pytest import fixture

# ....................{ FIXTURES                          }....................
@fixture
def envsync_env_target() -> 'envsync.env.envmerge.EnvTarget':
    '''
    Per-test fixture returning a new environment target whose environment is a
    copy of the current environment, permitting tests to merge changesets
    *without* modifying the environment of the test process itself.

    Since this copy preserves ``${PATH}``, subordinate shells spawned with this
    environment remain findable.
    '''

    # Defer heavyweight imports.
    from envsync.env.envmerge import EnvTarget
    from envsync.util.os.shell import shellenv

    return EnvTarget(environ=shellenv.get_env())


@fixture(autouse=True)
def envsync_dot_dir(
    monkeypatch: '_pytest.monkeypatch.MonkeyPatch',
    tmpdir_factory: '_pytest.tmpdir.TempdirFactory',
) -> 'LocalPath':
    '''
    **Autouse fixture** (i.e., fixture unconditionally applicable to all
    tests) redirecting this application's dot directory to a new temporary
    directory for the duration of each test, preventing tests from reading or
    writing the current user's configuration, cache, or logfile.

    Returns
    ----------
    LocalPath
        Object encapsulating this temporary dot directory.
    '''

    # Defer heavyweight imports.
    from envsync.pathtree import DOT_DIR_VAR_NAME

    dot_dirpath = tmpdir_factory.mktemp('dot_dir')
    monkeypatch.setenv(DOT_DIR_VAR_NAME, str(dot_dirpath))
    return dot_dirpath
