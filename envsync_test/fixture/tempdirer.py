#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Fixtures providing per-test scratch directories.
'''

# ....................{ IMPORTS                           }....................
from pytest import fixture

# ....................{ FIXTURES                          }....................
@fixture
def envsync_temp_dir(
    request: '_pytest.fixtures.FixtureRequest',
    tmpdir_factory: '_pytest.tmpdir.TempdirFactory',
) -> 'LocalPath':
    '''
    Per-test fixture returning a new empty directory as a
    :class:`py.path.local` instance.

    Directories are named after the requesting test minus its ``test_``
    prefix (e.g., ``{basetemp}/envcache_remove0``), easing inspection of
    startup files and caches left behind by failing tests.
    '''

    # Name of the current test, excluding parametrization suffixes.
    test_name = request.node.originalname or request.node.name

    temp_dir_basename = test_name
    if temp_dir_basename.startswith('test_'):
        temp_dir_basename = temp_dir_basename[len('test_'):]

    return tmpdir_factory.mktemp(temp_dir_basename)
