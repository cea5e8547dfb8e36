#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Root :mod:`pytest` plugin, loaded before command-line arguments are parsed.

Only session-level hooks belong here. Fixtures are registered by
:mod:`envsync_test.conftest` instead.
'''

# ....................{ IMPORTS                           }....................
import shutil, sys

# ....................{ HOOKS                             }....................
def pytest_report_header(config: '_pytest.config.Config') -> list:
    '''
    Lines appended to the header printed by :mod:`pytest` on startup.

    Since most tests spawn a subordinate shell, the shells found in the
    current ``${PATH}`` are reported alongside the interpreter and package
    paths to ease triage of skipped tests.
    '''

    # Defer heavyweight imports.
    import envsync
    from envsync.util.path import pathnames

    package_dirname = pathnames.canonicalize(
        pathnames.get_dirname(envsync.__file__))

    return [
        'python prefix: {} (base: {})'.format(sys.prefix, sys.base_prefix),
        'envsync package: {}'.format(package_dirname),
        'bash: {}'.format(shutil.which('bash') or 'not found'),
        'sh: {}'.format(shutil.which('sh') or 'not found'),
    ]
