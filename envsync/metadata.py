#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Application metadata.

Both the ``setup.py`` script and the application import this module, which
therefore also refuses to import under an unsupported Python interpreter.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: "setup.py" imports this module before third-party dependencies are
# installed. Import *ONLY* from the standard library here.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import sys

# ....................{ METADATA                          }....................
NAME = 'envsync'
'''
Human-readable application name.
'''


LICENSE = '2-clause BSD'

# ....................{ PYTHON ~ version                  }....................
PYTHON_VERSION_MIN = '3.8.0'
'''
Oldest Python interpreter supported, as a ``.``-delimited string.

Matches the oldest interpreter supported by current :mod:`beartype` and
:mod:`ruamel.yaml` releases.
'''


def _convert_version_str_to_tuple(version_str: str) -> tuple:
    '''
    Tuple of the integers in the passed ``.``-delimited version string.
    '''
    assert isinstance(version_str, str), (
        '"{}" not a version string.'.format(version_str))

    return tuple(int(version_part) for version_part in version_str.split('.'))


PYTHON_VERSION_MIN_PARTS = _convert_version_str_to_tuple(PYTHON_VERSION_MIN)


if sys.version_info[:3] < PYTHON_VERSION_MIN_PARTS:
    PYTHON_VERSION = '.'.join(
        str(version_part) for version_part in sys.version_info[:3])

    raise RuntimeError(
        '{} requires Python >= {}, but is running under Python {}.'.format(
            NAME, PYTHON_VERSION_MIN, PYTHON_VERSION))

# ....................{ METADATA ~ version                }....................
VERSION = '0.4.0'
'''
Application version as a ``.``-delimited string.
'''


VERSION_PARTS = _convert_version_str_to_tuple(VERSION)

# ....................{ METADATA ~ synopsis               }....................
SYNOPSIS = (
    'envsync imports environment variables exported by shell startup files '
    'into processes not run from a login shell.'
)
'''
Single-line synopsis, shared by ``--help`` and the package index.
'''

# ....................{ METADATA ~ authors                }....................
AUTHORS = 'Alexis Pietak, Cecil Curry, et al.'
AUTHOR_EMAIL = 'alexis.pietak@gmail.com'

# ....................{ METADATA ~ names                  }....................
PACKAGE_NAME = NAME
'''
Name of the top-level importable package.
'''


SCRIPT_BASENAME = PACKAGE_NAME
'''
Basename of the console script installed by :mod:`setuptools`, also used to
label log messages and to name the user's dot directory.
'''
