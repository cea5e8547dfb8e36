#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
:mod:`setuptools` installer for ``envsync``.

Install for development with ``pip3 install -e .[test]`` and run the test
suite with ``pytest``.
'''

# ....................{ KLUDGES                           }....................
# Under build isolation, pip does not add the directory of this script to
# "sys.path", breaking the "envsync" imports below. See also:
#     https://github.com/pypa/pip/issues/6163
def _register_dir() -> None:

    import os, sys

    setup_dirname = os.path.dirname(os.path.realpath(__file__))

    if setup_dirname not in sys.path:
        print(
            'WARNING: Registering "setup.py" directory for importation under '
            'broken installer (e.g., pip >= 19.0.0)...',
            file=sys.stderr)
        sys.path.append(setup_dirname)

_register_dir()

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: Third-party dependencies are installed *AFTER* this script runs.
# Import *ONLY* from the standard library and the "metadata" and "metadeps"
# modules here, neither of which imports third-party packages.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import re, setuptools
from envsync import metadata, metadeps

# ....................{ EXCEPTIONS                        }....................
def _die_unless_setuptools_version_at_least(
    setuptools_version_min: str) -> None:
    '''
    Raise an exception if the installed :mod:`setuptools` is older than the
    passed version.
    '''

    def _get_version_parts(version: str) -> tuple:
        # Ignore all non-numeric suffixes (e.g., "rc1", ".post0").
        return tuple(
            int(version_part)
            for version_part in re.findall(r'\d+', version)[:3])

    if (
        _get_version_parts(setuptools.__version__) <
        _get_version_parts(setuptools_version_min)
    ):
        raise Exception(
            'setuptools >= {} required by this application, but only '
            'setuptools {} found.'.format(
                setuptools_version_min, setuptools.__version__))

_die_unless_setuptools_version_at_least(metadeps.SETUPTOOLS_VERSION_MIN)

# ....................{ METADATA ~ seo                    }....................
_KEYWORDS = [
    'environment',
    'shell',
    'bash',
    'profile',
    'path',
]


_CLASSIFIERS = [
    'Development Status :: 4 - Beta',
    'Environment :: Console',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: BSD License',
    'Natural Language :: English',
    'Operating System :: POSIX',
    'Programming Language :: Python :: 3',
    'Topic :: System :: Shells',
    'Topic :: Utilities',
]
'''
Trove classifiers. See https://pypi.org/classifiers for valid strings.
'''

# ....................{ OPTIONS                           }....................
_SETUP_OPTIONS = {
    # ..................{ CORE                              }..................
    'name':             metadata.PACKAGE_NAME,
    'version':          metadata.VERSION,
    'author':           metadata.AUTHORS,
    'author_email':     metadata.AUTHOR_EMAIL,
    'maintainer':       metadata.AUTHORS,
    'maintainer_email': metadata.AUTHOR_EMAIL,
    'description':      metadata.SYNOPSIS,

    # ..................{ PYPI                              }..................
    'classifiers': _CLASSIFIERS,
    'keywords': _KEYWORDS,
    'license': metadata.LICENSE,
    'python_requires': '>= ' + metadata.PYTHON_VERSION_MIN,

    # ..................{ DEPENDENCIES                      }..................
    'install_requires': metadeps.get_runtime_mandatory_tuple(),

    # Installed by "pip3 install -e .[test]".
    'extras_require': {
        'test': metadeps.get_testing_mandatory_tuple(),
    },

    # ..................{ PACKAGES                          }..................
    # The test suite is not installed.
    'packages': setuptools.find_packages(exclude=(
        metadata.PACKAGE_NAME + '_test',
        metadata.PACKAGE_NAME + '_test.*',
        'build',
    )),

    # ..................{ PATHS                             }..................
    'entry_points': {
        # The "envsync" command.
        'console_scripts': (
            '{0} = {0}.__main__:main'.format(metadata.PACKAGE_NAME),),
    },

    'zip_safe': False,
}
'''
Keyword arguments passed to :func:`setuptools.setup`.
'''

# ....................{ SETUP                             }....................
setuptools.setup(**_SETUP_OPTIONS)
