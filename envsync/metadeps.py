#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Dependencies of this application: Python distributions declared to
:mod:`setuptools` by ``setup.py`` and external commands probed at test time.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: "setup.py" imports this module before third-party dependencies are
# installed. Import *ONLY* from the standard library here.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from collections import namedtuple

# ....................{ LIBS ~ install : mandatory         }....................
SETUPTOOLS_VERSION_MIN = '38.2.0'
'''
Oldest :mod:`setuptools` able to install this application.
'''


RUNTIME_MANDATORY = {
    'setuptools': '>= ' + SETUPTOOLS_VERSION_MIN,

    # Type checking of all "@type_check"-decorated callables.
    'beartype': '>= 0.10.0',

    # YAML-formatted configuration and cache files. Versions prior to 0.15.x
    # lack the "ruamel.yaml.YAML" class.
    'ruamel.yaml': '>= 0.15.24',
}
'''
Runtime dependencies, mapping each project name on the package index to its
version constraint (e.g., ``>= 1.0``) or the empty string if unconstrained.
'''

# ....................{ LIBS ~ testing : mandatory        }....................
TESTING_MANDATORY = {
    # pytest >= 3.7.0 provides the "tmpdir_factory" and "monkeypatch" fixtures
    # in their current form.
    'pytest': '>= 3.7.0',
}
'''
Test dependencies, installed by the ``test`` extra. Same format as
:data:`RUNTIME_MANDATORY`.
'''

# ....................{ LIBS ~ commands                   }....................
RequirementCommand = namedtuple('RequirementCommand', ('name', 'basename',))
RequirementCommand.__doc__ = '''
    External command required at runtime.

    Attributes
    ----------
    name : str
        Human-readable name associated with this command (e.g., ``Bash``).
    basename : str
        Basename of this command to be searched for in the current ``${PATH}``.
    '''


REQUIREMENT_COMMANDS = (RequirementCommand(name='Bash', basename='bash'),)
'''
External commands required at runtime.

The export listing grammar parsed by this application is that of the ``export
-p`` builtin of GNU Bash, so the default shell is ``bash`` itself.
'''

# ....................{ GETTERS                           }....................
def get_runtime_mandatory_tuple() -> tuple:
    '''
    Requirement strings passed as ``install_requires``.
    '''

    return _get_requirements_str_from_dict(RUNTIME_MANDATORY)


def get_testing_mandatory_tuple() -> tuple:
    '''
    Requirement strings passed as the ``test`` extra.
    '''

    return _get_requirements_str_from_dict(TESTING_MANDATORY)


def _get_requirements_str_from_dict(requirements_dict: dict) -> tuple:
    '''
    Requirement strings (e.g., ``ruamel.yaml >= 0.15.24``) built from the
    passed mapping of project names to version constraints.
    '''

    return tuple(
        '{} {}'.format(project_name, constraint).rstrip()
        for project_name, constraint in requirements_dict.items())
