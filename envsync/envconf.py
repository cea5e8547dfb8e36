#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Configuration** (i.e., user-defined YAML-formatted file describing which
shell startup files to source and how) facilities.

Settings
----------
All settings are optional. Settings absent from a configuration file default
to the values documented by the :class:`EnvConf` class. Unrecognized settings
are logged as warnings and otherwise ignored, preserving forward
compatibility with configuration files written for newer releases.
'''

# ....................{ IMPORTS                           }....................
from envsync import pathtree
from envsync.exceptions import EnvsyncConfException
from envsync.lib.yaml import yamls
from envsync.shell import shellrun
from envsync.util.io.log import logs
from envsync.util.path import files, pathnames
from envsync.util.type.types import (
    type_check,
    NoneType,
    NumericSimpleTypes,
    StrOrNoneTypes,
)
from ruamel.yaml import YAMLError

# ....................{ GLOBALS                           }....................
_SETTING_NAME_TO_TYPES = {
    'shell': (str,),
    'shell_args': (list,),
    'shell_timeout': NumericSimpleTypes + (NoneType,),
    'shell_duration_warn': NumericSimpleTypes,
    'source_files': (list,),
    'var_names': (list, NoneType),
    'cache': (bool,),
    'cache_file': (str,),
}
'''
Dictionary mapping from the name of each recognized setting to the tuple of
all types permissible as values of that setting.
'''

# ....................{ CLASSES                           }....................
class EnvConf(object):
    '''
    High-level configuration of this application.

    Attributes
    ----------
    filename : StrOrNoneTypes
        Absolute or relative filename of the YAML file this configuration was
        loaded from if any *or* ``None`` if this is the default configuration.
    shell : str
        Basename or filename of the subordinate shell. Defaults to
        :data:`envsync.shell.shellrun.SHELL_DEFAULT`.
    shell_args : list
        List of additional arguments passed to that shell before ``-c``.
        Defaults to the empty list.
    shell_timeout : NumericOrNoneTypes
        Maximum number of seconds each subordinate shell may run for *or*
        ``None`` to run each shell indefinitely. Defaults to 30 seconds.
    shell_duration_warn : NumericSimpleTypes
        Number of seconds after which slow shells are logged as warnings.
        Defaults to 1 second.
    source_files : list
        List of the filenames of all shell startup files to be sourced in
        order, with ``~`` expanded. Defaults to ``['~/.profile']`` expanded.
    var_names : list
        **Allow-list** (i.e., list of the names of all variables to be
        imported) if non-empty *or* the empty list otherwise, in which case all
        variables changed by sourcing these files are imported. Defaults to the
        empty list.
    is_cache : bool
        ``True`` only if the changeset computed from these files is cached.
        Defaults to ``True``.
    cache_filename : str
        Filename of that cache, with ``~`` expanded. Defaults to
        ``cache/env.yaml`` in this application's dot directory.
    '''

    # ..................{ INITIALIZERS                      }..................
    @type_check
    def __init__(self, filename: StrOrNoneTypes = None) -> None:
        '''
        Initialize this configuration to default settings.

        Callers should typically call the :meth:`load` class method rather
        than instantiate this class directly.
        '''

        self.filename = filename
        self.shell = shellrun.SHELL_DEFAULT
        self.shell_args = []
        self.shell_timeout = 30
        self.shell_duration_warn = 1.0
        self.source_files = [pathnames.expand_home('~/.profile')]
        self.var_names = []
        self.is_cache = True
        self.cache_filename = pathtree.get_cache_default_filename()

    # ..................{ LOADERS                           }..................
    @classmethod
    @type_check
    def load(cls, filename: str) -> 'EnvConf':
        '''
        Configuration loaded from the YAML file with the passed filename.

        Raises
        ----------
        EnvsyncConfException
            If this file either does *not* exist, is *not* well-formed YAML, is
            *not* a mapping, *or* contains a setting whose value is of the
            wrong type.
        '''

        if not files.is_file(filename):
            raise EnvsyncConfException(
                'Configuration file "{}" not found.'.format(filename))

        logs.log_debug('Loading configuration "%s"...', filename)

        try:
            settings = yamls.load(filename)
        except YAMLError as exception:
            raise EnvsyncConfException(
                'Configuration file "{}" not parsable as YAML: {}'.format(
                    filename, exception)) from exception

        # An empty file signifies default settings.
        if settings is None:
            settings = {}
        elif not isinstance(settings, dict):
            raise EnvsyncConfException(
                'Configuration file "{}" not a mapping.'.format(filename))

        conf = cls(filename=filename)
        conf._set_settings(settings)
        return conf


    @classmethod
    @type_check
    def load_or_default(cls, filename: StrOrNoneTypes = None) -> 'EnvConf':
        '''
        Configuration loaded from the YAML file with the passed filename if
        passed, else from the default configuration file if that file exists,
        else the default configuration.

        Explicitly passed files must exist; the default file need not.
        '''

        if filename is not None:
            return cls.load(filename)

        filename_default = pathtree.get_conf_default_filename()

        if files.is_file(filename_default):
            return cls.load(filename_default)

        logs.log_debug(
            'Configuration file "%s" not found; using defaults.',
            filename_default)
        return cls()

    # ..................{ PRIVATE ~ setters                 }..................
    def _set_settings(self, settings: dict) -> None:
        '''
        Validate and classify all settings in the passed dictionary loaded
        from this configuration file.
        '''

        for name, value in settings.items():
            if name not in _SETTING_NAME_TO_TYPES:
                logs.log_warning(
                    'Configuration file "%s" setting "%s" unrecognized; '
                    'ignoring.', self.filename, name)
                continue

            # Since "bool" subclasses "int", reject booleans for numeric
            # settings explicitly.
            setting_types = _SETTING_NAME_TO_TYPES[name]
            if not isinstance(value, setting_types) or (
                isinstance(value, bool) and bool not in setting_types):
                raise EnvsyncConfException(
                    'Configuration file "{}" setting "{}" value {!r} '
                    'invalid (i.e., not of type {}).'.format(
                        self.filename, name, value,
                        ' or '.join(
                            cls.__name__ for cls in setting_types)))

        if 'shell' in settings:
            self.shell = settings['shell']
        if 'shell_args' in settings:
            self.shell_args = self._get_str_list(settings, 'shell_args')
        if 'shell_timeout' in settings:
            self.shell_timeout = settings['shell_timeout']
        if 'shell_duration_warn' in settings:
            self.shell_duration_warn = settings['shell_duration_warn']
        if 'source_files' in settings:
            self.source_files = [
                pathnames.expand_home(source_filename)
                for source_filename in self._get_str_list(
                    settings, 'source_files')
            ]
        if settings.get('var_names') is not None:
            self.var_names = self._get_str_list(settings, 'var_names')
        if 'cache' in settings:
            self.is_cache = settings['cache']
        if 'cache_file' in settings:
            self.cache_filename = pathnames.expand_home(settings['cache_file'])


    def _get_str_list(self, settings: dict, name: str) -> list:
        '''
        Value of the list setting with the passed name in the passed
        dictionary, validated to contain only strings.
        '''

        value = settings[name]

        for item in value:
            if not isinstance(item, str):
                raise EnvsyncConfException(
                    'Configuration file "{}" setting "{}" item {!r} '
                    'not a string.'.format(self.filename, name, item))

        return list(value)
