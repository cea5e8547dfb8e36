#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
YAML file loading and saving, shared by the configuration and the environment
cache.

All files are handled by the safe pure-Python :mod:`ruamel.yaml` backend,
which constructs only plain scalars, lists and dictionaries.
'''

# ....................{ IMPORTS                           }....................
from envsync.util.io import iofiles
from envsync.util.io.log import logs
from envsync.util.path import pathnames
from envsync.util.type.types import type_check
from ruamel import yaml as ruamel_yaml

# ....................{ CONSTANTS                         }....................
YAML_FILETYPES = {'yaml', 'yml',}
'''
Filetypes expected of YAML files. Other filetypes are accepted with a warning.
'''

# ....................{ LOADERS                           }....................
@type_check
def load(filename: str) -> object:
    '''
    Deserialize the YAML file with the passed path.

    The returned object is unvalidated: a dictionary, list, scalar, or
    ``None`` for an empty file. Callers validate its shape themselves.

    Raises
    ----------
    EnvsyncFileException
        If this file does *not* exist.
    ruamel.yaml.YAMLError
        If this file is malformed.
    '''

    _warn_unless_filetype_yaml(filename)

    with iofiles.reading_chars(filename) as yaml_file:
        return _make_ruamel_parser().load(yaml_file)

# ....................{ SAVERS                            }....................
@type_check
def save(
    container: object,
    filename: str,
    is_overwritable: bool = False,
) -> None:
    '''
    Serialize the passed object to the YAML file with the passed path,
    creating missing parent directories.

    Parameters
    ----------
    container: object
        Dictionary, list or scalar to be serialized.
    filename : str
        Path of the file to be written.
    is_overwritable : optional[bool]
        ``True`` if an existing file is to be replaced. Defaults to
        ``False``, in which case an existing file raises
        :class:`FileExistsError`.
    '''

    _warn_unless_filetype_yaml(filename)

    with iofiles.writing_chars(
        filename=filename, is_overwritable=is_overwritable) as yaml_file:
        _make_ruamel_parser().dump(container, yaml_file)

# ....................{ PRIVATE ~ makers                  }....................
def _make_ruamel_parser() -> ruamel_yaml.YAML:
    '''
    New safe :mod:`ruamel.yaml` parser.

    The safe loader rejects ``!!python/object`` tags. Round-trip mode is not
    needed, as these files are small and mostly written by this application.
    '''

    ruamel_parser = ruamel_yaml.YAML(typ='safe', pure=True)

    # Write non-ASCII values (e.g., localized paths) unescaped.
    ruamel_parser.allow_unicode = True

    # One "NAME: value" line per variable.
    ruamel_parser.default_flow_style = False

    return ruamel_parser

# ....................{ PRIVATE ~ warners                 }....................
@type_check
def _warn_unless_filetype_yaml(filename: str) -> None:
    '''
    Log a warning unless the passed filename ends in ``.yaml`` or ``.yml``.
    '''

    filetype = pathnames.get_filetype_undotted_or_none(filename)

    if filetype not in YAML_FILETYPES:
        if filetype is None:
            logs.log_warning('YAML file "%s" has no filetype.', filename)
        else:
            logs.log_warning(
                'YAML file "%s" filetype "%s" neither "yaml" nor "yml".',
                filename, filetype)
