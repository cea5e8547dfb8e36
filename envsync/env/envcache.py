#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Environment cache** (i.e., YAML-formatted file persisting the last changeset
computed by sourcing shell startup files) facilities.

File Format
----------
This cache is a YAML mapping from the name of each variable to either the new
string value of that variable *or* ``null`` if that variable is to be unset.
The empty string is preserved as a set value distinct from ``null``. This
cache has no version or timestamp field; its timestamp is simply its
filesystem modification time.

Caveats
----------
This cache is overwritten in whole *without* atomic renaming or locking.
Concurrent writers may thus corrupt this cache, in which case the next read
fails and this cache is regenerated.
'''

# ....................{ IMPORTS                           }....................
from envsync.exceptions import (
    EnvsyncCacheNotFoundException,
    EnvsyncCacheParseException,
    EnvsyncCacheWriteException,
)
from envsync.lib.yaml import yamls
from envsync.shell import shellvalue
from envsync.shell.shellvalue import UNSET
from envsync.util.io.log import logs
from envsync.util.path import files, paths
from envsync.util.type.types import type_check, IterableTypes, MappingType
from ruamel.yaml import YAMLError

# ....................{ CLASSES                           }....................
class EnvCache(object):
    '''
    Environment cache persisted to a single YAML-formatted file.

    Attributes
    ----------
    filename : str
        Absolute or relative filename of this cache, which need *not* exist.
    '''

    # ..................{ INITIALIZERS                      }..................
    @type_check
    def __init__(self, filename: str) -> None:

        self.filename = filename

    # ..................{ TESTERS                           }..................
    @property
    def is_found(self) -> bool:
        '''
        ``True`` only if this cache exists.
        '''

        return files.is_file(self.filename)


    @type_check
    def is_fresh(self, source_filenames: IterableTypes) -> bool:
        '''
        ``True`` only if this cache exists *and* no passed source file was
        modified more recently than this cache.

        Nonexistent source files are silently ignored, as files that do not
        exist cannot invalidate this cache. Modification times are compared at
        the resolution of the current filesystem; a source file modified within
        the same tick as this cache is considered *not* to be newer.

        Parameters
        ----------
        source_filenames : IterableTypes
            Iterable of the filenames of all source files this cache derives
            from.
        '''

        if not self.is_found:
            logs.log_debug('Environment cache "%s" not found.', self.filename)
            return False

        is_stale = paths.is_mtime_newer_than_paths(
            pathnames=source_filenames, other_pathname=self.filename)

        if is_stale:
            logs.log_debug(
                'Environment cache "%s" older than source files.',
                self.filename)

        return not is_stale

    # ..................{ LOADERS                           }..................
    def load(self) -> dict:
        '''
        Load and return the changeset persisted to this cache.

        Returns
        ----------
        dict
            Changeset mapping each variable name to either its string value
            *or* :data:`UNSET`.

        Raises
        ----------
        EnvsyncCacheNotFoundException
            If this cache does *not* exist.
        EnvsyncCacheParseException
            If this cache is either *not* well-formed YAML or *not* a mapping
            from string names to either strings or ``null``.
        '''

        if not self.is_found:
            raise EnvsyncCacheNotFoundException(
                'Environment cache "{}" not found.'.format(self.filename))

        logs.log_debug('Loading environment cache "%s"...', self.filename)

        try:
            cache_data = yamls.load(self.filename)
        except YAMLError as exception:
            raise EnvsyncCacheParseException(
                'Environment cache "{}" not parsable as YAML: {}'.format(
                    self.filename, exception)) from exception
        except UnicodeDecodeError as exception:
            raise EnvsyncCacheParseException(
                'Environment cache "{}" not UTF-8-encoded: {}'.format(
                    self.filename, exception)) from exception

        # An empty file loads as "None", signifying the empty changeset.
        if cache_data is None:
            return {}

        if not isinstance(cache_data, dict):
            raise EnvsyncCacheParseException(
                'Environment cache "{}" not a mapping '
                '(i.e., is {}).'.format(
                    self.filename, type(cache_data).__name__))

        changeset = {}

        for name, value in cache_data.items():
            if not isinstance(name, str):
                raise EnvsyncCacheParseException(
                    'Environment cache "{}" variable name {!r} '
                    'not a string.'.format(self.filename, name))

            if value is None:
                changeset[name] = UNSET
            elif isinstance(value, str):
                changeset[name] = value
            else:
                raise EnvsyncCacheParseException(
                    'Environment cache "{}" variable "{}" value {!r} '
                    'neither a string nor null.'.format(
                        self.filename, name, value))

        return changeset

    # ..................{ SAVERS                            }..................
    @type_check
    def save(self, changeset: MappingType) -> None:
        '''
        Overwrite this cache with the passed changeset, creating the parent
        directory of this cache if needed.

        Raises
        ----------
        EnvsyncCacheWriteException
            If this cache could *not* be written (e.g., due to insufficient
            permissions).
        '''

        logs.log_debug('Saving environment cache "%s"...', self.filename)

        cache_data = {
            name: None if shellvalue.is_unset(value) else value
            for name, value in changeset.items()
        }

        try:
            yamls.save(
                container=cache_data,
                filename=self.filename,
                is_overwritable=True,
            )
        except (OSError, YAMLError) as exception:
            raise EnvsyncCacheWriteException(
                'Environment cache "{}" not writable: {}'.format(
                    self.filename, exception)) from exception

    # ..................{ REMOVERS                          }..................
    def remove(self) -> None:
        '''
        Remove this cache if found *or* silently reduce to a noop otherwise.
        '''

        files.remove_if_found(self.filename)
