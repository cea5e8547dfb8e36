#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
The ``envsync`` command and its ``source`` and ``load`` subcommands.

Output
----------
Each subcommand prints the changeset it merged to standard output as shell
statements (e.g., ``export PATH="/usr/bin"``, ``unset JAVA_HOME``), permitting
parent shells to import that changeset with ``eval "$(envsync load)"``. All
log messages are printed to standard error instead.
'''

# ....................{ IMPORTS                           }....................
# Modules importing "ruamel.yaml" are imported by the subcommand methods
# below, so that a missing dependency is logged rather than dumped as a
# traceback.
from envsync.cli.cliabc import CLIABC
from envsync.util.io.log import logs
from envsync.util.type.types import type_check, MappingType

# ....................{ SUBCLASS                          }....................
class EnvsyncCLI(CLIABC):
    '''
    Command-line interface of ``envsync``.

    Attributes (of :attr:`_args`)
    ----------
    subcommand_name : StrOrNoneTypes
        Name of the passed subcommand if any *or* ``None`` otherwise.
    conf_filename : StrOrNoneTypes
        Absolute or relative path of the configuration file to load if passed
        *or* ``None`` otherwise, in which case the default configuration file
        is loaded if found.
    source_filename : str
        Absolute or relative path of the file to be sourced by the ``source``
        subcommand.
    is_rebuild : bool
        ``True`` only if the ``load`` subcommand is to ignore and regenerate
        the environment cache.
    '''

    # ..................{ SUPERCLASS ~ args                 }..................
    def _config_arg_parsing(self) -> None:

        self._arg_parser.add_argument(
            '--conf',
            dest='conf_filename',
            default=None,
            help=(
                'YAML configuration file to load '
                '(defaults to "envsync.yaml" in the dot directory)'),
        )

        subparsers = self._arg_parser.add_subparsers(
            dest='subcommand_name',
            title='subcommands',
        )

        subparser_source = subparsers.add_parser(
            'source',
            help='source a shell startup file and print changed variables',
            description=(
                'Source the passed shell startup file in a subordinate shell '
                'and print all environment variables changed by doing so as '
                'shell statements.'),
        )
        subparser_source.add_argument(
            'source_filename',
            metavar='FILE',
            help='shell startup file to be sourced',
        )

        subparser_load = subparsers.add_parser(
            'load',
            help='load cached variables or rebuild them if stale',
            description=(
                'Print all environment variables cached from sourcing the '
                'configured shell startup files as shell statements, '
                'rebuilding this cache if stale or missing.'),
        )
        subparser_load.add_argument(
            '--rebuild',
            dest='is_rebuild',
            action='store_true',
            help='ignore and regenerate the environment cache',
        )

    # ..................{ SUPERCLASS ~ cli                  }..................
    def _do(self) -> object:
        '''
        Run the passed subcommand if any *or* print help otherwise.
        '''

        if not self._args.subcommand_name:
            self._arg_parser.print_help()
            return self

        # Method implementing this subcommand.
        subcommand_method = getattr(self, '_do_' + self._args.subcommand_name)
        return subcommand_method()

    # ..................{ SUBCOMMANDS                       }..................
    def _do_source(self) -> dict:
        '''
        Run the ``source`` subcommand.
        '''

        # Defer heavyweight imports.
        from envsync.env import envsource

        changeset = envsource.source_file(
            self._args.source_filename, conf=self._conf)
        _print_changeset(changeset)
        return changeset


    def _do_load(self) -> dict:
        '''
        Run the ``load`` subcommand.
        '''

        # Defer heavyweight imports.
        from envsync.env import envsource
        from envsync.env.envcache import EnvCache

        conf = self._conf

        if self._args.is_rebuild:
            EnvCache(conf.cache_filename).remove()

        changeset = envsource.load_or_rebuild(conf)
        _print_changeset(changeset)
        return changeset

    # ..................{ PROPERTIES                        }..................
    @property
    def _conf(self) -> object:
        '''
        Configuration loaded from the passed ``--conf`` file if any, else from
        the default configuration file if found, else the default
        configuration.
        '''

        # Defer heavyweight imports.
        from envsync.envconf import EnvConf

        return EnvConf.load_or_default(self._args.conf_filename)

# ....................{ PRIVATE                           }....................
@type_check
def _print_changeset(changeset: MappingType) -> None:
    '''
    Print the passed changeset to standard output as shell statements
    importing this changeset when evaluated by a POSIX-compatible shell.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue

    logs.log_info('Printing %d changed variable(s).', len(changeset))

    for name, value in changeset.items():
        if shellvalue.is_unset(value):
            print('unset {}'.format(name))
        else:
            print('export {}={}'.format(name, shellvalue.encode(value)))
