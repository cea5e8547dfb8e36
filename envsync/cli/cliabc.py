#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Abstract base class of the ``envsync`` command-line interface.

This class owns everything shared by all subcommands: logging setup, the
top-level options, and the translation of exceptions into exit statuses.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: Exceptions raised before logging is configured are printed as raw
# tracebacks. Hence, the top-level of this module may import *ONLY* from
# modules that cannot fail on importation.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import sys
from abc import ABCMeta, abstractmethod
from argparse import ArgumentParser
from envsync import metadata
from envsync.util.io.log import logs, logconfig
from envsync.util.io.log.logenum import LogLevel
from envsync.util.path.command.cmdexit import SUCCESS, FAILURE_DEFAULT
from envsync.util.type.types import type_check, SequenceOrNoneTypes

# ....................{ SUPERCLASS                        }....................
class CLIABC(object, metaclass=ABCMeta):
    '''
    Abstract command-line interface running a single subcommand per call.

    Attributes
    ----------
    _arg_list : list
        Unparsed command-line arguments, excluding the program name.
    _arg_parser : ArgumentParser
        Parser of these arguments.
    _args : argparse.Namespace
        Parsed arguments. See "Attributes (_args)" below.

    Attributes (of :attr:`_args`)
    ----------
    log_filename : StrOrNoneTypes
        Path of the logfile passed by ``--log-file`` *or* ``None``.
    log_level : str
        Lowercased name of the :class:`LogLevel` member passed by
        ``--log-level``. Defaults to
        ``warning``, keeping standard error quiet when sourced from shell
        startup files.
    '''

    # ..................{ INITIALIZERS                      }..................
    def __init__(self) -> None:

        super().__init__()

        self._arg_list = None
        self._arg_parser = None
        self._args = None

    # ..................{ RUNNERS                           }..................
    @type_check
    def run(self, arg_list: SequenceOrNoneTypes = None) -> int:
        '''
        Run this interface and return its exit status.

        Exceptions are logged rather than propagated. Any exception maps to
        :data:`FAILURE_DEFAULT`, so that a broken configuration never aborts
        the shell startup file evaluating this command.

        Parameters
        ----------
        arg_list : optional[SequenceTypes]
            Arguments excluding the program name. Defaults to ``None``, in
            which case ``sys.argv[1:]`` is used.
        '''

        if arg_list is None:
            arg_list = sys.argv[1:]

        self._arg_list = list(arg_list)

        try:
            # Configure logging first, so that parse errors are logged too.
            self._ignite_app()
            self._parse_args()

            self._do()

            return SUCCESS
        except Exception as exception:
            self._handle_exception(exception)
            return FAILURE_DEFAULT

    # ..................{ ARGS                              }..................
    def _parse_args(self) -> None:
        '''
        Build the argument parser, parse :attr:`_arg_list` and apply the
        top-level options.
        '''

        self._init_arg_parser_top()
        self._config_arg_parsing()

        self._args = self._arg_parser.parse_args(self._arg_list)

        self._parse_options_top()


    def _init_arg_parser_top(self) -> None:
        '''
        Create the parser of the options shared by all subcommands.
        '''

        self._arg_parser = ArgumentParser(
            prog=metadata.SCRIPT_BASENAME,
            description=metadata.SYNOPSIS,
        )

        self._arg_parser.add_argument(
            '-V', '--version',
            action='version',
            version='{} {}'.format(metadata.SCRIPT_BASENAME, metadata.VERSION),
            help='print program version and exit',
        )
        self._arg_parser.add_argument(
            '--log-file',
            dest='log_filename',
            default=None,
            help='file to log all messages to (defaults to no file)',
        )
        self._arg_parser.add_argument(
            '--log-level',
            dest='log_level',
            default=LogLevel.WARNING.name.lower(),
            choices=tuple(
                log_level.name.lower() for log_level in LogLevel),
            help='minimum level of messages to log (defaults to "%(default)s")',
        )


    def _parse_options_top(self) -> None:
        '''
        Apply ``--log-file`` and ``--log-level`` to the logging configuration.
        '''

        log_config = logconfig.get()

        # The logfile must exist before anything below logs to it.
        log_config.filename = self._args.log_filename
        log_config.level = LogLevel[self._args.log_level.upper()]

        logs.log_debug('Passed argument list: %s', self._arg_list)

    # ..................{ IGNITERS                          }..................
    def _ignite_app(self) -> None:
        '''
        Reconfigure logging for this run.

        Logging is reconfigured on every run, as tests invoke many runs from
        one process. Informational messages go to standard error, since
        standard output carries the generated shell code.
        '''

        logconfig.init(info_stream=sys.stderr)

    # ..................{ EXCEPTIONS                        }..................
    @type_check
    def _handle_exception(self, exception: Exception) -> None:
        '''
        Log the passed exception raised while running this interface.
        '''

        logs.log_exception(exception)

    # ..................{ SUBCLASS ~ mandatory              }..................
    @abstractmethod
    def _do(self) -> object:
        '''
        Run the subcommand selected by the parsed arguments.
        '''

        pass

    # ..................{ SUBCLASS ~ optional               }..................
    def _config_arg_parsing(self) -> None:
        '''
        Add subclass-specific arguments to :attr:`_arg_parser`.
        '''

        pass
