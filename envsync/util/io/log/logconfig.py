#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Root logger configuration.

Standard output of the ``envsync`` command is reserved for the shell code
evaluated by the calling shell, so the command-line interface routes
informational messages to standard error (see :func:`init`).
'''

# ....................{ IMPORTS                           }....................
import logging, os, sys
from envsync import metadata
from envsync.util.io.log.logenum import LogLevel
from envsync.util.io.log.logfilter import (
    LogFilterThirdPartyDebug, LogFilterMoreThanInfo)
from envsync.util.type.types import type_check, StrOrNoneTypes
from logging import Formatter, Handler, RootLogger, StreamHandler
from logging.handlers import RotatingFileHandler

# ....................{ GLOBALS                           }....................
_config = None
'''
:class:`LogConfig` instance created by the most recent call to :func:`init`.
'''


LOGFILE_SIZE_MAX = 1024 * 1024
'''
Size in bytes at which the logfile is rotated.
'''


LOGFILE_BACKUP_COUNT = 8
'''
Number of rotated logfiles retained alongside the current logfile.
'''

# ....................{ CLASSES                           }....................
class LogConfig(object):
    '''
    Handlers attached to the root logger.

    Every logger in this process propagates to the root logger, which this
    class equips with up to three handlers:

    * An informational handler emitting ``INFO`` and ``DEBUG`` records to the
      passed informational stream. Only ``INFO`` records pass by default.
    * An error handler emitting ``WARNING`` and more severe records to
      standard error.
    * An optional file handler appending records of every level to a rotated
      logfile, enabled by setting :attr:`filename`.

    Debug records from third-party loggers are dropped by all handlers.

    Attributes
    ----------
    _filename : StrOrNoneTypes
        Path of the logfile if file logging is enabled *or* ``None``.
    _info_stream : object
        Text stream written by the informational handler.
    _logger_root : RootLogger
        Root logger.
    _logger_root_handler_file : Handler
        File handler if file logging is enabled *or* ``None``.
    _logger_root_handler_stderr : Handler
        Error handler.
    _logger_root_handler_stdout : Handler
        Informational handler. Named after the stream it writes by default.
    '''

    # ..................{ INITIALIZERS                      }..................
    @type_check
    def __init__(
        self,
        filename: StrOrNoneTypes = None,
        info_stream: object = None,
    ) -> None:
        '''
        Replace all existing root logger handlers with new handlers.

        Parameters
        ----------
        filename : StrOrNoneTypes
            Path of the logfile to append to *or* ``None`` to disable file
            logging. Defaults to ``None``.
        info_stream : object
            Text stream written by the informational handler. Defaults to
            ``None``, in which case :data:`sys.stdout` is written.
        '''

        super().__init__()

        if info_stream is None:
            info_stream = sys.stdout
        self._info_stream = info_stream

        self._filename = None
        self._logger_root = None
        self._logger_root_handler_file = None
        self._logger_root_handler_stderr = None
        self._logger_root_handler_stdout = None

        self._init_logger_root()
        self._init_logger_root_handler_std()

        # Create the file handler last, so that it is appended after the
        # stream handlers.
        self.filename = filename

        # Route warnings from the "warnings" module through these handlers.
        logging.captureWarnings(True)


    def _init_logger_root(self) -> None:
        '''
        Reset the root logger, detaching every handler attached by a prior
        configuration.
        '''

        self._logger_root = logging.getLogger()

        # Label stream output with this package rather than "root".
        self._logger_root.name = metadata.PACKAGE_NAME

        # Let every record through the logger. Handlers do the filtering.
        self._logger_root.setLevel(LogLevel.ALL)

        for root_handler in list(self._logger_root.handlers):
            self._logger_root.removeHandler(root_handler)


    def _init_logger_root_handler_std(self) -> None:
        '''
        Attach the informational and error stream handlers.
        '''

        stream_formatter = Formatter(
            fmt='[{}] {{message}}'.format(metadata.SCRIPT_BASENAME),
            style='{')

        handler_info = StreamHandler(self._info_stream)
        handler_info.setLevel(LogLevel.INFO)

        # Warnings and errors belong to the error handler alone.
        handler_info.addFilter(LogFilterMoreThanInfo())

        handler_error = StreamHandler(sys.stderr)
        handler_error.setLevel(LogLevel.WARNING)

        for handler in (handler_info, handler_error):
            handler.addFilter(LogFilterThirdPartyDebug())
            handler.setFormatter(stream_formatter)
            self._logger_root.addHandler(handler)

        self._logger_root_handler_stdout = handler_info
        self._logger_root_handler_stderr = handler_error


    def _init_logger_root_handler_file(self) -> None:
        '''
        Replace the current file handler if any with a handler appending to
        the current :attr:`filename` if any.

        The level of the replaced handler is carried over to its replacement.
        '''

        file_level = LogLevel.DEBUG

        if self._logger_root_handler_file is not None:
            file_level = self._logger_root_handler_file.level
            self._logger_root.removeHandler(self._logger_root_handler_file)
            self._logger_root_handler_file.close()
            self._logger_root_handler_file = None

        if self._filename is None:
            return

        file_dirname = os.path.dirname(self._filename)
        if file_dirname:
            os.makedirs(file_dirname, exist_ok=True)

        handler_file = RotatingFileHandler(
            filename=self._filename,
            mode='a',
            # Do not create the logfile until a record is emitted.
            delay=True,
            encoding='utf-8',
            maxBytes=LOGFILE_SIZE_MAX,
            backupCount=LOGFILE_BACKUP_COUNT,
        )
        handler_file.setLevel(file_level)
        handler_file.addFilter(LogFilterThirdPartyDebug())
        handler_file.setFormatter(Formatter(
            fmt=(
                '{asctime} {levelname:<8} {name} '
                '[{module}:{lineno}] pid={process}: {message}'),
            style='{'))

        self._logger_root.addHandler(handler_file)
        self._logger_root_handler_file = handler_file

    # ..................{ PROPERTIES ~ handler              }..................
    @property
    def logger_root(self) -> RootLogger:
        return self._logger_root


    @property
    def handler_file(self) -> (Handler, type(None)):
        return self._logger_root_handler_file


    @property
    def handler_stderr(self) -> Handler:
        return self._logger_root_handler_stderr


    @property
    def handler_stdout(self) -> Handler:
        return self._logger_root_handler_stdout

    # ..................{ PROPERTIES ~ level                }..................
    @property
    def level(self) -> int:
        '''
        Minimum level of records emitted by the stream handlers.
        '''

        return self._logger_root_handler_stdout.level


    @level.setter
    @type_check
    def level(self, level: LogLevel) -> None:
        '''
        Set the minimum level of records emitted by the stream handlers.

        The error handler never drops below ``WARNING``, since lower records
        are the informational handler's concern. The file handler is left
        untouched and keeps logging every level.
        '''

        self._logger_root_handler_stdout.setLevel(level)
        self._logger_root_handler_stderr.setLevel(max(level, LogLevel.WARNING))

    # ..................{ PROPERTIES ~ file                 }..................
    @property
    def filename(self) -> StrOrNoneTypes:
        '''
        Path of the logfile if file logging is enabled *or* ``None``.
        '''

        return self._filename


    @filename.setter
    @type_check
    def filename(self, filename: StrOrNoneTypes) -> None:
        '''
        Redirect file logging to the passed path, or disable it if ``None``.

        :class:`logging.FileHandler` cannot be retargeted in place, so the
        current handler is closed and replaced.
        '''

        if self._filename == filename and (
            filename is None or self._logger_root_handler_file is not None):
            return

        self._filename = filename
        self._init_logger_root_handler_file()

# ....................{ INITIALIZERS                      }....................
@type_check
def init(
    filename: StrOrNoneTypes = None, info_stream: object = None,
) -> LogConfig:
    '''
    Configure the root logger for this process and return the configuration.

    Parameters are passed as is to :class:`LogConfig`. Calling this function
    again discards the previous configuration.
    '''

    global _config
    _config = LogConfig(filename=filename, info_stream=info_stream)
    return _config

# ....................{ GETTERS                           }....................
def get() -> LogConfig:
    '''
    Configuration returned by the last call to :func:`init` *or* ``None`` if
    logging has yet to be configured.
    '''

    return _config
