#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
External command runners.

Commands are passed as a sequence of **command words**: the command's basename
or path followed by its arguments. Words are passed as is to the operating
system rather than interpreted by a shell, so they must *not* be shell-quoted.

Keyword arguments accepted by :func:`subprocess.run` may be passed through
``popen_kwargs``. The ones used by this application are ``env`` (the
environment of the command, defaulting to a copy of the current environment)
and ``timeout`` (seconds after which the command is killed).
'''

# ....................{ IMPORTS                           }....................
import subprocess, time
from collections import namedtuple
from envsync.exceptions import EnvsyncCommandException
from envsync.util.io.log import logs
from envsync.util.type.types import (
    type_check,
    MappingType,
    MappingOrNoneTypes,
    SequenceTypes,
)
from subprocess import DEVNULL, PIPE, TimeoutExpired

# ....................{ TYPES                             }....................
CommandOutput = namedtuple(
    'CommandOutput', ('exit_status', 'stdout', 'stderr', 'duration'))
CommandOutput.__doc__ = '''
    Result of running a command to completion.

    Attributes
    ----------
    exit_status : int
        Exit status returned by this command.
    stdout : str
        Captured standard output, decoded with the locale's encoding.
        Undecodable bytes are preserved as surrogates.
    stderr : str
        Captured standard error, decoded likewise.
    duration : float
        Wall-clock seconds elapsed while running this command.
    '''

# ....................{ GETTERS                           }....................
@type_check
def get_output(
    command_words: SequenceTypes, popen_kwargs: MappingOrNoneTypes = None,
) -> CommandOutput:
    '''
    Run the passed command to completion and return its captured output.

    A nonzero exit status is returned rather than raised, leaving the caller
    to decide how to report it. Standard input is the null device, so
    commands prompting for input read end-of-file instead of blocking.

    Parameters
    ----------
    command_words : SequenceTypes
        Command words.
    popen_kwargs : optional[MappingType]
        Extra keyword arguments to :func:`subprocess.run`. Defaults to
        ``None``.

    Raises
    ----------
    EnvsyncCommandException
        If this command cannot be spawned *or* outlives the passed timeout.
    '''

    popen_kwargs = _init_popen_kwargs(command_words, popen_kwargs)

    time_start = time.monotonic()

    try:
        command_result = subprocess.run(
            command_words, stdin=DEVNULL, stdout=PIPE, stderr=PIPE,
            **popen_kwargs)
    # subprocess.run() has already killed the command.
    except TimeoutExpired as exception:
        raise EnvsyncCommandException(
            'Command "{}" timed out after {} seconds.'.format(
                command_words[0], exception.timeout)) from exception
    # Not found, not executable and the like.
    except OSError as exception:
        raise EnvsyncCommandException(
            'Command "{}" not runnable: {}'.format(
                command_words[0], exception)) from exception

    duration = time.monotonic() - time_start
    logs.log_debug(
        'Command "%s" exited with status %d in %.3f seconds.',
        command_words[0], command_result.returncode, duration)

    return CommandOutput(
        exit_status=command_result.returncode,
        stdout=command_result.stdout,
        stderr=command_result.stderr,
        duration=duration,
    )

# ....................{ PRIVATE                           }....................
@type_check
def _init_popen_kwargs(
    command_words: SequenceTypes, popen_kwargs: MappingOrNoneTypes
) -> MappingType:
    '''
    Copy of the passed :func:`subprocess.run` keyword arguments completed
    with the defaults required by :func:`get_output`.
    '''

    # Avoid circular import dependencies.
    from envsync.util.os.shell import shellenv

    if not command_words:
        raise EnvsyncCommandException('Non-empty command expected.')

    popen_kwargs = dict(popen_kwargs) if popen_kwargs is not None else {}

    logs.log_debug('Running command: %s', ' '.join(command_words))

    # Snapshot the environment now rather than when the child is spawned.
    if popen_kwargs.get('env') is None:
        popen_kwargs['env'] = shellenv.get_env()

    # Text mode. Undecodable bytes become surrogates, as in "os.environ".
    popen_kwargs['universal_newlines'] = True
    popen_kwargs.setdefault('errors', 'surrogateescape')

    return popen_kwargs
