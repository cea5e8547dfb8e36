#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Subordinate shell runner** (i.e., functions spawning a shell to run an
arbitrary command and then dump that shell's export listing).

Each call spawns a new shell process whose stdout is captured through pipes
private to that call. Since the command and the dump run in the *same* shell
process, variables set by that command (e.g., by sourcing a startup file) are
visible in that dump.
'''

# ....................{ IMPORTS                           }....................
import shlex
from envsync.exceptions import EnvsyncCommandException, EnvsyncShellException
from envsync.util.io.log import logs
from envsync.util.path.command import cmdexit, cmdrun
from envsync.util.type.types import (
    type_check,
    IterableTypes,
    MappingOrNoneTypes,
    NumericOrNoneTypes,
    SequenceTypes,
    StrOrNoneTypes,
)

# ....................{ CONSTANTS                         }....................
SHELL_DEFAULT = 'bash'
'''
Basename of the shell run by default, whose ``export -p`` builtin emits the
``declare -x`` grammar parsed by the :mod:`envsync.shell.shellexport`
submodule.
'''


EXPORT_COMMAND = 'export -p'
'''
Shell command dumping the export listing of the current shell.
'''


NOOP_COMMAND = ':'
'''
Shell command doing nothing, run before dumping a baseline export listing so
that this listing has the same shape as listings dumped after sourcing files.
'''


STDERR_LINES_LOGGED_MAX = 8
'''
Maximum number of lines of standard error logged on shell failure.
'''

# ....................{ RUNNERS                           }....................
@type_check
def run(
    # Optional parameters.
    command: StrOrNoneTypes = None,
    shell_filename: str = SHELL_DEFAULT,
    shell_args: SequenceTypes = (),
    timeout: NumericOrNoneTypes = None,
    env: MappingOrNoneTypes = None,
    duration_warn: NumericOrNoneTypes = None,
) -> str:
    '''
    Run the passed command (if any) in a new subordinate shell *and* then dump
    the export listing of that same shell, returning the stdout of that shell.

    Non-zero exit statuses returned by that shell (e.g., due to a failing
    command in a sourced startup file) are logged as warnings but otherwise
    tolerated, as the export listing remains meaningful.

    Parameters
    ----------
    command : StrOrNoneTypes
        Shell command to be run *before* dumping the export listing. Defaults
        to ``None``, in which case only the export listing is dumped.
    shell_filename : str
        Basename or absolute or relative filename of the shell to be run.
        Defaults to :data:`SHELL_DEFAULT`.
    shell_args : SequenceTypes
        Sequence of additional arguments to be passed to that shell *before*
        the ``-c`` option (e.g., ``('--noprofile', '--norc')``). Defaults to
        the empty tuple.
    timeout : NumericOrNoneTypes
        Maximum number of seconds that shell is permitted to run for. Defaults
        to ``None``, in which case that shell is run indefinitely.
    env : MappingOrNoneTypes
        Dictionary of all environment variables to export to that shell.
        Defaults to ``None``, in which case a copy of the current environment
        is exported.
    duration_warn : NumericOrNoneTypes
        Number of seconds after which a successfully terminated but slow shell
        is logged as a warning. Defaults to ``None``, in which case slow shells
        are *not* warned about.

    Returns
    ----------
    str
        Raw standard output of that shell.

    Raises
    ----------
    EnvsyncShellException
        If that shell either could not be spawned *or* timed out.
    '''

    # Script run by this shell. The export listing is dumped by the same shell
    # process running the passed command.
    script = EXPORT_COMMAND if command is None else '{}\n{}'.format(
        command, EXPORT_COMMAND)

    command_words = [shell_filename]
    command_words.extend(shell_args)
    command_words.extend(('-c', script))

    try:
        command_output = cmdrun.get_output(
            command_words=command_words,
            popen_kwargs={'timeout': timeout, 'env': env},
        )
    except EnvsyncCommandException as exception:
        raise EnvsyncShellException(
            'Shell "{}" failed: {}'.format(shell_filename, exception)
        ) from exception

    if cmdexit.is_failure(command_output.exit_status):
        logs.log_warning(
            'Shell "%s" exited with status %d.%s',
            shell_filename,
            command_output.exit_status,
            _get_stderr_summary(command_output.stderr),
        )
    elif command_output.stderr:
        logs.log_debug(
            'Shell "%s" emitted standard error.%s',
            shell_filename, _get_stderr_summary(command_output.stderr))

    if duration_warn is not None and command_output.duration > duration_warn:
        logs.log_warning(
            'Shell "%s" took %.2f seconds to run; '
            'consider moving slow commands out of the sourced files.',
            shell_filename, command_output.duration)

    return command_output.stdout

# ....................{ MAKERS                            }....................
@type_check
def make_source_command(filenames: IterableTypes) -> str:
    '''
    Shell command sourcing the passed files in the passed order via the
    POSIX-compliant ``.`` builtin, with each filename shell-quoted.
    '''

    return '\n'.join(
        '. {}'.format(shlex.quote(filename)) for filename in filenames)

# ....................{ PRIVATE                           }....................
def _get_stderr_summary(stderr: str) -> str:
    '''
    Human-readable summary of the passed standard error, comprising at most the
    first :data:`STDERR_LINES_LOGGED_MAX` lines of that output, each indented
    on a new line.
    '''

    stderr_lines = stderr.strip().splitlines()[:STDERR_LINES_LOGGED_MAX]

    return ''.join('\n    ' + stderr_line for stderr_line in stderr_lines)
