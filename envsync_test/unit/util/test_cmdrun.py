#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`envsync.util.path.command` subpackage.
'''

# ....................{ IMPORTS                           }....................
import pytest
from envsync_test.util.mark.skip import skip_unless_command

# ....................{ TESTS ~ cmdrun                    }....................
@skip_unless_command('sh')
def test_cmdrun_get_output() -> None:
    '''
    Unit test the :func:`envsync.util.path.command.cmdrun.get_output`
    function.
    '''

    # Defer heavyweight imports.
    from envsync.util.os.shell import shellenv
    from envsync.util.path.command import cmdexit, cmdrun

    env = shellenv.get_env()
    env['ENVSYNC_SHIP'] = 'Defiant'

    command_output = cmdrun.get_output(
        ('sh', '-c', 'echo "$ENVSYNC_SHIP"; echo Tain >&2; exit 7'),
        popen_kwargs={'env': env},
    )

    # Failing commands are returned rather than raised.
    assert command_output.exit_status == 7
    assert cmdexit.is_failure(command_output.exit_status)
    assert command_output.stdout == 'Defiant\n'
    assert command_output.stderr == 'Tain\n'
    assert command_output.duration >= 0


@skip_unless_command('sh')
def test_cmdrun_get_output_undecodable() -> None:
    '''
    Unit test the :func:`envsync.util.path.command.cmdrun.get_output`
    function on a command emitting bytes invalid as UTF-8.
    '''

    # Defer heavyweight imports.
    import locale
    from envsync.util.path.command import cmdrun

    command_output = cmdrun.get_output(('sh', '-c', 'printf "\\377ok"'))

    # These bytes round-trip rather than being replaced.
    assert '\ufffd' not in command_output.stdout
    assert command_output.stdout.encode(
        locale.getpreferredencoding(False), 'surrogateescape') == b'\xffok'


@skip_unless_command('sh')
def test_cmdrun_get_output_timeout() -> None:
    '''
    Unit test the :func:`envsync.util.path.command.cmdrun.get_output`
    function on a command exceeding the passed timeout.
    '''

    # Defer heavyweight imports.
    from envsync.exceptions import EnvsyncCommandException
    from envsync.util.path.command import cmdrun

    with pytest.raises(EnvsyncCommandException):
        cmdrun.get_output(
            ('sh', '-c', 'sleep 3; echo done'),
            popen_kwargs={'timeout': 0.5},
        )


def test_cmdrun_get_output_fail(envsync_temp_dir) -> None:
    '''
    Unit test the :func:`envsync.util.path.command.cmdrun.get_output`
    function on nonexistent and empty commands.
    '''

    # Defer heavyweight imports.
    from envsync.exceptions import EnvsyncCommandException
    from envsync.util.path.command import cmdrun

    with pytest.raises(EnvsyncCommandException):
        cmdrun.get_output((str(envsync_temp_dir.join('nonexistent')),))

    with pytest.raises(EnvsyncCommandException):
        cmdrun.get_output(())

# ....................{ TESTS ~ cmds                      }....................
def test_cmds_is_command(envsync_temp_dir) -> None:
    '''
    Unit test the :func:`envsync.util.path.command.cmds.is_command` function.
    '''

    # Defer heavyweight imports.
    import sys
    from envsync.util.path.command import cmds

    assert cmds.is_command(sys.executable)
    assert not cmds.is_command(str(envsync_temp_dir.join('nonexistent')))
