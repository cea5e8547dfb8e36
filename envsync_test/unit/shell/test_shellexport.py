#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`envsync.shell.shellexport` submodule.
'''

# ....................{ TESTS                             }....................
def test_shellexport_parse() -> None:
    '''
    Unit test the :func:`envsync.shell.shellexport.parse` function.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellexport

    entries = shellexport.parse(
        'declare -x HOME="/home/odo"\n'
        'declare -x OLDPWD\n'
        'declare -x EMPTY=""\n'
        'declare -x EQUATION="e=mc^2"\n'
    )

    assert entries == (
        ('HOME', '"/home/odo"'),
        ('OLDPWD', None),
        ('EMPTY', '""'),
        ('EQUATION', '"e=mc^2"'),
    )
    assert entries[0].name == 'HOME'
    assert entries[1].literal is None


def test_shellexport_parse_ignored() -> None:
    '''
    Unit test the :func:`envsync.shell.shellexport.parse` function on lines
    *not* matching the ``declare -x`` grammar.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellexport

    # Continuation lines of a multi-line value are ignored, leaving the
    # truncated literal of the first line as is.
    entries = shellexport.parse(
        'Welcome to Deep Space Nine!\n'
        'declare -x MOTD="first line\n'
        'second line"\n'
        '  declare -x INDENTED="ignored"\n'
        'declare -r READONLY="ignored"\n'
        'declare -x LAST="last"'
    )

    assert entries == (
        ('MOTD', '"first line'),
        ('LAST', '"last"'),
    )


def test_shellexport_parse_empty() -> None:
    '''
    Unit test the :func:`envsync.shell.shellexport.parse` function on an empty
    listing.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellexport

    assert shellexport.parse('') == ()


def test_shellexport_parse_diff() -> None:
    '''
    Unit test the :func:`envsync.shell.shellexport.parse_diff` function.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellexport
    from envsync.shell.shellexport import (
        DIFF_MARKER_ADDED, DIFF_MARKER_REMOVED)

    entries = shellexport.parse_diff(
        '--- before\n'
        '+++ after\n'
        '@@ -1,3 +1,3 @@\n'
        ' declare -x HOME="/home/odo"\n'
        '-declare -x PATH="/usr/bin"\n'
        '+declare -x PATH="/opt/bin:/usr/bin"\n'
        '-declare -x OLDPWD\n'
    )

    assert entries == (
        (DIFF_MARKER_REMOVED, 'PATH', '"/usr/bin"'),
        (DIFF_MARKER_ADDED, 'PATH', '"/opt/bin:/usr/bin"'),
        (DIFF_MARKER_REMOVED, 'OLDPWD', None),
    )


def test_shellexport_to_mapping() -> None:
    '''
    Unit test the :func:`envsync.shell.shellexport.to_mapping` function.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellexport

    entries = shellexport.parse(
        'declare -x RANK="ensign"\n'
        'declare -x SHIP\n'
        'declare -x RANK="lieutenant"\n'
    )

    # Later entries replace earlier entries of the same name.
    assert shellexport.to_mapping(entries) == {
        'RANK': '"lieutenant"',
        'SHIP': None,
    }
