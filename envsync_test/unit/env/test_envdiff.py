#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`envsync.env.envdiff` submodule.
'''

# ....................{ IMPORTS                           }....................
import logging

# ....................{ CONSTANTS                         }....................
LISTING_BEFORE = (
    'declare -x HOME="/home/sisko"\n'
    'declare -x PATH="/usr/bin"\n'
    'declare -x SHIP="Defiant"\n'
    'declare -x OLDPWD\n'
)
'''
Export listing of an environment *before* sourcing a startup file.
'''

# ....................{ TESTS ~ listings                  }....................
def test_envdiff_diff_listings_minimal() -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.diff_listings` function on
    minimal listings changing, adding, and removing one variable each.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff
    from envsync.shell.shellvalue import UNSET

    before_text = 'declare -x A="1"\ndeclare -x B="2"\n'

    assert envdiff.diff_listings(
        before_text,
        'declare -x A="1"\ndeclare -x B="3"\ndeclare -x C="4"\n',
    ) == {'B': '3', 'C': '4'}
    assert envdiff.diff_listings(
        before_text, 'declare -x A="1"\n') == {'B': UNSET}


def test_envdiff_diff_listings() -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.diff_listings` function.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff
    from envsync.shell.shellvalue import UNSET

    changeset = envdiff.diff_listings(LISTING_BEFORE, (
        'declare -x HOME="/home/sisko"\n'
        'declare -x PATH="/opt/bin:/usr/bin"\n'
        'declare -x OLDPWD\n'
        'declare -x EDITOR="vim"\n'
        'declare -x BLANK=""\n'
    ))

    assert changeset == {
        'PATH': '/opt/bin:/usr/bin',
        'EDITOR': 'vim',
        'BLANK': '',
        'SHIP': UNSET,
    }


def test_envdiff_diff_listings_unchanged() -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.diff_listings` function on two
    identical listings.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff

    assert envdiff.diff_listings(LISTING_BEFORE, LISTING_BEFORE) == {}
    assert envdiff.diff_listings('', '') == {}


def test_envdiff_diff_listings_valueless() -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.diff_listings` function on a
    variable whose value was removed while remaining exported.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff
    from envsync.shell.shellvalue import UNSET

    changeset = envdiff.diff_listings(
        'declare -x SHIP="Defiant"\n',
        'declare -x SHIP\n',
    )

    assert changeset == {'SHIP': UNSET}


def test_envdiff_diff_listings_malformed(caplog) -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.diff_listings` function on a
    listing containing a truncated multi-line value.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff

    with caplog.at_level(logging.WARNING):
        changeset = envdiff.diff_listings(
            'declare -x SHIP="Defiant"\n',
            'declare -x SHIP="Defiant"\n'
            'declare -x MOTD="first line\n'
            'second line"\n'
            'declare -x EDITOR="vim"\n',
        )

    # The malformed variable is skipped while all others are preserved.
    assert changeset == {'EDITOR': 'vim'}
    assert 'Ignoring variable "MOTD"' in caplog.text

# ....................{ TESTS ~ unified                   }....................
def test_envdiff_diff_unified() -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.diff_unified` function.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff
    from envsync.shell.shellvalue import UNSET

    changeset = envdiff.diff_unified(
        '--- before\n'
        '+++ after\n'
        '@@ -1,4 +1,4 @@\n'
        ' declare -x HOME="/home/sisko"\n'
        '-declare -x PATH="/usr/bin"\n'
        '+declare -x PATH="/opt/bin:/usr/bin"\n'
        '-declare -x SHIP="Defiant"\n'
        '+declare -x EDITOR="vim"\n'
        '+declare -x OLDPWD\n'
    )

    # Changed variables produce only their new value rather than a removal.
    assert changeset == {
        'PATH': '/opt/bin:/usr/bin',
        'EDITOR': 'vim',
        'OLDPWD': UNSET,
        'SHIP': UNSET,
    }


def test_envdiff_diff_unified_empty() -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.diff_unified` function on an
    empty diff.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff

    assert envdiff.diff_unified('') == {}

# ....................{ TESTS ~ filtered                  }....................
def test_envdiff_snapshot_filtered() -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.snapshot_filtered` function.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff

    changeset = envdiff.snapshot_filtered(
        LISTING_BEFORE, ('PATH', 'OLDPWD', 'SHIP', 'NONEXISTENT'))

    # Unlisted and value-less variables are omitted and nothing is unset.
    assert changeset == {
        'PATH': '/usr/bin',
        'SHIP': 'Defiant',
    }

    assert envdiff.snapshot_filtered(
        'declare -x A="1"\ndeclare -x B="2"\ndeclare -x C="3"\n',
        ('A', 'C'),
    ) == {'A': '1', 'C': '3'}


def test_envdiff_snapshot_filtered_empty() -> None:
    '''
    Unit test the :func:`envsync.env.envdiff.snapshot_filtered` function on an
    empty allow-list.
    '''

    # Defer heavyweight imports.
    from envsync.env import envdiff

    assert envdiff.snapshot_filtered(LISTING_BEFORE, ()) == {}
