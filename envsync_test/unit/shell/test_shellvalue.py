#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests for the :mod:`envsync.shell.shellvalue` submodule.
'''

# ....................{ IMPORTS                           }....................
import pytest

# ....................{ TESTS ~ decode                    }....................
def test_shellvalue_decode_none() -> None:
    '''
    Unit test the :func:`envsync.shell.shellvalue.decode` function on the
    absent literal of a variable exported without a value.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue
    from envsync.shell.shellvalue import UNSET

    assert shellvalue.decode(None) is UNSET
    assert shellvalue.is_unset(shellvalue.decode(None))
    assert repr(UNSET) == 'UNSET'


def test_shellvalue_decode_double_quoted() -> None:
    '''
    Unit test the :func:`envsync.shell.shellvalue.decode` function on
    double-quoted literals.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue

    # The empty string is a present value rather than an unset variable.
    assert shellvalue.decode('""') == ''
    assert not shellvalue.is_unset(shellvalue.decode('""'))

    assert shellvalue.decode('"/usr/local/bin:/usr/bin"') == (
        '/usr/local/bin:/usr/bin')
    assert shellvalue.decode('"Dax Jadzia"') == 'Dax Jadzia'

    # Backslashes preceding escapable characters are removed.
    assert shellvalue.decode(r'"say \"hi\" to \$USER at \`host\` \\o/"') == (
        r'say "hi" to $USER at `host` \o/')

    # Backslashes preceding all other characters are preserved.
    assert shellvalue.decode(r'"C:\temp\new"') == r'C:\temp\new'

    # Backslash-newline is a line continuation.
    assert shellvalue.decode('"Deep\\\nSpace"') == 'DeepSpace'

    # Literal newlines are preserved.
    assert shellvalue.decode('"Deep\nSpace"') == 'Deep\nSpace'


def test_shellvalue_decode_single_quoted() -> None:
    '''
    Unit test the :func:`envsync.shell.shellvalue.decode` function on
    single-quoted literals.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue

    assert shellvalue.decode("''") == ''
    assert shellvalue.decode(r"'no \"escapes\" $here'") == (
        r'no \"escapes\" $here')


def test_shellvalue_decode_ansi_c_quoted() -> None:
    '''
    Unit test the :func:`envsync.shell.shellvalue.decode` function on ANSI-C
    quoted literals.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue

    assert shellvalue.decode(r"$'Odo\nQuark'") == 'Odo\nQuark'
    assert shellvalue.decode(r"$'tab\there'") == 'tab\there'
    assert shellvalue.decode(r"$'\x41\101\u00e9\U0001F596'") == (
        'AA\u00e9\U0001F596')
    assert shellvalue.decode(r"$'\cA\e'") == '\x01\x1b'
    assert shellvalue.decode(r"$'it\'s'") == "it's"

    # Unrecognized escapes are preserved as is.
    assert shellvalue.decode(r"$'\q'") == r'\q'


def test_shellvalue_decode_ansi_c_quoted_bytes() -> None:
    '''
    Unit test the :func:`envsync.shell.shellvalue.decode` function on ANSI-C
    quoted literals escaping the UTF-8 bytes of non-ASCII characters, as Bash
    emits under the C locale.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue

    # Octal and hexadecimal byte escapes, alone and adjacent to text.
    assert shellvalue.decode(r"$'\303\251'") == 'é'
    assert shellvalue.decode(r"$'\xc3\xa9'") == 'é'
    assert shellvalue.decode(r"$'caf\303\251\nbar'") == 'café\nbar'
    assert shellvalue.decode(r"$'\xe2\x82\254 \303\251'") == '€ é'

    # Invalid UTF-8 survives as surrogates, exactly as in "os.environ".
    value = shellvalue.decode(r"$'\377ok'")
    assert value == '\udcffok'
    assert value.encode('utf-8', 'surrogateescape') == b'\xffok'


def test_shellvalue_decode_bare() -> None:
    '''
    Unit test the :func:`envsync.shell.shellvalue.decode` function on unquoted
    literals.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue

    assert shellvalue.decode('Sisko') == 'Sisko'
    assert shellvalue.decode('') == ''


@pytest.mark.parametrize('literal', (
    # Unterminated double-quoted literal, as produced by truncating the first
    # line of a multi-line value.
    '"Bajor',
    # Trailing garbage after a closing quote.
    '"Bajor"or',
    # Unterminated single- and ANSI-C quoted literals.
    "'Cardassia",
    "$'Cardassia",
    # Unquoted whitespace and metacharacters.
    'Gamma Quadrant',
    'Gamma$Quadrant',
))
def test_shellvalue_decode_fail(literal: str) -> None:
    '''
    Unit test the :func:`envsync.shell.shellvalue.decode` function on
    malformed literals.
    '''

    # Defer heavyweight imports.
    from envsync.exceptions import EnvsyncShellValueException
    from envsync.shell import shellvalue

    with pytest.raises(EnvsyncShellValueException):
        shellvalue.decode(literal)

# ....................{ TESTS ~ encode                    }....................
def test_shellvalue_encode() -> None:
    '''
    Unit test the :func:`envsync.shell.shellvalue.encode` function.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue

    assert shellvalue.encode('') == '""'
    assert shellvalue.encode('Kira Nerys') == '"Kira Nerys"'
    assert shellvalue.encode('a"b$c`d\\e') == r'"a\"b\$c\`d\\e"'


def test_shellvalue_encode_decode() -> None:
    '''
    Unit test that the :func:`envsync.shell.shellvalue.decode` function
    inverts the :func:`envsync.shell.shellvalue.encode` function.
    '''

    # Defer heavyweight imports.
    from envsync.shell import shellvalue

    for value in (
        '',
        'Kira Nerys',
        'say "hello"',
        "it's",
        '$HOME and ${PATH}',
        '`uname`',
        'trailing backslash\\',
        'C:\\temp',
        'multiple\nlines',
    ):
        assert shellvalue.decode(shellvalue.encode(value)) == value
