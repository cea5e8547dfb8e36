#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Value literal** (i.e., shell-quoted string embedded in a ``declare -x``
line of an export listing) decoders and encoders.

Value Literals
----------
Bash quotes the value of each exported variable in its export listing with one
of the following syntaxes, each of which this submodule decodes:

* **Double-quoted** (e.g., ``"foo \\"bar\\""``), the default. Backslashes
  escape only the ``\\``, ``"``, ``$``, and `````` characters and newlines;
  all other backslashes are literal.
* **ANSI-C quoted** (e.g., ``$'foo\\nbar'``), emitted by newer Bash releases
  for values containing control characters.
* **Single-quoted** (e.g., ``'foo'``), whose contents are literal.
* **Bare words** (e.g., ``foo``), containing no quoting metacharacters.

Exported variables with no value have no literal at all, which this submodule
decodes to the :data:`UNSET` singleton.
'''

# ....................{ IMPORTS                           }....................
import re
from enum import Enum
from envsync.exceptions import EnvsyncShellValueException
from envsync.util.type.types import type_check, StrOrNoneTypes

# ....................{ ENUMS                             }....................
class EnvVarUnset(Enum):
    '''
    Enumeration whose sole member signifies an environment variable to be
    unset (i.e., removed from the environment).

    This singleton is intentionally distinct from both ``None`` and the empty
    string, the latter of which is a valid value of set variables.
    '''

    UNSET = 'unset'

    def __repr__(self) -> str:
        return 'UNSET'


UNSET = EnvVarUnset.UNSET
'''
Singleton signifying an environment variable to be unset.
'''


EnvVarValueTypes = (str, EnvVarUnset)
'''
Tuple of the types of all environment variable values in changesets (i.e.,
either strings *or* the :data:`UNSET` singleton).
'''

# ....................{ GLOBALS ~ regex                   }....................
_DOUBLE_QUOTED_REGEX = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)
'''
Compiled regular expression matching a double-quoted literal, whose first
group captures the still-escaped contents of this literal.
'''


_DOUBLE_QUOTED_ESCAPE_REGEX = re.compile(r'\\(.)', re.DOTALL)
'''
Compiled regular expression matching a backslash-escaped character within a
double-quoted literal, whose first group captures that character.
'''


_DOUBLE_QUOTED_ESCAPED_CHARS = '\\"$`'
'''
Characters preceded by a backslash in double-quoted literals.
'''


_DOUBLE_QUOTED_ENCODE_REGEX = re.compile(r'([\\"$`])')
'''
Compiled regular expression matching each character requiring a preceding
backslash in double-quoted literals.
'''


_SINGLE_QUOTED_REGEX = re.compile(r"'([^']*)'", re.DOTALL)
'''
Compiled regular expression matching a single-quoted literal.
'''


_ANSI_C_QUOTED_REGEX = re.compile(r"\$'((?:[^'\\]|\\.)*)'", re.DOTALL)
'''
Compiled regular expression matching an ANSI-C quoted literal.
'''


_ANSI_C_ESCAPE_REGEX = re.compile(
    r'\\(?:'
    r'x([0-9a-fA-F]{1,2})|'
    r'u([0-9a-fA-F]{1,4})|'
    r'U([0-9a-fA-F]{1,8})|'
    r'([0-7]{1,3})|'
    r'c(.)|'
    r'(.)'
    r')',
    re.DOTALL,
)
'''
Compiled regular expression matching each backslash escape within an ANSI-C
quoted literal, whose groups capture (in order) a hexadecimal byte, a 16-bit
Unicode code point, a 32-bit Unicode code point, an octal byte, a control
character, and any other escaped character.
'''


_ANSI_C_ESCAPE_CHARS = {
    'a': '\a',
    'b': '\b',
    'e': '\x1b',
    'E': '\x1b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
    '\\': '\\',
    "'": "'",
    '"': '"',
    '?': '?',
}
'''
Dictionary mapping from each single character following a backslash in ANSI-C
quoted literals to the character that escape sequence signifies.
'''


_BARE_WORD_REGEX = re.compile(r'''[^\s'"\\$`]*''')
'''
Compiled regular expression matching a literal requiring no quoting.
'''

# ....................{ TESTERS                           }....................
@type_check
def is_unset(value: EnvVarValueTypes) -> bool:
    '''
    ``True`` only if the passed value signifies an unset variable.
    '''

    return value is UNSET

# ....................{ DECODERS                          }....................
@type_check
def decode(literal: StrOrNoneTypes) -> EnvVarValueTypes:
    '''
    Decode the passed value literal into the logical value of its variable.

    Parameters
    ----------
    literal : StrOrNoneTypes
        Either the raw literal following the ``=`` delimiter of a ``declare
        -x`` line *or* ``None`` if that line had no such delimiter.

    Returns
    ----------
    EnvVarValueTypes
        Either:

        * If this literal is ``None``, the :data:`UNSET` singleton.
        * Else, the string value this literal encodes.

    Raises
    ----------
    EnvsyncShellValueException
        If this literal is malformed (e.g., an unterminated quote, as produced
        by multi-line values truncated to their first line).
    '''

    if literal is None:
        return UNSET

    if literal.startswith('"'):
        return _decode_double_quoted(literal)
    elif literal.startswith("$'"):
        return _decode_ansi_c_quoted(literal)
    elif literal.startswith("'"):
        return _decode_single_quoted(literal)
    elif _BARE_WORD_REGEX.fullmatch(literal):
        return literal

    raise EnvsyncShellValueException(
        'Value literal {!r} unquoted but contains '
        'shell metacharacters.'.format(literal))


def _decode_double_quoted(literal: str) -> str:
    '''
    Decode the passed double-quoted literal.
    '''

    literal_match = _DOUBLE_QUOTED_REGEX.fullmatch(literal)
    if literal_match is None:
        raise EnvsyncShellValueException(
            'Double-quoted value literal {!r} malformed.'.format(literal))

    return _DOUBLE_QUOTED_ESCAPE_REGEX.sub(
        _replace_double_quoted_escape, literal_match.group(1))


def _replace_double_quoted_escape(escape_match) -> str:
    '''
    Character or characters replacing the passed backslash escape matched
    within a double-quoted literal.
    '''

    escaped_char = escape_match.group(1)

    # An escaped newline is a line continuation and hence removed entirely.
    if escaped_char == '\n':
        return ''
    elif escaped_char in _DOUBLE_QUOTED_ESCAPED_CHARS:
        return escaped_char

    # Else, this backslash is literal and hence preserved.
    return escape_match.group(0)


def _decode_single_quoted(literal: str) -> str:
    '''
    Decode the passed single-quoted literal.
    '''

    literal_match = _SINGLE_QUOTED_REGEX.fullmatch(literal)
    if literal_match is None:
        raise EnvsyncShellValueException(
            'Single-quoted value literal {!r} malformed.'.format(literal))

    return literal_match.group(1)


def _decode_ansi_c_quoted(literal: str) -> str:
    '''
    Decode the passed ANSI-C quoted literal.

    Bash emits each non-ASCII character of a value as the octal or hexadecimal
    escapes of its raw bytes, so consecutive byte escapes are collected into
    one run and decoded together as UTF-8. Undecodable bytes are preserved as
    surrogates, as :data:`os.environ` itself does.
    '''

    literal_match = _ANSI_C_QUOTED_REGEX.fullmatch(literal)
    if literal_match is None:
        raise EnvsyncShellValueException(
            'ANSI-C quoted value literal {!r} malformed.'.format(literal))

    body = literal_match.group(1)
    value_parts = []
    byte_run = bytearray()
    text_start = 0

    def flush_byte_run() -> None:
        if byte_run:
            value_parts.append(byte_run.decode('utf-8', 'surrogateescape'))
            byte_run.clear()

    for escape_match in _ANSI_C_ESCAPE_REGEX.finditer(body):
        if escape_match.start() > text_start:
            flush_byte_run()
            value_parts.append(body[text_start:escape_match.start()])
        text_start = escape_match.end()

        hex_byte = escape_match.group(1)
        octal_byte = escape_match.group(4)
        if hex_byte is not None:
            byte_run.append(int(hex_byte, 16))
        elif octal_byte is not None:
            byte_run.append(int(octal_byte, 8) & 0xFF)
        else:
            flush_byte_run()
            value_parts.append(_replace_ansi_c_escape(escape_match))

    flush_byte_run()
    value_parts.append(body[text_start:])

    return ''.join(value_parts)


def _replace_ansi_c_escape(escape_match) -> str:
    '''
    Character replacing the passed non-byte backslash escape matched within an
    ANSI-C quoted literal.
    '''

    hex_short, hex_long, control_char, other_char = escape_match.group(
        2, 3, 5, 6)

    if hex_short is not None:
        return chr(int(hex_short, 16))
    elif hex_long is not None:
        code_point = int(hex_long, 16)
        if code_point > 0x10FFFF:
            raise EnvsyncShellValueException(
                'ANSI-C escape "{}" exceeds Unicode range.'.format(
                    escape_match.group(0)))
        return chr(code_point)
    elif control_char is not None:
        return chr(ord(control_char.upper()) & 0x1F)

    # Unrecognized escapes are preserved as is, as under Bash.
    return _ANSI_C_ESCAPE_CHARS.get(other_char, escape_match.group(0))

# ....................{ ENCODERS                          }....................
@type_check
def encode(value: str) -> str:
    '''
    Encode the passed string value into a double-quoted literal, exactly as
    Bash itself quotes that value in its export listing.

    This function is the inverse of :func:`decode` for all strings: i.e.,
    ``decode(encode(value)) == value``.
    '''

    return '"{}"'.format(_DOUBLE_QUOTED_ENCODE_REGEX.sub(r'\\\1', value))
