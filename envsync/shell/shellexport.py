#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Export listing** (i.e., text emitted by the ``export -p`` builtin of Bash
enumerating all exported variables) parsers.

Grammar
----------
Each parsed line has one of the following two forms, anchored at both line
start and line end:

* ``declare -x NAME``, signifying a variable exported without a value.
* ``declare -x NAME=LITERAL``, signifying a variable exported with the value
  encoded by ``LITERAL``, extending to the end of this line. See the
  :mod:`envsync.shell.shellvalue` submodule for decoding this literal.

All other lines are silently ignored. Since the grammar is line-oriented, the
second and subsequent lines of values containing literal newlines are ignored;
the truncated literal on the first such line then fails to decode.
'''

# ....................{ IMPORTS                           }....................
import re
from collections import namedtuple
from envsync.util.type.types import type_check, IterableTypes

# ....................{ TYPES                             }....................
ExportEntry = namedtuple('ExportEntry', ('name', 'literal'))
ExportEntry.__doc__ = '''
    Single variable parsed from an export listing.

    Attributes
    ----------
    name : str
        Name of this variable.
    literal : StrOrNoneTypes
        Raw value literal of this variable if exported with a value *or*
        ``None`` otherwise.
    '''


DiffEntry = namedtuple('DiffEntry', ('marker', 'name', 'literal'))
DiffEntry.__doc__ = '''
    Single variable parsed from a textual diff of two export listings.

    Attributes
    ----------
    marker : str
        Either :data:`DIFF_MARKER_ADDED` if this line was added to the newer
        listing *or* :data:`DIFF_MARKER_REMOVED` if this line was removed from
        the older listing.
    name : str
        Name of this variable.
    literal : StrOrNoneTypes
        Raw value literal of this variable if any *or* ``None`` otherwise.
    '''

# ....................{ CONSTANTS                         }....................
DIFF_MARKER_ADDED = '+'
'''
Character prefixing lines added to the newer export listing in a textual diff.
'''


DIFF_MARKER_REMOVED = '-'
'''
Character prefixing lines removed from the older export listing in a textual
diff.
'''


_EXPORT_LINE_PATTERN = r'declare -x ([^\s=]+)(?:=(.*))?'
'''
Uncompiled regular expression matching the body of a single ``declare -x``
line, whose first group captures the variable name and whose optional second
group captures the raw value literal.
'''


_EXPORT_LINE_REGEX = re.compile(
    r'^' + _EXPORT_LINE_PATTERN + r'$', re.MULTILINE)
'''
Compiled regular expression matching each ``declare -x`` line in an export
listing.
'''


_DIFF_LINE_REGEX = re.compile(
    r'^([-+])' + _EXPORT_LINE_PATTERN + r'$', re.MULTILINE)
'''
Compiled regular expression matching each ``+``- or ``-``-prefixed ``declare
-x`` line in a textual diff of two export listings.

Since unified diff headers (e.g., ``+++ after``) are *not* followed by
``declare -x``, these headers are implicitly ignored.
'''

# ....................{ PARSERS                           }....................
@type_check
def parse(text: str) -> tuple:
    '''
    Parse the passed export listing into a tuple of :class:`ExportEntry`
    instances in listing order.

    Parameters
    ----------
    text : str
        Export listing to be parsed, typically the stdout of ``export -p``.

    Returns
    ----------
    tuple
        Tuple of zero or more :class:`ExportEntry` instances.
    '''

    return tuple(
        ExportEntry(name=line_match.group(1), literal=line_match.group(2))
        for line_match in _EXPORT_LINE_REGEX.finditer(text))


@type_check
def parse_diff(text: str) -> tuple:
    '''
    Parse the passed textual diff of two export listings into a tuple of
    :class:`DiffEntry` instances in diff order.

    Each matched line is prefixed by either :data:`DIFF_MARKER_ADDED` or
    :data:`DIFF_MARKER_REMOVED`, stripped *before* the ``declare -x`` grammar
    is applied. Context lines and diff headers are silently ignored.
    '''

    return tuple(
        DiffEntry(
            marker=line_match.group(1),
            name=line_match.group(2),
            literal=line_match.group(3),
        )
        for line_match in _DIFF_LINE_REGEX.finditer(text))

# ....................{ CONVERTERS                        }....................
@type_check
def to_mapping(entries: IterableTypes) -> dict:
    '''
    Dictionary mapping from the name of each variable in the passed iterable
    of :class:`ExportEntry` instances to that variable's raw value literal.

    As under the shell, later entries with the same name replace earlier
    entries.
    '''

    return {entry.name: entry.literal for entry in entries}
