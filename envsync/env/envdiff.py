#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Changeset** (i.e., dictionary mapping from the name of each environment
variable to either the new string value of that variable *or* the
:data:`envsync.shell.shellvalue.UNSET` singleton if that variable is to be
unset) calculators.

Each calculator returns a new dictionary containing at most one entry per
variable. Value literals failing to decode are logged and omitted rather than
aborting the entire calculation, since shell output is inherently noisy.
'''

# ....................{ IMPORTS                           }....................
from envsync.exceptions import EnvsyncShellValueException
from envsync.shell import shellexport, shellvalue
from envsync.shell.shellexport import DIFF_MARKER_ADDED, DIFF_MARKER_REMOVED
from envsync.shell.shellvalue import UNSET
from envsync.util.io.log import logs
from envsync.util.type.types import type_check, IterableTypes

# ....................{ DIFFERS                           }....................
@type_check
def diff_listings(before_text: str, after_text: str) -> dict:
    '''
    Changeset transforming the environment described by the first passed
    export listing into the environment described by the second.

    Specifically, for each variable:

    * Whose raw literal in the second listing is either new or differs from
      that in the first listing, this changeset maps this variable to its
      decoded value in the second listing. Variables exported *without* a value
      in the second listing decode to :data:`UNSET`.
    * Present in the first listing but absent from the second, this changeset
      maps this variable to :data:`UNSET`.

    Unchanged variables are omitted. Since both listings are reduced to
    dictionaries keyed on variable names *before* being compared, each changed
    variable produces exactly one entry.

    Parameters
    ----------
    before_text : str
        Export listing dumped *before* running an effect command.
    after_text : str
        Export listing dumped *after* running that command.

    Returns
    ----------
    dict
        Changeset as documented above.
    '''

    before_literals = shellexport.to_mapping(shellexport.parse(before_text))
    after_literals = shellexport.to_mapping(shellexport.parse(after_text))

    changeset = {}

    for name, literal in after_literals.items():
        if name in before_literals and before_literals[name] == literal:
            continue

        _set_decoded(changeset, name, literal)

    for name in before_literals:
        if name not in after_literals:
            changeset[name] = UNSET

    logs.log_debug(
        'Export listing diff: %d variable(s) changed.', len(changeset))

    return changeset


@type_check
def diff_unified(diff_text: str) -> dict:
    '''
    Changeset transforming an older environment into a newer environment,
    calculated from the passed textual diff of the export listings of these
    environments (e.g., as emitted by ``diff -u before after``).

    Lines prefixed by :data:`DIFF_MARKER_ADDED` describe new or changed
    variables; lines prefixed by :data:`DIFF_MARKER_REMOVED` describe removed
    or changed variables. To prevent a single changed variable from producing
    both a spurious removal and an addition, lines are aligned on variable
    names: a variable with any added line maps to its decoded added value,
    while a variable with *only* removed lines maps to :data:`UNSET`.

    Returns
    ----------
    dict
        Changeset as documented above.
    '''

    added_literals = {}
    removed_names = set()

    for diff_entry in shellexport.parse_diff(diff_text):
        if diff_entry.marker == DIFF_MARKER_ADDED:
            added_literals[diff_entry.name] = diff_entry.literal
        else:
            assert diff_entry.marker == DIFF_MARKER_REMOVED
            removed_names.add(diff_entry.name)

    changeset = {}

    for name, literal in added_literals.items():
        _set_decoded(changeset, name, literal)

    for name in removed_names:
        if name not in added_literals:
            changeset[name] = UNSET

    return changeset

# ....................{ SNAPSHOTTERS                      }....................
@type_check
def snapshot_filtered(text: str, var_names: IterableTypes) -> dict:
    '''
    Changeset setting each variable in the passed export listing whose name is
    in the passed allow-list to its decoded value.

    Unlike the :func:`diff_listings` function, this function has no prior
    state to compare against and hence *never* unsets variables. Variables in
    this allow-list that are either absent from this listing *or* exported
    without a value are silently omitted.

    Parameters
    ----------
    text : str
        Export listing to be filtered.
    var_names : IterableTypes
        Iterable of the names of all variables to be retained.

    Returns
    ----------
    dict
        Changeset as documented above, ordered as the passed listing.
    '''

    var_names = frozenset(var_names)
    changeset = {}

    for name, literal in shellexport.to_mapping(
        shellexport.parse(text)).items():
        if name in var_names and literal is not None:
            _set_decoded(changeset, name, literal)

    # Log all requested variables absent from this listing for debuggability.
    for name in sorted(var_names - changeset.keys()):
        logs.log_debug('Variable "%s" not exported by shell.', name)

    return changeset

# ....................{ PRIVATE                           }....................
def _set_decoded(changeset: dict, name: str, literal) -> None:
    '''
    Map the passed name in the passed changeset to the value decoded from the
    passed literal if that literal is well-formed *or* log a warning and
    preserve this changeset as is otherwise.
    '''

    try:
        changeset[name] = shellvalue.decode(literal)
    except EnvsyncShellValueException as exception:
        logs.log_warning('Ignoring variable "%s": %s', name, exception)
