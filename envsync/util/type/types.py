#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
The :func:`type_check` decorator and the type annotations it validates.

Annotations
----------
Parameters and return values of :func:`type_check`-decorated callables are
annotated by either a class (e.g., :class:`str`) or a tuple of classes
signifying their union. Names of tuples end in ``Types``, names of single
classes in ``Type``. Union tuples are preferred over :mod:`typing` unions
throughout this codebase.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from collections.abc import (
    Iterable,
    Mapping,
    MutableMapping,
    MutableSequence,
    Sequence,
)
from numbers import Real

# ....................{ TYPES                             }....................
NoneType = type(None)


IterableTypes = (Iterable,)
'''
Iterables, including generators and the :class:`dict` keys views returned by
changesets.
'''


MappingType = Mapping
'''
Read-only view of any mapping (e.g., a changeset).
'''


MappingMutableType = MutableMapping
'''
Any mutable mapping, including :data:`os.environ`.
'''


NumericSimpleTypes = (float, int,)
'''
Real scalars such as timeouts and modification times.
'''


SequenceTypes = (Sequence,)
'''
Sequences, including command words. Strings also satisfy this tuple.
'''


SequenceMutableTypes = (MutableSequence,)

# ....................{ TUPLES ~ none                     }....................
MappingOrNoneTypes = (MappingType, NoneType)
MappingMutableOrNoneTypes = (MappingMutableType, NoneType)
NumericOrNoneTypes = (Real, NoneType)
SequenceOrNoneTypes = SequenceTypes + (NoneType,)
SequenceMutableOrNoneTypes = SequenceMutableTypes + (NoneType,)
StrOrNoneTypes = (str, NoneType)

# ....................{ DECORATORS                        }....................
type_check = beartype
'''
Decorator validating the annotated parameters and return value of the
decorated callable on each call, raising a :mod:`beartype` violation
exception on mismatch.

:mod:`beartype` reduces to a noop under ``python3 -O``.
'''
