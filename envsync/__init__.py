#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
``envsync``, which imports the environment exported by shell startup files into
processes that were not started from a login shell.

Only the PEP 396 version attributes are exposed here. See
:mod:`envsync.env.envsource` for the programmatic interface.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: "setup.py" imports this module before third-party dependencies are
# installed. Import *ONLY* from the standard library here.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from envsync.metadata import VERSION as __version__
from envsync.metadata import VERSION_PARTS as __version_info__

# ....................{ GLOBALS                           }....................
__version__
'''
Version string (e.g., ``0.4.0``).
'''


__version_info__
'''
Version as a tuple of integers (e.g., ``(0, 4, 0)``).
'''
