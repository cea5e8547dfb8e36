#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Fixture registry for the ``envsync_test`` package.

Fixtures are defined in :mod:`envsync_test.fixture` and imported here, making
them available to every test module below this package.
'''

# ....................{ IMPORTS ~ fixture : manual        }....................
from envsync_test.fixture.tempdirer import envsync_temp_dir
from envsync_test.fixture.logconfiger import envsync_log_config
from envsync_test.fixture.targeter import envsync_env_target

# ....................{ IMPORTS ~ fixture : autouse       }....................
from envsync_test.fixture.targeter import envsync_dot_dir
