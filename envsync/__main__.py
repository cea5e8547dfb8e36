#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Entry point of the ``envsync`` console script, also runnable as
``python3 -m envsync``.
'''

# ....................{ IMPORTS                           }....................
from envsync.util.path.command import cmdexit
from envsync.util.type.types import SequenceOrNoneTypes

# ....................{ MAIN                              }....................
def main(arg_list: SequenceOrNoneTypes = None) -> int:
    '''
    Run the ``envsync`` command with the passed arguments, defaulting to
    ``sys.argv[1:]``, and return its exit status.
    '''

    # Defer heavyweight imports.
    from envsync.cli.climain import EnvsyncCLI

    return EnvsyncCLI().run(arg_list)

# ....................{ SCRIPT                            }....................
if __name__ == '__main__':
    cmdexit.exit_with_status(main())
