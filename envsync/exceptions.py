#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Application-specific exception hierarchy.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: The CLI logs these exceptions even when third-party dependencies
# are missing. Import *ONLY* from the standard library here.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from abc import ABCMeta

# ....................{ EXCEPTIONS                        }....................
class EnvsyncException(Exception, metaclass=ABCMeta):
    '''
    Abstract base class of all application-specific exceptions.
    '''

    pass

# ....................{ EXCEPTIONS ~ cache                }....................
class EnvsyncCacheException(EnvsyncException):
    '''
    **Environment cache** (i.e., YAML-formatted file persisting the last
    changeset computed from sourcing shell startup files)-specific exception.
    '''

    pass


class EnvsyncCacheWriteException(EnvsyncCacheException):
    '''
    Environment cache exception raised on failing to write that cache.
    '''

    pass


class EnvsyncCacheReadException(EnvsyncCacheException):
    '''
    Environment cache exception raised on failing to read that cache.

    Callers typically handle this exception by regenerating that cache from
    the shell startup files it derives from.
    '''

    pass


class EnvsyncCacheNotFoundException(EnvsyncCacheReadException):
    '''
    Environment cache exception raised on attempting to read a nonexistent
    cache.
    '''

    pass


class EnvsyncCacheParseException(EnvsyncCacheReadException):
    '''
    Environment cache exception raised on reading a cache whose contents are
    *not* a well-formed changeset.
    '''

    pass

# ....................{ EXCEPTIONS ~ command              }....................
class EnvsyncCommandException(EnvsyncException):
    '''
    **Command** (i.e., external executable file)-specific exception.
    '''

    pass

# ....................{ EXCEPTIONS ~ conf                 }....................
class EnvsyncConfException(EnvsyncException):
    '''
    **Configuration** (i.e., user-defined YAML-formatted file describing which
    shell startup files to source and how)-specific exception.
    '''

    pass

# ....................{ EXCEPTIONS ~ path                 }....................
class EnvsyncPathException(EnvsyncException):
    '''
    Path-specific exception.
    '''

    pass


class EnvsyncFileException(EnvsyncPathException):
    '''
    File-specific exception.
    '''

    pass

# ....................{ EXCEPTIONS ~ shell                }....................
class EnvsyncShellException(EnvsyncException):
    '''
    **Subordinate shell** (i.e., shell process spawned to source shell startup
    files and dump the resulting environment)-specific exception.

    This exception is raised when that shell either cannot be spawned at all
    *or* fails to terminate before timing out. Non-zero exit statuses returned
    by that shell do *not* raise this exception.
    '''

    pass


class EnvsyncShellEnvException(EnvsyncException):
    '''
    **Environment** (i.e., set of all environment variables exported to the
    active Python interpreter)-specific exception.
    '''

    pass


class EnvsyncShellValueException(EnvsyncException):
    '''
    **Value literal** (i.e., shell-quoted string embedded in an export listing)
    -specific exception.

    This exception is raised on failing to decode a single malformed literal.
    Callers decoding an entire listing typically handle this exception by
    logging and ignoring the offending variable.
    '''

    pass
