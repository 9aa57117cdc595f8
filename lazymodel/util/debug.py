# -*- coding: utf-8 -*-

'''

Util: Debug

Holds lazymodel's named logging channels, built on
[Logbook](http://packages.python.org/Logbook/index.html).

-sam (<sam@momentum.io>)

'''

# Logbook
import logbook

# Exceptions
from lazymodel.exceptions import LazyModelException


_loggers = {}


## LoggingException
# Thrown if a logging channel is extended without a new path or name.
class LoggingException(LazyModelException):
    pass


## LazyModelLogger
# Represents a logging channel for a single module.
class LazyModelLogger(logbook.Logger):

    ''' Logging controller for outputting debug information from different levels of lazymodel. '''

    # Logging channel config
    channel_path = 'lazymodel'
    channel_name = None
    channel_parent = None
    conditional = True

    @staticmethod
    def _channel_key(path, name):

        ''' Build the registry key for a channel, or ``None`` for an invalid path. '''

        if path not in frozenset([False, None, True, '']) and isinstance(path, str):
            if name not in frozenset([False, None, True, '']) and isinstance(name, str):
                return path, name
            return (path,)
        return None

    def __new__(cls, path='lazymodel', name=None, parent_channel=None):

        ''' Create a new logger channel, or return it if it already exists. '''

        logger_k = cls._channel_key(path, name)
        if logger_k is not None and logger_k in _loggers:
            return _loggers[logger_k]
        return super(LazyModelLogger, cls).__new__(cls)

    def __init__(self, path='lazymodel', name=None, parent_channel=None):

        ''' Init a new logger channel. '''

        if getattr(self, '_channel_ready', False):
            return  # cached channel, already initialized

        super(LazyModelLogger, self).__init__('.'.join(filter(None, (path, name))) or 'lazymodel')
        self.channel_path, self.channel_name, self.channel_parent = path, name, parent_channel
        self._channel_ready = True

        # Register this logger in the _loggers manager
        logger_k = self._channel_key(path, name)
        if logger_k is not None:
            _loggers[logger_k] = self

    def extend(self, path=None, name=None):

        ''' Extend an existing LogChannel into a new one. '''

        if path is not None and name is None:
            # If we have a path and no name, join the new path to the old one and pass only the new path in.
            return self.__class__('.'.join(self.channel_path.split('.') + path.split('.')), parent_channel=self)
        elif (path is None and name is not None):
            # If we have a name and no path, pass the old path in with the new name instead of the old one.
            return self.__class__(path=self.channel_path, name=name, parent_channel=self)
        elif (path is not None and name is not None):
            appended_path = '.'.join(self.channel_path.split('.') + path.split('.'))
            return self.__class__(path=appended_path, name=name, parent_channel=self)
        raise LoggingException('Cannot extend logging channel without appending a name or a path.')

    def _setcondition(self, conditional):

        ''' Set a local flag to enable/disable logging through this pipe. '''

        self.conditional = bool(conditional)
        self.disabled = not self.conditional
        return self


## create root logger
_root_logger = LazyModelLogger(path='lazymodel', name=None)
