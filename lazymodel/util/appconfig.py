# -*- coding: utf-8 -*-

'''

Util: Config

Holds utilities for dealing with lazymodel config, and the default config set.

-sam (<sam@momentum.io>)

'''

# Base Imports
import copy
import functools

# Constants
_DEFAULT_CONFIG = {

    'lazymodel': {

    },

    'lazymodel.system': {

        'config': {
            'debug': False
        }

    },

    'lazymodel.model': {

        'debug': False,  # log declarations, refreshes and reload merges
        'transform_defaults': False  # apply a property's `transform` to its `default` too

    }

}


## ConfigProxy
# Wraps lazymodel configuration, enabling log messages on config access/write.
class ConfigProxy(object):

    ''' Wraps lazymodel configuration to enable debug features. '''

    debug = False
    _config = None
    _lookup = None

    def __init__(self, config):

        ''' Initialize this object. '''

        self._config = copy.deepcopy(dict(config))
        self._lookup = set(self._config.keys())

    @functools.cached_property
    def logging(self):

        ''' Named logging pipe. '''

        from lazymodel.util import debug
        self.debug = self._config.get('lazymodel.system', {}).get('config', {}).get('debug', False)
        return debug.LazyModelLogger(path='lazymodel', name='config')._setcondition(self.debug)

    def __iter__(self):

        ''' Iterate over config blob names. '''

        return iter(list(self._config.keys()))

    def __len__(self):

        ''' Count config blobs. '''

        return len(self._config)

    def __getitem__(self, item):

        ''' Return an item in config. '''

        # redirect config access to dictionary
        self.logging.debug("Config access: '%s'." % item)
        if item in self._lookup:
            return self._config[item]
        raise KeyError("No config entry by the name '%s'." % item)

    def __setitem__(self, item, value):

        ''' Set an item in config. '''

        self._lookup.add(item)
        self.logging.debug("Config write: '%s'=>'%s'." % (item, value))
        self._config[item] = value
        return value

    def __contains__(self, item):

        ''' Contains redirect. '''

        return item in self._lookup

    def _overlay(self, mapping, rov=None):

        ''' Recursively update config, from target `mapping`. '''

        if not isinstance(mapping, dict):
            return mapping
        if rov is None:
            rov = copy.deepcopy(self._config)
        for k, v in mapping.items():
            if k in rov and isinstance(rov[k], dict):
                rov[k] = self._overlay(v, rov[k])
            else:
                rov[k] = v
        return rov

    def overlay(self, mapping):

        ''' Exported method for recursively updating config. '''

        return ConfigProxy(self._overlay(mapping))

    def get(self, name, default=None):

        ''' Retrieve an item from config without raising a KeyError. '''

        self.logging.debug("Config access: '%s'." % name)
        return self._config.get(name, default)

    def items(self):

        ''' Retrieve a set of (key, value) tuples. '''

        return list(self._config.items())


## active config
settings = ConfigProxy(_DEFAULT_CONFIG)


def configure(mapping):

    ''' Recursively overlay ``mapping`` onto the active config.

        :param mapping: ``dict`` of config blobs, merged
        key-by-key into the existing blobs.
        :returns: The active :py:class:`ConfigProxy`. '''

    for name, blob in settings._overlay(mapping).items():
        settings[name] = blob
    return settings


def reset():

    ''' Restore the active config to :py:data:`_DEFAULT_CONFIG`.

        :returns: The active :py:class:`ConfigProxy`. '''

    settings._config = copy.deepcopy(_DEFAULT_CONFIG)
    settings._lookup = set(settings._config.keys())
    return settings
