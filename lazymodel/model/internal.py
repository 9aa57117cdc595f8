# -*- coding: utf-8 -*-

'''

    lazymodel model: internal model

    holds :py:class:`InternalModel`, which owns a single record's source
    data, its cache of resolved values and its overlay of explicit writes.

    values resolve in a fixed order:

        1. an explicit write (never transformed)
        2. a cached, previously resolved value
        3. the first present source key, after at most one refresh
           of the owning record if none is present and the record
           isn't fully loaded yet
        4. the property's default

    anything produced by steps 3 or 4 is cached until the next reload.

    :author: Sam Gammon <sam@momentum.io>
    :copyright: (c) momentum labs, 2013
    :license: The inspection, use, distribution, modification or implementation
              of this source code is governed by a private license - all rights
              are reserved by the Authors (collectively, "momentum labs, ltd")
              and held under relevant California and US Federal Copyright laws.
              For full details, see ``LICENSE.md`` at the root of this project.
              Continued inspection of this source code demands agreement with
              the included license and explicitly means acceptance to these terms.

'''

# stdlib
import collections.abc

# model exceptions
from . import exceptions


## InternalModel
# Per-record delegate for value resolution, caching and write-through.
class InternalModel(object):

    ''' Resolves, caches and overlays property values for one record. '''

    __slots__ = ('registry', 'parent', 'source', 'cache', 'overlay', 'loaded')

    def __init__(self, registry, parent, source=None):

        ''' Create an internal model for ``parent``.

            :param registry: :py:class:`PropertyRegistry` of the parent's class.
            :param parent: Owning record, used as context for defaults and
            transforms and as the target of refreshes.
            :param source: Initial source mapping, copied. '''

        self.registry, self.parent = registry, parent
        self.source, self.cache, self.overlay = dict(source or {}), {}, {}
        self.loaded = False

    def verify_required(self):

        ''' Verify that every required property has a source key in the initial payload.

            :raises RequiredAttribute: Naming the first missing property. '''

        for name in self.registry.required():
            if self._source_key(self.registry.lookup(name)) is None:
                raise exceptions.RequiredAttribute(self.parent.kind(), name)

    ## = Read / Write = ##
    def read(self, name):

        ''' Resolve the value of property ``name``.

            :raises UndefinedProperty: If ``name`` isn't declared.
            :raises MissingAttribute: If no value can be produced.
            :returns: Resolved value. '''

        prop = self._lookup(name)
        if name in self.overlay:
            return self.overlay[name]
        if name in self.cache:
            return self.cache[name]

        value = self.cache[name] = self._load(prop)
        return value

    def write(self, name, value):

        ''' Explicitly set the value of property ``name``. '''

        self._lookup(name)
        self.overlay[name] = value
        return value

    def discard(self, name):

        ''' Drop any explicit write and cached value for ``name``. '''

        self._lookup(name)
        self.overlay.pop(name, None)
        self.cache.pop(name, None)

    def merge(self, attributes):

        ''' Merge a refresh result into source data and clear the cache.

            :raises InvalidRefreshResult: If ``attributes`` isn't a mapping.
            :returns: Count of dropped cached values. '''

        if not isinstance(attributes, collections.abc.Mapping):
            raise exceptions.InvalidRefreshResult(self.parent.kind(), type(attributes).__name__)

        self.source.update(attributes)
        dropped = len(self.cache)
        self.cache.clear()
        return dropped

    def to_dict(self, strict=True):

        ''' Package property values as a ``dict``, in declaration order.

            :param strict: Resolve every declared property first, if ``True``.
            Otherwise, only cached and written values are included.
            :returns: ``dict`` of property name => value. '''

        if strict:
            return dict((name, self.read(name)) for name in self.registry.names())
        return dict((name, self.overlay[name] if name in self.overlay else self.cache[name])
                    for name in self.registry.names() if name in self.overlay or name in self.cache)

    ## = Internals = ##
    def _lookup(self, name):

        ''' Fetch the property declared at ``name``, or fail. '''

        prop = self.registry.lookup(name)
        if prop is None:
            raise exceptions.UndefinedProperty(self.parent.kind(), name)
        return prop

    def _source_key(self, prop):

        ''' First of ``prop``'s candidate source keys present in source data, or ``None``. '''

        for key in prop.source:
            if key in self.source:
                return key
        return None

    def _load(self, prop):

        ''' Load a property from source or default, skipping the cache. '''

        key = self._source_key(prop)
        if key is None and not self.loaded:
            self.parent.logging.debug("Refreshing %s to resolve property \"%s\" (keys: %s)." % (
                self.parent.kind(), prop.name, ', '.join(prop.source)))
            self.parent.reload()
            key = self._source_key(prop)

        if key is not None:
            return self._transform(prop, self.source[key])
        if prop.has_default:
            value = self._default(prop)
            return self._transform(prop, value) if prop.transform_default else value
        raise exceptions.MissingAttribute(' or '.join('`%s`' % key for key in prop.source), repr(self.parent))

    def _default(self, prop):

        ''' Produce ``prop``'s default, calling it with the parent record if callable. '''

        if callable(prop.default):
            return prop.default(self.parent)
        return prop.default

    def _transform(self, prop, value):

        ''' Apply ``prop``'s transform to ``value``, if any.

            A string transform names a method the model author
            defined, called with ``value``. Names from the model
            API itself (``to_dict``, ``kind``, ...) and unknown
            names resolve against ``value`` instead. '''

        transform = prop.transform
        if transform is None:
            return value
        if isinstance(transform, str):
            from lazymodel.model import _reserved_names
            if transform not in _reserved_names() and callable(getattr(type(self.parent), transform, None)):
                return getattr(self.parent, transform)(value)  # named model method, bound to the record
            return getattr(value, transform)()  # named method of the value itself
        return transform(value)
