# -*- coding: utf-8 -*-

'''

    lazymodel model: registry

    holds :py:class:`PropertyRegistry`, the ordered, per-model-class
    collection of :py:class:`Property` objects. every model class owns
    one, cloned from its bases when the class is defined, so declarations
    on a subclass never leak back into its parent.

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

# model descriptor
from .descriptor import Property
from .descriptor import _validate_name


## PropertyRegistry
# Ordered map of property name => `Property`, for one model class.
class PropertyRegistry(object):

    ''' Collection of property metadata for a model class. '''

    __slots__ = ('_collection',)

    def __init__(self, properties=None):

        ''' Initialize this registry, optionally from ``(name, Property)`` pairs. '''

        self._collection = {}
        for name, prop in (properties or ()):
            self.add(name, prop)

    def __repr__(self):

        ''' Generate a string representation of this registry. '''

        return "PropertyRegistry(%s)" % ', '.join(self._collection)

    __contains__ = lambda self, name: name in self._collection
    __iter__ = lambda self: iter(list(self._collection.values()))
    __len__ = lambda self: len(self._collection)

    ## = Declaration = ##
    def declare(self, name, *flags, **options):

        ''' Build and register a :py:class:`Property` at ``name``.

            :param name: Property name, coerced to ``str``.
            :param flags: Options to set to ``True``.
            :param options: Property options, see :py:class:`Property`.
            :raises ConfigurationError: For invalid declarations.
            :returns: The canonical property name. '''

        name = _validate_name(name)
        self._collection[name] = Property(*flags, name=name, **options)
        return name

    def add(self, name, prop):

        ''' Register an existing (possibly unbound) :py:class:`Property` at ``name``.

            :returns: The canonical property name. '''

        name = _validate_name(name)
        self._collection[name] = prop if prop.name == name else prop.bind(name)
        return name

    def discard(self, name):

        ''' Forget the property at ``name``, if any. '''

        self._collection.pop(name, None)

    def inherit(self):

        ''' Snapshot this registry into a fresh one for a subclass.

            :returns: New :py:class:`PropertyRegistry` holding clones
            of every current property. '''

        return self.__class__((name, prop.clone()) for name, prop in self._collection.items())

    def extend(self, other):

        ''' Merge clones of ``other``'s properties into this registry. Later wins.

            :returns: ``self``, for chaining. '''

        for name, prop in other._collection.items():
            self._collection[name] = prop.clone()
        return self

    ## = Lookup = ##
    def lookup(self, name):

        ''' Retrieve the :py:class:`Property` at ``name``, or ``None``. '''

        return self._collection.get(name)

    def names(self):

        ''' Property names, in declaration order. '''

        return tuple(self._collection)

    def required(self):

        ''' Names of properties marked ``required``. '''

        return tuple(name for name, prop in self._collection.items() if prop.required)

    def identity(self):

        ''' Names of properties marked ``identity``. '''

        return tuple(name for name, prop in self._collection.items() if prop.identity)
