# -*- coding: utf-8 -*-

# meta
__doc__ = '''

    lazymodel: model API
    -------------------------------------------------
    |                                               |
    |   `lazymodel.model`                           |
    |                                               |
    |   a general-purpose, minimalist toolkit for   |
    |   lazily materialized pythonic records.       |
    |                                               |
    -------------------------------------------------
    |   authors:                                    |
    |       -- sam gammon (sam@momentum.io)         |
    -------------------------------------------------
    |   changelog:                                  |
    |       -- apr 1, 2013: initial draft           |
    |       -- may 7, 2013: refactor->v2, cleanup   |
    -------------------------------------------------

'''

__version__ = 'v2'

# lazymodel util
from lazymodel.util import json
from lazymodel.util import decorators

# model internals
from . import exceptions
from .descriptor import Property
from .internal import InternalModel
from .registry import PropertyRegistry


# Globals / Sentinels
_ABSTRACT_MODELS = frozenset(['AbstractModel', 'Model'])  # core model classes, which can't carry properties


## == Metaclasses == ##

## MetaFactory
# Abstract metaclass parent that provides common construction methods.
class MetaFactory(type):

    ''' Abstract parent for model metaclasses. '''

    __owner__ = 'MetaFactory'

    ## = Internal Methods = ##
    def __new__(cls, name=None, bases=tuple(), properties=None):

        ''' Factory for model metaclasses. '''

        # fail on regular class construction - embedded metaclasses cannot be instantiated
        if not name:
            raise exceptions.AbstractConstructionFailure(cls.__owner__)

        # pass up the inheritance chain to `type`, which properly enforces metaclasses
        name, bases, properties = cls.initialize(name, bases, dict(properties or {}))
        return super(MetaFactory, cls).__new__(cls, name, bases, properties)

    ## = Abstract Methods = ##
    @classmethod
    def initialize(mcs, name, bases, properties):  # pragma: no cover

        ''' Initialize a subclass. Must be overridden by child metaclasses. '''

        raise NotImplementedError('Classmethod `MetaFactory.initialize` must be overridden by subclasses and cannot be invoked directly.')


## MetaModel
# Builds class-level property registries and installs property descriptors.
class MetaModel(MetaFactory):

    ''' Metaclass for data models. '''

    __owner__ = 'Model'

    @classmethod
    def initialize(mcs, name, bases, properties):

        ''' Initialize a Model class. '''

        # core model classes come through here before being defined - must use string name :(
        if _is_abstract(name, properties.get('__module__')):
            properties['__registry__'] = PropertyRegistry()
            return name, bases, properties

        # snapshot base registries, leftmost base wins on conflicting names
        registry = PropertyRegistry()
        for base in reversed(bases):
            if isinstance(base, MetaModel):
                registry.extend(base.__registry__)

        # class-body declarations (`name = Property(...)`), other bindings override inherited properties
        for prop_name, candidate in list(properties.items()):
            if isinstance(candidate, Property):
                if prop_name in _reserved_names():
                    raise exceptions.ReservedName(prop_name, name)
                registry.add(prop_name, candidate)
            elif prop_name in registry:
                registry.discard(prop_name)

        # install one descriptor per property at the class-level, so each class owns its own
        properties.update((prop.name, prop) for prop in registry)
        properties['__registry__'] = registry
        return name, bases, properties

    def __init__(cls, name, bases, properties):

        ''' Log declarations once the class exists. '''

        super(MetaModel, cls).__init__(name, bases, properties)
        if not _is_abstract(name, cls.__module__):
            cls.logging.debug("Initialized model \"%s\" with properties: %s." % (name, ', '.join(cls.__registry__.names()) or '(none)'))

    # util: generate string representation of `Model` class, like "Model(<prop1>, <prop n...>)".
    __repr__ = lambda cls: '%s(%s)' % (cls.__name__, ', '.join(cls.__registry__.names()))

    def __setattr__(cls, name, value):

        ''' Disallow property mutation at the class level. '''

        if name in cls.__dict__.get('__registry__', ()):
            raise exceptions.PropertyMutation(name, cls.__name__)
        return super(MetaModel, cls).__setattr__(name, value)

    def __delattr__(cls, name):

        ''' Disallow property removal at the class level. '''

        if name in cls.__dict__.get('__registry__', ()):
            raise exceptions.PropertyMutation(name, cls.__name__)
        return super(MetaModel, cls).__delattr__(name)


def _is_abstract(name, module):

    ''' Whether ``name`` in ``module`` is one of the core model classes. '''

    return module == __name__ and name in _ABSTRACT_MODELS


def _reserved_names():

    ''' Names taken by the public model API, which properties can't shadow. '''

    return frozenset(i for i in dir(Model) if not i.startswith('__'))


## == Abstract Classes == ##

## AbstractModel
# Base class for lazily-materialized records.
@decorators.config(debug=False, path='lazymodel.model')
class AbstractModel(object, metaclass=MetaModel):

    ''' Abstract Model class. '''

    # = Internal Methods = #
    def __new__(cls, *args, **kwargs):

        ''' Intercepts construction requests for directly Abstract model classes. '''

        if cls is AbstractModel:  # prevent direct instantiation
            raise exceptions.AbstractConstructionFailure('AbstractModel')
        return super(AbstractModel, cls).__new__(cls)

    def __init__(self, attributes=None, **kwargs):

        ''' Initialize this record from a payload of source attributes.

            :param attributes: Mapping of source key => raw value.
            :param kwargs: More source attributes, which win over ``attributes``.
            :raises RequiredAttribute: If a required property's source key is missing. '''

        source = dict(attributes or {})
        source.update(kwargs)
        self.__internal__ = InternalModel(self.__class__.__registry__, self, source)
        self.__internal__.verify_required()

    # util: generate a string representation of this entity from resolved values only, alias to `__str__`
    __repr__ = lambda self: "%s(%s)" % (self.kind(), ', '.join('%s=%r' % i for i in self.to_dict(strict=False).items()))
    __str__ = __repr__

    def __eq__(self, other):

        ''' Compare records by identity properties, or by object identity without any. '''

        if other.__class__ is not self.__class__:
            return False
        identity = self.__class__.__registry__.identity()
        if not identity:
            return self is other
        return all(self.get(name) == other.get(name) for name in identity)

    __ne__ = lambda self, other: not self.__eq__(other)

    def __hash__(self):

        ''' Hash identity property values, or object identity without any.

            Identity values resolve leniently, like :py:meth:`get`,
            so hashing a record that isn't fully loaded may call
            :py:meth:`refresh`. The hash follows writes to identity
            properties: don't write them while the record is held
            in a ``set`` or used as a ``dict`` key. '''

        identity = self.__class__.__registry__.identity()
        if not identity:
            return object.__hash__(self)
        return hash((self.__class__,) + tuple(self.get(name) for name in identity))

    # util: item API - lenient reads, writes and deletes by name
    __getitem__ = lambda self, name: self.get(name)
    __setitem__ = lambda self, name, value: self.write(name, value)
    __delitem__ = lambda self, name: self.delete(name)

    ## = Class Methods = ##
    kind = classmethod(lambda cls: cls.__name__)
    properties = classmethod(lambda cls: cls.__registry__.names())

    @classmethod
    def declare(cls, name, *flags, **options):

        ''' Declare a property on this model class after definition.

            Subclasses defined *before* this call do not see the new
            property, as they hold a snapshot of this class' registry.

            :raises ConfigurationError: For invalid declarations.
            :returns: The canonical property name. '''

        if _is_abstract(cls.__name__, cls.__module__):
            raise exceptions.AbstractDeclaration(name, cls.__name__)
        if str(name) in _reserved_names():
            raise exceptions.ReservedName(name, cls.__name__)

        name = cls.__registry__.declare(name, *flags, **options)
        type.__setattr__(cls, name, cls.__registry__.lookup(name))  # bypass the class-level mutation guard
        cls.logging.debug("Declared property \"%s\" on model \"%s\"." % (name, cls.__name__))
        return name

    ## = Read / Write = ##
    def read(self, name):

        ''' Return the value of property ``name``.

            :raises UndefinedProperty: If ``name`` isn't declared.
            :raises MissingAttribute: If the value can't be found or defaulted. '''

        return self.__internal__.read(name)

    def get(self, name, default=None):

        ''' Return the value of property ``name``, or ``default`` if it can't be found. '''

        try:
            return self.__internal__.read(name)
        except exceptions.MissingAttribute:
            return default

    def write(self, name, value):

        ''' Explicitly set property ``name``, bypassing source, default and transform. '''

        return self.__internal__.write(name, value)

    def update(self, mapping=None, **kwargs):

        ''' Write every entry of ``mapping`` and then ``kwargs``, in order.

            :returns: ``self``, for chaining. '''

        for name, value in list((mapping or {}).items()) + list(kwargs.items()):
            self.write(name, value)
        return self

    def delete(self, name):

        ''' Forget any explicit write or cached value for ``name``. '''

        self.__internal__.discard(name)

    ## = Loading = ##
    def refresh(self):

        ''' Fetch fresh source attributes. Override to implement lazy loading.

            Implementations should call :py:meth:`_set_loaded` once
            no further refreshes are meaningful, otherwise every
            read miss calls this again.

            :returns: Mapping of source key => raw value, merged
            into the record's source data. '''

        self._set_loaded()
        return {}

    def reload(self):

        ''' Call :py:meth:`refresh`, merge its result and clear the resolved value cache.

            :returns: ``self``, for chaining. '''

        attributes = self.refresh()
        dropped = self.__internal__.merge(attributes)
        self.logging.debug("Merged %s key(s) into %s, dropped %s cached value(s)." % (len(attributes), self.kind(), dropped))
        return self

    def _set_loaded(self, flag=True):

        ''' Mark this record as fully loaded (or not). '''

        self.__internal__.loaded = bool(flag)
        return self

    # util: `fully_loaded` flag, proxies to internal model
    fully_loaded = property(lambda self: self.__internal__.loaded)

    ## = Export = ##
    def to_dict(self, strict=True):

        ''' Export this record as a ``dict``.

            :param strict: Resolve every property first (possibly refreshing),
            if ``True``. Otherwise only export values already resolved or written.
            :raises MissingAttribute: In strict mode, for unresolvable properties. '''

        return self.__internal__.to_dict(strict)

    def to_json(self, strict=True, **kwargs):

        ''' Export this record as a JSON string. '''

        return json.dumps(self.to_dict(strict), **kwargs)


## == Concrete Classes == ##

## Model
# Concrete class for a lazily-materialized record.
class Model(AbstractModel):

    ''' Concrete Model class. '''


# Module Globals
__abstract__ = [MetaFactory, AbstractModel]
__concrete__ = [Property, PropertyRegistry, InternalModel, MetaModel, Model]
__all__ = [i.__name__ for i in __abstract__ + __concrete__]
