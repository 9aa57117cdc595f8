# -*- coding: utf-8 -*-

'''

    lazymodel model: descriptor

    holds :py:class:`Property`, the frozen metadata object for a single
    declared model property. the same object is installed on the model
    class as a data descriptor, so ``record.name`` reads and writes go
    through the record's internal model.

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
import keyword

# lazymodel util
from lazymodel.util import appconfig
from lazymodel.util.datastructures import _EMPTY

# model exceptions
from . import exceptions


# Globals
_FLAGS = frozenset(('required', 'nil', 'identity', 'transform_default'))  # options settable as positional flags
_OPTIONS = _FLAGS | frozenset(('from', 'source', 'default', 'with', 'transform'))
_ALIASES = (('from', 'source'), ('with', 'transform'))  # (spelling, canonical spelling)


def _validate_name(name):

    ''' Coerce ``name`` to a canonical property name, or fail. '''

    name = str(name)
    if not name.isidentifier() or keyword.iskeyword(name):
        raise exceptions.InvalidName(name)
    return name


## Property
# Data-descriptor property class.
class Property(object):

    ''' Concrete Property class. '''

    __slots__ = ('name', 'required', 'identity', 'default', 'transform', 'transform_default', '_source', '_options', '_frozen')
    _sentinel = _EMPTY  # default sentinel for unset defaults (read only, since it isn't specified in `__slots__`)

    ## = Internal Methods = ##
    def __init__(self, *flags, **options):

        ''' Initialize this Property.

            :param flags: Option names to set to ``True``, for
            instance ``Property('required', 'identity')``.

            :param options: ``required``, ``from``/``source``,
            ``default``, ``with``/``transform``, ``nil``,
            ``identity`` and ``transform_default``. ``name``
            binds the property, and is usually supplied by the
            model class or registry.

            :raises ConfigurationError: For any invalid combination. '''

        name = options.pop('name', None)
        name = _validate_name(name) if name is not None else None
        label = name or '<unbound>'

        for flag in flags:
            if flag not in _FLAGS:
                raise exceptions.UnknownOption(label, repr(flag))
            options[flag] = True

        unknown = sorted(set(options) - _OPTIONS)
        if unknown:
            raise exceptions.UnknownOption(label, ', '.join(unknown))

        for spelling, canonical in _ALIASES:
            if spelling in options:
                if canonical in options:
                    raise exceptions.ConflictingOptions(label, spelling, canonical)
                options[canonical] = options.pop(spelling)

        required, nil = bool(options.get('required', False)), bool(options.get('nil', False))
        if required and 'default' in options:
            raise exceptions.ConflictingOptions(label, 'required', 'default')
        if required and nil:
            raise exceptions.ConflictingOptions(label, 'required', 'nil')
        if nil and 'default' in options:
            raise exceptions.ConflictingOptions(label, 'nil', 'default')

        source = options.get('source')
        if source is not None:
            source = (source,) if isinstance(source, str) else tuple(source) if isinstance(source, (list, tuple)) else None
            if not source or not all(isinstance(key, str) for key in source):
                raise exceptions.InvalidSource(label, options.get('source'))

        transform = options.get('transform')
        if transform is not None and not (callable(transform) or isinstance(transform, str)):
            raise exceptions.InvalidTransform(label, transform)

        transform_default = options.get('transform_default')
        if transform_default is None:
            transform_default = appconfig.settings.get('lazymodel.model', {}).get('transform_defaults', False)
        options['transform_default'] = bool(transform_default)  # clones keep the flag resolved at declaration

        # copy resolved options onto slots, then seal the object
        for attr, value in (('name', name),
                            ('required', required),
                            ('identity', bool(options.get('identity', False))),
                            ('default', None if nil else options.get('default', _EMPTY)),
                            ('transform', transform),
                            ('transform_default', bool(transform_default)),
                            ('_source', source),
                            ('_options', options),
                            ('_frozen', True)):
            object.__setattr__(self, attr, value)

    def __setattr__(self, name, value):

        ''' Properties are frozen once constructed. '''

        raise AttributeError("Cannot set attribute \"%s\" of immutable property \"%s\"." % (name, self.name))

    __delattr__ = lambda self, name: self.__setattr__(name, None)

    def __repr__(self):

        ''' Generate a string representation of this Property. '''

        flags = [i for i in ('required', 'identity') if getattr(self, i)]
        if self.has_default:
            flags.append('default=%r' % (self.default,))
        if self.transform is not None:
            flags.append('transform=%s' % getattr(self.transform, '__name__', self.transform))
        return "Property(%s)" % ', '.join([self.name or '<unbound>', 'source=(%s)' % ', '.join(self.source)] + flags)

    ## = Descriptor Methods = ##
    def __get__(self, instance, owner):

        ''' Descriptor attribute access. '''

        if instance is None:  # class-level access gives up the descriptor itself
            return self
        return instance.read(self.name)  # delegate to `AbstractModel.read`

    def __set__(self, instance, value):

        ''' Descriptor attribute write. '''

        instance.write(self.name, value)  # delegate to `AbstractModel.write`

    def __delete__(self, instance):

        ''' Descriptor attribute delete. '''

        instance.delete(self.name)  # delegate to `AbstractModel.delete`

    ## = Exported Methods = ##
    @property
    def source(self):

        ''' Candidate source keys, searched left to right. '''

        return self._source or ((self.name,) if self.name else tuple())

    @property
    def has_default(self):

        ''' Whether this property can fall back to a default. '''

        return self.default is not _EMPTY

    def bind(self, name):

        ''' Return a copy of this Property bound to ``name``. '''

        return self.__class__(name=name, **self._options)

    # util method to clone `Property` objects
    clone = lambda self: self.__class__(name=self.name, **self._options)
