# -*- coding: utf-8 -*-

'''

    lazymodel: model descriptor tests
    -------------------------------------------------
    |                                               |
    |   `lazymodel.tests.test_model.test_descriptor`|
    |                                               |
    |   test cases for the `model.Property` class.  |
    |                                               |
    -------------------------------------------------
    |   authors:                                    |
    |       -- sam gammon (sam@momentum.io)         |
    -------------------------------------------------
    |   changelog:                                  |
    |       -- apr 1, 2013: initial draft           |
    -------------------------------------------------

'''

# lazymodel model API
from lazymodel.model import Property
from lazymodel.model import exceptions

# lazymodel tests
from lazymodel.tests import LazyModelTest


## PropertyTests
# Tests that the Property class works properly.
class PropertyTests(LazyModelTest):

    ''' Tests `model.Property`. '''

    def test_defaults(self):

        ''' A bare, bound property has no default, transform or flags. '''

        prop = Property(name='age')
        self.assertEqual(prop.name, 'age')
        self.assertEqual(prop.source, ('age',))
        self.assertFalse(prop.required)
        self.assertFalse(prop.identity)
        self.assertFalse(prop.has_default)
        self.assertIsNone(prop.transform)
        self.assertFalse(prop.transform_default)

    def test_flags(self):

        ''' Positional flags set their options to `True`. '''

        prop = Property('required', 'identity', name='id')
        self.assertTrue(prop.required)
        self.assertTrue(prop.identity)

        with self.assertRaises(exceptions.UnknownOption):
            Property('from', name='id')

    def test_option_aliases(self):

        ''' `from` and `with` are accepted as spellings of `source` and `transform`. '''

        prop = Property(name='age', **{'from': 'years', 'with': int})
        self.assertEqual(prop.source, ('years',))
        self.assertIs(prop.transform, int)

        with self.assertRaises(exceptions.ConflictingOptions):
            Property(name='age', source='years', **{'from': 'age_years'})

    def test_source_keys(self):

        ''' A single source key is a one-element list of candidates. '''

        self.assertEqual(Property(name='x', source='a').source, ('a',))
        self.assertEqual(Property(name='x', source=['a', 'b']).source, ('a', 'b'))
        self.assertEqual(Property(name='x', source=('b', 'a')).source, ('b', 'a'))

        for invalid in ([], (), [1], 5):
            with self.assertRaises(exceptions.InvalidSource):
                Property(name='x', source=invalid)

    def test_required_and_default_conflict(self):

        ''' `required` can't be combined with `default` or `nil`. '''

        with self.assertRaises(exceptions.ConflictingOptions):
            Property('required', name='x', default=0)
        with self.assertRaises(exceptions.ConflictingOptions):
            Property('required', 'nil', name='x')
        with self.assertRaises(exceptions.ConflictingOptions):
            Property('nil', name='x', default=0)

        # configuration errors are `TypeError`s, too
        with self.assertRaises(TypeError):
            Property(required=True, default=None, name='x')

    def test_nil_shortcut(self):

        ''' `nil` is a shortcut for a `None` default. '''

        prop = Property('nil', name='nickname')
        self.assertTrue(prop.has_default)
        self.assertIsNone(prop.default)

    def test_unknown_option(self):

        ''' Unknown options fail at declaration time. '''

        with self.assertRaises(exceptions.UnknownOption) as context:
            Property(name='x', indexed=True)
        self.assertIn('indexed', str(context.exception))

    def test_invalid_transform(self):

        ''' Transforms must be callables or method names. '''

        self.assertEqual(Property(name='x', transform='upper').transform, 'upper')
        with self.assertRaises(exceptions.InvalidTransform):
            Property(name='x', transform=42)

    def test_invalid_name(self):

        ''' Property names must be identifiers. '''

        for invalid in ('first name', '1st', 'class', ''):
            with self.assertRaises(exceptions.InvalidName):
                Property(name=invalid)

    def test_immutable(self):

        ''' Properties are frozen once constructed. '''

        prop = Property(name='x', default=1)
        with self.assertRaises(AttributeError):
            prop.default = 2
        with self.assertRaises(AttributeError):
            del prop.name
        self.assertEqual(prop.default, 1)

    def test_bind_and_clone(self):

        ''' Binding and cloning produce equivalent, distinct properties. '''

        transform = lambda value: value * 2
        unbound = Property('identity', transform=transform, source='raw')
        self.assertIsNone(unbound.name)

        bound = unbound.bind('doubled')
        self.assertIsNot(bound, unbound)
        self.assertEqual(bound.name, 'doubled')
        self.assertEqual(bound.source, ('raw',))
        self.assertTrue(bound.identity)
        self.assertIs(bound.transform, transform)

        clone = bound.clone()
        self.assertIsNot(clone, bound)
        self.assertEqual((clone.name, clone.source, clone.identity), (bound.name, bound.source, bound.identity))

    def test_repr(self):

        ''' Properties render their name and source. '''

        rendered = repr(Property('required', name='age', source='years', transform=int))
        self.assertIn('age', rendered)
        self.assertIn('years', rendered)
        self.assertIn('required', rendered)


## PropertyConfigTests
# Tests that the Property class picks up config.
class PropertyConfigTests(LazyModelTest):

    ''' Tests `model.Property` with `transform_defaults` turned on. '''

    config = {'lazymodel.model': {'transform_defaults': True}}

    def test_transform_default_from_config(self):

        ''' Without an explicit flag, `transform_default` comes from config. '''

        self.assertTrue(Property(name='x', default='0', transform=int).transform_default)
        self.assertFalse(Property(name='x', default='0', transform=int, transform_default=False).transform_default)

    def test_clone_keeps_resolved_flag(self):

        ''' Clones keep the flag resolved when the original was declared. '''

        from lazymodel.util import appconfig

        prop = Property(name='x', default='0', transform=int)
        appconfig.reset()
        self.assertTrue(prop.clone().transform_default)
        self.assertFalse(Property(name='x', default='0', transform=int).transform_default)
