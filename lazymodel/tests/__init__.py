# -*- coding: utf-8 -*-

'''

    lazymodel: testsuite
    -------------------------------------------------
    |                                               |
    |   `lazymodel.tests`                           |
    |                                               |
    |   a suite of unit testing tools and test      |
    |   cases for lazymodel and encapsulating apps. |
    |                                               |
    -------------------------------------------------
    |   authors:                                    |
    |       -- sam gammon (sam@momentum.io)         |
    -------------------------------------------------
    |   changelog:                                  |
    |       -- apr 1, 2013: initial draft           |
    -------------------------------------------------

'''

# Base Imports
import sys
import unittest

# lazymodel config
from lazymodel.util import appconfig


# Builtin Test Paths
_TEST_PATHS = [
    'lazymodel.tests.test_model.test_exports',  # Model API exports
    'lazymodel.tests.test_model.test_descriptor',  # `Property`
    'lazymodel.tests.test_model.test_registry',  # `PropertyRegistry`
    'lazymodel.tests.test_model.test_internal',  # `InternalModel`
    'lazymodel.tests.test_model.test_meta',  # `MetaFactory` / `MetaModel`
    'lazymodel.tests.test_model.test_model',  # `Model`
    'lazymodel.tests.test_util'  # config, logging, JSON
]


## LazyModelTestCase - Parent class for lazymodel and Application-level tests.
class LazyModelTestCase(unittest.TestCase):

    ''' A test case that restores lazymodel's config after each test. '''

    ## == Config == ##
    config = None  # config overlay applied for the duration of each test

    def setUp(self):

        ''' Apply this test case's config overlay, if any. '''

        appconfig.reset()
        if self.config:
            appconfig.configure(self.config)

    def tearDown(self):

        ''' Restore the default config. '''

        appconfig.reset()


## LazyModelTest - Test case for a test that is part of lazymodel.
class LazyModelTest(LazyModelTestCase):
    pass


## `load_test_module` - Load a single testsuite module.
def load_test_module(path):

    ''' Load the tests at a dotted module ``path`` into a suite. '''

    suite = unittest.TestSuite()
    suite.addTest(unittest.TestLoader().loadTestsFromName(path))
    return suite


## `load_testsuite` - Gather lazymodel testsuites.
def load_testsuite(paths=None):

    ''' __main__ entrypoint '''

    LazyModelTests = unittest.TestSuite()

    if paths is None:
        paths = _TEST_PATHS[:]

    for path in paths:
        LazyModelTests.addTest(load_test_module(path))

    return LazyModelTests


## `run_testsuite` - Run a suite of tests loaded via `load_testsuite`.
def run_testsuite(suite=None, verbosity=2):

    ''' Run ``suite`` (by default, every lazymodel testsuite) with the text runner. '''

    if suite is None:
        suite = load_testsuite()
    return unittest.TextTestRunner(stream=sys.stderr, verbosity=verbosity).run(suite)


if __name__ == '__main__':  # pragma: no cover
    run_testsuite(load_testsuite())
