# -*- coding: utf-8 -*-

'''

    lazymodel model tests: exports

    makes sure the model API and the package root
    export what they should.

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
import os

# lazymodel test
from lazymodel.tests import LazyModelTest


## ModelExportTests
# Tests that things exported by the model package are there.
class ModelExportTests(LazyModelTest):

    ''' Tests objects exported by `model`. '''

    def test_concrete(self):

        ''' Test that we can import concrete classes. '''

        try:
            from lazymodel import model
            from lazymodel.model import Model
            from lazymodel.model import Property
            from lazymodel.model import MetaModel
            from lazymodel.model import AbstractModel
            from lazymodel.model import InternalModel
            from lazymodel.model import PropertyRegistry

        except ImportError:  # pragma: no cover
            return self.fail("Failed to import concrete classes exported by Model.")

        else:
            self.assertTrue(Model)  # must export Model
            self.assertTrue(Property)  # must export Property
            self.assertTrue(MetaModel)  # must export MetaModel
            self.assertTrue(AbstractModel)  # must export AbstractModel
            self.assertTrue(InternalModel)  # must export InternalModel
            self.assertTrue(PropertyRegistry)  # must export PropertyRegistry
            self.assertIsInstance(model, type(os))  # must be a module (lol)

    def test_toplevel(self):

        ''' Test that the package root re-exports the public API. '''

        import lazymodel
        from lazymodel import model
        from lazymodel.model import exceptions

        self.assertIs(lazymodel.Model, model.Model)
        self.assertIs(lazymodel.Property, model.Property)
        self.assertIs(lazymodel.MissingAttribute, exceptions.MissingAttribute)
        self.assertIs(lazymodel.RequiredAttribute, exceptions.RequiredAttribute)
        self.assertIs(lazymodel.ConfigurationError, exceptions.ConfigurationError)
        self.assertIsInstance(lazymodel.__version__, str)
