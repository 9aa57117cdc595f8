# -*- coding: utf-8 -*-

'''

    lazymodel model: exceptions

    holds core exceptions for the :py:mod:`lazymodel.model` API.

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

# lazymodel exceptions
from lazymodel.exceptions import LazyModelException


class Error(LazyModelException): pass


class ModelException(Error):

    message = "%s"

    def __init__(self, *context):

        ''' Format this exception's message template with ``context``. '''

        self.context = context
        self.message = self.message % context
        super(ModelException, self).__init__(self.message)

    def __repr__(self):

        ''' Represent this exception as its formatted message. '''

        return self.message

    __str__ = __repr__


class AbstractConstructionFailure(ModelException, NotImplementedError):
    message = "Cannot directly instantiate abstract class `%s`."


## == Declaration Errors == ##

class ConfigurationError(ModelException, TypeError):
    pass


class ConflictingOptions(ConfigurationError):
    message = "Property \"%s\" cannot be declared with both `%s` and `%s`."


class UnknownOption(ConfigurationError):
    message = "Property \"%s\" was declared with unknown option(s): %s."


class InvalidSource(ConfigurationError):
    message = "Property \"%s\" needs one or more string source keys (got: %r)."


class InvalidTransform(ConfigurationError):
    message = "Property \"%s\" was given a transform that is neither callable nor a method name (got: %r)."


class InvalidName(ConfigurationError):
    message = "Cannot declare a property at name \"%s\", which is not a valid identifier."


class ReservedName(ConfigurationError):
    message = "Cannot declare property \"%s\" on model \"%s\", the name is reserved by the model API."


class AbstractDeclaration(ConfigurationError):
    message = "Cannot declare property \"%s\" on abstract model class `%s`."


## == Resolution Errors == ##

class RequiredAttribute(ModelException, ValueError):
    message = "Model \"%s\" requires property \"%s\", which was not present in the initial payload."


class MissingAttribute(ModelException, AttributeError):
    message = "Source key %s is missing for %s."


class UndefinedProperty(ModelException, AttributeError):
    message = "Model \"%s\" has no property \"%s\"."


class InvalidRefreshResult(ModelException, TypeError):
    message = "Refresh of model \"%s\" must return a mapping (got: \"%s\")."


class PropertyMutation(ModelException, AttributeError):
    message = "Cannot mutate property \"%s\" of model \"%s\" at the class level."
