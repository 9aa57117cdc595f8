# -*- coding: utf-8 -*-

'''

    lazymodel

    records whose properties are supplied up front, defaulted, renamed,
    transformed on read, or fetched on demand through a refresh hook the
    first time they are read.

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

__version__ = '0.2.0'


## lazymodel util
from lazymodel.util import appconfig

## lazymodel model API
from lazymodel.model import Model
from lazymodel.model import Property
from lazymodel.model import AbstractModel
from lazymodel.model import PropertyRegistry
from lazymodel.model.exceptions import ConfigurationError
from lazymodel.model.exceptions import RequiredAttribute
from lazymodel.model.exceptions import MissingAttribute
from lazymodel.model.exceptions import UndefinedProperty


## active config
cfg = appconfig.settings
configure = appconfig.configure


__all__ = ['Model', 'Property', 'AbstractModel', 'PropertyRegistry', 'ConfigurationError',
           'RequiredAttribute', 'MissingAttribute', 'UndefinedProperty', 'cfg', 'configure']
