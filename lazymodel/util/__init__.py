# -*- coding: utf-8 -*-

'''

    lazymodel util

    holds small utilities and useful pieces of code/functionality that don't
    belong anywhere specific.

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


## Base Imports
import json as libjson
import datetime


class LazyModelJSONEncoder(libjson.JSONEncoder):

    ''' Custom encoder that implements the __json__ method interface. '''

    def default(self, target):

        ''' Invoked when the JSON encoder can't encode something.

            :param target:
            :returns: '''

        if hasattr(target, '__json__'):
            return target.__json__()

        from lazymodel import model
        if isinstance(target, model.AbstractModel):
            return target.to_dict()

        if isinstance(target, (datetime.datetime, datetime.date, datetime.time)):
            return target.isoformat()
        if isinstance(target, (set, frozenset)):
            return list(target)
        return super(LazyModelJSONEncoder, self).default(target)


class json(object):

    ''' Namespace proxy for JSON support, bound to :py:class:`LazyModelJSONEncoder`. '''

    @staticmethod
    def dumps(*args, **kwargs):

        ''' Serialize to a JSON string. '''

        kwargs.setdefault('cls', LazyModelJSONEncoder)
        return libjson.dumps(*args, **kwargs)

    @staticmethod
    def loads(*args, **kwargs):

        ''' Deserialize from a JSON string. '''

        return libjson.loads(*args, **kwargs)
