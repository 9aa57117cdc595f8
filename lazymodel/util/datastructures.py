# -*- coding: utf-8 -*-

'''

    lazymodel util: datastructures

    holds small datastructures shared across :py:mod:`lazymodel`, namely
    the named sentinels used to tell "unset" apart from ``None``.

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


class Sentinel(object):

    ''' Create a named sentinel object. '''

    __slots__ = ('name', '_falsy')

    def __init__(self, name, falsy=False):

        ''' Construct a new sentinel.

            :param name: Name shown in ``repr``.
            :param falsy: Whether the sentinel tests as ``False``.
            :returns: '''

        self.name, self._falsy = name, falsy

    def __repr__(self):

        ''' Represent this sentinel as a string.

            :returns: '''

        return '<Sentinel "%s">' % self.name

    def __bool__(self):

        ''' Test whether this sentinel is falsy.

            :returns: '''

        return (not self._falsy)

    # sentinels are singletons, copies must stay identical
    __copy__ = lambda self: self
    __deepcopy__ = lambda self, memo: self


# Sentinels
_EMPTY = Sentinel("EMPTY", True)
