# -*- coding: utf-8 -*-

'''

    lazymodel util: decorators

    this package provides useful decorators that crosscut the regular
    functional bounds of lazymodel's main packages. stuff in here is
    generally used everywhere.

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


## ``classproperty`` - use like ``@property``, but at the class-level.
class classproperty(property):

    ''' Custom decorator for class-level property getters.
        Usable like ``@property``, resolves against the
        owner type whether dispatched from the class or
        from an instance. '''

    def __get__(self, instance, owner):

        ''' Return the property value at the class level.

            :param instance: Current encapsulating object
            dispatching via the descriptor protocol,
            ``None`` if we are being dispatched from the
            class level.

            :param owner: Corresponding owner type, available
            whether we're dispatching at the class or instance
            level.

            :returns: Result of a ``classmethod``-wrapped,
            ``property``-decorated method. '''

        return classmethod(self.fget).__get__(None, owner)()


## ``config`` - markup a class for lazymodel structure.
def config(debug=False, path=None):

    ''' Prepare to inject config/path values
        at ``debug`` and ``path``.

        :param debug: Default value for class-level
        ``debug`` flag, used when the active config has
        no blob at ``path``. Defaults to ``False``.

        :param path: String path to configuration blob
        in :py:data:`appconfig.settings`. Defaults to the
        Python module/name classpath of the injectee.

        :returns: Closure that constructs an injected
        target class. '''

    # build injection closure
    def inject(klass):

        ''' Injection closure that prepares ``klass``
            with basic lazymodel structure.

            :param klass: Target class slated for injection.
            :returns: Injected class structure. '''

        def _config(cls):

            ''' Named config pipe. Resolves configuration
                at the local class' :py:attr:`cls._config_path`
                from the active appconfig, on every access.

                :returns: Configuration ``dict``, or default
                ``dict`` of ``{'debug': <debug>}``. '''

            from lazymodel.util import appconfig
            return appconfig.settings.get(cls._config_path, {'debug': debug})

        def _logging(cls):

            ''' Named logging pipe. Prepares a logbook-backed
                channel via config path. Allows fine grained
                control of logging output, down to the individual
                config blob.

                :returns: Customized :py:class:`debug.LazyModelLogger`,
                attached with injectee's config path. '''

            from lazymodel.util import debug as _debug

            _csplit = cls._config_path.split('.')
            return _debug.LazyModelLogger(**{
                'path': '.'.join(_csplit[:-1]),
                'name': _csplit[-1]
            })._setcondition(cls.config.get('debug', debug))

        # attach injected properties and classmethods
        klass._config_path = path or '.'.join((klass.__module__, klass.__name__))
        klass.config, klass.logging = classproperty(_config), classproperty(_logging)
        return klass

    return inject
