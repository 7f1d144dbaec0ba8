""" Locally stored service configuration. Each named configuration is a
    JSON file in the ewskit configuration directory describing how to reach
    the remote service, which protocol version to use, and the default
    error handling mode for multi-item requests.
"""

import os
import threading

import orjson

from .protocol.enums import ErrorHandling, ServerVersion


_cache = dict()
_cache_lock = threading.Lock()

defaults = dict()
defaults['address'] = 'localhost'
defaults['port'] = 10079
defaults['version'] = ServerVersion.EXCHANGE2013_SP1.wire_name
defaults['timeout'] = 30.0
defaults['error_handling'] = ErrorHandling.THROW_ON_ERROR.value


class Configuration:
    """ A convenience class to represent the configuration of a single named
        service. To first order an instance acts like a dictionary; the
        typed properties interpret the raw values.
    """

    def __init__(self, name):

        self.name = name.lower()
        self._values = dict(defaults)

        try:
            self.load()
        except FileNotFoundError:
            pass


    def __contains__(self, key):
        return key in self._values


    def __getitem__(self, key):
        return self._values[key]


    def __setitem__(self, key, value):
        if key not in defaults:
            raise KeyError('unknown configuration key: ' + repr(key))

        # Enumerated values are kept as they are written on disk.

        if isinstance(value, ServerVersion):
            value = value.wire_name
        elif isinstance(value, ErrorHandling):
            value = value.value

        self._values[key] = value


    def __repr__(self):
        return 'Configuration(%r, %r)' % (self.name, self._values)


    @property
    def filename(self):
        return os.path.join(directory(), self.name + '.json')


    @property
    def address(self):
        return str(self._values['address'])


    @property
    def port(self):
        return int(self._values['port'])


    @property
    def version(self):
        return ServerVersion.parse(self._values['version'])


    @property
    def timeout(self):
        return float(self._values['timeout'])


    @property
    def error_handling(self):
        return ErrorHandling(self._values['error_handling'])


    def load(self):
        """ Load the configuration for this service from disk. Keys that are
            not present on disk keep their default values; unknown keys are
            an error.
        """

        with open(self.filename, 'rb') as contents:
            loaded = orjson.loads(contents.read())

        if not isinstance(loaded, dict):
            raise ValueError('configuration must be a JSON object: ' + self.filename)

        for key, value in loaded.items():
            self[key] = value

        # Interpret everything now, so that a bad value is reported when the
        # file is loaded rather than when the value is first used.

        self.validate()


    def save(self):
        """ Write this configuration to disk, creating the configuration
            directory if necessary.
        """

        self.validate()
        os.makedirs(directory(), mode=0o775, exist_ok=True)

        encoded = orjson.dumps(self._values, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)

        with open(self.filename, 'wb') as contents:
            contents.write(encoded)


    def validate(self):

        self.address
        self.port
        self.version
        self.timeout
        self.error_handling

        if self.timeout <= 0:
            raise ValueError('timeout must be positive: ' + repr(self.timeout))


# end of class Configuration



def directory(path=None):
    """ Return the directory holding the service configuration files. The
        location is settled on first use: ``$EWSKIT_HOME`` if it is set,
        otherwise ``.ewskit`` in the user's home directory. Passing an
        absolute *path* relocates it, and exports ``EWSKIT_HOME`` so that
        child processes agree.
    """

    if path is not None:
        path = os.path.expandvars(str(path))

        if not os.path.isabs(path):
            raise ValueError('configuration directory must be an absolute path: ' + repr(path))

        os.environ['EWSKIT_HOME'] = path
        directory.found = path

    if directory.found is None:
        found = os.environ.get('EWSKIT_HOME')

        if not found:
            found = os.path.join(os.path.expanduser('~'), '.ewskit')

        directory.found = found

    return directory.found

directory.found = None



def get(name):
    """ Retrieve the cached :class:`Configuration` instance for the named
        service, loading it from disk the first time it is requested.
    """

    name = name.lower()

    with _cache_lock:
        try:
            config = _cache[name]
        except KeyError:
            config = Configuration(name)
            _cache[name] = config

    return config



def clear():
    """ Forget all cached :class:`Configuration` instances.
    """

    with _cache_lock:
        _cache.clear()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
