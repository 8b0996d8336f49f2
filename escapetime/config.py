import logging
import sys
import os
import warnings

# YAML needed to use file based escapetime config
try:
    import yaml
    _HAVE_YAML = True
except ImportError:
    _HAVE_YAML = False


IS_WIN32 = sys.platform.startswith('win32')
# Python version in (major, minor) tuple
PYVERSION = sys.version_info[:2]

_ENV_PREFIX = 'ESCAPETIME_'

# this is the name of the user supplied configuration file
_config_fname = '.escapetime_config.yaml'


def _parse_log_level(text):
    """
    Parse a logging level name, e.g. "debug" or "WARNING".  An empty
    string means no level was requested.
    """
    text = str(text).strip().upper()
    if not text:
        return ''
    if not isinstance(getattr(logging, text, None), int):
        raise ValueError("unknown logging level: %r" % (text,))
    return text


def _parse_limit(text):
    limit = int(text)
    if limit < 0:
        raise ValueError("default limit must be non-negative")
    return limit


class _EnvReloader(object):

    def __init__(self):
        self.reset()

    def reset(self):
        self.old_environ = {}
        self.update(force=True)

    def update(self, force=False):
        new_environ = {}

        # first check if there's a .escapetime_config.yaml and use values
        # from that
        if os.path.exists(_config_fname) and os.path.isfile(_config_fname):
            if not _HAVE_YAML:
                msg = ("An escapetime config file is found but YAML parsing "
                       "capabilities appear to be missing. "
                       "To use this feature please install `pyyaml`. e.g. "
                       "`pip install pyyaml`.")
                warnings.warn(msg)
            else:
                with open(_config_fname, 'rt') as f:
                    y_conf = yaml.safe_load(f)
                if y_conf is not None:
                    for k, v in y_conf.items():
                        new_environ[_ENV_PREFIX + k.upper()] = v

        # clobber file based config with any locally defined env vars
        for name, value in os.environ.items():
            if name.startswith(_ENV_PREFIX):
                new_environ[name] = value
        # Only reprocess when an ESCAPETIME_ variable changed, so values
        # assigned directly on this module survive a reload_config().
        if force or self.old_environ != new_environ:
            self.process_environ(new_environ)
            # Store a copy
            self.old_environ = dict(new_environ)

    def process_environ(self, environ):
        def _readenv(name, ctor, default):
            value = environ.get(name)
            if value is None:
                return default() if callable(default) else default
            try:
                return ctor(value)
            except Exception:
                warnings.warn("environ %s defined but failed to parse '%s'" %
                              (name, value), RuntimeWarning)
                return default

        # developer mode produces full tracebacks from the command line
        DEVELOPER_MODE = _readenv("ESCAPETIME_DEVELOPER_MODE", int, 0)

        # Run the kernels as plain Python, for debugging
        DISABLE_JIT = _readenv("ESCAPETIME_DISABLE_JIT", int, 0)

        # Cache compiled kernels in __pycache__
        CACHE = _readenv("ESCAPETIME_CACHE", int, 0)

        # Iteration limit used by the command line when none is given
        DEFAULT_LIMIT = _readenv("ESCAPETIME_DEFAULT_LIMIT", _parse_limit, 255)

        # Logging level of the "escapetime" logger.  Any level name from
        # the *logging* module, case insensitive.  Only applies when
        # logging is not configured by the application.
        LOG_LEVEL = _readenv("ESCAPETIME_LOG_LEVEL", _parse_log_level, '')

        # Inject the configuration values into the module globals
        for name, value in locals().copy().items():
            if name.isupper():
                globals()[name] = value


_env_reloader = _EnvReloader()


def reload_config():
    """
    Reload the configuration from environment variables, if necessary.
    """
    _env_reloader.update()


def current_config():
    """
    Return the effective configuration as a ``{name: value}`` dict.
    """
    return {name: value for name, value in globals().items()
            if name.isupper() and not name.startswith('_')
            and name not in ('IS_WIN32', 'PYVERSION')}
