"""Connection settings for a Big Blue Button server.

A ClientConfig can be built by hand, from BBB_* environment variables,
or, on the BBB server itself, from the bbb-web properties files where
the API key lives.
"""

import os
from dataclasses import dataclass

import pyjavaproperties

from .checksum import HASH_ALGORITHMS
from .errors import ConfigurationError

# bbb-web reads the first file and lets the second one override it;
# the second one only exists on newer installations.

BBB_WEB_CONFIG = "/usr/share/bbb-web/WEB-INF/classes/bigbluebutton.properties"
BBB_WEB_ETC_CONFIG = "/etc/bigbluebutton/bbb-web.properties"

DEFAULT_TIMEOUT = 30


def _flag(value, default=True):
    value = value.strip().lower()
    if not value:
        return default
    return value not in ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class ClientConfig:
    server_url: str
    secret: str
    hash_algorithm: str = 'sha256'
    verify_tls: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.server_url:
            raise ConfigurationError("server_url is required")
        if not self.secret:
            raise ConfigurationError("secret is required")
        if self.hash_algorithm not in HASH_ALGORITHMS:
            raise ConfigurationError("unsupported hash algorithm %r, use one of %s"
                                     % (self.hash_algorithm, ', '.join(HASH_ALGORITHMS)))
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        object.__setattr__(self, 'server_url', self.server_url.rstrip('/'))

    @classmethod
    def from_environment(cls, environ=None):
        r"""
        Build a configuration from BBB_SERVER_URL and BBB_SECRET, plus the
        optional BBB_HASH_ALGORITHM, BBB_VERIFY_TLS and BBB_TIMEOUT.
        """
        if environ is None:
            environ = os.environ
        try:
            server_url = environ['BBB_SERVER_URL']
            secret = environ['BBB_SECRET']
        except KeyError as err:
            raise ConfigurationError("environment variable %s is not set" % err.args[0]) from err
        try:
            timeout = float(environ.get('BBB_TIMEOUT', DEFAULT_TIMEOUT))
        except ValueError as err:
            raise ConfigurationError("BBB_TIMEOUT must be a number") from err
        return cls(server_url=server_url,
                   secret=secret,
                   hash_algorithm=environ.get('BBB_HASH_ALGORITHM', 'sha256').lower(),
                   verify_tls=_flag(environ.get('BBB_VERIFY_TLS', '')),
                   timeout=timeout)

    @classmethod
    def from_properties(cls, filenames=(BBB_WEB_CONFIG, BBB_WEB_ETC_CONFIG), **kwargs):
        r"""
        Read securitySalt and bigbluebutton.web.serverURL out of bbb-web's
        Java properties files.  Read access to them is required; files
        that don't exist are skipped.  Extra keyword arguments go straight
        to the ClientConfig.
        """
        # Loading both files into one Properties lets the later one
        # override the earlier, the same way bbb-web does.
        properties = pyjavaproperties.Properties()
        loaded = False
        for filename in filenames:
            if os.path.exists(filename):
                with open(filename) as file:
                    properties.load(file)
                loaded = True
        if not loaded:
            raise ConfigurationError("no bbb-web properties file found in " + ', '.join(filenames))

        server_url = properties['bigbluebutton.web.serverURL'].strip()
        if not server_url:
            raise ConfigurationError("bigbluebutton.web.serverURL is not set")
        return cls(server_url=server_url.rstrip('/') + '/bigbluebutton',
                   secret=properties['securitySalt'].strip(),
                   **kwargs)
