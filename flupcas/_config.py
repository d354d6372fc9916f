# Copyright 2018 Allan Saddi <allan@saddi.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from ._errors import ConfigError


__all__ = ['CASEndpoints']


DEFAULT_LOGIN_PATH = '/login'
DEFAULT_LOGOUT_PATH = '/logout'
DEFAULT_VERIFY_PATH = '/serviceValidate'


def _absolute_url(url):
    """Returns url split into its parts, or raises ConfigError."""
    if not isinstance(url, str):
        raise ConfigError(url, 'expected a string, got %s' % type(url).__name__)
    try:
        parts = urlsplit(url)
        # Port is parsed lazily.
        parts.port
    except ValueError as e:
        raise ConfigError(url, str(e)) from e
    if not parts.scheme:
        raise ConfigError(url, 'relative URL without a scheme')
    if not parts.netloc or not parts.hostname:
        raise ConfigError(url, 'missing host')
    if any(c.isspace() for c in parts.netloc):
        raise ConfigError(url, 'invalid character in host')
    return parts


def _with_query(parts, params):
    query = urlencode(params, quote_via=quote)
    return urlunsplit(parts._replace(query=query))


class CASEndpoints(object):
    """
    The CAS server endpoints plus our own service URL. Every URL is
    checked once, here; instances are immutable and may be shared
    between threads.

    base_url - CAS server prefix, e.g. https://login.example.com/cas
    login_path, logout_path, verify_path - appended to base_url as is,
      e.g. /login, /logout, /serviceValidate
    service_url - where the CAS server sends the user back to, with
      the ticket.
    """
    __slots__ = ('_login', '_logout', '_verify', '_service')

    def __init__(self, base_url, login_path, logout_path, verify_path,
                 service_url):
        for part in (base_url, login_path, logout_path, verify_path):
            if not isinstance(part, str):
                raise ConfigError(part, 'expected a string, got %s' %
                                  type(part).__name__)

        login, logout, verify = [_absolute_url(base_url + path) for path in
                                 (login_path, logout_path, verify_path)]
        service = _absolute_url(service_url)

        object.__setattr__(self, '_login', login)
        object.__setattr__(self, '_logout', logout)
        object.__setattr__(self, '_verify', verify)
        object.__setattr__(self, '_service', service)

    @classmethod
    def from_config(cls, config, section='cas'):
        """
        Builds endpoints from a configparser section:

          [cas]
          base_url = https://login.example.com/cas
          service_url = https://app.example.com/callback
          ; optional
          login_path = /login
          logout_path = /logout
          verify_path = /serviceValidate
        """
        if not config.has_section(section):
            raise ConfigError(None, 'missing [%s] section' % section)
        for required in ('base_url', 'service_url'):
            if not config.get(section, required, fallback=''):
                raise ConfigError(None, 'missing %s in [%s]' %
                                  (required, section))
        return cls(
            config.get(section, 'base_url'),
            config.get(section, 'login_path', fallback=DEFAULT_LOGIN_PATH),
            config.get(section, 'logout_path', fallback=DEFAULT_LOGOUT_PATH),
            config.get(section, 'verify_path', fallback=DEFAULT_VERIFY_PATH),
            config.get(section, 'service_url'))

    def __setattr__(self, name, value):
        raise AttributeError('CASEndpoints is immutable')

    def __delattr__(self, name):
        raise AttributeError('CASEndpoints is immutable')

    def __repr__(self):
        return '<CASEndpoints login=%r verify=%r service=%r>' % (
            self.login_url, self.verify_url, self.service_url)

    @property
    def login_url(self):
        return urlunsplit(self._login)

    @property
    def logout_url(self):
        return urlunsplit(self._logout)

    @property
    def verify_url(self):
        return urlunsplit(self._verify)

    @property
    def service_url(self):
        return urlunsplit(self._service)

    def login_redirect_url(self):
        """Login URL with our service URL as its only parameter."""
        return _with_query(self._login, [('service', self.service_url)])

    def logout_redirect_url(self):
        return self.logout_url

    def validation_url(self, ticket):
        """Verify URL carrying service and ticket, in that order."""
        return _with_query(self._verify, [('service', self.service_url),
                                          ('ticket', ticket)])
