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

import logging
from contextlib import closing

import requests

from ._config import CASEndpoints
from ._errors import TransportError, XmlParseError
from ._events import iter_events
from ._interpreter import interpret
from ._response import Success
from ._ticket import extract_ticket, request_uri


__all__ = ['CASClient']


log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
CHUNK_SIZE = 4096


def _redacted(ticket):
    return ticket[:6] + '...' if len(ticket) > 6 else '...'


class CASClient(object):
    """
    Simple CAS client.

    endpoints - CASEndpoints for the CAS server and our service.

    session - optional requests.Session used for validation requests,
      e.g. to set up proxies or client certificates.

    timeout - seconds to wait on the CAS server, passed to requests.
    """
    def __init__(self, endpoints, session=None, timeout=DEFAULT_TIMEOUT):
        self.endpoints = endpoints
        self._session = session
        self.timeout = timeout

    @classmethod
    def create(cls, base_url, login_path, logout_path, verify_path,
               service_url, **kwargs):
        endpoints = CASEndpoints(base_url, login_path, logout_path,
                                 verify_path, service_url)
        return cls(endpoints, **kwargs)

    def get_login_url(self):
        """URL to redirect to for login."""
        return self.endpoints.login_redirect_url()

    def get_logout_url(self):
        """URL to redirect to for logout."""
        return self.endpoints.logout_redirect_url()

    def login_redirect(self, sink):
        return self._redirect(sink, self.get_login_url())

    def logout_redirect(self, sink):
        return self._redirect(sink, self.get_logout_url())

    def _redirect(self, sink, url):
        sink.set_status(302)
        sink.set_header('Location', url)
        return sink.send(b'')

    def verify_ticket(self, ticket):
        """
        Checks ticket with the CAS server. Returns Success(username) or
        Failure(reason). Raises TransportError if the server could not be
        asked and XmlParseError if its reply is not XML.
        """
        url = self.endpoints.validation_url(ticket)
        log.debug('Validating ticket %s with %s', _redacted(ticket),
                  self.endpoints.verify_url)

        get = self._session.get if self._session is not None else requests.get
        try:
            r = get(url, timeout=self.timeout, stream=True)
        except requests.RequestException as e:
            log.warning('CAS validation request failed: %s', e)
            raise TransportError(str(e)) from e

        with closing(r):
            try:
                r.raise_for_status()
                result = interpret(iter_events(r.iter_content(CHUNK_SIZE)))
            except XmlParseError as e:
                log.warning('Unreadable CAS reply from %s: %s',
                            self.endpoints.verify_url, e)
                raise
            except requests.RequestException as e:
                log.warning('CAS validation request failed: %s', e)
                raise TransportError(str(e)) from e

        if isinstance(result, Success):
            log.info('CAS authenticated %r', result.identity)
        else:
            log.info('CAS rejected ticket %s: %s', _redacted(ticket),
                     result.reason)
        return result

    def verify_from_request(self, request):
        """
        Verifies the ticket the CAS server appended to our service URL.
        request is the request URI (absolute path or absolute URI) or a
        WSGI environ.
        """
        return self.verify_ticket(extract_ticket(request_uri(request)))
