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

from urllib.parse import parse_qsl, quote, urlsplit

from ._errors import NoTicketFound, UnsupportedUriKind


__all__ = ['request_uri', 'environ_uri', 'extract_ticket']


# Absolute paths get a throwaway origin so both shapes split the same way.
_PLACEHOLDER_ORIGIN = 'http://none'

_DEFAULT_PORTS = {'http': '80', 'https': '443'}


def environ_uri(environ):
    """Reconstructs the absolute request URI from a WSGI environ."""
    scheme = environ['wsgi.url_scheme']
    host = environ.get('HTTP_HOST')
    if not host:
        host = environ['SERVER_NAME']
        port = environ.get('SERVER_PORT', _DEFAULT_PORTS.get(scheme))
        if port != _DEFAULT_PORTS.get(scheme):
            host += ':' + port

    path = quote(environ.get('SCRIPT_NAME', '') + environ.get('PATH_INFO', ''))
    uri = '%s://%s%s' % (scheme, host, path)
    if environ.get('QUERY_STRING'):
        uri += '?' + environ['QUERY_STRING']
    return uri


def request_uri(request):
    """
    Returns the request URI of request, which is either the URI string
    itself or a WSGI environ.
    """
    if isinstance(request, bytes):
        request = request.decode('latin-1')
    if isinstance(request, str):
        return request
    if hasattr(request, 'get') and 'wsgi.url_scheme' in request:
        return environ_uri(request)
    raise UnsupportedUriKind(request)


def _split(uri):
    if uri.startswith('/'):
        return urlsplit(_PLACEHOLDER_ORIGIN + uri)
    try:
        parts = urlsplit(uri)
    except ValueError as e:
        raise UnsupportedUriKind(uri) from e
    if parts.scheme and parts.netloc:
        return parts
    raise UnsupportedUriKind(uri)


def extract_ticket(uri):
    """
    Returns the value of the ticket query parameter of uri. When it
    occurs more than once, the last one counts. Raises NoTicketFound if
    it is missing or empty.
    """
    query = _split(uri).query

    ticket = ''
    for name, value in parse_qsl(query, keep_blank_values=True):
        if name == 'ticket':
            ticket = value
    if not ticket:
        raise NoTicketFound(uri)
    return ticket
