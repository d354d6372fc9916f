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

from http import HTTPStatus


__all__ = ['ResponseSink', 'WSGIResponseSink']


class ResponseSink(object):
    """
    What CASClient.login_redirect() and logout_redirect() need from a web
    framework's response. Anything with these three methods will do.
    """

    def set_status(self, code):
        raise NotImplementedError

    def set_header(self, name, value):
        raise NotImplementedError

    def send(self, body):
        """Finishes the response with body (bytes)."""
        raise NotImplementedError


class WSGIResponseSink(ResponseSink):
    """
    ResponseSink over a WSGI start_response. send() returns the WSGI
    response iterable, so an application can simply

        return client.login_redirect(WSGIResponseSink(start_response))
    """

    def __init__(self, start_response):
        self._start_response = start_response
        self._status = '200 OK'
        self._headers = []

    def set_status(self, code):
        try:
            phrase = HTTPStatus(code).phrase
        except ValueError:
            phrase = 'Unknown'
        self._status = '%d %s' % (code, phrase)

    def set_header(self, name, value):
        self._headers = [(n, v) for n, v in self._headers
                         if n.lower() != name.lower()]
        self._headers.append((name, value))

    def send(self, body):
        self._start_response(self._status, list(self._headers))
        return [body]
