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

__all__ = ['CASError',
           'ConfigError',
           'VerifyError',
           'TransportError',
           'XmlParseError',
           'UnsupportedUriKind',
           'NoTicketFound']


class CASError(Exception):
    """Base class for everything raised by flupcas."""


class ConfigError(CASError, ValueError):
    """
    A configured URL is not a usable absolute URL.

    url - the offending string.
    reason - why it was rejected.
    """
    def __init__(self, url, reason):
        super(ConfigError, self).__init__('%r: %s' % (url, reason))
        self.url = url
        self.reason = reason


class VerifyError(CASError):
    """Base class for errors raised while verifying a ticket."""


class TransportError(VerifyError):
    """The validation endpoint could not be reached or returned an error."""


class XmlParseError(VerifyError):
    """
    The validation reply is not well-formed XML. line and column point
    into the reply when the tokenizer reported them.
    """
    def __init__(self, message, line=None, column=None):
        super(XmlParseError, self).__init__(message)
        self.line = line
        self.column = column


class UnsupportedUriKind(VerifyError):
    """The inbound request URI is neither an absolute path nor an absolute URI."""
    def __init__(self, uri):
        super(UnsupportedUriKind, self).__init__(
            'unsupported request URI: %r' % (uri,))
        self.uri = uri


class NoTicketFound(VerifyError):
    """The inbound request carries no ticket, or an empty one."""
    def __init__(self, uri):
        super(NoTicketFound, self).__init__(
            'no ticket in request URI: %r' % (uri,))
        self.uri = uri
