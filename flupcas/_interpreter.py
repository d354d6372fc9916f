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

from ._events import StartElement, Characters
from ._response import Success, Failure


__all__ = ['interpret', 'NO_REPLY_REASON']


log = logging.getLogger(__name__)

NO_REPLY_REASON = 'did not detect authentication reply from CAS server'

IDLE = 'idle'
EXPECTING_IDENTITY = 'expecting-identity'


def _failure_reason(attributes):
    for name, value in attributes:
        if name == 'code':
            return value
    if attributes:
        return attributes[0][1]
    return ''


def interpret(events):
    """
    Reads a CAS serviceValidate reply from a stream of parse events.

    Returns Success(identity) with the first text found after
    <authenticationSuccess> opens, or Failure(reason) with the code of
    <authenticationFailure>. Stops reading at whichever comes first.
    A reply with neither is a Failure(NO_REPLY_REASON). XmlParseError
    raised by the stream is not caught.
    """
    state = IDLE
    for event in events:
        if isinstance(event, StartElement):
            if event.local_name == 'authenticationSuccess':
                state = EXPECTING_IDENTITY
            elif event.local_name == 'authenticationFailure':
                if not event.attributes:
                    log.debug('authenticationFailure without attributes')
                return Failure(_failure_reason(event.attributes))
        elif isinstance(event, Characters) and state == EXPECTING_IDENTITY:
            return Success(event.text)

    return Failure(NO_REPLY_REASON)
