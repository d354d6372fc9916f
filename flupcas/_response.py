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

__all__ = ['Success', 'Failure']


class _ServiceResponse(object):
    __slots__ = ('_value',)

    authenticated = None

    def __init__(self, value):
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __eq__(self, other):
        return type(self) is type(other) and self._value == other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._value)


class Success(_ServiceResponse):
    """Ticket accepted; identity is the user name reported by the server."""
    __slots__ = ()

    authenticated = True

    @property
    def identity(self):
        return self._value


class Failure(_ServiceResponse):
    """Ticket rejected, or no recognizable reply. reason is never None."""
    __slots__ = ()

    authenticated = False

    @property
    def reason(self):
        return self._value
