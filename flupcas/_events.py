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

"""
Lazy XML parse events over a byte stream.

The body of a validation reply is fed to expat one chunk at a time and
the events each chunk produces are handed out before the next chunk is
read, so a reply is never held in memory as a whole.
"""

from collections import deque, namedtuple
from xml.parsers import expat

from ._errors import XmlParseError


__all__ = ['StartElement',
           'EndElement',
           'Characters',
           'Whitespace',
           'iter_events']


StartElement = namedtuple('StartElement', ['name', 'local_name', 'attributes'])
EndElement = namedtuple('EndElement', ['name', 'local_name'])
Characters = namedtuple('Characters', ['text'])
Whitespace = namedtuple('Whitespace', ['text'])

# Only these count as whitespace in XML.
XML_WHITESPACE = ' \t\r\n'


def local_name(name):
    # Prefixes are not resolved, so an undeclared cas: still matches.
    return name.rpartition(':')[2]


def _make_parser(pending, text):
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.ordered_attributes = True

    def start_element(name, attrs):
        _flush_text(pending, text)
        attributes = list(zip(attrs[0::2], attrs[1::2]))
        pending.append(StartElement(name, local_name(name), attributes))

    def end_element(name):
        _flush_text(pending, text)
        pending.append(EndElement(name, local_name(name)))

    # expat flushes its text buffer at the end of every Parse() call, so a
    # text node crossing a chunk boundary arrives in pieces.
    parser.StartElementHandler = start_element
    parser.EndElementHandler = end_element
    parser.CharacterDataHandler = text.append
    return parser


def _flush_text(pending, text):
    """Queues the text collected so far as one event."""
    if not text:
        return
    data = ''.join(text)
    del text[:]
    if data.strip(XML_WHITESPACE):
        pending.append(Characters(data))
    else:
        pending.append(Whitespace(data))


def _feed(parser, data, final):
    try:
        parser.Parse(data, final)
    except expat.ExpatError as e:
        raise XmlParseError('malformed CAS reply: %s' % e,
                            line=e.lineno, column=e.offset) from e


def iter_events(chunks):
    """
    Yields parse events for the XML document made of chunks (an iterable
    of bytes). Raises XmlParseError as soon as malformed input is reached.
    """
    pending = deque()
    text = []
    parser = _make_parser(pending, text)

    for chunk in chunks:
        if not chunk:
            continue
        _feed(parser, chunk, False)
        while pending:
            yield pending.popleft()

    _feed(parser, b'', True)
    _flush_text(pending, text)
    while pending:
        yield pending.popleft()
