r"""Text with display attributes attached to byte ranges

Ranges are byte offsets into the UTF-8 encoding of the text, half open.
Rendering interleaves the text with the escape sequences that turn each
attribute on and off.

>>> from attrstr.attributes import BOLD, UNDERLINE
>>> t = AttributedText('bold and underlined')
>>> t.attach(BOLD, 0, 4)
>>> t.attach(UNDERLINE, 9, 19)
>>> t.render()
'\x1b[1mbold\x1b[22m and \x1b[4munderlined\x1b[24m'
>>> t.plain_text
'bold and underlined'
>>> AttributedText('端末').byte_length()
6
"""

import logging
from collections import namedtuple

from attrstr import escapecodes
from attrstr.attributes import Attribute
from attrstr.errors import BoundaryError, ReversedRangeError

logger = logging.getLogger(__name__)

AttributeRange = namedtuple('AttributeRange', 'attribute start end')

# sort key puts disables ahead of enables at the same offset
DISABLE, ENABLE = 0, 1


def is_char_boundary(data, offset):
    """Whether splitting the UTF-8 bytes data at offset keeps every character whole"""
    if offset < 0 or offset > len(data):
        return False
    if offset == len(data):
        return True
    return (data[offset] & 0xC0) != 0x80


def overlapping_or_adjacent(a, b):
    return a.start <= b.end and a.end >= b.start


class AttributedText(object):
    """A fixed string plus display attributes over byte ranges of it

    For any one attribute, stored ranges never overlap or touch: attaching
    a range that does extends the existing one instead.
    """
    def __init__(self, text):
        if isinstance(text, bytes):
            text = text.decode('utf-8')
        self._text = text
        self._data = text.encode('utf-8')
        self._ranges = []

    @property
    def plain_text(self):
        """The underlying text, unaffected by attributes"""
        return self._text

    def byte_length(self):
        return len(self._data)

    __len__ = byte_length

    def ranges(self):
        return tuple(self._ranges)

    def copy(self):
        other = AttributedText(self._text)
        other._ranges = list(self._ranges)
        return other

    def attach(self, attribute, start, end):
        """Applies attribute to bytes [start, end) of the text

        Raises ReversedRangeError if start > end, and BoundaryError if
        either offset is outside the text or inside a multi-byte character.
        Raises TypeError if attribute is not an Attribute.
        Empty ranges are ignored.

        >>> from attrstr.attributes import BOLD
        >>> t = AttributedText('it works!!!')
        >>> t.attach(BOLD, 3, 5)
        >>> t.attach(BOLD, 5, 8)
        >>> t.ranges()
        (AttributeRange(attribute=Bold, start=3, end=8),)
        >>> t.attach(BOLD, 5, 2)
        Traceback (most recent call last):
            ...
        attrstr.errors.ReversedRangeError: reversed range 5..2 not allowed
        """
        if not isinstance(attribute, Attribute):
            raise TypeError('expected an Attribute, got %r' % (attribute,))
        if start > end:
            raise ReversedRangeError('reversed range %d..%d not allowed' % (start, end))
        for offset in (start, end):
            if not is_char_boundary(self._data, offset):
                raise BoundaryError('range %d..%d in %r does not lie on character boundary'
                                    % (start, end, self._text))
        if start == end:
            return
        merged = AttributeRange(attribute, start, end)
        slot = None
        kept = []
        # a new range can bridge two existing ones, so absorb every one it touches
        for existing in self._ranges:
            if existing.attribute == attribute and overlapping_or_adjacent(existing, merged):
                merged = merged._replace(start=min(existing.start, merged.start),
                                         end=max(existing.end, merged.end))
                if slot is None:
                    slot = len(kept)
                    kept.append(None)
            else:
                kept.append(existing)
        if slot is None:
            kept.append(merged)
        else:
            logger.debug('merged %d..%d of %r into %r', start, end, attribute, merged)
            kept[slot] = merged
        self._ranges = kept

    def events(self):
        """Returns (offset, kind, attribute) tuples in rendering order

        Events at the same offset keep disables before enables; among
        events of the same kind they stay in the order ranges were stored.
        """
        events = []
        for r in self._ranges:
            events.append((r.start, ENABLE, r.attribute))
            events.append((r.end, DISABLE, r.attribute))
        return sorted(events, key=lambda e: (e[0], e[1]))

    def render(self):
        """Returns the text interleaved with ANSI escape sequences"""
        events = self.events()
        logger.debug('rendering %d bytes with %d events', len(self._data), len(events))
        output = []
        cursor = 0
        for offset, kind, attribute in events:
            if offset > cursor:
                output.append(self._data[cursor:offset].decode('utf-8'))
                cursor = offset
            if kind == ENABLE:
                output.append(escapecodes.enable_sequence(attribute))
            else:
                output.append(escapecodes.disable_sequence(attribute))
        if cursor < len(self._data):
            output.append(self._data[cursor:].decode('utf-8'))
        return ''.join(output)

    __str__ = render

    def __repr__(self):
        return '<AttributedText %r with %d ranges>' % (self._text, len(self._ranges))
