"""Specified values and data about the few supported CSS properties."""

import collections
import enum

Keyword = collections.namedtuple('Keyword', ['value'])
Length = collections.namedtuple('Length', ['value', 'unit'])
Color = collections.namedtuple('Color', ['r', 'g', 'b'])

#: Sentinel for properties left to the layout engine. Checking whether a
#: value is "auto" is an equality test against this keyword.
AUTO = Keyword('auto')

ZERO_PIXELS = Length(0, 'px')

WHITE = Color(255, 255, 255)

# Only pixels, other units are rejected at parse time.
LENGTH_UNITS = ('px',)


class Display(enum.Enum):
    """Used values of the ``display`` property."""
    INLINE = 'inline'
    BLOCK = 'block'
    NONE = 'none'


def to_px(value):
    """Return the size of ``value`` in pixels, 0 for anything but a length."""
    if isinstance(value, Length):
        return value.value
    return 0
