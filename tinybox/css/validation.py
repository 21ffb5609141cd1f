"""Validate declarations and turn their tokens into specified values."""

from tinycss2 import parse_blocks_contents, serialize
from tinycss2.color3 import parse_color

from ..logger import LOGGER
from .properties import LENGTH_UNITS, ZERO_PIXELS, Color, Keyword, Length


class InvalidValues(ValueError):  # noqa: N818
    """Invalid or unsupported values for a known CSS property."""


def remove_whitespace(tokens):
    """Remove any top-level whitespace and comments in a token list."""
    return tuple(
        token for token in tokens
        if token.type not in ('whitespace', 'comment'))


def get_color(token):
    """Parse a hash or ``rgb()`` token into a :class:`Color`."""
    if token.type == 'hash' or (
            token.type == 'function' and token.lower_name in ('rgb', 'rgba')):
        color = parse_color(token)
        if color is None or color == 'currentColor':
            return None
        return Color(*(
            round(channel * 255) for channel in
            (color.red, color.green, color.blue)))


def get_length(token):
    """Parse a ``<length>`` token into a :class:`Length`."""
    if token.type == 'dimension':
        if token.lower_unit in LENGTH_UNITS:
            return Length(token.value, token.lower_unit)
        raise InvalidValues(f'unsupported unit {token.unit!r}')
    if token.type == 'number' and token.value == 0:
        return ZERO_PIXELS


def parse_declaration_value(tokens):
    """Return the specified value for the ``tokens`` of one declaration.

    :raises: :class:`InvalidValues` if the value is not a single keyword,
        pixel length or color.

    """
    tokens = remove_whitespace(tokens)
    if not tokens:
        raise InvalidValues('no value')
    if len(tokens) > 1:
        raise InvalidValues('only single values are supported')
    token, = tokens
    if token.type == 'ident':
        return Keyword(token.lower_value)
    color = get_color(token)
    if color is not None:
        return color
    length = get_length(token)
    if length is not None:
        return length
    raise InvalidValues(None)


def preprocess_declarations(tokens):
    """Yield ``(name, value)`` for valid declarations in ``tokens``.

    ``tokens`` is the content of a qualified rule as given by tinycss2.
    Invalid declarations are logged and skipped.

    """
    for declaration in parse_blocks_contents(
            tokens, skip_comments=True, skip_whitespace=True):
        if declaration.type == 'error':
            LOGGER.warning(
                'Error: %s at %d:%d.', declaration.message,
                declaration.source_line, declaration.source_column)
            continue

        if declaration.type != 'declaration':
            LOGGER.warning(
                'Ignored %s at %d:%d, nested rules are not supported.',
                declaration.type, declaration.source_line,
                declaration.source_column)
            continue

        try:
            value = parse_declaration_value(declaration.value)
        except InvalidValues as exc:
            LOGGER.warning(
                'Ignored `%s:%s` at %d:%d, %s.',
                declaration.name, serialize(declaration.value),
                declaration.source_line, declaration.source_column,
                exc.args[0] if exc.args and exc.args[0] else 'invalid value')
            continue

        yield declaration.lower_name, value
