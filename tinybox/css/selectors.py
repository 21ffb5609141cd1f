"""Simple selectors: parsing, specificity and matching.

Only simple selectors are supported: an optional type selector (or the
universal selector), followed by any number of id and class selectors, for
example ``div#main.note.warning``. Selector lists are comma-separated.

Preludes are parsed by cssselect2, its compound selectors are then turned
into :class:`SimpleSelector` objects with their own matching and
specificity.

See https://www.w3.org/TR/CSS21/selector.html#selector-syntax

"""

import collections

from cssselect2.parser import (
    ClassSelector, CompoundSelector, IDSelector, LocalNameSelector,
    SelectorError, parse)


class SimpleSelector(
        collections.namedtuple('SimpleSelector', ['tag_name', 'id', 'classes'])):
    """A selector such as ``type#id.class1.class2``.

    ``tag_name`` and ``id`` are ``None`` when not given, ``classes`` is a
    tuple of class names.

    """
    __slots__ = ()

    def __new__(cls, tag_name=None, id=None, classes=()):
        return super().__new__(cls, tag_name, id, tuple(classes))

    @property
    def specificity(self):
        """Return the ``(ids, classes, tags)`` triple of the selector.

        See https://www.w3.org/TR/selectors/#specificity

        """
        return (
            int(self.id is not None),
            len(self.classes),
            int(self.tag_name is not None))

    def matches(self, element):
        """Return whether this selector matches the ``element`` node."""
        if self.tag_name is not None and self.tag_name != element.tag:
            return False
        if self.id is not None and self.id != element.id:
            return False
        element_classes = element.classes
        return all(name in element_classes for name in self.classes)

    def __str__(self):
        parts = [self.tag_name or '']
        if self.id is not None:
            parts.append(f'#{self.id}')
        parts.extend(f'.{name}' for name in self.classes)
        return ''.join(parts) or '*'


def sort_selectors(selectors):
    """Sort ``selectors`` by specificity, most specific first.

    The sort is stable: selectors with the same specificity keep their
    source order.

    """
    return sorted(
        selectors, key=lambda selector: selector.specificity, reverse=True)


def simple_selector_from_compound(compound):
    """Turn a cssselect2 compound selector into a :class:`SimpleSelector`.

    :raises: :class:`cssselect2.SelectorError` for anything but type, id and
        class selectors.

    """
    tag_name = None
    id_ = None
    classes = []
    for selector in compound.simple_selectors:
        if isinstance(selector, LocalNameSelector):
            tag_name = selector.lower_local_name
        elif isinstance(selector, IDSelector):
            if id_ is not None:
                raise SelectorError('several id selectors')
            id_ = selector.ident
        elif isinstance(selector, ClassSelector):
            classes.append(selector.class_name)
        else:
            raise SelectorError(
                f'{type(selector).__name__} is not supported')
    return SimpleSelector(tag_name, id_, classes)


def parse_selectors(prelude):
    """Parse a rule prelude into a list of selectors.

    The returned list is sorted by specificity, most specific first.

    :raises: :class:`cssselect2.SelectorError` when any selector of the list
        is invalid or unsupported.

    """
    selectors = []
    for selector in parse(prelude):
        if selector.pseudo_element is not None:
            raise SelectorError(
                f'pseudo-element ::{selector.pseudo_element} is not supported')
        if not isinstance(selector.parsed_tree, CompoundSelector):
            raise SelectorError('combinators are not supported')
        selectors.append(simple_selector_from_compound(selector.parsed_tree))
    return sort_selectors(selectors)
