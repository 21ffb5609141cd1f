"""Document tree, and its construction from HTML.

The tree only has two kinds of nodes, :class:`Text` and :class:`Element`.
Nodes own their children and are not modified once built.

HTML is parsed by tinyhtml5, whose ElementTree result is then converted.

"""

from xml.etree import ElementTree

import tinyhtml5


class Node:
    """Abstract base class for document nodes."""
    def __init__(self, children=None):
        self.children = [] if children is None else children

    def iter(self):
        """Iterate on the node and its descendants, in tree order."""
        yield self
        for child in self.children:
            yield from child.iter()


class Text(Node):
    """A text node."""
    def __init__(self, data):
        super().__init__()
        self.data = data

    def __repr__(self):
        return f'<Text {self.data!r}>'

    def __eq__(self, other):
        return isinstance(other, Text) and self.data == other.data


class Element(Node):
    """An element node, with a tag name and an attribute map."""
    def __init__(self, tag, attributes=None, children=None):
        super().__init__(children)
        self.tag = tag
        self.attributes = {} if attributes is None else attributes

    def __repr__(self):
        return f'<Element {self.tag}>'

    def __eq__(self, other):
        return (
            isinstance(other, Element) and self.tag == other.tag and
            self.attributes == other.attributes and
            self.children == other.children)

    @property
    def id(self):
        """Value of the ``id`` attribute, or ``None``."""
        return self.attributes.get('id')

    @property
    def classes(self):
        """Set of class names given by the ``class`` attribute."""
        return set(self.attributes.get('class', '').split())


def text(data):
    """Create a :class:`Text` node."""
    return Text(data)


def element(tag, attributes=None, children=None):
    """Create an :class:`Element` node."""
    return Element(tag, attributes, children)


def _text_node(data, children):
    # Whitespace between tags is not kept.
    if data and not data.isspace():
        children.append(Text(data))


def element_from_etree(etree_element):
    """Convert an ElementTree element and its descendants into nodes."""
    children = []
    _text_node(etree_element.text, children)
    for etree_child in etree_element:
        if isinstance(etree_child.tag, str):
            children.append(element_from_etree(etree_child))
        # else: comment or processing instruction, only keep its tail
        _text_node(etree_child.tail, children)
    return Element(
        etree_element.tag, dict(etree_element.attrib), children)


def parse_html(source):
    """Parse an HTML string or bytes and return the root :class:`Element`.

    The root is the ``html`` element, even when the source is a fragment.

    """
    etree_root = tinyhtml5.parse(source, namespace_html_elements=False)
    if isinstance(etree_root, ElementTree.ElementTree):
        etree_root = etree_root.getroot()
    return element_from_etree(etree_root)


def find_style_elements(root):
    """Yield the CSS source of the ``<style>`` elements of the document.

    The output order is the same as the source order.

    """
    for node in root.iter():
        if isinstance(node, Element) and node.tag == 'style':
            yield ''.join(
                child.data for child in node.children
                if isinstance(child, Text))
