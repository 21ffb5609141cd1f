"""Find and apply CSS.

This module takes care of the cascade: it matches the rules of a stylesheet
against every element of a document tree and annotates each node with its
specified values, building a style tree that has exactly the shape of the
document tree.

https://www.w3.org/TR/CSS21/cascade.html

Values are not inherited and not computed: a node only gets the
declarations of the rules matching it. The :func:`style_tree` function does
everything, but it is itself based on other functions in this module.

"""

import collections

import cssselect2

from ..html import Element
from ..logger import LOGGER, PROGRESS_LOGGER
from .properties import Display, Keyword
from .selectors import parse_selectors
from .validation import preprocess_declarations

Declaration = collections.namedtuple('Declaration', ['name', 'value'])

#: A rule set. ``selectors`` are sorted by specificity, most specific first;
#: the style resolver relies on this order.
Rule = collections.namedtuple('Rule', ['selectors', 'declarations'])

Stylesheet = collections.namedtuple('Stylesheet', ['rules'])


class StyledNode:
    """A document node with its specified values.

    ``node`` is a reference to the document node, not a copy. ``children``
    has one styled node per child of ``node``, in the same order, text nodes
    included.

    """
    def __init__(self, node, specified_values, children):
        self.node = node
        #: Map from property names (as written in CSS) to values.
        self.specified_values = specified_values
        self.children = children

    def __repr__(self):
        return f'<{type(self).__name__} {self.node!r}>'

    def value(self, name):
        """Return the specified value of property ``name``, or ``None``."""
        return self.specified_values.get(name)

    def lookup(self, name, fallback_name, default):
        """Return the value of ``name``, else ``fallback_name``, else ``default``.

        ``fallback_name`` is typically a shorthand, such as ``margin`` for
        ``margin-left``.

        """
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        if value is None:
            value = default
        return value

    def display(self):
        """Return the :class:`Display` value of the node.

        Unknown or missing values default to inline.

        """
        value = self.value('display')
        if value == Keyword('block'):
            return Display.BLOCK
        elif value == Keyword('none'):
            return Display.NONE
        return Display.INLINE


def preprocess_stylesheet(stylesheet_rules):
    """Turn tinycss2 rules into a :class:`Stylesheet`.

    Rules that can't be used are logged and skipped.

    """
    rules = []
    for rule in stylesheet_rules:
        if rule.type == 'error':
            LOGGER.warning(
                'Parse error at %d:%d: %s',
                rule.source_line, rule.source_column, rule.message)
            continue
        if rule.type == 'at-rule':
            LOGGER.warning(
                'Ignored at-rule @%s at %d:%d, at-rules are not supported.',
                rule.lower_at_keyword, rule.source_line, rule.source_column)
            continue
        if rule.type != 'qualified-rule':
            continue

        try:
            selectors = parse_selectors(rule.prelude)
        except cssselect2.SelectorError as exc:
            LOGGER.warning(
                'Invalid or unsupported selector at %d:%d, %s',
                rule.source_line, rule.source_column, exc)
            continue

        declarations = [
            Declaration(name, value)
            for name, value in preprocess_declarations(rule.content)]
        rules.append(Rule(selectors, declarations))
    return Stylesheet(rules)


def match_rule(element, rule):
    """Return the specificity of the first selector of ``rule`` matching.

    Return ``None`` if no selector of ``rule`` matches ``element``. As
    selectors are sorted, the first match is also the most specific one.

    """
    for selector in rule.selectors:
        if selector.matches(element):
            return selector.specificity


def matching_rules(element, stylesheet):
    """Return ``(specificity, rule)`` pairs for rules matching ``element``.

    Each rule is given at most once, in stylesheet order.

    """
    matched = []
    for rule in stylesheet.rules:
        specificity = match_rule(element, rule)
        if specificity is not None:
            matched.append((specificity, rule))
    return matched


def specified_values(element, stylesheet):
    """Apply the cascade to ``element`` and return its property map.

    Rules are applied by increasing specificity, later rules winning over
    earlier rules of the same specificity.

    """
    values = {}
    rules = matching_rules(element, stylesheet)
    # sorted() is stable: ties keep the stylesheet order.
    rules = sorted(rules, key=lambda pair: pair[0])
    for _specificity, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value
    return values


def _style_node(node, stylesheet):
    if isinstance(node, Element):
        values = specified_values(node, stylesheet)
    else:
        values = {}
    children = [_style_node(child, stylesheet) for child in node.children]
    return StyledNode(node, values, children)


def style_tree(root, stylesheet):
    """Return the :class:`StyledNode` tree for the document ``root``.

    The styled tree references the nodes of the document tree, that must be
    kept alive as long as the styled tree is used.

    """
    PROGRESS_LOGGER.info('Step 3 - Applying CSS')
    return _style_node(root, stylesheet)


resolve = style_tree
