"""Test the cascade and the style tree."""

import pytest

from tinybox import CSS
from tinybox.css import (
    Stylesheet, StyledNode, matching_rules, resolve, specified_values,
    style_tree)
from tinybox.css.properties import (
    AUTO, Color, Display, Keyword, Length)
from tinybox.html import element, text

from ..testing_utils import assert_no_logs, capture_logs, find_element, parse


def _stylesheet(css):
    return CSS(string=css).stylesheet


@assert_no_logs
def test_style_tree_shape():
    root = element('div', children=[
        element('p', children=[text('Hello')]),
        text('world'),
        element('span')])
    styled = style_tree(root, Stylesheet([]))
    assert styled.node is root
    assert [child.node for child in styled.children] == root.children
    paragraph, world, span = styled.children
    assert paragraph.children[0].node is root.children[0].children[0]
    assert world.children == []
    assert span.children == []


@assert_no_logs
def test_text_nodes_have_no_values():
    root = element('div', children=[text('Hello')])
    styled = style_tree(root, _stylesheet('* { display: block }'))
    assert styled.specified_values == {'display': Keyword('block')}
    assert styled.children[0].specified_values == {}
    assert styled.children[0].display() is Display.INLINE


@assert_no_logs
def test_matching_rules():
    stylesheet = _stylesheet('''
      p { width: 1px }
      div { width: 2px }
      .a, p, #b { width: 3px }
    ''')
    paragraph = element('p', {'class': 'a'})
    matched = matching_rules(paragraph, stylesheet)
    assert [rule for _, rule in matched] == [
        stylesheet.rules[0], stylesheet.rules[2]]
    # The most specific matching selector of a rule is used.
    assert [specificity for specificity, _ in matched] == [
        (0, 0, 1), (0, 1, 0)]


@assert_no_logs
def test_cascade_specificity():
    stylesheet = _stylesheet('''
      #main { width: 30px }
      .a { width: 20px; height: 2px }
      div { width: 10px; height: 1px; padding: 1px }
    ''')
    div = element('div', {'id': 'main', 'class': 'a'})
    assert specified_values(div, stylesheet) == {
        'width': Length(30, 'px'),
        'height': Length(2, 'px'),
        'padding': Length(1, 'px')}


@assert_no_logs
def test_cascade_ties():
    stylesheet = _stylesheet('''
      p { color: #ff0000 }
      p { color: #0000ff; width: 1px; width: 2px }
    ''')
    assert specified_values(element('p'), stylesheet) == {
        'color': Color(0, 0, 255), 'width': Length(2, 'px')}


@assert_no_logs
def test_cascade_no_match():
    stylesheet = _stylesheet('h1 { color: #ff0000 }')
    assert specified_values(element('p'), stylesheet) == {}


@assert_no_logs
def test_cascade_deterministic():
    css = '''
      .a { width: 1px } p { width: 2px } * { height: 3px }
      p.a { margin: auto } .a { margin: 0 }
    '''
    paragraph = element('p', {'class': 'a'})
    values = specified_values(paragraph, _stylesheet(css))
    for _ in range(5):
        assert specified_values(paragraph, _stylesheet(css)) == values
    assert values == {
        'width': Length(1, 'px'), 'height': Length(3, 'px'),
        'margin': AUTO}


@assert_no_logs
@pytest.mark.parametrize('value, display', (
    (Keyword('block'), Display.BLOCK),
    (Keyword('none'), Display.NONE),
    (Keyword('inline'), Display.INLINE),
    (Keyword('flex'), Display.INLINE),
    (Length(1, 'px'), Display.INLINE),
    (None, Display.INLINE),
))
def test_display(value, display):
    values = {} if value is None else {'display': value}
    assert StyledNode(element('p'), values, []).display() is display


@assert_no_logs
def test_value_lookup():
    node = StyledNode(element('p'), {
        'margin': Length(1, 'px'), 'margin-left': Length(2, 'px')}, [])
    assert node.value('margin') == Length(1, 'px')
    assert node.value('padding') is None
    assert node.lookup('margin-left', 'margin', AUTO) == Length(2, 'px')
    assert node.lookup('margin-right', 'margin', AUTO) == Length(1, 'px')
    assert node.lookup('padding-left', 'padding', AUTO) == AUTO


@assert_no_logs
def test_document_scenario():
    style = parse(
        '''
          <h1>Title</h1>
          <div class="note"><p id="answer">42</p></div>
        ''',
        '''
          h1, h2, h3 { margin: auto; color: #cc0000; }
          div.note { margin-bottom: 20px; padding: 10px; }
          #answer { display: none; }
        ''')
    assert find_element(style, 'h1').specified_values == {
        'margin': AUTO, 'color': Color(204, 0, 0)}
    assert find_element(style, 'div').specified_values == {
        'margin-bottom': Length(20, 'px'), 'padding': Length(10, 'px')}
    answer = find_element(style, 'p')
    assert answer.display() is Display.NONE
    assert answer.children[0].node.data == '42'


def test_stylesheet_warnings():
    with capture_logs() as logs:
        stylesheet = _stylesheet('''
          @media print { p { width: 1px } }
          div p { width: 2px }
          p { width: 3px }
        ''')
    assert len(logs) == 2
    assert 'Ignored at-rule @media' in logs[0]
    assert 'Invalid or unsupported selector' in logs[1]
    assert len(stylesheet.rules) == 1
    assert stylesheet.rules[0].declarations[0].value == Length(3, 'px')


@assert_no_logs
def test_resolve():
    root = element('div', {'class': 'a'}, [element('p'), text('b')])
    stylesheet = _stylesheet('.a { width: 1px } p { display: block }')

    def values(styled):
        return [styled.specified_values] + [
            value for child in styled.children for value in values(child)]

    assert values(resolve(root, stylesheet)) == values(
        style_tree(root, stylesheet)) == [
            {'width': Length(1, 'px')}, {'display': Keyword('block')}, {}]
