"""Classes for the boxes of the CSS formatting structure / box model.

See https://www.w3.org/TR/CSS21/box.html

A :class:`LayoutBox` has one of three types:

* ``BLOCK``, for elements with ``display: block``;
* ``INLINE``, for elements with ``display: inline`` and for text;
* ``ANONYMOUS``, for anonymous block boxes wrapping a run of inline boxes
  in a block container, see
  https://www.w3.org/TR/CSS21/visuren.html#anonymous-block-level

Block and inline boxes keep a reference to their styled node. Anonymous
boxes have no styled node.

Each box has :class:`Dimensions`: a content rectangle and the padding,
border and margin edges around it. They are all zero until the box is laid
out.

"""

import enum


class Rect:
    """A rectangle, positioned relative to the document origin.

    ``y`` grows downward.

    """
    __slots__ = ('x', 'y', 'width', 'height')

    def __init__(self, x=0, y=0, width=0, height=0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def __repr__(self):
        return (
            f'Rect(x={self.x}, y={self.y}, '
            f'width={self.width}, height={self.height})')

    def __eq__(self, other):
        return isinstance(other, Rect) and tuple(self) == tuple(other)

    def __iter__(self):
        return iter((self.x, self.y, self.width, self.height))

    def expanded_by(self, edge):
        """Return a new rectangle grown by the ``edge`` sizes on each side."""
        return Rect(
            self.x - edge.left,
            self.y - edge.top,
            self.width + edge.left + edge.right,
            self.height + edge.top + edge.bottom)


class EdgeSizes:
    """Sizes of the four sides of a padding, border or margin edge."""
    __slots__ = ('left', 'right', 'top', 'bottom')

    def __init__(self, left=0, right=0, top=0, bottom=0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def __repr__(self):
        return (
            f'EdgeSizes(left={self.left}, right={self.right}, '
            f'top={self.top}, bottom={self.bottom})')

    def __eq__(self, other):
        return isinstance(other, EdgeSizes) and tuple(self) == tuple(other)

    def __iter__(self):
        return iter((self.left, self.right, self.top, self.bottom))


class Dimensions:
    """Content rectangle and surrounding edges of a box."""
    def __init__(self, content=None, padding=None, border=None, margin=None):
        self.content = Rect() if content is None else content
        self.padding = EdgeSizes() if padding is None else padding
        self.border = EdgeSizes() if border is None else border
        self.margin = EdgeSizes() if margin is None else margin

    def __repr__(self):
        return (
            f'Dimensions(content={self.content!r}, padding={self.padding!r}, '
            f'border={self.border!r}, margin={self.margin!r})')

    @classmethod
    def from_size(cls, width, height):
        """Return dimensions with a content box of the given size at (0, 0)."""
        return cls(Rect(0, 0, width, height))

    def padding_box(self):
        """The area covered by the content area plus its padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self):
        """The area covered by the content area plus padding and borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self):
        """The area covered by the content area plus padding, borders and
        margin."""
        return self.border_box().expanded_by(self.margin)


class BoxType(enum.Enum):
    BLOCK = 'Block'
    INLINE = 'Inline'
    ANONYMOUS = 'Anonymous'


class LayoutBox:
    """A node of the layout tree."""
    def __init__(self, box_type, style_node=None):
        assert (style_node is None) == (box_type is BoxType.ANONYMOUS), (
            box_type, style_node)
        self.box_type = box_type
        self._style_node = style_node
        self.dimensions = Dimensions()
        self.children = []

    def __repr__(self):
        if self.box_type is BoxType.ANONYMOUS:
            return '<LayoutBox Anonymous>'
        return f'<LayoutBox {self.box_type.value} {self._style_node.node!r}>'

    @classmethod
    def anonymous(cls):
        """Return a new anonymous block box."""
        return cls(BoxType.ANONYMOUS)

    def descendants(self):
        """A flat generator for a box, its children and descendants."""
        yield self
        for child in self.children:
            yield from child.descendants()

    def get_style_node(self):
        """Return the styled node of a block or inline box.

        :raises: :obj:`TypeError` for anonymous boxes, that have no style.

        """
        if self.box_type is BoxType.ANONYMOUS:
            raise TypeError('Anonymous block box has no style node.')
        return self._style_node

    def get_inline_container(self):
        """Return the box where a new inline child should be appended.

        Inline and anonymous boxes contain their inline children directly.
        Block boxes put them in an anonymous box, reusing the last child if
        it is one.

        """
        if self.box_type is not BoxType.BLOCK:
            return self
        if not (self.children and
                self.children[-1].box_type is BoxType.ANONYMOUS):
            self.children.append(LayoutBox.anonymous())
        return self.children[-1]
