"""Functions laying out the block boxes.

See https://www.w3.org/TR/CSS21/visudet.html

"""

from ..css.properties import AUTO, ZERO_PIXELS, Length, to_px
from ..formatting_structure.boxes import BoxType


def block_level_layout(box, containing_block):
    """Lay out ``box`` and its descendants in ``containing_block``.

    ``containing_block`` is a :class:`Dimensions` object, its content height
    is the height already used by the previous siblings of ``box``.

    """
    if box.box_type is BoxType.BLOCK:
        block_box_layout(box, containing_block)
    # Inline and anonymous boxes are not laid out.


def block_box_layout(box, containing_block):
    """Lay out the block ``box``."""
    # The width of children depends on the width of their parent, it must
    # be set before laying out children.
    block_level_width(box, containing_block)
    block_level_position(box, containing_block)
    block_container_layout(box)
    # The height of the parent depends on the height of its children.
    block_level_height(box)


def block_level_width(box, containing_block):
    """Set the ``box`` width and horizontal edges.

    See https://www.w3.org/TR/CSS21/visudet.html#blockwidth

    """
    style = box.get_style_node()
    # 'cb' stands for 'containing block'
    cb_width = containing_block.content.width

    width = style.value('width') or AUTO

    margin_l = style.lookup('margin-left', 'margin', AUTO)
    margin_r = style.lookup('margin-right', 'margin', AUTO)
    border_l = style.lookup('border-left', 'border', ZERO_PIXELS)
    border_r = style.lookup('border-right', 'border', ZERO_PIXELS)
    padding_l = style.lookup('padding-left', 'padding', ZERO_PIXELS)
    padding_r = style.lookup('padding-right', 'padding', ZERO_PIXELS)

    # Only margin-left, margin-right and width can be 'auto'.
    # We want:  width of containing block ==
    #               margin-left + border-left-width + padding-left + width
    #               + padding-right + border-right-width + margin-right
    total = sum(to_px(value) for value in (
        margin_l, border_l, padding_l, width, padding_r, border_r, margin_r))

    if width != AUTO and total > cb_width:
        if margin_l == AUTO:
            margin_l = ZERO_PIXELS
        if margin_r == AUTO:
            margin_r = ZERO_PIXELS

    # Each branch below adds exactly ``underflow`` to the total.
    underflow = cb_width - total

    if width != AUTO:
        if margin_l != AUTO and margin_r != AUTO:
            # The equation is over-constrained
            margin_r = Length(to_px(margin_r) + underflow, 'px')
        elif margin_l != AUTO:
            margin_r = Length(underflow, 'px')
        elif margin_r != AUTO:
            margin_l = Length(underflow, 'px')
        else:
            margin_l = margin_r = Length(underflow / 2, 'px')
    else:
        if margin_l == AUTO:
            margin_l = ZERO_PIXELS
        if margin_r == AUTO:
            margin_r = ZERO_PIXELS
        if underflow >= 0:
            width = Length(underflow, 'px')
        else:
            # Width can't be negative, the right margin takes the overflow.
            width = ZERO_PIXELS
            margin_r = Length(to_px(margin_r) + underflow, 'px')

    dimensions = box.dimensions
    dimensions.content.width = to_px(width)
    dimensions.padding.left = to_px(padding_l)
    dimensions.padding.right = to_px(padding_r)
    dimensions.border.left = to_px(border_l)
    dimensions.border.right = to_px(border_r)
    dimensions.margin.left = to_px(margin_l)
    dimensions.margin.right = to_px(margin_r)


def block_level_position(box, containing_block):
    """Set the vertical edges and the position of the ``box`` content.

    The box is put below the content already laid out in its containing
    block.

    """
    style = box.get_style_node()
    dimensions = box.dimensions

    # No 'auto' vertical margins, they are 0 like the other edges.
    dimensions.padding.top = to_px(
        style.lookup('padding-top', 'padding', ZERO_PIXELS))
    dimensions.padding.bottom = to_px(
        style.lookup('padding-bottom', 'padding', ZERO_PIXELS))
    dimensions.border.top = to_px(
        style.lookup('border-top', 'border', ZERO_PIXELS))
    dimensions.border.bottom = to_px(
        style.lookup('border-bottom', 'border', ZERO_PIXELS))
    dimensions.margin.top = to_px(
        style.lookup('margin-top', 'margin', ZERO_PIXELS))
    dimensions.margin.bottom = to_px(
        style.lookup('margin-bottom', 'margin', ZERO_PIXELS))

    cb_content = containing_block.content
    dimensions.content.x = (
        cb_content.x + dimensions.margin.left + dimensions.border.left +
        dimensions.padding.left)
    dimensions.content.y = (
        cb_content.y + cb_content.height + dimensions.margin.top +
        dimensions.border.top + dimensions.padding.top)


def block_container_layout(box):
    """Lay out the children of ``box``, stacked vertically.

    ``box.dimensions.content.height`` grows with each child and ends as the
    height of all the children.

    """
    # Margins are not collapsed.
    dimensions = box.dimensions
    dimensions.content.height = 0
    for child in box.children:
        block_level_layout(child, dimensions)
        dimensions.content.height += child.dimensions.margin_box().height


def block_level_height(box):
    """Set the ``box`` height if given, keep the height of children else."""
    height = box.get_style_node().value('height')
    if isinstance(height, Length):
        box.dimensions.content.height = height.value
