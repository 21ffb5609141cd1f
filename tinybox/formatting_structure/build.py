"""Turn a style tree into a "before layout" box tree.

This includes leaving out nodes with ``display: none`` and creating
anonymous block boxes around inline boxes.

"""

from ..css.properties import Display
from ..logger import LOGGER
from .boxes import BoxType, LayoutBox

# Maps used values of the ``display`` CSS property to box types.
BOX_TYPE_FROM_DISPLAY = {
    Display.BLOCK: BoxType.BLOCK,
    Display.INLINE: BoxType.INLINE,
}


class LayoutError(ValueError):
    """The document can't be laid out."""


def build_layout_tree(style_node):
    """Build the tree of layout boxes for ``style_node``.

    No layout calculation is done: dimensions of all the boxes are zero.

    :raises: :class:`LayoutError` if the root node has ``display: none``.

    """
    display = style_node.display()
    if display is Display.NONE:
        raise LayoutError('Root node has display: none.')
    root = LayoutBox(BOX_TYPE_FROM_DISPLAY[display], style_node)

    for child in style_node.children:
        display = child.display()
        if display is Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif display is Display.INLINE:
            # Blocks with only inline children get an anonymous box too.
            root.get_inline_container().children.append(
                build_layout_tree(child))
        else:
            LOGGER.debug('Skipped %r and its descendants, display: none.',
                         child.node)
    return root
