"""Transform a style tree into a laid out box tree.

Boxes in the returned tree have *used values* in their ``dimensions``
attribute: the position and size of their content box, and the size of
their padding, border and margin edges.

See https://www.w3.org/TR/CSS21/cascade.html#used-value

Only block boxes are laid out. Inline boxes (and anonymous boxes wrapping
them) are kept in the tree, but their content is never measured: their
dimensions stay at zero.

"""

from ..formatting_structure.build import build_layout_tree
from ..logger import PROGRESS_LOGGER
from .block import block_level_layout


def layout(box, containing_block):
    """Lay out ``box`` and its descendants in ``containing_block``.

    Dimensions of the boxes are modified in place.

    """
    block_level_layout(box, containing_block)


def layout_tree(style_root, containing_block):
    """Build the layout tree of ``style_root`` and lay it out.

    ``containing_block`` is a :class:`Dimensions` object, typically the
    viewport. Its content height is reset to 0, as it is used to stack the
    children of the root box.

    The returned boxes reference the nodes of the style tree, that must be
    kept alive as long as the layout tree is used.

    """
    containing_block.content.height = 0
    PROGRESS_LOGGER.info('Step 4 - Creating formatting structure')
    root = build_layout_tree(style_root)
    PROGRESS_LOGGER.info('Step 5 - Laying out boxes')
    layout(root, containing_block)
    return root
