"""Take an "after layout" box tree and paint it onto a pixel canvas.

Painting is done in two steps: the box tree is turned into a display list,
a flat list of solid rectangles in painting order, then the commands of the
list are executed on a :class:`Canvas`.

Only backgrounds and borders are painted, parents before their children.
Later commands overwrite earlier ones.

"""

import collections
from io import BytesIO

from PIL import Image

from .css.properties import WHITE, Color
from .formatting_structure.boxes import BoxType, Rect

SolidColor = collections.namedtuple('SolidColor', ['color', 'rect'])


def get_color(box, key):
    """Return the :class:`Color` value of property ``key`` for ``box``.

    Return ``None`` for anonymous boxes and for values that are not colors.

    """
    if box.box_type is BoxType.ANONYMOUS:
        return None
    value = box.get_style_node().value(key)
    if isinstance(value, Color):
        return value


def build_display_list(layout_root):
    """Return the list of :class:`SolidColor` commands painting the tree."""
    display_list = []
    draw_box(display_list, layout_root)
    return display_list


def draw_box(display_list, box):
    draw_background(display_list, box)
    draw_border(display_list, box)
    for child in box.children:
        draw_box(display_list, child)


def draw_background(display_list, box):
    color = get_color(box, 'background')
    if color is not None:
        display_list.append(SolidColor(color, box.dimensions.border_box()))


def draw_border(display_list, box):
    color = get_color(box, 'border-color')
    if color is None:
        return

    dimensions = box.dimensions
    border_box = dimensions.border_box()
    border = dimensions.border
    x, y, width, height = border_box
    display_list.extend((
        # Left, right, top and bottom sides
        SolidColor(color, Rect(x, y, border.left, height)),
        SolidColor(color, Rect(
            x + width - border.right, y, border.right, height)),
        SolidColor(color, Rect(x, y, width, border.top)),
        SolidColor(color, Rect(
            x, y + height - border.bottom, width, border.bottom)),
    ))


def _clamp(value, maximum):
    return min(max(value, 0), maximum)


class Canvas:
    """An RGB pixel buffer, white when created."""
    def __init__(self, width, height):
        self.width = width
        self.height = height
        #: Row-major list of ``(r, g, b)`` tuples.
        self.pixels = [WHITE] * (width * height)

    def __repr__(self):
        return f'<Canvas {self.width}×{self.height}>'

    def paint_item(self, item):
        """Execute a display command."""
        color, rect = item
        # Positions are truncated like integer casts, then clipped.
        x0 = _clamp(int(rect.x), self.width)
        y0 = _clamp(int(rect.y), self.height)
        x1 = _clamp(int(rect.x) + int(rect.width), self.width)
        y1 = _clamp(int(rect.y) + int(rect.height), self.height)
        if x1 <= x0:
            return
        for y in range(y0, y1):
            row = y * self.width
            self.pixels[row + x0:row + x1] = [color] * (x1 - x0)

    def to_image(self):
        """Return the canvas as a Pillow RGB image."""
        image = Image.new('RGB', (self.width, self.height))
        image.putdata([tuple(pixel) for pixel in self.pixels])
        return image

    def write_png(self, target=None):
        """Write the canvas as PNG to ``target``.

        :type target:
            :class:`str`, :class:`pathlib.Path` or :term:`file object`
        :param target:
            A filename, a file object, or :obj:`None`.
        :returns:
            The PNG as :obj:`bytes` if ``target`` is :obj:`None`, otherwise
            :obj:`None`.

        """
        image = self.to_image()
        if target is None:
            output = BytesIO()
            image.save(output, format='PNG')
            return output.getvalue()
        image.save(target, format='PNG')


def paint(layout_root, width, height):
    """Paint the laid out ``layout_root`` tree on a new :class:`Canvas`."""
    canvas = Canvas(width, height)
    for item in build_display_list(layout_root):
        canvas.paint_item(item)
    return canvas
