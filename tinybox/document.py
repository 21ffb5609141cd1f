"""Rendered documents: laid out box trees ready to be painted."""

from .css import Stylesheet, style_tree
from .draw import paint
from .formatting_structure.boxes import Dimensions
from .html import find_style_elements
from .layout import layout_tree
from .logger import PROGRESS_LOGGER


class Document:
    """A rendered document ready to be painted on a canvas.

    Typically obtained from :meth:`HTML.render() <tinybox.HTML.render>`, but
    can also be instantiated directly with the root of a laid out box tree,
    the root of the style tree it references, and the size of the viewport.

    """

    @classmethod
    def _stylesheets(cls, html, options):
        stylesheets = [
            CSS(string=source) for source in find_style_elements(html.root)]
        for css in options['stylesheets'] or []:
            if not hasattr(css, 'stylesheet'):
                css = CSS(guess=css)
            stylesheets.append(css)
        return stylesheets

    @classmethod
    def _render(cls, html, options):
        rules = [
            rule for css in cls._stylesheets(html, options)
            for rule in css.stylesheet.rules]
        style_root = style_tree(html.root, Stylesheet(rules))
        viewport = Dimensions.from_size(options['width'], options['height'])
        root_box = layout_tree(style_root, viewport)
        return cls(root_box, style_root, options['width'], options['height'])

    def __init__(self, root_box, style_root, width, height):
        #: The root :class:`LayoutBox <formatting_structure.boxes.LayoutBox>`.
        self.root_box = root_box
        # Layout boxes only reference their styled nodes, keep the style tree
        # alive as long as the document.
        self.style_root = style_root
        #: Size of the viewport, in pixels.
        self.width = width
        self.height = height

    def paint(self):
        """Paint the document on a new :class:`Canvas <draw.Canvas>`."""
        PROGRESS_LOGGER.info('Step 6 - Painting')
        return paint(self.root_box, self.width, self.height)

    def write_png(self, target=None):
        """Paint the document and write it as a PNG image.

        :type target:
            :class:`str`, :class:`pathlib.Path` or :term:`file object`
        :param target:
            A filename where the PNG file is generated, a file object, or
            :obj:`None`.
        :returns:
            The PNG as :obj:`bytes` if ``target`` is not provided or
            :obj:`None`, otherwise :obj:`None` (the PNG is written to
            ``target``).

        """
        return self.paint().write_png(target)


# Work around circular imports.
from . import CSS  # noqa: I001, E402
