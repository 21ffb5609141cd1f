"""A tiny HTML and CSS layout engine.

The public API is what is accessible from this "root" package without
importing sub-modules.

"""

import contextlib
from pathlib import Path

import tinycss2

VERSION = __version__ = '0.1.0'

#: Default values for command-line and Python API options. See
#: :func:`__main__.main` to learn more about specific options for
#: command-line.
#:
#: :param list stylesheets:
#:     An optional list of user stylesheets, applied after the ``<style>``
#:     elements of the document. The list can include :class:`CSS`
#:     objects, filenames or file-like objects.
#: :param int width:
#:     Width of the viewport, and of the painted image, in pixels.
#: :param int height:
#:     Height of the viewport, and of the painted image, in pixels.
DEFAULT_OPTIONS = {
    'stylesheets': None,
    'width': 800,
    'height': 600,
}

__all__ = [
    'CSS', 'DEFAULT_OPTIONS', 'HTML', 'VERSION', 'Document', '__version__']


# Import after setting the version, as the version is used in other modules
from .logger import LOGGER, PROGRESS_LOGGER  # noqa: I001, E402
# Some imports are at the end of the file (after the CSS class)
# to work around circular imports.


class HTML:
    """HTML document parsed by tinyhtml5.

    You can just create an instance with a positional argument:
    ``doc = HTML(something)``
    The class will try to guess if the input is a filename or a
    :term:`file object`.

    Alternatively, use **one** named argument so that no guessing is involved:

    :type filename: str or pathlib.Path
    :param filename:
        A filename, relative to the current directory, or absolute.
    :type file_obj: :term:`file object`
    :param file_obj:
        Any object with a ``read`` method.
    :param str string:
        A string of HTML source.

    Specifying multiple inputs is an error:
    ``HTML(filename="foo.html", string="<p>bar")``
    will raise a :obj:`TypeError`.

    """
    def __init__(self, guess=None, filename=None, file_obj=None,
                 string=None):
        PROGRESS_LOGGER.info(
            'Step 1 - Parsing HTML - %s',
            guess or filename or getattr(file_obj, 'name', 'HTML string'))
        with _select_source(guess, filename, file_obj, string) as source:
            #: The root :class:`Element <html.Element>` of the document.
            self.root = parse_html(source)

    def render(self, **options):
        """Lay out the document, but do not (yet) paint it.

        This returns a :class:`document.Document` object which gives access
        to the laid out box tree. See :meth:`write_png` to get an image
        directly.

        :param options:
            The ``options`` parameter includes by default the
            :data:`DEFAULT_OPTIONS` values.
        :returns: A :class:`document.Document` object.

        """
        for unknown in set(options) - set(DEFAULT_OPTIONS):
            LOGGER.warning('Unknown rendering option: %s.', unknown)
        new_options = DEFAULT_OPTIONS.copy()
        new_options.update(options)
        options = new_options
        return Document._render(self, options)

    def write_png(self, target=None, **options):
        """Paint the document to a PNG file.

        This is a shortcut for calling :meth:`render`, then
        :meth:`Document.write_png() <document.Document.write_png>`.

        :type target:
            :class:`str`, :class:`pathlib.Path` or :term:`file object`
        :param target:
            A filename where the PNG file is generated, a file object, or
            :obj:`None`.
        :param options:
            The ``options`` parameter includes by default the
            :data:`DEFAULT_OPTIONS` values.
        :returns:
            The PNG as :obj:`bytes` if ``target`` is not provided or
            :obj:`None`, otherwise :obj:`None` (the PNG is written to
            ``target``).

        """
        return self.render(**options).write_png(target)


class CSS:
    """CSS stylesheet parsed by tinycss2.

    An instance is created in the same way as :class:`HTML`, with the same
    arguments.

    ``CSS`` objects are meant to be used in the :meth:`HTML.render` and
    :meth:`HTML.write_png` methods of :class:`HTML` objects.

    """
    def __init__(self, guess=None, filename=None, file_obj=None,
                 string=None):
        PROGRESS_LOGGER.info(
            'Step 2 - Parsing CSS - %s',
            filename or getattr(file_obj, 'name', 'CSS string'))
        with _select_source(guess, filename, file_obj, string) as source:
            if isinstance(source, str):
                # unicode, no encoding
                rules = tinycss2.parse_stylesheet(
                    source, skip_comments=True, skip_whitespace=True)
            else:
                rules, _encoding = tinycss2.parse_stylesheet_bytes(
                    source, skip_comments=True, skip_whitespace=True)
        #: The parsed :class:`Stylesheet <css.Stylesheet>`.
        self.stylesheet = preprocess_stylesheet(rules)


@contextlib.contextmanager
def _select_source(guess=None, filename=None, file_obj=None, string=None):
    """If only one input is given, yield its content."""
    selected_params = [
        param for param in (guess, filename, file_obj, string) if
        param is not None]
    if len(selected_params) != 1:
        source = ', '.join(map(repr, selected_params)) or 'nothing'
        raise TypeError(f'Expected exactly one source, got {source}')
    elif guess is not None:
        if hasattr(guess, 'read'):
            type_ = 'file_obj'
        else:
            type_ = 'filename'
        with _select_source(**{type_: guess}) as result:
            yield result
    elif filename is not None:
        with open(Path(filename), 'rb') as file_obj:
            yield file_obj.read()
    elif file_obj is not None:
        yield file_obj.read()
    else:
        assert string is not None
        yield string


# Work around circular imports.
from .css import preprocess_stylesheet  # noqa: I001, E402
from .html import parse_html  # noqa: E402
from .document import Document  # noqa: E402
