"""Logging setup.

The rest of the code gets the logger through this module rather than
``logging.getLogger`` to make sure that it is configured.

Logging levels are used for specific purposes:

- warnings are used in ``LOGGER`` for unknown or bad CSS syntaxes and
  unknown rendering options;
- debug messages are used in ``LOGGER`` for boxes silently left out of the
  layout tree;
- infos are used in ``PROGRESS_LOGGER`` to advertise rendering steps.

"""

import logging

LOGGER = logging.getLogger('tinybox')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())

PROGRESS_LOGGER = logging.getLogger('tinybox.progress')


def configure_stream_logging(debug=False, verbose=False, quiet=False,
                             stream=None):
    """Make ``LOGGER`` write to ``stream`` (stderr by default).

    ``debug`` wins over ``verbose``. Nothing is added when ``quiet`` is set.

    """
    if debug:
        LOGGER.setLevel(logging.DEBUG)
    elif verbose:
        LOGGER.setLevel(logging.INFO)
    if quiet:
        return None
    handler = logging.StreamHandler(stream)
    if debug:
        # Add extra information when debug logging
        handler.setFormatter(logging.Formatter(
            '%(levelname)s: %(filename)s:%(lineno)d '
            '(%(funcName)s): %(message)s'))
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    LOGGER.addHandler(handler)
    return handler
