"""Logging for store errors.

The store itself never logs. Applications hand errors they catch to
:func:`log_error`, which logs them at the severity the error reports:
``DEBUG`` for missing files and ``WARNING`` for everything else.
"""

import logging

logger = logging.getLogger("filestore")


def log_error(error, log=None):
    """Log `error` (a :class:`filestore.errors.IoFailure`) on `log`, or the
    ``filestore`` logger if none is given.
    """
    (log or logger).log(error.log_level, "%s", error.describe())
