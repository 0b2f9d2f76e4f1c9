# Copyright (c) 2025-2026 NASK. All rights reserved.

import logging


TOPLEVEL_PACKAGE_NAME = 'structmap'


def get_logger(name):
    """
    Like logging.getLogger(name), but -- for loggers that belong to the
    `structmap` hierarchy -- also ensure that the top-level `structmap`
    logger has a `logging.NullHandler` attached (so that, if the
    application did not configure logging, our records are silently
    dropped instead of being printed by the *last resort* handler).

    No other handlers are ever installed by the library.

    >>> get_logger('structmap.in_mapper').name
    'structmap.in_mapper'
    >>> toplevel = logging.getLogger(TOPLEVEL_PACKAGE_NAME)
    >>> sum(isinstance(h, logging.NullHandler) for h in toplevel.handlers)
    1
    >>> get_logger('foo.bar').name
    'foo.bar'
    """
    if name == TOPLEVEL_PACKAGE_NAME or name.startswith(TOPLEVEL_PACKAGE_NAME + '.'):
        _ensure_null_handler(logging.getLogger(TOPLEVEL_PACKAGE_NAME))
    return logging.getLogger(name)


def _ensure_null_handler(logger):
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
