"""
Utility functions for builtinshader.

.. currentmodule:: builtinshader.utils

.. autosummary::
    :toctree: utils/

    enums

"""

import os
import logging

from . import enums  # noqa: F401


logger = logging.getLogger("builtinshader")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("BUILTINSHADER_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid builtinshader log level: {level}")


_set_log_level()
