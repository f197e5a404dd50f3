"""
Versioning for builtinshader. We use a hard-coded version number, because it's
simple and always works.
"""

import logging


# This is the reference version number, to be bumped before each release.
__version__ = "0.1.0"

logger = logging.getLogger("builtinshader")


def _parse_version_info(version):
    parts = []
    for part in version.split("."):
        try:
            parts.append(int(part))
        except ValueError:
            logger.warning(f"Could not parse builtinshader version part {part!r}")
            break
    return tuple(parts)


version_info = _parse_version_info(__version__)
