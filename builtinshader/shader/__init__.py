"""
This subpackage is where the kage code of the built-in shaders is generated
and cached.

## A note about the built-in shaders

The built-in shaders draw a source image onto a target, optionally transforming
the color with a color matrix. There are only a few options (the filter, the
address mode and whether a color matrix is used), so instead of templating
each shader on the fly, every variant is assembled from a small set of fixed
kage snippets. The snippets are selected with plain branches on the options.
No user data ever ends up in the code.

Generation is deterministic, so each variant is generated once and then
cached. ``append_shader_sources()`` produces all variants up front, which is
useful to warm up a shader compilation cache.
"""

from .generator import (  # noqa
    ShaderOptions,
    generate_shader,
    UNIFORM_COLOR_M_BODY,
    UNIFORM_COLOR_M_TRANSLATION,
)
from .cache import ShaderCache, shader_cache, shader_source  # noqa
from .sources import (  # noqa
    SCREEN_SHADER_SOURCE,
    CLEAR_SHADER_SOURCE,
    append_shader_sources,
)
from .templating import register_kage_loader, load_kage  # noqa
