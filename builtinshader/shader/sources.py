"""
The fixed built-in shaders, and the enumeration of all built-in shaders.
"""

from ..utils.enums import Filter, Address
from .templating import load_kage
from .cache import shader_source


# Blends the four source texels around each destination pixel, for scaling
# a render target onto the screen. Texels are always in the source rect.
SCREEN_SHADER_SOURCE = load_kage("screen.kage").encode()

# Produces transparent black for every fragment.
CLEAR_SHADER_SOURCE = load_kage("clear.kage").encode()


def append_shader_sources(sources=None, *, cache=None):
    """Append the sources of all built-in shaders to the given list.

    The parameterized shaders come first, ordered by filter, then address,
    then without and with color matrix. The screen and clear shader come
    last. Callers may rely on this order to register shaders by position.

    Returns the list (a new list if ``sources`` is None).
    """
    if sources is None:
        sources = []
    for filter in Filter:
        for address in Address:
            sources.append(shader_source(filter, address, False, cache=cache))
            sources.append(shader_source(filter, address, True, cache=cache))
    sources.append(SCREEN_SHADER_SOURCE)
    sources.append(CLEAR_SHADER_SOURCE)
    return sources
