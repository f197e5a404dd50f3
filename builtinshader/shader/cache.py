"""
The cache that sits in front of the shader generator.
"""

import logging
import threading

from ..utils.enums import Filter, Address, FILTER_COUNT, ADDRESS_COUNT
from .generator import ShaderOptions, check_options, generate_shader


logger = logging.getLogger("builtinshader")

_filter_index = {filter: i for i, filter in enumerate(Filter)}
_address_index = {address: i for i, address in enumerate(Address)}


class ShaderCache:
    """A cache for the generated built-in shaders.

    Each shader variant is generated at most once per cache. A single lock
    covers the lookup, the generation and the store. This is fine, because
    generation is cheap and happens at most once per slot.

    Parameters
    ----------
    generator : callable
        Function that maps a ShaderOptions to the shader source (bytes).
        Defaults to ``generate_shader``.
    """

    def __init__(self, generator=None):
        self._generator = generator or generate_shader
        self._lock = threading.Lock()
        self._shaders = [
            [[None, None] for _ in range(ADDRESS_COUNT)] for _ in range(FILTER_COUNT)
        ]
        self.hits = 0
        self.misses = 0

    def get_stats(self):
        """Get the number of generated shaders, the hits, and the misses."""
        with self._lock:
            count = sum(
                s is not None
                for per_address in self._shaders
                for per_colorm in per_address
                for s in per_colorm
            )
            return count, self.hits, self.misses

    def get(self, filter, address, use_color_m):
        """Get the shader source for the given options, generating it if needed."""
        options = ShaderOptions(filter, address, use_color_m)
        check_options(options)

        slots = self._shaders[_filter_index[filter]][_address_index[address]]
        colorm = 1 if use_color_m else 0

        with self._lock:
            shader = slots[colorm]
            if shader is not None:
                self.hits += 1
                return shader
            self.misses += 1
            shader = self._generator(options)
            slots[colorm] = shader
            logger.debug(f"Generated built-in shader for {options}")
            return shader


# The process-wide cache used by the module-level functions.
shader_cache = ShaderCache()


def shader_source(filter, address, use_color_m, *, cache=None):
    """Get the built-in shader source for the given parameters.

    Parameters
    ----------
    filter : Filter
        How the source image is sampled.
    address : Address
        How texels outside the source rect are handled.
    use_color_m : bool
        Whether the shader applies the color matrix set through the
        ``ColorMBody`` and ``ColorMTranslation`` uniforms.
    cache : ShaderCache | None
        The cache to use. Defaults to the process-wide cache.
    """
    cache = shader_cache if cache is None else cache
    return cache.get(filter, address, use_color_m)
