"""
The enums used in builtinshader. The enums are all available from the root ``builtinshader`` namespace.

.. currentmodule:: builtinshader.utils.enums

.. autosummary::
    :toctree: utils/enums

    Filter
    Address

"""

from wgpu.utils import BaseEnum


__all__ = [
    "Filter",
    "Address",
    "FILTER_COUNT",
    "ADDRESS_COUNT",
]


class Enum(BaseEnum):
    """Enum base class for builtinshader."""


class Filter(Enum):
    """The Filter enum specifies how the source image is sampled.

    The order of the fields is significant: it is the order in which
    ``append_shader_sources()`` walks the filters.
    """

    nearest = None  #: Point sampling, a single texel per fragment.
    linear = None  #: Bilinear interpolation of the four neighbouring texels.


class Address(Enum):
    """The Address enum specifies how texels outside the source rect are sampled.

    The order of the fields is significant: it is the order in which
    ``append_shader_sources()`` walks the address modes.
    """

    unsafe = None  #: No bounds handling. The caller guarantees in-bounds access.
    clamp_to_zero = None  #: Texels outside the source rect are transparent (zero).
    repeat = None  #: Coordinates are wrapped into the source rect before sampling.


FILTER_COUNT = len(list(Filter))
ADDRESS_COUNT = len(list(Address))

# NOTE: Don't forget to add new enums to the toctree and __all__
