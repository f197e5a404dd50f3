"""
Generation of the parameterized built-in shaders.

A shader is assembled from fixed kage snippets. Which snippets are used is
decided by explicit branches on the options, so the produced text only ever
consists of the snippets in the ``builtinshader.kage`` package.
"""

from typing import NamedTuple

from ..utils.enums import Filter, Address
from .templating import load_kage


UNIFORM_COLOR_M_BODY = "ColorMBody"
UNIFORM_COLOR_M_TRANSLATION = "ColorMTranslation"


class ShaderOptions(NamedTuple):
    """The options that select a built-in shader variant."""

    filter: str
    address: str
    use_color_m: bool


def check_options(options):
    """Raise ValueError if the given options are outside their enums."""
    if options.filter not in Filter:
        raise ValueError(f"Unexpected shader filter: {options.filter!r}")
    if options.address not in Address:
        raise ValueError(f"Unexpected shader address: {options.address!r}")
    if not isinstance(options.use_color_m, bool):
        raise ValueError(
            f"use_color_m must be a bool, not {options.use_color_m!r}"
        )


def generate_shader(options):
    """Generate the kage source for the given ShaderOptions.

    The result is deterministic: the same options always produce the same bytes.
    """
    check_options(options)

    parts = [load_kage("preamble.kage")]

    if options.use_color_m:
        parts.append(load_kage("colorm_uniforms.kage"))
    if options.address == Address.repeat:
        parts.append(load_kage("repeat_helper.kage"))

    parts.append(load_kage("fragment_begin.kage"))

    if options.filter == Filter.nearest:
        if options.address == Address.unsafe:
            parts.append(load_kage("nearest_unsafe.kage"))
        elif options.address == Address.clamp_to_zero:
            parts.append(load_kage("nearest_clamp_to_zero.kage"))
        elif options.address == Address.repeat:
            parts.append(load_kage("nearest_repeat.kage"))
    elif options.filter == Filter.linear:
        parts.append(load_kage("linear_corners.kage"))
        if options.address == Address.unsafe:
            parts.append(load_kage("linear_unsafe.kage"))
        elif options.address == Address.clamp_to_zero:
            parts.append(load_kage("linear_clamp_to_zero.kage"))
        elif options.address == Address.repeat:
            parts.append(load_kage("linear_repeat.kage"))
        parts.append(load_kage("linear_blend.kage"))

    if options.use_color_m:
        parts.append(load_kage("colorm_apply.kage"))
    else:
        parts.append(load_kage("color_scale.kage"))

    parts.append(load_kage("fragment_end.kage"))

    return "".join(parts).encode()
