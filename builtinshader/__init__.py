"""Kage sources for the built-in shaders of a 2D renderer."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info
from . import utils

from .shader import (
    ShaderOptions,
    ShaderCache,
    shader_cache,
    generate_shader,
    shader_source,
    append_shader_sources,
    register_kage_loader,
    load_kage,
    SCREEN_SHADER_SOURCE,
    CLEAR_SHADER_SOURCE,
    UNIFORM_COLOR_M_BODY,
    UNIFORM_COLOR_M_TRANSLATION,
)
from .colorm import color_matrix_uniforms, apply_color_matrix
from .utils import enums, logger
from .utils.enums import *
