"""
Helpers for the color matrix of the built-in shaders.

A shader generated with ``use_color_m=True`` has two uniforms, ``ColorMBody``
(a mat4) and ``ColorMTranslation`` (a vec4), that the runtime binds by name.
"""

import numpy as np

from .shader.generator import UNIFORM_COLOR_M_BODY, UNIFORM_COLOR_M_TRANSLATION


def _as_body_and_translation(body, translation):
    body = np.asarray(body, dtype=np.float32)
    translation = np.asarray(translation, dtype=np.float32)
    if body.shape != (4, 4):
        raise ValueError(f"Color matrix body must have shape (4, 4), not {body.shape}")
    if translation.shape != (4,):
        raise ValueError(
            f"Color matrix translation must have shape (4,), not {translation.shape}"
        )
    return body, translation


def color_matrix_uniforms(body, translation):
    """Get the uniform values for a color matrix, as a dict keyed by uniform name.

    The body is given in the usual (row, column) order. Kage matrices are
    column-major, while numpy arrays are row-major, so the body is flattened
    column by column.
    """
    body, translation = _as_body_and_translation(body, translation)
    return {
        UNIFORM_COLOR_M_BODY: body.flatten(order="F"),
        UNIFORM_COLOR_M_TRANSLATION: translation.copy(),
    }


def apply_color_matrix(colors, body, translation, scale=None):
    """Apply a color matrix to premultiplied colors, the same way the shader does.

    This is a reference of the post-processing step in the generated kage,
    to check its numerics on the CPU.

    params:
        colors: array-like
            Premultiplied rgba colors with shape (..., 4).
        body: array-like
            The 4x4 matrix.
        translation: array-like
            The 4-component translation.
        scale: array-like | None
            The per-draw color scale, broadcastable to ``colors``. Default ones.
    """
    body, translation = _as_body_and_translation(body, translation)
    clr = np.array(colors, dtype=np.float32)
    if clr.shape[-1:] != (4,):
        raise ValueError(f"Colors must have shape (..., 4), not {clr.shape}")

    # Un-premultiply. When alpha is 0, 1 - sign(alpha) is 1, so rgb is divided by 1.
    alpha = clr[..., 3:4]
    clr[..., :3] /= alpha + (1 - np.sign(alpha))
    # Matrix times column vector, for each color
    clr = clr @ body.T + translation
    # Premultiply
    clr[..., :3] *= clr[..., 3:4]
    # Color scale
    if scale is not None:
        clr *= np.asarray(scale, dtype=np.float32)
    # A premultiplied color cannot be brighter than its alpha
    clr[..., :3] = np.minimum(clr[..., :3], clr[..., 3:4])
    return clr
