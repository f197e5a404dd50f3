"""
This directory contains the kage snippets that the built-in shaders are
assembled from. They are loaded with ``load_kage()``.
"""
