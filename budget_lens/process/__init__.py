# Path: budget_lens/process/__init__.py
"""
Budget Lens PROCESS layer.

Subpackages:
    - hierarchy: budget tree navigation (path resolution, store, keyboard)
    - matcher: comparison matching (impact scoring, engine, builder)
"""
