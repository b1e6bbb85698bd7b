# Path: budget_lens/core/__init__.py
"""
Budget Lens Core Package

Cross-cutting utilities for the Budget Lens system.

Submodules:
    - logger: layered (input / process / output) logging
"""
