# --- FILE: stillworld/__init__.py
"""
Top-level package for Stillworld, a calm explorable camera world.

The per-frame update (``core.motion``, ``core.camera``, ``core.simulation``)
never imports pygame, so it can be driven and tested without a display.
"""
__version__ = "0.1.0"

__all__ = ["core", "ui", "utils", "world"]
