# --- FILE: stillworld/utils/__init__.py
"""Utilities package marker (settings, logging, pygame bootstrap, keymap)."""

__all__ = []
