# --- FILE: stillworld/core/__init__.py
"""Simulation core (state, motion, camera, frame update) plus the game loop and entrypoint."""
