# stillworld/utils/settings.py
"""
Centralized settings and constants for Stillworld.

All motion constants are expressed per simulated frame (the simulation runs at
a fixed 1/FPS step), so tuning here does not depend on the display refresh rate.
"""
import math

# --- World / Viewport ---
WORLD_WIDTH = 2400
WORLD_HEIGHT = 1600

VIEW_WIDTH = 800
VIEW_HEIGHT = 480

FPS = 60
WINDOW_TITLE = "Stillworld"

# Calm starting location
START_X = 300
START_Y = 300

# Stable layout: same landmarks/stars/noise every run
WORLD_SEED = 5

# --- Player motion (per frame) ---
PLAYER_SIZE = 24
MOVE_ACCEL = 0.38
MOVE_FRICTION = 0.9        # higher = more glide (0.88-0.94 good range)
MOVE_MAX_SPEED = 3.0
MOVE_SLOW_MULT = 0.5       # max speed multiplier while slow-walking
MOVE_SLOW_ACCEL_MULT = 0.65
MOVE_STOP_EPS = 0.05       # below this, snap a velocity component to 0
EDGE_DAMP = 0.2            # velocity multiplier on an axis that hit the world edge

# --- Camera ---
CAMERA_SMOOTH = 0.09           # calm follow smoothing (0.06-0.12 floaty)
CAMERA_SMOOTH_REDUCED = 0.22   # reduced motion easing (steadier, less float)
CAMERA_OVERSCROLL_PAD = 60     # slight overscroll allowed beyond world edges
CAMERA_CLAMP_SOFT = 0.08       # pull from overscroll back toward the world edge

# --- Idle auto-drift ---
DRIFT_AMOUNT = 18.0        # pixels (6-25 subtle)
DRIFT_SPEED = 0.0022       # noise time per frame
DRIFT_FADE_IN = 0.02
DRIFT_FADE_OUT = 0.06
DRIFT_MIN_FADE = 0.001

# --- Breathing zoom ---
BREATH_AMP = 0.006                     # 0.003-0.010 safe
BREATH_RATE = (math.pi * 2) / (60 * 12)  # ~12s per cycle at 60fps

# --- Decor ---
LANDMARK_COUNT = 52
MOTE_COUNT = 90
STAR_COUNT = 140
LANDMARK_MARGIN = 80

# --- Colors ---
BG_COLOR = (22, 22, 22)
BG_COLOR_HIGH_CONTRAST = (10, 10, 10)

# --- HUD ---
HUD_PADDING = 10
HUD_PANEL_SIZE = (780, 86)
HUD_PANEL_RADIUS = 10
HUD_FONT_NAME = "sans-serif"
HUD_FONT_SIZE = 14
HUD_LINE_OFFSETS = (22, 42, 62)
HUD_PANEL_COLOR = (255, 255, 255, 140)
HUD_PANEL_COLOR_HIGH_CONTRAST = (0, 0, 0, 180)
HUD_TEXT_COLOR = (20, 20, 20)
HUD_TEXT_COLOR_HIGH_CONTRAST = (255, 255, 255)

# ---------------------------------------------------------------------------
# Key bindings (fixed table; names resolve via pygame.key.key_code)
# ---------------------------------------------------------------------------
KEY_BINDINGS = {
    # Movement (supports WASD and arrows)
    "MOVE_UP":    ["w", "up"],
    "MOVE_DOWN":  ["s", "down"],
    "MOVE_LEFT":  ["a", "left"],
    "MOVE_RIGHT": ["d", "right"],
    "SLOW_WALK":  ["left shift", "right shift"],

    # Comfort toggles
    "TOGGLE_REDUCED_MOTION": ["m"],
    "TOGGLE_HIGH_CONTRAST":  ["h"],
    "RESET":                 ["r"],

    # System
    "QUIT": ["escape"],
}
