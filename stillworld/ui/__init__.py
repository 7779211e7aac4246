from .hud import HUD, hud_lines
from .renderer import Renderer

__all__ = ["HUD", "hud_lines", "Renderer"]
