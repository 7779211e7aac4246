from .decor import Decor, Landmark, Mote, Star, generate_decor
from .zones import ZONE_NAMES, Palette, get_palette, zone_at

__all__ = [
    "Decor",
    "Landmark",
    "Mote",
    "Star",
    "generate_decor",
    "ZONE_NAMES",
    "Palette",
    "get_palette",
    "zone_at",
]
