"""Game state, console input and text rendering of battle panels, the navigation box, sprites and dialogue."""

__version__ = "0.1.0"

__all__ = [
    "battle",
    "console",
    "constants",
    "dialogue",
    "models",
    "nav",
    "printer",
    "sprites",
]