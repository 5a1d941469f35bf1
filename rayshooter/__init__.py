"""Software raycasting renderer, texture sampling, animation, input and HUD layout for a grid-based shooter."""

__version__ = "0.1.0"