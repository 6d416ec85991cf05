"""Game logic for a small side-scrolling platformer: geometry, animation, scripts and collisions."""

__version__ = "0.1.0"