"""Arcade engine pairing a game and a display through event subjects, with a Pacman game and a pygame display."""

__version__ = "0.1.0"