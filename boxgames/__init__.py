"""Two small box games, a Sokoban level and a falling-box dodge game, with pygame front ends."""

__version__ = "0.1.0"