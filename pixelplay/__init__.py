"""Frame-stepped arcade games (tanks, invaders, a space shooter), lumberjack
game rules and a dialogue-script director."""

__version__ = "1.0.0"