"""Version information for the OSC message builder."""

__version__ = "1.0.0"
