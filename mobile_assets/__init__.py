"""Generate mobile app icon and splash-screen assets from two master images."""

__version__ = "0.1.0"
