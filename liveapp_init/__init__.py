"""liveapp-init: scaffold a new Quip Live App project from a bundled template."""

__version__ = "0.1.0"
