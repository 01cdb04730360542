"""Make SVG image directories into a single Xcode asset catalog."""

__version__ = "0.1.0"
