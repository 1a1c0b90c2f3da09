"""cvdctl — color-vision-deficiency accessibility checks for color palettes."""

__version__ = "0.1.0"
