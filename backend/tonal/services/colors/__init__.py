"""
Tonal Colors Module

Provides color model conversions, channel manipulation, hue-wheel harmonies
and the wardrobe palette synthesizer.
"""

__version__ = "1.0.0"
