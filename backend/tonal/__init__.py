"""
Tonal

Wardrobe palette engine: color model conversions, harmony generation and a
rule-based synthesizer producing five three-color outfit combinations.
"""

__version__ = "1.0.0"
