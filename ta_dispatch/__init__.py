"""
TA Dispatch - Technical Indicator Dispatch Core

Indicators are written once against a static configuration/instance pair and
can then be driven either directly or through a type-erased dynamic layer, so a
host can keep a mixed collection of indicator kinds built from a text-driven
strategy description.
"""

__version__ = "0.1.0"
__author__ = "TA Dispatch Team"
