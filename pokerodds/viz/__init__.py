"""Terminal display of odds results."""

from .display import OddsDisplay, probability_style

__all__ = ["OddsDisplay", "probability_style"]
