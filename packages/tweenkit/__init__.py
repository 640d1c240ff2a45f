"""tweenkit - Easing curves and UI transitions."""

__version__ = "0.1.0"
