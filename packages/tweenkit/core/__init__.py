"""Core easing, transition and configuration modules."""
