"""Command-line interface for tweenkit."""
