"""Test suite for tweenkit.

Test Structure:
- unit/: Unit tests for individual components
  - curves/: Easing formulas, dispatch and baking
  - transitions/: Effects and the show/hide driver
  - config/: Config models and loaders
  - utils/: Utility function tests
  - cli/: Command-line entry point
- conftest.py: Shared fixtures
"""
