"""Test suite for the emailaddr package.

Test structure:
- unit/: Unit tests, one module per component, no external services
- integration/: Real structlog output and container wiring from settings
"""
