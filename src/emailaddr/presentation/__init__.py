"""Presentation layer: user-facing diagnostics."""

from emailaddr.presentation.diagnostics import Diagnostic, build_diagnostic

__all__ = ["Diagnostic", "build_diagnostic"]
