"""Paws diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from pawslib.diagnostics.diagnostic import Diagnostic, format_error
from pawslib.diagnostics.position import Position

__all__ = ["Position", "Diagnostic", "format_error"]
