"""Warning types and match-with-warnings results for AsciiDoc parsing."""

__version__ = "0.1.0"
__all__ = ["warnings"]