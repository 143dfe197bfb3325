"""UI Board — button reference, font preview, color manager and notes in one terminal window."""

__version__ = "0.1.0"
