"""DSP helpers, signal modules, control-input processing and peripheral models for audio boards."""

__version__ = "0.1.0"