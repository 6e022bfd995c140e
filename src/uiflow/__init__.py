"""uiflow - end-to-end UI suite for signup and account flows."""

__version__ = "0.1.0"
