"""Forced-command SSH front end that identifies the caller and reports the virtual machine action requested."""

__version__ = "0.1.0"