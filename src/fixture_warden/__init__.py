"""Fixture Warden - interactive maintenance of diagnostic regression fixtures."""

__version__ = "0.1.0"
