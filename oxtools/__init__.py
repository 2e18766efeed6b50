"""Development workflow plugins for building, testing, scaffolding and migrating Go web applications."""

__version__ = "0.1.0"