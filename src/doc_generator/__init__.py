"""Doc comment generation for Apex and JavaScript/TypeScript sources."""

__version__ = "0.1.0"
