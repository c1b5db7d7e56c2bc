"""NomadFlow: savings runway calculator for relocating travelers."""

__version__ = "0.1.0"
