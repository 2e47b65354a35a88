"""Backend logic for a small code editor and its code assistant."""

__version__ = "0.1.0"