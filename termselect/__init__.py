"""Interactive terminal chooser that prints the items the user marks, with text and byte helpers."""

__version__ = "0.1.0"