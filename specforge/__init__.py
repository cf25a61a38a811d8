"""SpecForge: turn a product goal into an editable project specification."""

__version__ = "0.1.0"
