"""Application services wiring adapters into use cases."""

from .file_manager import FileManager

__all__ = ["FileManager"]
