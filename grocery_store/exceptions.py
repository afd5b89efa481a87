"""
Exceptions raised by the grocery store package
"""
from pathlib import Path
from typing import Optional, Union


class GroceryStoreError(Exception):
    """Base exception for grocery store errors"""
    pass


class InvalidArgumentError(GroceryStoreError, ValueError):
    """Invalid argument passed to a domain operation"""
    pass


class LoadError(GroceryStoreError):
    """Source data could not be parsed into customers and orders"""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None, line: Optional[int] = None):
        self.path = str(path) if path is not None else None
        self.line = line
        location = ""
        if self.path is not None:
            location = f"{self.path}:{line}: " if line is not None else f"{self.path}: "
        super().__init__(f"{location}{message}")
