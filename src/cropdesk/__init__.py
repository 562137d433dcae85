"""Interactive crop-region selection for images shown at any display scale."""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
