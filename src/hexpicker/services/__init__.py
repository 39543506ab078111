"""Application services (not TUI-specific)."""

from hexpicker.services.color_service import ColorService

__all__ = ["ColorService"]
