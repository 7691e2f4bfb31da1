"""External system adapters."""

from .clipboard import ClipboardService, copy_to_clipboard

__all__ = [
    'ClipboardService',
    'copy_to_clipboard',
]
