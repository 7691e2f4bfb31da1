"""
Observer Protocols - Capabilities a streaming worker writes to.

The worker never touches shared cells directly; it talks to a
ProgressObserver (text + progress) and a RenderSurface (redraw requests).
Any concurrency substrate (locks, queues, Qt signals) can implement them.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressObserver(Protocol):
    """Receives incremental output text and fractional progress."""

    def append_text(self, text: str) -> None:
        """Append text to the accumulated output."""
        ...

    def replace_text(self, text: str) -> None:
        """Replace the accumulated output (used for the stop sentinel)."""
        ...

    def set_progress(self, fraction: float) -> None:
        """Publish progress in [0.0, 1.0]."""
        ...


@runtime_checkable
class RenderSurface(Protocol):
    """External consumer that must be told when to redraw."""

    def request_redraw(self) -> None:
        """Ask the surface to repaint."""
        ...
