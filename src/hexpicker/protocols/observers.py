"""Observer and host protocol definitions.

- PickerHost: The GUI host a picker widget signals after committing a color
- ColorObserver: React to color changes
- AppObserver: React to theme/output changes
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .events import AppEvent, ColorEvent

if TYPE_CHECKING:
    from hexpicker.models import PickerData


@runtime_checkable
class PickerHost(Protocol):
    """
    Outbound signals from a picker widget to whatever hosts it.

    Both signals are idempotent and carry no data, so a host may coalesce
    any number of them into a single redraw or refresh.
    """

    def request_redraw(self) -> None:
        """Ask the host to repaint the widget."""
        ...

    def request_refresh(self) -> None:
        """Ask the host to recompute views that depend on the color (e.g. copyable text)."""
        ...


@runtime_checkable
class ColorObserver(Protocol):
    """
    Observer that receives color change events.

    Threading:
        Called from the UI event loop. Implementations should be
        lightweight and non-blocking.
    """

    def on_color_event(self, event: ColorEvent, data: "PickerData") -> None:
        """
        Handle a color change.

        Args:
            event: What caused the change
            data: The data record after the change
        """
        ...


@runtime_checkable
class AppObserver(Protocol):
    """Observer that receives presentation events (theme, output format)."""

    def on_app_event(self, event: AppEvent, data: "PickerData") -> None:
        """
        Handle a presentation change.

        Args:
            event: The type of application event
            data: The data record after the change
        """
        ...
