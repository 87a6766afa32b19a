"""Observer protocol definitions for color picker events."""

from typing import Protocol, runtime_checkable

from .events import ColorEvent


@runtime_checkable
class ColorObserver(Protocol):
    """
    Observer that receives color picker events.

    This protocol allows loose coupling between a ColorPickerService and
    whatever renders it. Any object with an ``on_color_event`` method can
    observe the picker.
    """

    def on_color_event(self, event: ColorEvent, **kwargs) -> None:
        """
        Handle color picker events.

        Args:
            event: The type of color event
            **kwargs: Event-specific data:
                - COLOR_CHANGED: 'state' (ColorState), 'color' (Color)
                - HEX_REJECTED: 'text' (rejected input), 'hex_text' (restored text)
                - MODE_CHANGED: 'mode' (ColorMode)

        Threading:
            Called from the thread that made the change, after the new
            state is published. Events arrive in publish order. The
            callback may call back into the service, but must not block
            on another thread that does.
        """
        ...
