"""Color picker service: the state logic behind a color picker control."""

import logging
import math
from threading import Lock, RLock

from colorstate.exceptions import HexParseError, PickerDisposedError
from colorstate.model_manager import ObserverManager
from colorstate.models import Color, ColorBounds, ColorMode, ColorState, PickerConfig
from colorstate.protocols import ColorEvent, ColorObserver

logger = logging.getLogger(__name__)

# Numeric input channels: field name on ColorState and the divisor that
# turns the displayed number into the stored fraction.
_CHANNELS: dict[str, tuple[str, float]] = {
    "red": ("red", 255.0),
    "green": ("green", 255.0),
    "blue": ("blue", 255.0),
    "hue": ("hue", 1.0),
    "saturation": ("saturation", 100.0),
    "value": ("value", 100.0),
    "opacity": ("alpha", 100.0),
}


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class ColorPickerService:
    """
    Owns the current color of a picker and every change made to it.

    A renderer feeds user interactions in (spectrum taps, slider drags,
    numeric input, hex text) and observes the results. The service never
    mutates a ColorState: each change builds a new one, clamps it to the
    configured bounds and publishes it.

    Event-Driven Architecture:
        Published changes emit ColorEvent.COLOR_CHANGED; rejected hex
        input emits ColorEvent.HEX_REJECTED; mode switches emit
        ColorEvent.MODE_CHANGED.

    Threading:
        Concurrent input sources resolve last-writer-wins. A publish and its
        notification happen under one reentrant publish lock, so observers
        see changes in the order they were published and the last event
        always matches ``state``. Observers may call back into the service
        from their callback, but must not wait on another thread that
        does. ``dispose`` waits for an in-flight notification to finish.

    Example:
        ```python
        service = ColorPickerService(Color(r=255, g=0, b=0), PickerConfig())
        service.edit(value=0.5)
        service.submit_hex("#zzzzzz")   # False, hex_text reverts to '#FF800000'
        ```
    """

    def __init__(self, color: Color | None = None, config: PickerConfig | None = None):
        """
        Initialize the picker service.

        Args:
            color: Initial color (defaults to opaque black)
            config: Picker configuration (defaults to PickerConfig())
        """
        self.config = config or PickerConfig()
        self._lock = Lock()
        # Held across publish + notify; reentrant so callbacks can edit
        self._publish_lock = RLock()
        self._disposed = False
        self._color_mode = self.config.color_mode

        self._state = self.config.bounds.clamp(ColorState.from_color(color or Color.off()))
        self._hex_text = self._state.to_hex_string(self.alpha_enabled)

        self._observers = ObserverManager[ColorObserver](observer_type_name="color")
        logger.info(f"ColorPickerService initialized with {self._hex_text}")

    # =================================================================
    # Accessors
    # =================================================================

    @property
    def state(self) -> ColorState:
        """The current (clamped) color state."""
        with self._lock:
            return self._state

    @property
    def color(self) -> Color:
        """The current color as 8-bit RGBA."""
        return self.state.to_color()

    @property
    def hex_text(self) -> str:
        """Text currently shown in the hex input."""
        with self._lock:
            return self._hex_text

    @property
    def bounds(self) -> ColorBounds:
        return self.config.bounds

    @property
    def alpha_enabled(self) -> bool:
        return self.config.alpha_enabled

    @property
    def color_mode(self) -> ColorMode:
        return self._color_mode

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: ColorObserver) -> None:
        """
        Register an observer to receive color events.

        Args:
            observer: Object implementing ColorObserver protocol

        Raises:
            PickerDisposedError: If the service has been disposed
        """
        with self._publish_lock:
            self._check_alive("register an observer")
            self._observers.register(observer)

    def unregister_observer(self, observer: ColorObserver) -> None:
        """
        Unregister an observer.

        Args:
            observer: Previously registered observer
        """
        self._observers.unregister(observer)

    def _notify_observers(self, event: ColorEvent, **kwargs) -> None:
        self._observers.notify("on_color_event", event, **kwargs)

    # =================================================================
    # Changes
    # =================================================================

    def _check_alive(self, operation: str) -> None:
        with self._lock:
            disposed = self._disposed
        if disposed:
            raise PickerDisposedError(operation)

    def apply(self, new_state: ColorState) -> ColorState:
        """
        Clamp a new state to the bounds and publish it.

        Args:
            new_state: Candidate state from any input source

        Returns:
            The state actually published (after clamping)

        Raises:
            PickerDisposedError: If the service has been disposed
        """
        clamped = self.bounds.clamp(new_state)

        with self._publish_lock:
            self._check_alive("apply a color")
            with self._lock:
                self._state = clamped
                self._hex_text = clamped.to_hex_string(self.alpha_enabled)

            logger.debug(f"Published color {clamped.to_hex_string(True)}")
            self._notify_observers(
                ColorEvent.COLOR_CHANGED, state=clamped, color=clamped.to_color()
            )
        return clamped

    def edit(self, **fields: float) -> ColorState:
        """
        Replace some fields of the current state and publish the result.

        Accepts the keyword arguments of ColorState.copy_with.

        Example:
            ```python
            service.edit(hue=200)
            service.edit(alpha=0.5)
            ```
        """
        with self._publish_lock:
            self._check_alive("edit the color")
            return self.apply(self.state.copy_with(**fields))

    def set_channel(self, channel: str, number: float) -> ColorState:
        """
        Apply a number typed into a channel input.

        Args:
            channel: One of red, green, blue (0-255), hue (degrees),
                saturation, value, opacity (percent)
            number: The displayed number

        Raises:
            ValueError: If the channel is unknown or the number is not finite
        """
        key = channel.lower()
        if key not in _CHANNELS:
            raise ValueError(f"Unknown channel '{channel}'. Valid: {', '.join(_CHANNELS)}")
        if math.isnan(number) or math.isinf(number):
            raise ValueError(f"Channel value must be finite, got {number}")

        field, divisor = _CHANNELS[key]
        return self.edit(**{field: number / divisor})

    def set_color(self, color: Color) -> ColorState:
        """Replace the color from outside (e.g. the owner passed a new one)."""
        self._check_alive("set the color")
        return self.apply(
            self.state.copy_with(
                red=color.r / 255,
                green=color.g / 255,
                blue=color.b / 255,
                alpha=color.a / 255,
            )
        )

    def set_hex_text(self, text: str) -> None:
        """Stage text typed into the hex input without applying it."""
        self._check_alive("stage hex text")
        with self._lock:
            self._hex_text = text

    def submit_hex(self, text: str | None = None) -> bool:
        """
        Apply hex input.

        The text must be 7 characters ('#RRGGBB'), or 9 ('#AARRGGBB') when
        alpha is enabled. On any failure the state is left unchanged, the
        hex text reverts to the current color and HEX_REJECTED is emitted.

        Args:
            text: Hex text to apply (defaults to the staged hex text)

        Returns:
            True if the color was applied, False if the input was rejected
        """
        self._check_alive("submit hex")

        if text is None:
            text = self.hex_text

        valid_lengths = (7, 9) if self.alpha_enabled else (7,)
        if len(text) not in valid_lengths:
            logger.info(f"Rejected hex input {text!r}: length {len(text)} not in {valid_lengths}")
            self._revert_hex(text)
            return False

        try:
            new_state = self.state.with_hex(text)
        except HexParseError as e:
            logger.warning(f"Rejected hex input: {e.technical_message}")
            self._revert_hex(text)
            return False

        self.apply(new_state)
        return True

    def _revert_hex(self, rejected: str) -> None:
        with self._publish_lock:
            self._check_alive("submit hex")
            with self._lock:
                self._hex_text = self._state.to_hex_string(self.alpha_enabled)
                restored = self._hex_text
            self._notify_observers(ColorEvent.HEX_REJECTED, text=rejected, hex_text=restored)

    def set_color_mode(self, mode: ColorMode | str) -> None:
        """Switch the numeric inputs between RGB and HSV."""
        mode = ColorMode(mode)

        with self._publish_lock:
            self._check_alive("change color mode")
            if mode == self._color_mode:
                return
            self._color_mode = mode
            logger.debug(f"Color mode changed to {mode.value}")
            self._notify_observers(ColorEvent.MODE_CHANGED, mode=mode)

    # =================================================================
    # Display helpers
    # =================================================================

    def channel_values(self) -> dict[str, int]:
        """
        Numbers shown in the channel inputs for the current mode.

        RGB mode shows 0-255 channels; HSV mode shows hue in degrees and
        saturation/value in percent. Opacity (percent) is added when alpha
        is enabled.
        """
        state = self.state
        if self._color_mode == ColorMode.RGB:
            values = {name: _round_half_up(getattr(state, name) * 255) for name in ("red", "green", "blue")}
        else:
            values = {
                "hue": _round_half_up(state.hue),
                "saturation": _round_half_up(state.saturation * 100),
                "value": _round_half_up(state.value * 100),
            }

        if self.alpha_enabled:
            values["opacity"] = _round_half_up(state.alpha * 100)
        return values

    def value_label(self) -> str:
        """Label for the value slider, e.g. '50% (Maroon)'."""
        state = self.state
        label = f"{_round_half_up(state.value * 100)}%"
        name = state.guess_color_name()
        if name:
            label += f" ({name})"
        return label

    # =================================================================
    # Lifecycle
    # =================================================================

    def dispose(self) -> None:
        """Release observers. Safe to call more than once."""
        with self._publish_lock:
            with self._lock:
                if self._disposed:
                    logger.debug("ColorPickerService already disposed")
                    return
                self._disposed = True
                state = self._state
            self._observers.clear()

        state.dispose()
        logger.info("ColorPickerService disposed")
