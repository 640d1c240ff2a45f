"""Show/hide transition driver.

TransitionDriver owns a visibility value and moves it toward 1 (show) or
0 (hide) over TransitionSettings.total_time. It never reads a clock or
sleeps: the caller passes the current time to every call and samples the
resolved frame once per tick.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
import logging
from typing import Literal

from tweenkit.core.curves.easing import normalized_progress
from tweenkit.core.transitions.effects import resolve_frame
from tweenkit.core.transitions.models import TransitionFrame, TransitionSettings
from tweenkit.core.utils.math import clamp01, lerp

logger = logging.getLogger(__name__)

TransitionCallback = Callable[[], None]
TransitionEvent = Literal["shown", "hidden"]

# Progress of a show after which input is accepted again
INPUT_UNBLOCK_PROGRESS = 0.75


class TransitionPhase(str, Enum):
    """Current activity of a driver."""

    IDLE = "idle"
    SHOWING = "showing"
    HIDING = "hiding"


class TransitionDriver:
    """Drives a visibility value through show/hide transitions.

    Attributes:
        settings: Timing, behaviour and effects.
        size: Target (width, height) used by move effects.
        value: Current visibility in [0, 1].
        active: Whether the target is active. Only changes when
            settings.auto_activate is set.
        blocks_input: Whether the target accepts input. Only changes when
            settings.auto_block_input is set.

    Example:
        >>> driver = TransitionDriver(TransitionSettings(initial_value=0.0))
        >>> driver.show(now=0.0)
        >>> driver.update(now=0.3).visibility
        1.0
    """

    def __init__(
        self,
        settings: TransitionSettings | None = None,
        size: Sequence[float] = (0.0, 0.0),
    ) -> None:
        self.settings = settings or TransitionSettings()
        self.size = (float(size[0]), float(size[1]))
        self.value = self.settings.initial_value

        shown = self.value > 0
        self.active = shown if self.settings.auto_activate else True
        self.blocks_input = shown if self.settings.auto_block_input else True

        self._phase = TransitionPhase.IDLE
        self._phase_begin = 0.0
        self._phase_start_value = self.value
        self._on_complete: TransitionCallback | None = None
        self._listeners: dict[str, list[TransitionCallback]] = {"shown": [], "hidden": []}

    @property
    def phase(self) -> TransitionPhase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase != TransitionPhase.IDLE

    def add_listener(self, event: TransitionEvent, callback: TransitionCallback) -> None:
        """Register a callback fired every time the driver is fully shown/hidden."""
        if event not in self._listeners:
            raise ValueError(f"Unknown transition event: {event}")
        self._listeners[event].append(callback)

    def frame(self) -> TransitionFrame:
        """Resolve the effects at the current value without advancing."""
        return resolve_frame(self.settings.effects, self.value, self.size)

    def show(self, now: float, on_complete: TransitionCallback | None = None) -> None:
        """Start showing after settings.delay_before_show.

        Cancels a running hide. Does nothing if already shown or showing.
        """
        if self._phase == TransitionPhase.HIDING:
            self._stop()

        if self.value >= 1 or self._phase == TransitionPhase.SHOWING:
            return

        if self.settings.auto_activate:
            self.active = True
        if self.settings.auto_block_input:
            # Input stays blocked until most of the show has played
            self.blocks_input = False

        self._begin(TransitionPhase.SHOWING, now + self.settings.delay_before_show, on_complete)

    def hide(self, now: float, on_complete: TransitionCallback | None = None) -> None:
        """Start hiding after settings.delay_before_hide.

        Cancels a running show. Does nothing if already hidden or hiding.
        """
        if self._phase == TransitionPhase.SHOWING:
            self._stop()

        if self.value <= 0 or self._phase == TransitionPhase.HIDING:
            return

        if self.settings.auto_block_input:
            self.blocks_input = False

        self._begin(TransitionPhase.HIDING, now + self.settings.delay_before_hide, on_complete)

    def update(self, now: float) -> TransitionFrame:
        """Advance a running transition to time now and return the frame."""
        if self._phase == TransitionPhase.IDLE or now < self._phase_begin:
            return self.frame()

        progress = normalized_progress(now - self._phase_begin, self.settings.total_time)
        start = self._phase_start_value

        if self._phase == TransitionPhase.SHOWING:
            self.value = clamp01(lerp(start, 1.0, progress))
            if self.settings.auto_block_input and progress >= INPUT_UNBLOCK_PROGRESS:
                self.blocks_input = True
            if progress >= 1:
                self._finish("shown")
        else:
            self.value = clamp01(lerp(start, 0.0, progress))
            if progress >= 1:
                if self.settings.auto_activate:
                    self.active = False
                self._finish("hidden")

        return self.frame()

    def set_value(self, value: float) -> None:
        """Jump to a visibility value, cancelling any running transition.

        Reaching 1 (or interrupting a show) fires the shown callbacks;
        reaching 0 (or interrupting a hide) fires the hidden callbacks.
        """
        value = clamp01(value)
        if value == self.value:
            return

        if value == 1 or self._phase == TransitionPhase.SHOWING:
            if self.settings.auto_activate:
                self.active = True
            if self.settings.auto_block_input:
                self.blocks_input = True
            self._fire("shown")
        elif value == 0 or self._phase == TransitionPhase.HIDING:
            if self.settings.auto_activate:
                self.active = False
            if self.settings.auto_block_input:
                self.blocks_input = False
            self._fire("hidden")

        self._stop()
        self.value = value

    def _begin(
        self,
        phase: TransitionPhase,
        begin: float,
        on_complete: TransitionCallback | None,
    ) -> None:
        self._phase = phase
        self._phase_begin = begin
        self._phase_start_value = self.value
        self._on_complete = on_complete
        logger.debug(f"Transition {phase.value} from {self.value:.3f} at t={begin:.3f}")

    def _stop(self) -> None:
        if self._phase != TransitionPhase.IDLE:
            logger.debug(f"Transition {self._phase.value} cancelled at {self.value:.3f}")
        self._phase = TransitionPhase.IDLE
        self._on_complete = None

    def _finish(self, event: TransitionEvent) -> None:
        self._phase = TransitionPhase.IDLE
        logger.debug(f"Transition complete: {event}")
        self._fire(event)

    def _fire(self, event: TransitionEvent) -> None:
        callback = self._on_complete
        self._on_complete = None
        for listener in self._listeners[event]:
            listener()
        if callback is not None:
            callback()
