"""
Base class for simulation engines.

This module provides the abstract base class that defines the common
interface and shared functionality of all engines:

- Event system (start/tick/end events)
- Validated configuration via properties
- Generation loop producing one immutable snapshot per generation

Subclasses only implement ``_step()``, which turns one snapshot into the next.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from .physics import G
from .types import Event, EventType, Universe
from .validation import (
    ValidationError,
    validate_generations,
    validate_time_step,
    validate_universe,
)


class BaseSimulation(ABC):
    """
    Abstract base class for all simulation engines.

    Running an engine for N generations produces N + 1 snapshots: the
    first is a copy of the initial universe, and each following one is
    computed from its predecessor. Snapshots are independent copies and
    are never modified after they are produced.

    Example:
        sim = SomeSimulation(
            universe=universe,
            generations=100,
            time_step=1.0,
        )
        sim.run()

        for universe in sim.timepoints:
            print(len(universe.bodies))
    """

    def __init__(
        self,
        *,
        universe: Optional[Universe] = None,
        generations: int = 1,
        time_step: float = 1.0,
        gravitational_constant: float = G,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize simulation with configuration.

        Args:
            universe: Initial snapshot (copied; the caller's object is never modified)
            generations: Number of generations to compute
            time_step: Integration time step
            gravitational_constant: G used for every force evaluation
            on_start: Callback for start event
            on_tick: Callback for tick event (once per generation)
            on_end: Callback for end event
        """
        self._universe: Optional[Universe] = None
        self._generations: int = 1
        self._time_step: float = 1.0
        self._gravitational_constant: float = float(gravitational_constant)
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}
        self._timepoints: list[Universe] = []
        self._running: bool = False

        if universe is not None:
            self.universe = universe
        self.generations = generations
        self.time_step = time_step

        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def universe(self) -> Optional[Universe]:
        """Get the initial universe."""
        return self._universe

    @universe.setter
    def universe(self, value: Universe) -> None:
        """
        Set the initial universe.

        Raises:
            InvalidUniverseError: If the width or any body mass is not positive.
        """
        self._universe = validate_universe(value).copy()

    @property
    def generations(self) -> int:
        """Get number of generations to compute."""
        return self._generations

    @generations.setter
    def generations(self, value: int) -> None:
        self._generations = validate_generations(value)

    @property
    def time_step(self) -> float:
        """Get integration time step."""
        return self._time_step

    @time_step.setter
    def time_step(self, value: float) -> None:
        self._time_step = validate_time_step(value)

    @property
    def gravitational_constant(self) -> float:
        return self._gravitational_constant

    @gravitational_constant.setter
    def gravitational_constant(self, value: float) -> None:
        self._gravitational_constant = float(value)

    @property
    def timepoints(self) -> list[Universe]:
        """Snapshots computed so far (generation 0 first)."""
        return self._timepoints

    @property
    def generation(self) -> int:
        """Index of the most recent snapshot, or -1 before run()."""
        return len(self._timepoints) - 1

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a simulation event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Trigger an event, calling the registered callback."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Validate current configuration.

        Called automatically by run() but can be called early for fail-fast
        behavior.

        Raises:
            ValidationError: If no universe has been set.
        """
        if self._universe is None:
            raise ValidationError("No initial universe set")
        return self

    def run(self) -> Self:
        """
        Run all generations.

        Fires a start event, one tick event per generation, then an end event.

        Returns:
            self (for chaining)
        """
        self.validate()
        assert self._universe is not None

        self._timepoints = [self._universe.copy()]
        self._running = True
        self.trigger({"type": EventType.start, "generation": 0, "universe": self._timepoints[0]})

        self.kick()

        self._running = False
        self.trigger(
            {"type": EventType.end, "generation": self.generation, "universe": self._timepoints[-1]}
        )
        return self

    def kick(self) -> None:
        """Run tick() repeatedly until all generations are done or stopped."""
        while self._running:
            if self.tick():
                break

    def tick(self) -> bool:
        """
        Compute the next generation.

        Returns:
            True if all generations are done, False if more remain.
        """
        if not self._timepoints:
            self.validate()
            assert self._universe is not None
            self._timepoints = [self._universe.copy()]

        if self.generation >= self._generations:
            return True

        new_universe = self._step(self._timepoints[-1])
        self._timepoints.append(new_universe)
        self.trigger(
            {"type": EventType.tick, "generation": self.generation, "universe": new_universe}
        )
        return self.generation >= self._generations

    def stop(self) -> Self:
        """Stop the generation loop after the current tick."""
        self._running = False
        return self

    @abstractmethod
    def _step(self, universe: Universe) -> Universe:
        """
        Compute the snapshot following ``universe``.

        Implementations must return a new Universe and leave ``universe``
        unchanged.
        """
        pass


__all__ = ["BaseSimulation"]
