"""The game loop: owns the engine and the window and drives the frame hooks."""

from __future__ import annotations

import time
from typing import Any, Callable

from .engine import GraphicsEngine
from .window import Window


class FrameClock:
    """Measures the time between successive frames.

    ``source`` returns the current time in seconds; the first ``tick``
    reports zero because there is no earlier frame to measure from.
    """

    def __init__(self, source: Callable[[], float] = time.monotonic) -> None:
        self._source = source
        self._previous: float | None = None

    def tick(self) -> float:
        """Return the seconds elapsed since the previous tick."""
        now = self._source()
        elapsed = 0.0 if self._previous is None else now - self._previous
        self._previous = now
        return elapsed


class Game:
    """Base game: creates the engine and window, then runs the frame loop.

    Subclasses override ``on_create``, ``on_update`` and ``on_quit``. The
    factories used to build the engine, window and clock are class
    attributes so a subclass can choose others.
    """

    engine_factory: Callable[[], Any] = GraphicsEngine
    window_factory: Callable[[], Any] = Window
    clock_factory: Callable[[], FrameClock] = FrameClock

    def __init__(self) -> None:
        self.is_running = True
        self._owned: list[Any] = []
        cls = type(self)
        self.engine = cls.engine_factory()
        self.display = cls.window_factory()
        self.clock = cls.clock_factory()
        self.display.make_current_context()
        self.engine.set_viewport(self.display.inner_size)

    def on_create(self) -> None:
        """Called once before the first frame."""

    def on_update(self) -> None:
        """Called once per frame."""

    def on_quit(self) -> None:
        """Called once after the last frame."""

    def run(self) -> None:
        """Run the loop until the window asks to close or ``quit`` is called.

        GPU resources taken with ``_own`` are released in reverse order of
        creation, then the window is closed, whether or not a hook raised.
        """
        try:
            self.on_create()
            while self.is_running:
                if self.display.poll_events():
                    self.is_running = False
                    continue
                self.on_update()
            self.on_quit()
        finally:
            self._shutdown()

    def quit(self) -> None:
        """Stop the loop after the current frame."""
        self.is_running = False

    def _own(self, resource: Any) -> Any:
        self._owned.append(resource)
        return resource

    def _shutdown(self) -> None:
        while self._owned:
            self._owned.pop().release()
        self.display.close()