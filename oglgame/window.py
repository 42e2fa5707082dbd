"""The game window and its OpenGL 4.6 core rendering context."""

from __future__ import annotations

from typing import Any

from .geometry import Rect


class Window:
    """A fixed-size window with an OpenGL core-profile context.

    Closing the window does not destroy it; it records a quit request that
    ``poll_events`` reports, and the owner then calls ``close``.
    """

    WIDTH = 1024
    HEIGHT = 768
    TITLE = "OGL3D | OpenGL 3D Game"
    GL_VERSION = (4, 6)

    def __init__(self) -> None:
        self._closed = False
        self._quit_requested = False
        self._native = self._create_native()
        self._native.push_handlers(on_close=self._handle_close)

    def _create_native(self) -> Any:
        import pyglet

        major, minor = self.GL_VERSION
        config = pyglet.gl.Config(
            double_buffer=True,
            major_version=major,
            minor_version=minor,
            forward_compatible=True,
            depth_size=24,
            stencil_size=8,
        )
        return pyglet.window.Window(
            width=self.WIDTH,
            height=self.HEIGHT,
            caption=self.TITLE,
            resizable=False,
            config=config,
        )

    def _handle_close(self) -> bool:
        self._quit_requested = True
        return True

    @property
    def inner_size(self) -> Rect:
        """Size of the drawable area in pixels, positioned at the origin."""
        width, height = self._native.get_framebuffer_size()
        return Rect(width, height)

    @property
    def quit_requested(self) -> bool:
        """Whether the user asked to close the window."""
        return self._quit_requested

    @property
    def closed(self) -> bool:
        """Whether ``close`` has been called."""
        return self._closed

    def make_current_context(self) -> None:
        """Make this window's OpenGL context the current one."""
        self._native.switch_to()

    def present(self, vsync: bool) -> None:
        """Swap the back buffer to the screen, synchronised if ``vsync``."""
        self._native.set_vsync(bool(vsync))
        self._native.flip()

    def poll_events(self) -> bool:
        """Handle pending window events; return True once a quit was requested."""
        self._native.dispatch_events()
        return self._quit_requested

    def close(self) -> None:
        """Destroy the context and the window; safe to call twice."""
        if self._closed:
            return
        self._native.close()
        self._closed = True

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()