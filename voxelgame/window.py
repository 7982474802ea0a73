"""The application window and its OpenGL context."""

from __future__ import annotations

import sys

CONTEXT_MAJOR = 4
CONTEXT_MINOR = 1


class WindowError(Exception):
    """The window or its OpenGL context could not be created."""


class Window:
    """A window with a current OpenGL 4.1 core context."""

    def __init__(self, title: str, width: int, height: int) -> None:
        try:
            from pyglet import gl
            from pyglet import window as pyglet_window
        except Exception as exc:  # no display or GL library available
            raise WindowError(f"failed to initialise the windowing system: {exc}") from exc

        config = gl.Config(
            major_version=CONTEXT_MAJOR,
            minor_version=CONTEXT_MINOR,
            forward_compatible=sys.platform == "darwin",
            double_buffer=True,
            depth_size=24,
            stencil_size=8,
        )
        try:
            native = pyglet_window.Window(
                width=width, height=height, caption=title, config=config, resizable=True
            )
        except (pyglet_window.WindowException, gl.ContextException) as exc:
            raise WindowError(f"failed to create window: {exc}") from exc

        self._attach(native)
        gl.glViewport(0, 0, width, height)

    @classmethod
    def from_native(cls, native) -> "Window":
        """Wrap an already created pyglet window."""
        window = cls.__new__(cls)
        window._attach(native)
        return window

    def _attach(self, native) -> None:
        self.native = native
        self._should_close = False
        self._closed = False
        native.push_handlers(on_close=self._on_close, on_resize=self._on_resize)

    def _on_close(self) -> bool:
        self._should_close = True
        return True

    def _on_resize(self, width: int, height: int) -> bool:
        from pyglet import gl

        fb_width, fb_height = self.native.get_framebuffer_size()
        gl.glViewport(0, 0, fb_width, fb_height)
        return True

    def framebuffer_size(self) -> tuple[int, int]:
        """Size of the drawable area in pixels."""
        width, height = self.native.get_framebuffer_size()
        return int(width), int(height)

    def request_close(self) -> None:
        """Ask the main loop to stop."""
        self._should_close = True

    def poll_events(self) -> None:
        """Dispatch pending window events."""
        self.native.dispatch_events()

    def swap_buffers(self) -> None:
        """Present the back buffer."""
        self.native.flip()

    def should_close(self) -> bool:
        """True once closing has been requested or the window is closed."""
        return self._should_close or self._closed

    def close(self) -> None:
        """Destroy the window; later calls do nothing."""
        if not self._closed:
            self._closed = True
            self.native.close()