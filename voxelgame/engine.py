"""The game loop: window, input, camera and renderer tied together."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional

from voxelgame.camera import Camera
from voxelgame.input import InputHandler
from voxelgame.model import ModelLoadError
from voxelgame.renderer import Renderer
from voxelgame.shader import ShaderError
from voxelgame.window import Window, WindowError

TITLE = "Voxel Game"
WIDTH = 1280
HEIGHT = 720


def _gl_viewport(width: int, height: int) -> None:
    from pyglet import gl

    gl.glViewport(0, 0, width, height)


def _symbol_name(symbol: int) -> str:
    from pyglet.window import key

    return key.symbol_string(symbol)


class Engine:
    """Runs one frame at a time until the window asks to close."""

    def __init__(
        self,
        window_factory: Callable[[str, int, int], Window] = Window,
        renderer: Optional[Renderer] = None,
        clock: Callable[[], float] = time.perf_counter,
        set_viewport: Callable[[int, int], None] = _gl_viewport,
    ) -> None:
        self._window_factory = window_factory
        self.renderer = renderer if renderer is not None else Renderer()
        self._clock = clock
        self._set_viewport = set_viewport
        self.window: Optional[Window] = None
        self.camera = Camera()
        self.input = InputHandler()
        self._pressed: set[str] = set()
        self._last_frame = 0.0
        self._cursor_x = self.input.last_x
        self._cursor_y = self.input.last_y

    def _require_window(self) -> Window:
        if self.window is None:
            raise RuntimeError("engine is not initialised")
        return self.window

    def init(self) -> None:
        """Open the window, set up rendering and capture the mouse."""
        window = self._window_factory(TITLE, WIDTH, HEIGHT)
        self.window = window
        self._set_viewport(*window.framebuffer_size())
        self.renderer.init()

        native = window.native
        native.set_exclusive_mouse(True)
        native.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_mouse_scroll=self._on_mouse_scroll,
        )
        self._last_frame = self._clock()

    def key_down(self, name: str) -> None:
        """Record that the named key is held."""
        self._pressed.add(name)

    def key_up(self, name: str) -> None:
        """Record that the named key was released."""
        self._pressed.discard(name)

    def _on_key_press(self, symbol: int, modifiers: int) -> bool:
        self.key_down(_symbol_name(symbol))
        return True

    def _on_key_release(self, symbol: int, modifiers: int) -> bool:
        self.key_up(_symbol_name(symbol))
        return True

    def _on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> bool:
        # Track a virtual cursor with the y axis pointing down the screen.
        self._cursor_x += dx
        self._cursor_y -= dy
        self.input.mouse_callback(self._cursor_x, self._cursor_y)
        return True

    def _on_mouse_drag(self, x, y, dx, dy, buttons, modifiers) -> bool:
        return self._on_mouse_motion(x, y, dx, dy)

    def _on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> bool:
        self.input.scroll_callback(scroll_x, scroll_y)
        return True

    def update(self) -> None:
        """Advance one frame: input, camera, rendering and events."""
        window = self._require_window()
        current = self._clock()
        delta_time = current - self._last_frame
        self._last_frame = current

        if self.input.process_input(lambda name: name in self._pressed):
            window.request_close()

        self.camera.update(delta_time, self.input.state)
        self.renderer.render(self.camera)

        window.swap_buffers()
        window.poll_events()

    def should_close(self) -> bool:
        """True once the window has been asked to close."""
        return self._require_window().should_close()

    def shutdown(self) -> None:
        """Release rendering resources and destroy the window."""
        self.renderer.shutdown()
        if self.window is not None:
            self.window.close()


def main(argv=None) -> int:
    """Run the game until its window is closed."""
    engine = Engine()
    try:
        engine.init()
    except (WindowError, ShaderError, ModelLoadError) as exc:
        print(exc, file=sys.stderr)
        engine.shutdown()
        return 1
    try:
        while not engine.should_close():
            engine.update()
    finally:
        engine.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())