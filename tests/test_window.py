from unittest.mock import MagicMock

from oglgame.geometry import Rect
from oglgame.window import Window


class FakeNativeWindow(Window):
    def _create_native(self):
        native = MagicMock()
        native.get_framebuffer_size.return_value = (1024, 768)
        return native


def _close_handler(window):
    return window._native.push_handlers.call_args.kwargs["on_close"]


def test_inner_size_is_framebuffer_size():
    window = FakeNativeWindow()
    assert window.inner_size == Rect(1024, 768)


def test_inner_size_starts_at_origin():
    window = FakeNativeWindow()
    size = window.inner_size
    assert size == Rect(1024, 768)
    assert (size.left, size.top) == (0, 0)


def test_poll_events_without_close_request():
    window = FakeNativeWindow()
    assert Window.poll_events(window) is False
    assert window._native.dispatch_events.call_count == 1


def test_close_request_is_reported_by_poll():
    window = FakeNativeWindow()
    handled = _close_handler(window)()
    assert handled is True
    assert window.quit_requested is True
    assert Window.poll_events(window) is True


def test_close_request_keeps_window_open():
    window = FakeNativeWindow()
    _close_handler(window)()
    assert Window.poll_events(window) is True
    assert window.closed is False
    assert window._native.close.call_count == 0


def test_make_current_context_switches_to_window():
    window = FakeNativeWindow()
    Window.make_current_context(window)
    assert window._native.switch_to.call_count == 1


def test_present_without_vsync():
    window = FakeNativeWindow()
    Window.present(window, False)
    window._native.set_vsync.assert_called_once_with(False)
    assert window._native.flip.call_count == 1


def test_present_with_vsync():
    window = FakeNativeWindow()
    Window.present(window, True)
    window._native.set_vsync.assert_called_once_with(True)
    assert window._native.flip.call_count == 1


def test_close_is_idempotent():
    window = FakeNativeWindow()
    Window.close(window)
    Window.close(window)
    assert window.closed is True
    assert window._native.close.call_count == 1


def test_context_manager_closes_window():
    with FakeNativeWindow() as window:
        assert window.closed is False
        assert window.inner_size == Rect(1024, 768)
    assert window.closed is True
    assert window._native.close.call_count == 1