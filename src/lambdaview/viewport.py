"""Scroll and autoscroll state for a bounded text buffer."""

from __future__ import annotations

from lambdaview.models import ViewportState

LINE_STEP = 1
PAGE_STEP = 5


class ViewportController:
    """Owns the viewport of one buffer and keeps it consistent as the buffer grows.

    ``follow`` is the autoscroll mode restored by ``reset``: the log panel
    follows new lines, the function list does not.
    """

    def __init__(self, height: int = 1, *, follow: bool = True) -> None:
        self._follow = follow
        self._height = max(1, height)
        self._total = 0
        self.state = ViewportState(autoscroll=follow)

    @property
    def origin(self) -> int:
        return self.state.origin

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def autoscroll(self) -> bool:
        return self.state.autoscroll

    @property
    def height(self) -> int:
        return self._height

    @property
    def total(self) -> int:
        return self._total

    @property
    def max_origin(self) -> int:
        """Largest origin that still fills the view."""
        return max(0, self._total - self._height)

    def reset(self) -> None:
        """Empty the buffer and return to the top."""
        self._total = 0
        self.state = ViewportState(autoscroll=self._follow)

    def append(self, count: int) -> None:
        """Record ``count`` new lines at the end of the buffer."""
        self._total += max(0, count)
        if self.state.autoscroll:
            self.state.origin = self.max_origin

    def resize(self, height: int) -> None:
        """Change the number of visible rows."""
        self._height = max(1, height)
        if self.state.autoscroll:
            self.state.origin = self.max_origin
        self._clamp()

    def scroll_by(self, delta: int) -> None:
        """Scroll by ``delta`` lines.

        Scrolling forward past the end re-engages autoscroll and pins the
        view to the bottom. Leaving autoscroll first brings the cursor to
        the top visible row.
        """
        if delta > 0 and self.state.origin + delta > self._total - self._height - 1:
            self.state.autoscroll = True
            self.state.origin = self.max_origin
            return
        if self.state.autoscroll:
            self.state.cursor = self.state.origin
        self.state.autoscroll = False
        self.state.origin += delta
        self.state.cursor += delta
        self._clamp()

    def cursor_move(self, delta: int) -> None:
        """Move the cursor, dragging the origin along when it leaves the view."""
        if self._total == 0:
            return
        cursor = min(max(0, self.state.cursor + delta), self._total - 1)
        if cursor < self.state.origin:
            self.state.origin = cursor
        elif cursor >= self.state.origin + self._height:
            self.state.origin = cursor - self._height + 1
        self.state.cursor = cursor
        self._clamp()

    def visible_range(self) -> range:
        """Buffer indices currently on screen."""
        return range(self.state.origin, min(self._total, self.state.origin + self._height))

    def _clamp(self) -> None:
        self.state.origin = min(max(0, self.state.origin), self.max_origin)
        self.state.cursor = min(max(0, self.state.cursor), max(0, self._total - 1))
