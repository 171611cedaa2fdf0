"""Dashboard screen - the single full-window view of the monitor."""

from __future__ import annotations

import logging
from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import Static

from runtara_tui.controllers.dashboard_controller import FrameSnapshot
from runtara_tui.screens.dashboard.config import (
    BANNER_ID,
    CONTENT_ID,
    FOOTER_ID,
    HEADER_ID,
    TABS_ID,
)
from runtara_tui.screens.dashboard.presenter import DashboardPresenter

logger = logging.getLogger(__name__)


class DashboardScreen(Screen[None]):
    """Header, tab bar, error banner, content area and footer.

    The screen keeps no state of its own. The app hands it a fresh
    ``FrameSnapshot`` after every state change and on every frame tick.
    """

    def __init__(self, presenter: DashboardPresenter | None = None) -> None:
        super().__init__()
        self._presenter = presenter or DashboardPresenter()

    def compose(self) -> ComposeResult:
        yield Static(id=HEADER_ID)
        yield Static(id=TABS_ID)
        yield Static(id=BANNER_ID)
        with VerticalScroll(id=f"{CONTENT_ID}-scroll"):
            yield Static("Connecting...", id=CONTENT_ID)
        yield Static(id=FOOTER_ID)

    def on_mount(self) -> None:
        refresh_view = getattr(self.app, "refresh_view", None)
        if callable(refresh_view):
            refresh_view()

    def refresh_frame(self, frame: FrameSnapshot) -> None:
        """Redraw every region from one frame snapshot.

        Frames that arrive before the widgets exist are skipped; the screen
        asks the app for a fresh one on mount.
        """
        presenter = self._presenter
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{HEADER_ID}", Static).update(presenter.header(frame))
            self.query_one(f"#{TABS_ID}", Static).update(presenter.tabs(frame))
            banner = self.query_one(f"#{BANNER_ID}", Static)
            message = presenter.banner(frame)
            banner.display = message is not None
            if message is not None:
                banner.update(message)
            self.query_one(f"#{CONTENT_ID}", Static).update(presenter.content(frame))
            self.query_one(f"#{FOOTER_ID}", Static).update(presenter.footer(frame))


__all__ = ["DashboardScreen"]
