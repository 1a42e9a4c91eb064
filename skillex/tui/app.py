"""Main TUI application for the skill catalog."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical

from ..config import DEFAULT_CONFIG, SkillexConfig
from ..errors import DiscoveryError
from ..layout import PaneLayout
from ..models import LocalSkillsDir
from ..scanner import discover
from .state import (
    BrowserModel,
    BrowserState,
    DiscoveryCompleted,
    Focus,
    KeyPressed,
    Phase,
    RendererFactory,
    Resized,
)
from .widgets import (
    AnalyticsPanel,
    SearchBar,
    SkillItemRenderer,
    SkillList,
    SkillViewer,
    Splash,
    StatusBar,
)

logger = logging.getLogger(__name__)


class SkillexApp(App):
    """Terminal catalog of the skills installed for Claude Code."""

    TITLE = "skillex"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #browser {
        display: none;
        height: 1fr;
    }

    #list-pane, #analytics, #viewer {
        border: round #585858;
        border-title-color: #585858;
        border-title-style: bold;
        padding: 0 1;
    }

    #list-pane.focused, #analytics.focused, #viewer.focused {
        border: round #5f5fd7;
        border-title-color: #5f5fd7;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "force_quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        plugins_file: Path,
        local_dirs: Iterable[LocalSkillsDir] = (),
        *args,
        settings: SkillexConfig = DEFAULT_CONFIG,
        renderer_factory: Optional[RendererFactory] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.plugins_file = Path(plugins_file)
        self.local_dirs = list(local_dirs)
        self.settings = settings
        self.browser = BrowserModel(settings, renderer_factory=renderer_factory)
        self.browser_state = BrowserState()

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        palette = self.settings.palette
        yield Splash(id="splash", palette=palette)

        with Horizontal(id="browser"):
            with Vertical(id="list-pane"):
                yield SearchBar(id="search")
                yield SkillList(
                    id="skill-list", item_renderer=SkillItemRenderer(palette)
                )
            with Vertical(id="detail-column"):
                yield AnalyticsPanel(id="analytics", config=self.settings)
                yield SkillViewer(id="viewer")

        yield StatusBar(id="status-bar", palette=palette)

    def on_mount(self) -> None:
        """Size the panes and start discovery."""
        self.query_one("#list-pane", Vertical).border_title = "Skills"
        self.query_one("#analytics", AnalyticsPanel).border_title = "Skill Analytics"
        self.query_one("#viewer", SkillViewer).border_title = "SKILL.md"

        self.apply_browser_event(Resized(self.size.width, self.size.height))
        self.discover_skills()

    @work(thread=True, exclusive=True)
    def discover_skills(self) -> None:
        """Run discovery once, off the event loop."""
        try:
            skills = discover(self.plugins_file, self.local_dirs)
        except DiscoveryError as e:
            logger.error("Skill discovery failed: %s", e)
            self.call_from_thread(self.apply_browser_event, DiscoveryCompleted(error=e))
            return
        self.call_from_thread(
            self.apply_browser_event, DiscoveryCompleted(skills=tuple(skills))
        )

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.apply_browser_event(KeyPressed(key=event.key, character=event.character))

    def on_resize(self, event: events.Resize) -> None:
        self.apply_browser_event(Resized(event.size.width, event.size.height))

    def action_force_quit(self) -> None:
        self.apply_browser_event(KeyPressed(key="ctrl+c"))

    def apply_browser_event(self, event) -> None:
        """Advance the browser state and redraw."""
        self.browser_state = self.browser.update(self.browser_state, event)
        if self.browser_state.quitting:
            self.exit(return_code=self.browser_state.exit_code)
            return
        self._refresh_view()

    def _refresh_view(self) -> None:
        state = self.browser_state
        self.query_one("#status-bar", StatusBar).show(state)

        splash = self.query_one("#splash", Splash)
        browser = self.query_one("#browser", Horizontal)
        if state.phase is not Phase.READY:
            splash.display = True
            browser.display = False
            if state.phase is Phase.ERROR:
                splash.show_error(state.load_error or "unknown error")
            return

        splash.display = False
        browser.display = True
        if state.layout is not None:
            self._apply_layout(state.layout)

        list_state = state.list_state
        self.query_one("#search", SearchBar).show(list_state.query, list_state.filtering)
        self.query_one("#skill-list", SkillList).show(list_state)

        analytics = self.query_one("#analytics", AnalyticsPanel)
        width = state.layout.analytics_content_width if state.layout else 0
        analytics.show(state.selected_skill, state.skills, width, budget=state.budget)

        viewer = self.query_one("#viewer", SkillViewer)
        viewer.show(state.viewer)

        list_focused = state.focus is Focus.LIST
        self.query_one("#list-pane", Vertical).set_class(list_focused, "focused")
        analytics.set_class(not list_focused, "focused")
        viewer.set_class(not list_focused, "focused")

    def _apply_layout(self, layout: PaneLayout) -> None:
        """Push computed pane geometry into the widget styles."""
        self.query_one("#browser", Horizontal).styles.height = layout.content_height
        self.query_one("#list-pane", Vertical).styles.width = layout.list_width
        self.query_one("#detail-column", Vertical).styles.width = layout.detail_width
        self.query_one("#analytics", AnalyticsPanel).styles.height = layout.analytics_height
        self.query_one("#viewer", SkillViewer).styles.height = layout.viewer_height
