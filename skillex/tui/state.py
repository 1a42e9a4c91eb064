"""Browser state machine for the skill catalog.

Every input reaches the browser as an event. ``BrowserModel.update`` takes the
current ``BrowserState`` plus one event and returns the next state; states and
their nested list/viewer parts are frozen and replaced, never mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from ..config import DEFAULT_CONFIG, SkillexConfig
from ..layout import BudgetStatus, PaneLayout, assess_budget, compute_layout
from ..models import Skill
from .markdown import MarkdownRenderer, compose_markdown

logger = logging.getLogger(__name__)

NO_SELECTION = "No skill selected."
NO_SKILLS = "no skills found"


class Phase(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Focus(Enum):
    LIST = "list"
    VIEWER = "viewer"


@dataclass(frozen=True)
class Dimensions:
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class ListState:
    """Filterable, paged list of skills with a cursor.

    ``visible`` holds indices into ``skills`` that match ``query``; ``cursor``
    is a position within ``visible``.
    """

    skills: Tuple[Skill, ...] = ()
    visible: Tuple[int, ...] = ()
    cursor: int = 0
    query: str = ""
    filtering: bool = False
    width: int = 0
    height: int = 0
    item_height: int = 2
    item_spacing: int = 1

    @classmethod
    def from_skills(cls, skills, item_height: int = 2, item_spacing: int = 1) -> "ListState":
        skills = tuple(skills)
        return cls(
            skills=skills,
            visible=tuple(range(len(skills))),
            item_height=item_height,
            item_spacing=item_spacing,
        )

    @property
    def selected_index(self) -> Optional[int]:
        if not self.visible:
            return None
        return self.visible[self.cursor]

    @property
    def selected(self) -> Optional[Skill]:
        index = self.selected_index
        return None if index is None else self.skills[index]

    @property
    def per_page(self) -> int:
        rows = self.item_height + self.item_spacing
        return max(1, (self.height + self.item_spacing) // rows)

    def page(self) -> Tuple[Tuple[int, Skill], ...]:
        """(position, skill) pairs on the page holding the cursor."""
        start = (self.cursor // self.per_page) * self.per_page
        window = self.visible[start:start + self.per_page]
        return tuple((start + n, self.skills[i]) for n, i in enumerate(window))

    def move_to(self, position: int) -> "ListState":
        if not self.visible:
            return replace(self, cursor=0)
        position = min(max(position, 0), len(self.visible) - 1)
        return replace(self, cursor=position)

    def move(self, delta: int) -> "ListState":
        return self.move_to(self.cursor + delta)

    def with_query(self, query: str) -> "ListState":
        """Re-filter; the cursor stays on the selected skill if it still matches."""
        needle = query.lower()
        visible = tuple(
            i for i, skill in enumerate(self.skills)
            if needle in skill.filter_value.lower()
        )
        previous = self.selected_index
        cursor = visible.index(previous) if previous in visible else 0
        return replace(self, query=query, visible=visible, cursor=cursor)

    def start_filter(self) -> "ListState":
        return replace(self, filtering=True)

    def accept_filter(self) -> "ListState":
        return replace(self, filtering=False)

    def cancel_filter(self) -> "ListState":
        return replace(self.with_query(""), filtering=False)

    def resize(self, width: int, height: int) -> "ListState":
        return replace(self, width=width, height=height)


@dataclass(frozen=True)
class ViewerState:
    """Rendered SKILL.md text and its scroll position."""

    content: str = ""
    width: int = 0
    height: int = 0
    offset: int = 0

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self.content.split("\n")) if self.content else ()

    @property
    def max_offset(self) -> int:
        return max(len(self.lines) - self.height, 0)

    def visible_lines(self) -> Tuple[str, ...]:
        return self.lines[self.offset:self.offset + self.height]

    def scroll_to(self, offset: int) -> "ViewerState":
        return replace(self, offset=min(max(offset, 0), self.max_offset))

    def scroll(self, delta: int) -> "ViewerState":
        return self.scroll_to(self.offset + delta)

    def with_content(self, content: str) -> "ViewerState":
        return replace(self, content=content, offset=0)

    def resize(self, width: int, height: int) -> "ViewerState":
        return replace(self, width=width, height=height).scroll_to(self.offset)


@dataclass(frozen=True)
class RenderCache:
    """Markdown renderer built for ``width``; rebuilt only when the width changes."""

    width: int = 0
    renderer: Any = None


@dataclass(frozen=True)
class BrowserState:
    phase: Phase = Phase.LOADING
    skills: Tuple[Skill, ...] = ()
    list_state: ListState = field(default_factory=ListState)
    viewer: ViewerState = field(default_factory=ViewerState)
    focus: Focus = Focus.LIST
    dimensions: Dimensions = field(default_factory=Dimensions)
    layout: Optional[PaneLayout] = None
    render_cache: RenderCache = field(default_factory=RenderCache)
    budget: Optional[BudgetStatus] = None
    load_error: Optional[str] = None
    fatal: bool = False
    quitting: bool = False

    @property
    def selection_index(self) -> Optional[int]:
        return self.list_state.selected_index

    @property
    def selected_skill(self) -> Optional[Skill]:
        return self.list_state.selected

    @property
    def filtering(self) -> bool:
        return self.list_state.filtering

    @property
    def exit_code(self) -> int:
        return 1 if self.fatal else 0


@dataclass(frozen=True)
class DiscoveryCompleted:
    skills: Tuple[Skill, ...] = ()
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


@dataclass(frozen=True)
class KeyPressed:
    key: str
    character: Optional[str] = None


RendererFactory = Callable[[int], Any]


class BrowserModel:
    """Transition function for ``BrowserState``.

    ``renderer_factory`` builds a renderer (anything with ``render(markdown)
    -> str``) for a given wrap width.
    """

    def __init__(
        self,
        config: SkillexConfig = DEFAULT_CONFIG,
        renderer_factory: Optional[RendererFactory] = None,
    ):
        self.config = config
        self.renderer_factory = renderer_factory or self._default_renderer

    def _default_renderer(self, width: int) -> MarkdownRenderer:
        return MarkdownRenderer(width, code_theme=self.config.code_theme)

    def update(self, state: BrowserState, event: Any) -> BrowserState:
        if isinstance(event, Resized):
            return self._on_resize(state, event)
        if isinstance(event, DiscoveryCompleted):
            return self._on_discovery(state, event)
        if isinstance(event, KeyPressed):
            return self._on_key(state, event)
        return state

    # Discovery

    def _on_discovery(self, state: BrowserState, event: DiscoveryCompleted) -> BrowserState:
        if state.phase is not Phase.LOADING:
            return state

        if event.error is not None:
            return replace(
                state, phase=Phase.ERROR, load_error=str(event.error), fatal=True
            )
        if not event.skills:
            return replace(state, phase=Phase.ERROR, load_error=NO_SKILLS)

        skills = tuple(event.skills)
        layout = self._layout(state)
        list_state = ListState.from_skills(
            skills,
            item_height=self.config.layout.item_height,
            item_spacing=self.config.layout.item_spacing,
        ).resize(layout.list_content_width, layout.list_content_height)
        viewer = state.viewer.resize(
            layout.viewer_content_width, layout.viewer_content_height
        )

        state = replace(
            state,
            phase=Phase.READY,
            skills=skills,
            list_state=list_state,
            viewer=viewer,
            focus=Focus.LIST,
            layout=layout,
            budget=assess_budget(skills, self.config.budget_limit),
        )
        return self._render_selection(state)

    # Resize

    def _on_resize(self, state: BrowserState, event: Resized) -> BrowserState:
        layout = compute_layout(event.width, event.height, self.config.layout)
        resized = replace(
            state,
            dimensions=Dimensions(event.width, event.height),
            layout=layout,
            list_state=state.list_state.resize(
                layout.list_content_width, layout.list_content_height
            ),
            viewer=state.viewer.resize(
                layout.viewer_content_width, layout.viewer_content_height
            ),
        )
        if resized.phase is Phase.READY and layout.render_width != state.render_cache.width:
            resized = self._render_selection(resized, keep_offset=True)
        return resized

    def _layout(self, state: BrowserState) -> PaneLayout:
        if state.layout is not None:
            return state.layout
        return compute_layout(
            state.dimensions.width, state.dimensions.height, self.config.layout
        )

    # Keys

    def _on_key(self, state: BrowserState, event: KeyPressed) -> BrowserState:
        keys = self.config.keys
        key = event.key

        if state.phase is not Phase.READY:
            if key in keys.quit:
                return replace(state, quitting=True)
            return state

        # Filter mode owns the keyboard.
        if state.list_state.filtering:
            if key in keys.force_quit:
                return replace(state, quitting=True)
            return self._apply_list(state, self._filter_key(state.list_state, event))

        if key in keys.quit:
            return replace(state, quitting=True)

        if state.focus is Focus.LIST:
            if key in keys.enter_detail:
                return replace(state, focus=Focus.VIEWER)
            if key in keys.filter:
                return replace(state, list_state=state.list_state.start_filter())
            if key in keys.cancel_filter and state.list_state.query:
                return self._apply_list(state, state.list_state.cancel_filter())
            return self._apply_list(state, self._navigate(state.list_state, key))

        if key in keys.back:
            return replace(state, focus=Focus.LIST)
        return replace(state, viewer=self._scroll(state.viewer, key))

    def _filter_key(self, list_state: ListState, event: KeyPressed) -> ListState:
        keys = self.config.keys
        key = event.key
        if key in keys.accept_filter:
            return list_state.accept_filter()
        if key in keys.cancel_filter:
            return list_state.cancel_filter()
        if key in keys.delete_char:
            return list_state.with_query(list_state.query[:-1])
        if key == "up":
            return list_state.move(-1)
        if key == "down":
            return list_state.move(1)
        if event.character and event.character.isprintable():
            return list_state.with_query(list_state.query + event.character)
        return list_state

    def _navigate(self, list_state: ListState, key: str) -> ListState:
        keys = self.config.keys
        if key in keys.up:
            return list_state.move(-1)
        if key in keys.down:
            return list_state.move(1)
        if key in keys.page_up:
            return list_state.move(-list_state.per_page)
        if key in keys.page_down:
            return list_state.move(list_state.per_page)
        if key in keys.top:
            return list_state.move_to(0)
        if key in keys.bottom:
            return list_state.move_to(len(list_state.visible) - 1)
        return list_state

    def _scroll(self, viewer: ViewerState, key: str) -> ViewerState:
        keys = self.config.keys
        page = max(viewer.height, 1)
        if key in keys.up:
            return viewer.scroll(-1)
        if key in keys.down:
            return viewer.scroll(1)
        if key in keys.page_up:
            return viewer.scroll(-page)
        if key in keys.page_down:
            return viewer.scroll(page)
        if key in keys.top:
            return viewer.scroll_to(0)
        if key in keys.bottom:
            return viewer.scroll_to(viewer.max_offset)
        return viewer

    def _apply_list(self, state: BrowserState, list_state: ListState) -> BrowserState:
        """Swap in the new list state and re-render if the selection moved."""
        changed = list_state.selected_index != state.list_state.selected_index
        state = replace(state, list_state=list_state)
        if changed:
            state = self._render_selection(state)
        return state

    # Rendering

    def _render_selection(self, state: BrowserState, keep_offset: bool = False) -> BrowserState:
        skill = state.list_state.selected
        if skill is None:
            return replace(state, viewer=state.viewer.with_content(NO_SELECTION))

        width = self._layout(state).render_width
        cache = state.render_cache
        if cache.renderer is None or cache.width != width:
            try:
                renderer = self.renderer_factory(width)
            except Exception as e:
                logger.warning("Could not build markdown renderer: %s", e)
                return replace(
                    state, viewer=state.viewer.with_content(f"Render error: {e}")
                )
            cache = RenderCache(width=width, renderer=renderer)

        try:
            rendered = cache.renderer.render(compose_markdown(skill))
        except Exception as e:
            logger.warning("Could not render %s: %s", skill.file_path, e)
            rendered = f"Render error: {e}"

        viewer = state.viewer.with_content(rendered)
        if keep_offset:
            viewer = viewer.scroll_to(state.viewer.offset)
        return replace(state, viewer=viewer, render_cache=cache)
