"""Tests for the browser state machine."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from skillex.errors import RegistryError
from skillex.models import Skill
from skillex.tui.state import (
    NO_SELECTION,
    BrowserModel,
    BrowserState,
    DiscoveryCompleted,
    Focus,
    KeyPressed,
    ListState,
    Phase,
    Resized,
    ViewerState,
)


def make_skill(name: str, plugin: str = "superpowers", content: str = "") -> Skill:
    return Skill(
        name=name,
        description=f"{name} description",
        plugin=plugin,
        file_path=Path(f"/skills/{name}/SKILL.md"),
        content=content or f"# {name}",
    )


class FakeRenderer:
    def __init__(self, width: int, lines: int = 0, fail: bool = False):
        self.width = width
        self.lines = lines
        self.fail = fail

    def render(self, markdown: str) -> str:
        if self.fail:
            raise RuntimeError("boom")
        if self.lines:
            return "\n".join(f"line {n}" for n in range(self.lines))
        return f"w{self.width}:{markdown}"


class CountingFactory:
    """Renderer factory that records every width it builds for."""

    def __init__(self, lines: int = 0, fail_render: bool = False):
        self.built: List[int] = []
        self.lines = lines
        self.fail_render = fail_render

    def __call__(self, width: int) -> FakeRenderer:
        self.built.append(width)
        return FakeRenderer(width, lines=self.lines, fail=self.fail_render)


SKILLS = (
    make_skill("alpha"),
    make_skill("beta", plugin="local"),
    make_skill("gamma"),
)


def key(name: str, character=None) -> KeyPressed:
    return KeyPressed(key=name, character=character)


@pytest.fixture
def factory() -> CountingFactory:
    return CountingFactory()


@pytest.fixture
def model(factory: CountingFactory) -> BrowserModel:
    return BrowserModel(renderer_factory=factory)


@pytest.fixture
def ready(model: BrowserModel) -> BrowserState:
    state = model.update(BrowserState(), Resized(120, 40))
    return model.update(state, DiscoveryCompleted(skills=SKILLS))


def press(model: BrowserModel, state: BrowserState, *names: str) -> BrowserState:
    for name in names:
        character = name if len(name) == 1 else None
        state = model.update(state, key(name, character))
    return state


class TestDiscovery:
    def test_initial_state_is_loading(self):
        state = BrowserState()
        assert state.phase is Phase.LOADING
        assert state.selection_index is None
        assert state.quitting is False

    def test_skills_loaded(self, ready: BrowserState, factory: CountingFactory):
        assert ready.phase is Phase.READY
        assert ready.focus is Focus.LIST
        assert ready.skills == SKILLS
        assert ready.selection_index == 0
        assert ready.viewer.content == "w74:# alpha"
        assert ready.budget.total == sum(len(s.description) for s in SKILLS)
        assert factory.built == [74]

    def test_registry_error_is_fatal(self, model: BrowserModel):
        state = model.update(
            BrowserState(),
            DiscoveryCompleted(error=RegistryError("reading plugins file: missing")),
        )

        assert state.phase is Phase.ERROR
        assert state.load_error == "reading plugins file: missing"
        assert state.fatal is True
        assert state.exit_code == 1

    def test_no_skills_is_not_fatal(self, model: BrowserModel):
        state = model.update(BrowserState(), DiscoveryCompleted(skills=()))

        assert state.phase is Phase.ERROR
        assert state.load_error == "no skills found"
        assert state.fatal is False
        assert state.exit_code == 0

    def test_later_discovery_is_ignored(self, model: BrowserModel, ready: BrowserState):
        assert model.update(ready, DiscoveryCompleted(skills=())) is ready

    def test_discovery_without_resize_uses_minimum_render_width(
        self, model: BrowserModel, factory: CountingFactory
    ):
        state = model.update(BrowserState(), DiscoveryCompleted(skills=SKILLS))

        assert state.phase is Phase.READY
        assert factory.built == [20]


class TestQuitting:
    @pytest.mark.parametrize("name", ["q", "ctrl+c"])
    def test_quit_while_loading(self, model: BrowserModel, name: str):
        state = press(model, BrowserState(), name)
        assert state.quitting is True
        assert state.exit_code == 0

    def test_other_keys_ignored_outside_ready(self, model: BrowserModel):
        state = model.update(BrowserState(), DiscoveryCompleted(skills=()))
        assert press(model, state, "j", "l", "slash") is state

    def test_quit_after_fatal_error_exits_nonzero(self, model: BrowserModel):
        state = model.update(BrowserState(), DiscoveryCompleted(error=RegistryError("x")))
        state = press(model, state, "q")
        assert state.quitting is True
        assert state.exit_code == 1

    @pytest.mark.parametrize("focus_keys", [(), ("l",)])
    def test_quit_from_either_pane(self, model: BrowserModel, ready: BrowserState, focus_keys):
        state = press(model, ready, *focus_keys)
        assert press(model, state, "q").quitting is True


class TestFocus:
    def test_enter_and_leave_viewer(self, model: BrowserModel, ready: BrowserState):
        for enter in ("l", "enter", "right"):
            viewer = press(model, ready, enter)
            assert viewer.focus is Focus.VIEWER
            for back in ("h", "left", "escape"):
                assert press(model, viewer, back).focus is Focus.LIST

    def test_repeated_focus_keys_are_noops(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "l", "l")
        assert state.focus is Focus.VIEWER
        state = press(model, state, "h", "h")
        assert state.focus is Focus.LIST
        assert state.selection_index == 0


class TestNavigation:
    def test_selection_change_rerenders_with_cached_renderer(
        self, model: BrowserModel, ready: BrowserState, factory: CountingFactory
    ):
        state = press(model, ready, "j")
        assert state.selection_index == 1
        assert state.viewer.content == "w74:# beta"

        state = press(model, state, "down")
        assert state.selection_index == 2
        assert state.viewer.content == "w74:# gamma"

        assert factory.built == [74]

    def test_cursor_is_clamped(self, model: BrowserModel, ready: BrowserState):
        assert press(model, ready, "k").selection_index == 0
        assert press(model, ready, "G").selection_index == 2
        assert press(model, ready, "G", "j").selection_index == 2
        assert press(model, ready, "G", "g").selection_index == 0
        assert press(model, ready, "pagedown").selection_index == 2
        assert press(model, ready, "end", "pageup").selection_index == 0

    def test_unknown_key_keeps_state(self, model: BrowserModel, ready: BrowserState):
        assert press(model, ready, "x") == ready


class TestFilter:
    def test_filter_keys_are_text(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "slash")
        assert state.filtering is True

        state = press(model, state, "q", "j")
        assert state.quitting is False
        assert state.list_state.query == "qj"
        assert state.selection_index is None
        assert state.viewer.content == NO_SELECTION

    def test_ctrl_c_quits_while_filtering(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "slash", "ctrl+c")
        assert state.quitting is True

    def test_filter_moves_selection_and_rerenders(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "slash", "b")

        assert state.list_state.visible == (1,)
        assert state.selected_skill.name == "beta"
        assert state.viewer.content == "w74:# beta"

    def test_filter_matches_plugin_name_case_insensitively(
        self, model: BrowserModel, ready: BrowserState
    ):
        state = press(model, ready, "slash", "L", "O", "C")
        assert [state.skills[i].name for i in state.list_state.visible] == ["beta"]

    def test_accept_keeps_query(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "slash", "g", "enter")

        assert state.filtering is False
        assert state.list_state.query == "g"
        assert state.focus is Focus.LIST

    def test_escape_clears_query(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "slash", "g", "escape")
        assert state.filtering is False
        assert state.list_state.query == ""
        assert len(state.list_state.visible) == 3

        # an accepted filter is cleared by escape from the list
        state = press(model, ready, "slash", "g", "enter", "escape")
        assert state.list_state.query == ""
        assert state.focus is Focus.LIST

    def test_backspace_widens_filter(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "slash", "z", "z")
        assert state.list_state.visible == ()

        state = press(model, state, "backspace", "backspace")
        assert state.list_state.query == ""
        assert state.selected_skill.name == "alpha"
        assert state.viewer.content == "w74:# alpha"

    def test_arrows_navigate_while_filtering(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "slash", "down")
        assert state.filtering is True
        assert state.selection_index == 1

    def test_slash_in_viewer_does_not_filter(self, model: BrowserModel, ready: BrowserState):
        state = press(model, ready, "l", "slash")
        assert state.filtering is False
        assert state.focus is Focus.VIEWER


class TestViewer:
    @pytest.fixture
    def long_factory(self) -> CountingFactory:
        return CountingFactory(lines=100)

    @pytest.fixture
    def long_model(self, long_factory: CountingFactory) -> BrowserModel:
        return BrowserModel(renderer_factory=long_factory)

    @pytest.fixture
    def viewing(self, long_model: BrowserModel) -> BrowserState:
        state = long_model.update(BrowserState(), Resized(120, 40))
        state = long_model.update(state, DiscoveryCompleted(skills=SKILLS))
        return press(long_model, state, "l")

    def test_scrolling(self, long_model: BrowserModel, viewing: BrowserState):
        assert viewing.viewer.height == 29
        assert viewing.viewer.max_offset == 71

        assert press(long_model, viewing, "j").viewer.offset == 1
        assert press(long_model, viewing, "k").viewer.offset == 0
        assert press(long_model, viewing, "G").viewer.offset == 71
        assert press(long_model, viewing, "G", "j").viewer.offset == 71
        assert press(long_model, viewing, "G", "g").viewer.offset == 0
        assert press(long_model, viewing, "space").viewer.offset == 29
        assert press(long_model, viewing, "f", "b").viewer.offset == 0

    def test_selection_change_resets_offset(self, long_model: BrowserModel, viewing: BrowserState):
        state = press(long_model, viewing, "G", "h", "j")
        assert state.selection_index == 1
        assert state.viewer.offset == 0

    def test_resize_rerenders_and_keeps_offset(
        self, long_model: BrowserModel, long_factory: CountingFactory, viewing: BrowserState
    ):
        state = press(long_model, viewing, "j", "j", "j")
        state = long_model.update(state, Resized(100, 40))

        assert long_factory.built == [74, 61]
        assert state.render_cache.width == 61
        assert state.viewer.offset == 3
        assert state.focus is Focus.VIEWER

    def test_taller_viewer_clamps_offset(self, long_model: BrowserModel, viewing: BrowserState):
        state = press(long_model, viewing, "G")
        state = long_model.update(state, Resized(120, 60))

        assert state.viewer.max_offset == 51

        assert state.viewer.offset == state.viewer.max_offset

    def test_resize_at_same_width_does_not_rebuild(
        self, long_model: BrowserModel, long_factory: CountingFactory, viewing: BrowserState
    ):
        long_model.update(viewing, Resized(120, 20))
        assert long_factory.built == [74]


class TestRenderErrors:
    def test_render_failure_is_shown(self):
        model = BrowserModel(renderer_factory=CountingFactory(fail_render=True))
        state = model.update(BrowserState(), DiscoveryCompleted(skills=SKILLS))

        assert state.phase is Phase.READY
        assert state.viewer.content == "Render error: boom"

    def test_renderer_construction_failure_is_shown(self):
        def broken_factory(width: int):
            raise ValueError("no terminal")

        model = BrowserModel(renderer_factory=broken_factory)
        state = model.update(BrowserState(), DiscoveryCompleted(skills=SKILLS))

        assert state.viewer.content == "Render error: no terminal"
        assert state.render_cache.renderer is None


class TestListState:
    def test_paging(self):
        skills = tuple(make_skill(f"s{n}") for n in range(10))
        state = ListState.from_skills(skills).resize(30, 8)

        assert state.per_page == 3
        assert [pos for pos, _ in state.page()] == [0, 1, 2]
        assert [pos for pos, _ in state.move_to(4).page()] == [3, 4, 5]
        assert [pos for pos, _ in state.move_to(9).page()] == [9]

    def test_filter_keeps_cursor_on_selection(self):
        state = ListState.from_skills(SKILLS).move_to(2)
        state = state.with_query("a")

        assert state.selected.name == "gamma"

    def test_empty_list(self):
        state = ListState.from_skills(())
        assert state.selected is None
        assert state.move(1).cursor == 0
        assert state.page() == ()


class TestViewerState:
    def test_visible_lines(self):
        viewer = ViewerState(content="a\nb\nc\nd", height=2).scroll(1)
        assert viewer.visible_lines() == ("b", "c")

    def test_with_content_resets_offset(self):
        viewer = ViewerState(content="a\nb\nc", height=1).scroll(2)
        assert viewer.offset == 2
        assert viewer.with_content("x").offset == 0
