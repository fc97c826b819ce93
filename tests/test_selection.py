# tests/test_selection.py

from blog_search.domain import selection
from blog_search.domain.models import Document, KeyEvent, QueryState


def _state_with(count: int) -> QueryState:
    results = [Document(title=f"Post {i}", url=f"/post-{i}/") for i in range(count)]
    return selection.with_results(QueryState(), "post", ["post"], results)


def test_arrow_down_from_idle_selects_first_and_wraps():
    state = _state_with(3)

    state = selection.move_down(state)
    assert state.selected_index == 0
    state = selection.move_down(selection.move_down(state))
    assert state.selected_index == 2
    state = selection.move_down(state)
    assert state.selected_index == 0


def test_arrow_up_from_idle_selects_last_then_walks_back_and_wraps():
    state = _state_with(3)

    state = selection.move_up(state)
    assert state.selected_index == 2
    state = selection.move_up(state)
    assert state.selected_index == 1
    state = selection.move_up(selection.move_up(state))
    assert state.selected_index == 2


def test_arrows_without_results_stay_idle():
    state = _state_with(0)
    assert selection.move_down(state).selected_index == -1
    assert selection.move_up(state).selected_index == -1


def test_new_results_reset_selection():
    state = selection.move_down(_state_with(3))

    state = selection.with_results(state, "po", ["po"], state.results[:2])

    assert state.selected_index == -1
    assert state.raw_query == "po"


def test_transitions_do_not_mutate_input_state():
    state = _state_with(3)
    selection.move_down(state)
    assert state.selected_index == -1


def test_enter_target():
    state = _state_with(3)
    assert selection.enter_target(state) == "/post-0/"
    assert selection.enter_target(selection.move_up(state)) == "/post-2/"
    assert selection.enter_target(_state_with(0)) is None


def test_reset_is_empty():
    state = selection.reset()
    assert state.raw_query == ""
    assert state.results == ()
    assert state.selected_index == -1


def test_open_shortcut_accepts_either_modifier():
    assert selection.is_open_shortcut(KeyEvent("k", ctrl_key=True))
    assert selection.is_open_shortcut(KeyEvent("K", meta_key=True))
    assert not selection.is_open_shortcut(KeyEvent("k"))
    assert not selection.is_open_shortcut(KeyEvent("j", ctrl_key=True))
