"""
Unit tests for session state reducers.

Every reducer is pure: the input state is never modified, and unknown
subject or unit ids return the state unchanged.
"""

import pytest

from bca_assistant.curriculum import SubjectId, get_semester
from bca_assistant.session import (
    AppMode,
    Role,
    active_subject,
    append_message,
    append_notes,
    initial_state,
    make_message,
    messages_for,
    notes_for,
    select_semester,
    select_subject,
    semester_progress,
    set_mode,
    set_online,
    subject_progress,
    toggle_learner_mode,
    toggle_online,
    toggle_unit,
)


# ========================================
# Fixtures
# ========================================


@pytest.fixture
def loaded():
    """State with Semester I loaded and PPA selected."""
    state = select_semester(initial_state(), get_semester(1))
    return select_subject(state, SubjectId.PPA)


# ========================================
# Navigation
# ========================================


class TestNavigation:
    """Tests for semester, subject and mode reducers."""

    def test_initial_state(self):
        state = initial_state()
        assert state.mode == AppMode.SEMESTER_SELECT
        assert state.subject_id is None
        assert state.online is False
        assert state.subjects == ()

    def test_initial_state_online(self):
        assert initial_state(online=True).online is True

    def test_select_semester_loads_subjects(self):
        state = select_semester(initial_state(), get_semester(1))
        assert state.semester_id == 1
        assert len(state.subjects) == 5
        assert state.mode == AppMode.CHAT

    def test_select_coming_soon_semester_is_noop(self):
        state = initial_state()
        assert select_semester(state, get_semester(2)) is state

    def test_reselecting_semester_keeps_unit_progress(self, loaded):
        """Going back to the picker and re-entering keeps completed units."""
        state = toggle_unit(loaded, SubjectId.PPA, "u1")
        state = set_mode(state, AppMode.SEMESTER_SELECT)
        state = select_semester(state, get_semester(1))

        ppa = next(s for s in state.subjects if s.id == SubjectId.PPA)
        assert ppa.units[0].is_completed is True
        assert state.subject_id is None
        assert state.mode == AppMode.CHAT

    def test_select_subject(self, loaded):
        assert loaded.subject_id == SubjectId.PPA
        assert active_subject(loaded).name == "Prog. Principle & Algorithm"

    def test_select_unknown_subject_is_noop(self, loaded):
        assert select_subject(loaded, "PHYSICS") is loaded

    def test_back_to_semester_select_clears_subject(self, loaded):
        state = set_mode(loaded, AppMode.SEMESTER_SELECT)
        assert state.subject_id is None
        assert active_subject(state) is None

    def test_set_mode_keeps_subject(self, loaded):
        state = set_mode(loaded, AppMode.QUIZ)
        assert state.mode == AppMode.QUIZ
        assert state.subject_id == SubjectId.PPA


# ========================================
# Flags
# ========================================


class TestFlags:
    def test_toggle_online_twice_restores(self, loaded):
        assert toggle_online(toggle_online(loaded)).online == loaded.online

    def test_set_online(self, loaded):
        assert set_online(loaded, True).online is True
        assert set_online(loaded, False).online is False

    def test_toggle_learner_mode(self, loaded):
        assert toggle_learner_mode(loaded).learner_mode is True


# ========================================
# Units and progress
# ========================================


class TestUnits:
    """Tests for unit completion toggling and progress."""

    def test_toggle_unit(self, loaded):
        state = toggle_unit(loaded, SubjectId.PPA, "u1")
        units = active_subject(state).units
        assert units[0].is_completed is True
        assert not any(u.is_completed for u in units[1:])

    def test_toggle_twice_restores(self, loaded):
        state = toggle_unit(toggle_unit(loaded, "PPA", "u3"), "PPA", "u3")
        assert state.subjects == loaded.subjects

    def test_toggle_unknown_unit_is_noop(self, loaded):
        assert toggle_unit(loaded, SubjectId.PPA, "u99") is loaded

    def test_toggle_unknown_subject_is_noop(self, loaded):
        assert toggle_unit(loaded, "PHYSICS", "u1") is loaded

    def test_toggle_does_not_touch_template(self, loaded):
        toggle_unit(loaded, SubjectId.PPA, "u1")
        assert not get_semester(1).get_subject(SubjectId.PPA).units[0].is_completed

    def test_subject_progress(self, loaded):
        state = toggle_unit(toggle_unit(loaded, "PPA", "u1"), "PPA", "u2")
        # 2 of 6 units
        assert subject_progress(active_subject(state)) == 33

    def test_semester_progress(self, loaded):
        assert semester_progress(loaded) == 0
        state = toggle_unit(loaded, "MATHS", "u1")
        # 1 of 29 units
        assert semester_progress(state) == 3

    def test_progress_with_no_subjects(self):
        assert semester_progress(initial_state()) == 0


# ========================================
# Transcript and notes
# ========================================


class TestTranscript:
    """Tests for message append and timestamps."""

    def test_append_message(self, loaded):
        message = make_message((), Role.USER, "hi", clock=lambda: 5)
        state = append_message(loaded, SubjectId.PPA, message)
        assert messages_for(state, SubjectId.PPA) == (message,)
        assert messages_for(loaded, SubjectId.PPA) == ()

    def test_transcripts_are_per_subject(self, loaded):
        message = make_message((), Role.USER, "hi")
        state = append_message(loaded, SubjectId.PPA, message)
        assert messages_for(state, SubjectId.BC) == ()

    def test_duplicate_id_is_noop(self, loaded):
        message = make_message((), Role.USER, "hi")
        state = append_message(loaded, SubjectId.PPA, message)
        assert append_message(state, SubjectId.PPA, message) is state

    def test_timestamps_strictly_increase(self):
        """A clock that stands still still yields ordered timestamps."""
        first = make_message((), Role.USER, "a", clock=lambda: 100)
        second = make_message((first,), Role.MODEL, "b", clock=lambda: 100)
        third = make_message((first, second), Role.USER, "c", clock=lambda: 50)
        assert first.timestamp < second.timestamp < third.timestamp

    def test_message_ids_unique(self):
        ids = {make_message((), Role.USER, "x").id for _ in range(50)}
        assert len(ids) == 50

    def test_message_to_dict(self):
        message = make_message((), Role.MODEL, "ok", sources=["https://a"], clock=lambda: 7)
        data = message.to_dict()
        assert data["role"] == "model"
        assert data["sources"] == ["https://a"]
        assert data["timestamp"] == 7


class TestNotes:
    """Tests for notes accumulation."""

    def test_notes_append_in_order(self, loaded):
        state = append_notes(loaded, SubjectId.PPA, "first")
        state = append_notes(state, SubjectId.PPA, "second")
        assert notes_for(state, SubjectId.PPA) == "first\nsecond"

    def test_empty_upload_is_noop(self, loaded):
        assert append_notes(loaded, SubjectId.PPA, "") is loaded

    def test_notes_are_per_subject(self, loaded):
        state = append_notes(loaded, SubjectId.PPA, "pointers")
        assert notes_for(state, SubjectId.POM) == ""

    def test_unknown_subject_notes(self, loaded):
        assert append_notes(loaded, "PHYSICS", "x") is loaded
        assert notes_for(loaded, "PHYSICS") == ""
