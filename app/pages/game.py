"""
Game page rendering.

Renders setup, the running session and the finished summary, always from
a DrillSession snapshot.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.state import consume_elapsed_seconds, get_drill_session
from app.ui import render_session_complete, render_session_stats, render_word_card
from core.constants import TIMER_MAX_SECONDS, TIMER_MIN_SECONDS, TIMER_STEP_SECONDS
from core.errors import EmptyPool, InvalidCategory, InvalidPreset, InvalidTransition
from core.presets import clamp_timer_seconds
from core.schemas import Category
from core.session import DrillSession, SessionPhase
from core.session_builders import set_word_count, toggle_category
from core.store import StoreContext

logger = logging.getLogger(__name__)


def render_game_page(stores: StoreContext) -> None:
    """
    Render the game flow for the current phase.
    """
    session = get_drill_session()
    categories = stores.categories.list_categories(st.session_state.owner_id)
    phase = session.snapshot().phase

    if phase == SessionPhase.SETUP:
        _render_setup(session, stores, categories)
    elif phase in (SessionPhase.PLAYING, SessionPhase.PAUSED):
        _render_active_session(session)
    else:
        _render_finished(session, stores, categories)


# ---- Setup ----

def _render_setup(session: DrillSession, stores: StoreContext, categories: list[Category]) -> None:
    st.title("Game Setup")
    _render_presets(session, stores, categories)

    st.markdown("### Select Categories")
    for category in categories:
        selected = category.id in session.selection
        checked = st.checkbox(
            f"{category.name} ({len(category.words)} words)",
            value=selected,
            key=f"category_{category.id}_{selected}",
            disabled=not category.words,
        )
        if checked != selected:
            session.configure(selection=toggle_category(session.selection, category))
            st.rerun()

        if selected:
            _render_word_count(session, category)

    st.markdown("### Game Settings")
    slider_default = clamp_timer_seconds(session.timer_seconds)
    timer = st.slider(
        "Timer (seconds)",
        min_value=TIMER_MIN_SECONDS,
        max_value=TIMER_MAX_SECONDS,
        step=TIMER_STEP_SECONDS,
        value=slider_default,
    )
    if slider_default != session.timer_seconds and timer == slider_default:
        st.caption(
            f"⚠️ Loaded timer of {session.timer_seconds}s is outside the slider range; "
            "it is kept unless you move the slider."
        )
    repeat = st.checkbox("Repeat words when pool is empty", value=session.repeat_words)
    if timer != slider_default or repeat != session.repeat_words:
        session.configure(
            timer_seconds=timer if timer != slider_default else None,
            repeat_words=repeat,
        )

    if st.button("▶ Start Game", type="primary", use_container_width=True):
        try:
            session.start(categories)
        except (EmptyPool, InvalidCategory) as exc:
            st.error(str(exc))
            return
        st.session_state.last_tick = None
        st.session_state.history_saved = False
        st.rerun()

    _render_save_preset(session, stores)


def _render_word_count(session: DrillSession, category: Category) -> None:
    current = session.selection[category.id]
    if len(category.words) <= 1:
        st.caption("Number of words: 1")
        return

    count = st.slider(
        "Number of words",
        min_value=1,
        max_value=len(category.words),
        value=current,
        key=f"count_{category.id}_{current}",
    )
    if count != current:
        session.configure(selection=set_word_count(session.selection, category, count))
        st.rerun()


def _render_presets(session: DrillSession, stores: StoreContext, categories: list[Category]) -> None:
    presets = stores.presets.list(st.session_state.owner_id)
    if not presets:
        return

    st.markdown("### Load Preset")
    columns = st.columns(min(3, len(presets)))
    for index, (name, config) in enumerate(presets):
        with columns[index % len(columns)]:
            label = f"{name} ({len(config.selected_categories)} categories)"
            if st.button(label, key=f"preset_{index}", use_container_width=True):
                session.apply_preset(config, categories)
                st.toast(f"Loaded preset: {name}")
                st.rerun()


def _render_save_preset(session: DrillSession, stores: StoreContext) -> None:
    with st.expander("💾 Save Preset"):
        name = st.text_input("Preset Name", placeholder="Enter preset name")
        if st.button("Save", key="save_preset"):
            try:
                stores.presets.save(st.session_state.owner_id, name, session.to_preset())
            except InvalidPreset as exc:
                st.error(str(exc))
                return
            st.success("Preset saved successfully!")


# ---- Active Session ----

def _apply_action(action) -> None:
    # The timer may have finished the session since this frame was drawn
    try:
        action()
    except InvalidTransition as exc:
        logger.info("Ignored stale action: %s", exc)
    st.rerun()


@st.fragment(run_every=1)
def _render_countdown() -> None:
    session = get_drill_session()
    snapshot = session.snapshot()
    if snapshot.phase == SessionPhase.PLAYING:
        for _ in range(consume_elapsed_seconds()):
            snapshot = session.tick()
    else:
        st.session_state.last_tick = None

    render_session_stats(snapshot)
    if snapshot.phase == SessionPhase.FINISHED:
        st.rerun(scope="app")


def _render_active_session(session: DrillSession) -> None:
    _render_countdown()

    snapshot = session.snapshot()
    paused = snapshot.phase == SessionPhase.PAUSED

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("▶ Resume" if paused else "⏸ Pause", use_container_width=True):
            st.session_state.last_tick = None
            _apply_action(session.toggle_pause)
    with col2:
        if st.button("⏹ Finish", use_container_width=True):
            _apply_action(session.finish)
    with col3:
        if st.button("↺ Reset", use_container_width=True):
            session.reset()
            st.rerun()

    if paused:
        st.info("Paused")
        return

    if snapshot.current_word is None:
        return

    render_word_card(snapshot.current_word, corner_text=f"{snapshot.available_count} left")
    st.markdown("<br>", unsafe_allow_html=True)

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("🗑 Discard", use_container_width=True):
            _apply_action(session.discard)
    with col2:
        if st.button("🔄 Next Word", type="primary", use_container_width=True):
            _apply_action(session.draw)
    with col3:
        if st.button("↩ Return to Pool", use_container_width=True):
            _apply_action(session.return_to_pool)


# ---- Finished ----

def _render_finished(session: DrillSession, stores: StoreContext, categories: list[Category]) -> None:
    st.title("Game Finished!")
    render_session_complete(session.summary(), session.recorder.entries)

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("▶ Play Again", type="primary", use_container_width=True):
            try:
                session.start(categories)
            except (EmptyPool, InvalidCategory) as exc:
                st.error(str(exc))
                return
            st.session_state.last_tick = None
            st.session_state.history_saved = False
            st.rerun()
    with col2:
        if st.button("↺ New Game", use_container_width=True):
            session.reset()
            st.rerun()
    with col3:
        saved = st.session_state.history_saved
        if st.button("💾 Save to History", disabled=saved, use_container_width=True):
            stores.history.save(st.session_state.owner_id, session.to_record())
            st.session_state.history_saved = True
            st.rerun()
