"""
Statistics page rendering.
"""

from __future__ import annotations

import streamlit as st

from core.analytics import build_owner_statistics
from core.store import StoreContext


def render_statistics_page(stores: StoreContext) -> None:
    st.subheader("Statistics")

    stats = build_owner_statistics(stores.history, st.session_state.owner_id)
    if stats.total_games == 0:
        st.info("No games saved yet. Finish a game and save it to history.")
        return

    col1, col2, col3 = st.columns(3)
    col1.metric("Total Games", stats.total_games)
    col2.metric("Words Practiced", stats.total_words)
    col3.metric("Avg Words / Game", stats.average_words_per_game)

    col4, col5, col6 = st.columns(3)
    col4.metric("Play Time (min)", stats.total_play_minutes)
    col5.metric("Games This Week", stats.games_this_week)
    col6.metric("Day Streak", stats.streak)

    st.markdown("### Games Played This Week")
    st.bar_chart(stats.games_per_weekday.rename("games").to_frame())

    st.markdown("### Recent Activity")
    for game in stats.recent_activity:
        col_left, col_right = st.columns([3, 1])
        col_left.markdown(f"**Game Session**  \n{game.words_used} words • {game.minutes} min")
        col_right.caption(game.created_at.strftime("%Y-%m-%d"))

    st.markdown("### Achievements")
    columns = st.columns(3)
    for index, achievement in enumerate(stats.achievements):
        with columns[index % len(columns)]:
            icon = "🏆" if achievement.earned else "🔒"
            st.markdown(f"{icon} **{achievement.name}**")
            st.caption(achievement.description)
