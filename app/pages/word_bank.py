"""
Word bank page rendering.
"""

from __future__ import annotations

import streamlit as st

from core.errors import CategoryNotOwned, InvalidCategory
from core.store import StoreContext, parse_word_list


def render_word_bank_page(stores: StoreContext) -> None:
    owner_id = st.session_state.owner_id
    st.subheader("Word Bank")

    with st.form("new_category", clear_on_submit=True):
        name = st.text_input("New category name")
        if st.form_submit_button("Create Category"):
            try:
                stores.categories.create_category(owner_id, name)
            except ValueError as exc:
                st.error(str(exc))
            else:
                st.success(f"Created category: {name.strip()}")

    for category in stores.categories.list_categories(owner_id):
        with st.expander(f"{category.name} ({len(category.words)} words)"):
            st.write(", ".join(category.words) or "No words yet.")
            if category.is_builtin:
                st.caption("Built-in category")
                continue

            with st.form(f"add_words_{category.id}", clear_on_submit=True):
                text = st.text_area("Add words (comma or newline separated)")
                if st.form_submit_button("Add Words"):
                    try:
                        added = stores.categories.add_words(owner_id, category.id, parse_word_list(text))
                    except (CategoryNotOwned, InvalidCategory) as exc:
                        st.error(str(exc))
                    else:
                        st.success(f"Added {len(added)} words")
