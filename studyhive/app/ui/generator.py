# studyhive/app/ui/generator.py

import streamlit as st

from studyhive.app.services.generator import (
    FlashcardDeck,
    GenerationError,
    build_cheat_sheet,
    build_flashcards,
    cheat_sheet_markdown,
)


def flashcards_page():
    st.markdown("# 🃏 Flashcards Generator")
    st.caption("Convert your lecture notes into interactive flashcards")

    notes = st.text_area("📝 Paste your notes here", height=200, key="flashcard_notes")
    if st.button("✨ Generate flashcards"):
        with st.spinner("Generating..."):
            try:
                st.session_state["flashcard_deck"] = FlashcardDeck(build_flashcards(notes))
            except GenerationError as e:
                st.error(f"❌ {e}")

    deck = st.session_state.get("flashcard_deck")
    if not deck or not deck.cards:
        return

    card = deck.current
    with st.container(border=True):
        st.caption(f"Card {deck.index + 1} of {len(deck.cards)}")
        st.markdown(f"### {card['back'] if deck.flipped else card['front']}")

    cols = st.columns(3)
    if cols[0].button("◀ Previous"):
        deck.previous()
        st.rerun()
    if cols[1].button("🔄 Flip"):
        deck.flip()
        st.rerun()
    if cols[2].button("Next ▶"):
        deck.next()
        st.rerun()


def cheat_sheet_page():
    st.markdown("# 📄 Cheat Sheet Generator")

    notes = st.text_area("📝 Paste your notes here", height=200, key="cheat_sheet_notes")
    if st.button("✨ Generate cheat sheet"):
        with st.spinner("Generating..."):
            try:
                st.session_state["cheat_sheet"] = build_cheat_sheet(notes)
            except GenerationError as e:
                st.error(f"❌ {e}")

    definitions = st.session_state.get("cheat_sheet")
    if definitions:
        markdown = cheat_sheet_markdown(definitions)
        st.markdown(markdown)
        st.download_button("⬇ Download", markdown, file_name="cheat_sheet.md", mime="text/markdown")
