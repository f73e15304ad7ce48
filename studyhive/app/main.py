# studyhive/app/main.py

import streamlit as st

st.set_page_config(page_title="StudyHive", page_icon="🐝", layout="wide")

from studyhive.app.ui.common import get_study_state  # noqa: E402
from studyhive.app.ui.dashboard import dashboard_page  # noqa: E402
from studyhive.app.ui.deadlines import deadlines_page  # noqa: E402
from studyhive.app.ui.generator import cheat_sheet_page, flashcards_page  # noqa: E402
from studyhive.app.ui.groups import groups_page  # noqa: E402
from studyhive.app.ui.login import login_page, logout  # noqa: E402
from studyhive.app.ui.study_plan import study_plan_page  # noqa: E402


PAGES = {
    "dashboard": "🏠 Dashboard",
    "study_plan": "📚 Study Plan",
    "deadlines": "📅 Deadlines",
    "flashcards": "🃏 Flashcards",
    "cheat_sheet": "📄 Cheat Sheet",
    "groups": "👥 Study Groups",
}


def main_page():
    st.sidebar.markdown("## 🐝 StudyHive")

    for key, label in PAGES.items():
        if st.sidebar.button(label, key=f"nav_{key}"):
            st.session_state["page"] = key
    if st.sidebar.button("🧪 Load sample data"):
        get_study_state().load_sample_data()
    if st.sidebar.button("🔓 Log out"):
        logout()
        st.session_state.clear()
        st.rerun()

    page = st.session_state.get("page", "dashboard")
    if page == "dashboard":
        dashboard_page(get_study_state())
    elif page == "study_plan":
        study_plan_page(get_study_state())
    elif page == "deadlines":
        deadlines_page(get_study_state())
    elif page == "flashcards":
        flashcards_page()
    elif page == "cheat_sheet":
        cheat_sheet_page()
    elif page == "groups":
        groups_page()


if "access_token" not in st.session_state:
    login_page()
else:
    main_page()
