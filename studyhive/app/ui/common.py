# studyhive/app/ui/common.py

import streamlit as st

from studyhive.app.services.api import ApiError
from studyhive.app.services.state import StudyState


def get_study_state() -> StudyState:
    """
    One StudyState per browser session, loaded from the server on first use.
    """
    state = st.session_state.get("study_state")
    if state is None or state.token != st.session_state.get("access_token"):
        state = StudyState(st.session_state["access_token"])
        try:
            state.refresh()
        except ApiError as e:
            st.error(f"❌ Could not load your data: {e.message}")
        st.session_state["study_state"] = state
    return state


def run_action(action, success_message=None):
    """
    Runs a state mutation and reports the outcome. The state has already
    rolled itself back when an ApiError comes out.
    """
    try:
        result = action()
    except ApiError as e:
        st.error(f"❌ {e.message}")
        return None
    if success_message:
        st.success(success_message)
    return result
