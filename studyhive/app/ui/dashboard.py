# studyhive/app/ui/dashboard.py

import streamlit as st

from studyhive.app.services.state import StudyState
from studyhive.server.core.timeutil import parse_iso


def display_name(user: dict) -> str:
    return user.get("name") or (user.get("email") or "").split("@")[0] or "Student"


def dashboard_page(state: StudyState):
    user = st.session_state.get("user", {})
    st.title(f"Welcome back, {display_name(user)}!")
    st.caption("Ready to continue your learning journey?")

    progress = state.overall_progress()
    st.progress(progress / 100, text=f"Overall progress {progress}% · {len(state.courses)} courses active")

    data = state.study_data
    cols = st.columns(4)
    cols[0].metric("Total XP", f"{data['totalXP']:,}")
    cols[1].metric("Study Streak", f"{data['studyStreak']} days")
    cols[2].metric("Hours Studied", data["hoursStudied"])
    cols[3].metric("Goals Completed", data["goalsCompleted"])

    st.markdown("### ⏰ Upcoming deadlines")
    upcoming = state.upcoming_deadlines()
    if not upcoming:
        st.info("No upcoming deadlines. Nice!")
    for deadline in upcoming:
        due = parse_iso(deadline["dueDate"]).strftime("%b %d, %Y")
        st.markdown(f"- **{deadline['title']}** · due {due} · {deadline['priority']} priority")

    st.markdown("### 🏆 Achievements")
    for achievement in state.achievements():
        mark = "✅" if achievement["earned"] else "⬜"
        st.markdown(f"{mark} **{achievement['name']}** · {achievement['description']}")

    if st.button("🔄 Refresh"):
        state.refresh()
        st.rerun()
