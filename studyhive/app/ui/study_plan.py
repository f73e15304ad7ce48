# studyhive/app/ui/study_plan.py

import streamlit as st

from studyhive.app.services.state import StudyState
from studyhive.app.ui.common import run_action
from studyhive.server.core.stats import session_xp


def study_plan_page(state: StudyState):
    st.markdown("# 📚 Study Plan")

    st.markdown("## Courses")
    with st.expander("➕ Add course"):
        with st.form("add_course", clear_on_submit=True):
            name = st.text_input("Course name")
            color = st.color_picker("Color", value="#3b82f6")
            description = st.text_area("Description")
            submitted = st.form_submit_button("Add")
        if submitted:
            if not name.strip():
                st.warning("Course name is required.")
            else:
                run_action(lambda: state.add_course(name, color, description), "Course added.")

    for course in state.courses:
        cols = st.columns([6, 3, 1])
        with cols[0]:
            st.markdown(f"<span style='color:{course['color']}'>●</span> **{course['name']}**", unsafe_allow_html=True)
            if course.get("description"):
                st.caption(course["description"])
        with cols[1]:
            progress = st.slider("Progress", 0, 100, course.get("progress") or 0, key=f"progress_{course['id']}")
            if progress != course.get("progress"):
                state.update_course(course["id"], {"progress": progress})
        with cols[2]:
            if st.button("🗑️", key=f"del_course_{course['id']}"):
                state.delete_course(course["id"])
                st.rerun()

    st.markdown("## Log a study session")
    if not state.courses:
        st.info("Add a course first.")
    else:
        course_names = {c["id"]: c["name"] for c in state.courses}
        with st.form("log_session", clear_on_submit=True):
            course_id = st.selectbox("Course", options=list(course_names), format_func=course_names.get)
            duration = st.number_input("Duration (minutes)", min_value=1, max_value=24 * 60, value=30, step=5)
            notes = st.text_area("Notes")
            st.caption(f"You will earn {session_xp(int(duration))} XP.")
            submitted = st.form_submit_button("Log session")
        if submitted:
            run_action(
                lambda: state.add_study_session(course_id, int(duration), notes),
                "Session logged.",
            )

    st.markdown("## Recent sessions")
    course_names = {c["id"]: c["name"] for c in state.courses}
    for session in state.study_sessions[:10]:
        course = course_names.get(session["courseId"], "Unknown course")
        st.markdown(f"- {course} · {session['duration']} min · +{session['xpEarned']} XP")
