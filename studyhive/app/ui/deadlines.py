# studyhive/app/ui/deadlines.py

from datetime import date, datetime, timezone

import streamlit as st

from studyhive.app.services.api import ApiError
from studyhive.app.services.state import StudyState
from studyhive.app.ui.common import run_action
from studyhive.server.core.timeutil import parse_iso, to_iso


def deadline_status(deadline: dict, today: date | None = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    due = parse_iso(deadline["dueDate"]).date()
    if due < today:
        return "overdue"
    if due == today:
        return "today"
    return "upcoming"


def apply_completed(state: StudyState, deadline_id: str, widget_state, key: str) -> str | None:
    """
    Sends a checkbox change to the server. On failure the checkbox is set
    back to the rolled-back value and the error message is returned.
    """
    checked = widget_state[key]
    try:
        state.update_deadline(deadline_id, {"completed": checked})
    except ApiError as e:
        widget_state[key] = next(
            (d["completed"] for d in state.deadlines if d["id"] == deadline_id),
            not checked,
        )
        return e.message
    return None


def _on_completed_change(state: StudyState, deadline_id: str):
    error = apply_completed(state, deadline_id, st.session_state, f"done_{deadline_id}")
    if error:
        st.session_state["deadline_error"] = error


def deadlines_page(state: StudyState):
    st.markdown("# 📅 Deadlines")

    if "deadline_error" in st.session_state:
        st.error(f"❌ {st.session_state.pop('deadline_error')}")

    course_names = {c["id"]: c["name"] for c in state.courses}

    with st.expander("➕ Add deadline"):
        with st.form("add_deadline", clear_on_submit=True):
            title = st.text_input("Title")
            description = st.text_area("Description")
            course_id = st.selectbox(
                "Course",
                options=[None, *course_names],
                format_func=lambda cid: "No course" if cid is None else course_names[cid],
            )
            due = st.date_input("Due date")
            priority = st.selectbox("Priority", options=["low", "medium", "high"], index=1)
            submitted = st.form_submit_button("Add")

        if submitted:
            if not title.strip():
                st.warning("Title is required.")
            else:
                due_iso = to_iso(datetime(due.year, due.month, due.day, tzinfo=timezone.utc))
                run_action(
                    lambda: state.add_deadline(title, due_iso, description, course_id, priority),
                    "Deadline added.",
                )

    if not state.deadlines:
        st.info("No deadlines yet.")
        return

    for deadline in state.deadlines:
        status = deadline_status(deadline)
        cols = st.columns([1, 8, 1])
        with cols[0]:
            key = f"done_{deadline['id']}"
            st.session_state[key] = deadline["completed"]
            st.checkbox(
                "done",
                key=key,
                label_visibility="collapsed",
                on_change=_on_completed_change,
                args=(state, deadline["id"]),
            )
        with cols[1]:
            title = f"~~{deadline['title']}~~" if deadline["completed"] else f"**{deadline['title']}**"
            course = course_names.get(deadline.get("courseId"), "")
            flag = ""
            if not deadline["completed"] and status == "overdue":
                flag = " · 🔴 overdue"
            elif not deadline["completed"] and status == "today":
                flag = " · 🟠 due today"
            due = parse_iso(deadline["dueDate"]).strftime("%b %d, %Y")
            st.markdown(f"{title} · {due} · {deadline['priority']}{flag}")
            if deadline.get("description"):
                st.caption(deadline["description"] + (f" · {course}" if course else ""))
        with cols[2]:
            if st.button("🗑️", key=f"del_{deadline['id']}"):
                run_action(lambda: state.delete_deadline(deadline["id"]))
                st.rerun()
