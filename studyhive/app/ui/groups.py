# studyhive/app/ui/groups.py

import time

import streamlit as st

from studyhive.app.services.groups import StudyGroups
from studyhive.app.services.pomodoro import PRESETS, RUNNING, PomodoroTimer


def _timer() -> PomodoroTimer:
    if "pomodoro" not in st.session_state:
        st.session_state["pomodoro"] = PomodoroTimer()
        st.session_state["pomodoro_last_tick"] = time.monotonic()
    return st.session_state["pomodoro"]


def _groups() -> StudyGroups:
    if "study_groups" not in st.session_state:
        st.session_state["study_groups"] = StudyGroups()
    return st.session_state["study_groups"]


def pomodoro_panel():
    timer = _timer()

    now = time.monotonic()
    elapsed = int(now - st.session_state["pomodoro_last_tick"])
    if timer.state == RUNNING and elapsed > 0:
        st.session_state["pomodoro_last_tick"] += elapsed
        award = timer.tick(elapsed)
        if award:
            st.balloons()
            st.success(f"🍅 Pomodoro complete! +{award} XP")
    elif timer.state != RUNNING:
        st.session_state["pomodoro_last_tick"] = now

    st.markdown("### 🍅 Pomodoro Timer")
    st.markdown(f"# {timer.display}")

    cols = st.columns(2)
    if cols[0].button("⏸ Pause" if timer.state == RUNNING else "▶ Start"):
        timer.toggle()
        st.session_state["pomodoro_last_tick"] = time.monotonic()
        st.rerun()
    if cols[1].button("↺ Reset"):
        timer.reset()
        st.rerun()

    cols = st.columns(3)
    labels = {"focus": "Focus 25m", "short_break": "Break 5m", "long_break": "Long 15m"}
    for col, (preset, seconds) in zip(cols, PRESETS.items()):
        if col.button(labels[preset]):
            timer.set_duration(seconds)
            st.rerun()

    st.markdown(f"Pomodoros completed: **{timer.completed_count}**")
    st.markdown(f"XP earned: **+{timer.xp_earned} XP**")

    if timer.state == RUNNING:
        time.sleep(1)
        st.rerun()


def groups_page():
    groups = _groups()
    st.markdown("# 👥 Study Groups")
    st.caption("Join study rooms with Pomodoro timers, earn XP, and collaborate with peers")

    main, side = st.columns([2, 1])
    with main:
        if groups.active_room is None:
            for room in groups.rooms:
                with st.container(border=True):
                    st.markdown(f"**{room['name']}** · {room['subject']}")
                    st.caption(
                        f"Host {room['host']} · {room['participants']}/{room['maxParticipants']} · "
                        f"{room['xpReward']} XP"
                    )
                    if room["isActive"] and st.button("Join", key=f"join_{room['id']}"):
                        groups.join(room["id"])
                        st.rerun()
        else:
            room = groups.active_room
            st.markdown(f"## {room['name']}")
            if st.button("Leave room"):
                groups.leave()
                st.rerun()
            for message in groups.messages:
                with st.chat_message("user" if message["user"] == "You" else "assistant"):
                    st.markdown(f"**{message['user']}** · {message['timestamp']:%H:%M}")
                    st.markdown(message["message"])
            text = st.chat_input("Type a message...")
            if text:
                groups.send(text)
                st.rerun()

    with side:
        pomodoro_panel()
