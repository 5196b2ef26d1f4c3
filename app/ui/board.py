# app/ui/board.py

import streamlit as st
from services.api import list_tasks, update_task_status
from ui.login import show_error
from ui.forms import STATUSES, STATUS_LABELS, group_by_status


def board_page():
    st.title("🗂️ 보드")

    token = st.session_state["access_token"]

    tasks = list_tasks(token)
    if show_error(tasks):
        return

    columns = group_by_status(tasks)

    for i, (status, col) in enumerate(zip(STATUSES, st.columns(len(STATUSES)))):
        with col:
            st.subheader(f"{STATUS_LABELS[status]} ({len(columns[status])})")
            for task in columns[status]:
                with st.container(border=True):
                    st.markdown(f"**{task['title']}**")
                    if task.get("description"):
                        st.caption(task["description"])

                    left, right = st.columns(2)
                    if i > 0 and left.button("◀", key=f"left_{task['id']}"):
                        move(token, task, STATUSES[i - 1])
                    if i < len(STATUSES) - 1 and right.button("▶", key=f"right_{task['id']}"):
                        move(token, task, STATUSES[i + 1])


def move(token, task, status):
    result = update_task_status(token, task["id"], status)
    if not show_error(result):
        st.rerun()
