# app/ui/tasks.py

import streamlit as st
from services.api import (
    list_tasks,
    create_task,
    update_task,
    update_task_status,
    delete_task,
)
from ui.forms import STATUSES, STATUS_LABELS, TITLE_MAX, DESCRIPTION_MAX, validate_task_input
from ui.login import show_error


def tasks_page():
    st.title("📋 내 작업")

    token = st.session_state["access_token"]

    tasks = list_tasks(token)
    if show_error(tasks):
        return

    with st.container():
        if st.button("➕ 새 작업"):
            st.session_state["editing_task"] = None
            st.session_state["show_task_form"] = not st.session_state.get("show_task_form", False)

    if st.session_state.get("show_task_form"):
        task_form(token, st.session_state.get("editing_task"))

    status_filter = st.selectbox(
        "상태 필터",
        options=["ALL"] + STATUSES,
        format_func=lambda s: "전체" if s == "ALL" else STATUS_LABELS[s],
    )
    if status_filter != "ALL":
        tasks = [t for t in tasks if t["status"] == status_filter]

    if not tasks:
        st.info("작업이 없습니다.")
        return

    for task in tasks:
        task_card(token, task)


def task_card(token, task):
    with st.container(border=True):
        st.markdown(f"**{task['title']}**")
        if task.get("description"):
            st.caption(task["description"])

        col1, col2, col3 = st.columns([3, 1, 1])
        with col1:
            new_status = st.selectbox(
                "상태",
                options=STATUSES,
                index=STATUSES.index(task["status"]),
                format_func=STATUS_LABELS.get,
                key=f"status_{task['id']}",
                label_visibility="collapsed",
            )
            if new_status != task["status"]:
                result = update_task_status(token, task["id"], new_status)
                if not show_error(result):
                    st.rerun()
        with col2:
            if st.button("✏️ 수정", key=f"edit_{task['id']}"):
                st.session_state["editing_task"] = task
                st.session_state["show_task_form"] = True
                st.rerun()
        with col3:
            if st.button("🗑️ 삭제", key=f"delete_{task['id']}"):
                st.session_state["confirm_delete"] = task["id"]

        if st.session_state.get("confirm_delete") == task["id"]:
            st.warning(f"⚠️ '{task['title']}' 작업을 삭제하시겠습니까?")
            if st.button("삭제 확인", key=f"confirm_{task['id']}"):
                result = delete_task(token, task["id"])
                st.session_state.pop("confirm_delete", None)
                if not show_error(result):
                    st.success("삭제되었습니다.")
                    st.rerun()
            if st.button("❌ 취소", key=f"cancel_{task['id']}"):
                st.session_state.pop("confirm_delete", None)
                st.rerun()


def task_form(token, task=None):
    editing = task is not None

    with st.form("task_form"):
        st.subheader("✏️ 작업 수정" if editing else "➕ 새 작업")
        title = st.text_input("제목", value=task["title"] if editing else "", max_chars=TITLE_MAX)
        description = st.text_area(
            "설명",
            value=(task.get("description") or "") if editing else "",
            max_chars=DESCRIPTION_MAX,
        )
        status = st.selectbox(
            "상태",
            options=STATUSES,
            index=STATUSES.index(task["status"]) if editing else 0,
            format_func=STATUS_LABELS.get,
        )
        submitted = st.form_submit_button("💾 저장")

    if not submitted:
        return

    errors = validate_task_input(title, description)
    if errors:
        for e in errors:
            st.error(e)
        return

    if editing:
        result = update_task(token, task["id"], title, description or None, status)
    else:
        result = create_task(token, title, description or None, status)

    if show_error(result):
        return

    st.session_state["show_task_form"] = False
    st.session_state["editing_task"] = None
    st.rerun()
