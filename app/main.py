# app/main.py

import streamlit as st
from dotenv import load_dotenv
from ui.login import login_page, logout
from ui.tasks import tasks_page
from ui.board import board_page
from ui.stats import stats_page


load_dotenv()


#st.set_page_config(page_title="Task Tracker", layout="wide")

def main_page():
    st.sidebar.markdown(f"### 👋 {st.session_state['username']}")
    st.sidebar.markdown("## 📋 메뉴")

    if st.sidebar.button("📋 작업 목록"):
        st.session_state["page"] = "tasks"
    if st.sidebar.button("🗂️ 보드"):
        st.session_state["page"] = "board"
    if st.sidebar.button("📊 통계"):
        st.session_state["page"] = "stats"
    if st.sidebar.button("🔓 로그아웃"):
        logout()
        st.session_state.clear()
        st.rerun()

    page = st.session_state.get("page", "tasks")
    if page == "board":
        board_page()
    elif page == "stats":
        stats_page()
    else:
        tasks_page()


if "access_token" not in st.session_state:
    login_page()
else:
    main_page()
