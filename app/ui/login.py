# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from services.api import login_user, register_user
from ui.forms import validate_registration

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

cookies = EncryptedCookieManager(password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def logout():
    cookies.clear()
    cookies.save()


def show_error(result):
    """
    Shows an API error, if any. An expired or rejected token logs the user out.
    Returns True when the result was an error.
    """
    if not (isinstance(result, dict) and result.get("error")):
        return False
    if result.get("code") == "UNAUTHORIZED":
        logout()
        st.session_state.clear()
        st.rerun()
    st.error(result["error"])
    return True


def _remember(token, username):
    st.session_state["access_token"] = token
    st.session_state["username"] = username
    cookies["access_token"] = token
    cookies["username"] = username
    cookies.save()


def login_page():
    st.title("🔐 로그인")

    if "access_token" not in st.session_state:
        if cookies.get("access_token"):
            st.session_state["access_token"] = cookies["access_token"]
            st.session_state["username"] = cookies["username"]
            st.rerun()

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("아이디")
        password = st.text_input("비밀번호", type="password")
        submitted = st.form_submit_button("로그인")

    if submitted:
        with st.spinner("로그인 중..."):
            result = login_user(username, password)
        if result.get("error"):
            st.error(f"❌ 로그인 실패: {result['error']}")
        else:
            _remember(result["token"], result["username"])
            st.success("✅ 로그인 성공!")
            st.rerun()

    if st.button("회원가입"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 회원가입")

    new_user = st.text_input("새 아이디", key="new_user")
    new_pass = st.text_input("새 비밀번호", type="password", key="new_pass")
    confirm_pass = st.text_input("비밀번호 확인", type="password", key="confirm_pass")

    if st.button("가입하기"):
        errors = validate_registration(new_user, new_pass, confirm_pass)
        if errors:
            for e in errors:
                st.error(f"❌ {e}")
            return
        with st.spinner("회원가입 처리 중..."):
            result = register_user(new_user, new_pass)
        if result.get("error"):
            st.error(f"❌ 실패: {result['error']}")
        else:
            # registration already returns a token, so the user is signed in right away
            _remember(result["token"], result["username"])
            st.session_state["show_register"] = False
            st.success("🎉 회원가입 성공!")
            st.rerun()

    if st.button("← 로그인으로 돌아가기"):
        st.session_state["show_register"] = False
        st.rerun()
