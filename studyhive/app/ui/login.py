# studyhive/app/ui/login.py

import streamlit as st
from streamlit_cookies_manager import EncryptedCookieManager

from studyhive.app.config import COOKIE_PASSWORD
from studyhive.app.services.api import ApiError, get_user_info, login_user, register_user


cookies = EncryptedCookieManager(prefix="studyhive/", password=COOKIE_PASSWORD or "studyhive-dev-cookie")
if not cookies.ready():
    st.stop()


def _remember(result):
    st.session_state["access_token"] = result["token"]
    st.session_state["user"] = result["user"]
    cookies["access_token"] = result["token"]
    cookies.save()


def logout():
    cookies.clear()
    cookies.save()


def restore_session(token):
    """
    Resumes a session from the cookie once the server confirms the token.
    """
    try:
        user = get_user_info(token)
    except ApiError as e:
        if e.status in (401, 404):
            logout()
            st.info("Your session has expired. Please sign in again.")
        else:
            st.error(f"❌ Could not restore your session: {e.message}")
        return
    st.session_state["access_token"] = token
    st.session_state["user"] = user
    st.rerun()


def login_page():
    st.title("🐝 StudyHive")

    token = cookies.get("access_token")
    if token and "access_token" not in st.session_state:
        restore_session(token)

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in")

    if submitted:
        with st.spinner("Signing in..."):
            try:
                result = login_user(email, password)
            except ApiError as e:
                st.error(f"❌ Login failed: {e.message}")
            else:
                _remember(result)
                st.success("✅ Welcome back!")
                st.rerun()

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Create your account")

    with st.form("register_form"):
        name = st.text_input("Full name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        st.caption(
            "At least 8 characters, with an uppercase letter, a lowercase letter, "
            "a number and a special character."
        )
        submitted = st.form_submit_button("Sign up")

    if submitted:
        with st.spinner("Creating account..."):
            try:
                result = register_user(name, email, password)
            except ApiError as e:
                st.error(f"❌ Registration failed: {e.message}")
            else:
                _remember(result)
                st.session_state["show_register"] = False
                st.success("🎉 Account created!")
                st.rerun()

    if st.button("← Back to sign in"):
        st.session_state["show_register"] = False
        st.rerun()
