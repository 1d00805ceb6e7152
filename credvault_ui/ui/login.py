# credvault_ui/ui/login.py

import streamlit as st
from credvault_ui.services.api import error_messages, login_user, signup_user


def login_page():
    st.title("🔐 Login")

    if "show_signup" not in st.session_state:
        st.session_state["show_signup"] = False

    if st.session_state["show_signup"]:
        show_signup_form()
    else:
        show_login_form()


def _show_errors(prefix, body):
    for message in error_messages(body):
        st.error(f"❌ {prefix}: {message}")


def show_login_form():
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        with st.spinner("Logging in..."):
            status, body = login_user(email, password)
        if status == 200:
            st.success(f"✅ {body.get('message', 'Login successful')}")
        else:
            _show_errors("Login failed", body)

    if st.button("Sign up"):
        st.session_state["show_signup"] = True
        st.rerun()


def show_signup_form():
    st.subheader("📝 Sign up")

    with st.form("signup_form"):
        username = st.text_input("Username")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Create account")

    if submitted:
        with st.spinner("Creating account..."):
            status, body = signup_user(username, email, password)
        if status == 201:
            st.success("🎉 Account created! You can log in now.")
            st.session_state["show_signup"] = False
        else:
            _show_errors("Sign up failed", body)

    if st.button("← Back to login"):
        st.session_state["show_signup"] = False
        st.rerun()
