# credvault_ui/main.py

import streamlit as st
from dotenv import load_dotenv
from credvault_ui.ui.login import login_page


load_dotenv()


st.set_page_config(page_title="credvault")

login_page()
