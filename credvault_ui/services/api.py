# credvault_ui/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the credvault backend
API_URL = os.getenv("CREDVAULT_API_URL", "http://localhost:8080")
TIMEOUT_SECONDS = 10


# -------------------------------
# Authentication-related functions
# -------------------------------

def _post(path, payload):
    """
    Posts JSON and returns (status_code, body).
    Connection problems come back as status 0 with a message body.
    """
    try:
        response = requests.post(f"{API_URL}{path}", json=payload, timeout=TIMEOUT_SECONDS)
    except requests.RequestException:
        return 0, {"message": "Could not reach the server"}

    try:
        body = response.json()
    except ValueError:
        body = {"message": response.text or "Unexpected response"}
    return response.status_code, body


def signup_user(username, email, password):
    return _post("/signup", {"username": username, "email": email, "password": password})


def login_user(email, password):
    return _post("/login", {"email": email, "password": password})


def error_messages(body):
    """
    Flattens an error body into displayable lines.
    """
    if isinstance(body, dict) and isinstance(body.get("errors"), list):
        return [err.get("msg", "Invalid value") for err in body["errors"]]
    if isinstance(body, dict) and body.get("message"):
        return [body["message"]]
    return ["Something went wrong"]
