import streamlit as st
from streamlit.errors import StreamlitSecretNotFoundError

DEFAULT_API_URL = "https://report-dashboard-backend-srve.onrender.com/api/campaigns"

POLL_INTERVAL_SECONDS = 5 * 60
# Redraw cadence of the dashboard fragment, well under the poll interval
REDRAW_INTERVAL_SECONDS = 5

# --- Pipeline stages, left to right ---
STAGES = [
    {"id": "discovery", "name": "Discovery", "color": "#1F343F"},
    {"id": "lead", "name": "Lead", "color": "#2C537A"},
    {"id": "qualified", "name": "Qualified", "color": "#2C537A"},
    {"id": "viewing", "name": "Viewing", "color": "#7BA0B2"},
    {"id": "offer", "name": "Offer", "color": "#D9B9A0"},
    {"id": "deal", "name": "Deal", "color": "#2C537A"},
]
STAGE_IDS = [stage["id"] for stage in STAGES]

REPORT_ICONS = {
    "buyers": "🏠",
    "buyers-investors": "💼",
    "tenants": "🔑",
    "sellers": "🏢",
    "landlords": "🏛️",
}
DEFAULT_REPORT_ICON = REPORT_ICONS["buyers"]

CHANNEL_STYLES = {
    "email": {"icon": "✉️", "bg": "#2C537A", "text": "#FFFFFF", "border": "#1F343F"},
    "sms": {"icon": "📱", "bg": "#7BA0B2", "text": "#1F343F", "border": "#2C537A"},
    "ma": {"icon": "⚙️", "bg": "#D9B9A0", "text": "#1F343F", "border": "#7BA0B2"},
}
DEFAULT_CHANNEL = "email"

# (minimum score, bar color), checked top down
PERFORMANCE_TIERS = [
    (80, "#22c55e"),
    (60, "#eab308"),
]
PERFORMANCE_FLOOR_COLOR = "#ef4444"

PRIMARY_COLOR = "#2C537A"
ACCENT_COLOR = "#D9B9A0"
MUTED_COLOR = "#7BA0B2"


def get_stage(stage_id):
    for stage in STAGES:
        if stage["id"] == stage_id:
            return stage
    return None


def get_report_icon(report_id) -> str:
    return REPORT_ICONS.get(report_id, DEFAULT_REPORT_ICON)


def get_channel_style(channel) -> dict:
    """Display attributes for a channel; unrecognized channels use the email style."""
    return CHANNEL_STYLES.get(channel, CHANNEL_STYLES[DEFAULT_CHANNEL])


def load_api_url() -> str:
    """
    Returns the campaigns endpoint.

    An optional ``CAMPAIGNS_API_URL`` entry in Streamlit's secrets overrides
    the default endpoint. Without a secrets file the default is used.
    """
    try:
        return st.secrets.get("CAMPAIGNS_API_URL", DEFAULT_API_URL)
    except (FileNotFoundError, StreamlitSecretNotFoundError) as e:
        print(f"Warning: Could not read Streamlit secrets ({e}). Using default endpoint {DEFAULT_API_URL}.")
        return DEFAULT_API_URL
