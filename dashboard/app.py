"""Streamlit operator dashboard for the hotel booking API."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

import pandas as pd
import requests
import streamlit as st

# ==========================================
# Configuration & Constants
# ==========================================
# Point this to your local FastAPI server
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")

STATUS_COLORS = {
    "free": "#d9f2dd",
    "booked": "#f4c7c3",
    "blocked": "#d0d0d0",
}
SELECTED_COLOR = "#ffd54f"

st.set_page_config(
    page_title="Hotel Room Reservation",
    page_icon="🏨",
    layout="wide",
)


# ==========================================
# API Helper Functions
# ==========================================
def fetch_hotel() -> Optional[Dict[str, Any]]:
    """Current floors, stats and latest feedback."""
    try:
        response = requests.get(f"{API_BASE_URL}/hotel", timeout=5)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        st.error(f"Backend connection failed: {e}")
        return None


def submit_booking(room_count: int) -> None:
    try:
        response = requests.post(
            f"{API_BASE_URL}/bookings",
            json={"room_count": room_count},
            timeout=10,
        )
    except requests.exceptions.RequestException as e:
        st.error(f"Booking failed: {e}")
        return
    if response.status_code in (400, 409):
        # Rejections are also recorded in the hotel message shown below.
        return
    if not response.ok:
        st.error(f"Booking failed: HTTP {response.status_code}")


def submit_random_occupancy() -> None:
    try:
        response = requests.post(f"{API_BASE_URL}/occupancy/random", json={}, timeout=5)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        st.error(f"Random occupancy failed: {e}")


def submit_reset() -> None:
    try:
        response = requests.post(f"{API_BASE_URL}/reset", timeout=5)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        st.error(f"Reset failed: {e}")


# ==========================================
# UI Rendering
# ==========================================
def _room_chip(room: Dict[str, Any], selected: bool) -> str:
    color = SELECTED_COLOR if selected else STATUS_COLORS.get(room["status"], "#ffffff")
    return (
        f'<span style="display:inline-block;width:58px;margin:2px;padding:6px 0;'
        f'text-align:center;border-radius:4px;background:{color};">{room["room_id"]}</span>'
    )


def render_controls() -> None:
    left, right = st.columns([3, 2])
    with left:
        room_count = st.number_input("Rooms to book (1–5)", min_value=1, max_value=5, value=1)
        if st.button("Book rooms", type="primary"):
            submit_booking(int(room_count))
    with right:
        if st.button("Random occupancy"):
            submit_random_occupancy()
        if st.button("Reset hotel"):
            submit_reset()


def render_feedback(hotel: Dict[str, Any]) -> None:
    message = hotel.get("message")
    last_booking = hotel.get("last_booking")
    if last_booking:
        st.success(message)
        df = pd.DataFrame(last_booking["rooms"])
        st.dataframe(df, use_container_width=True)
    elif message:
        st.info(message)
    else:
        st.caption('No booking yet. Choose number of rooms and click "Book rooms".')


def render_floors(hotel: Dict[str, Any]) -> None:
    st.subheader("Hotel layout")
    last_booking = hotel.get("last_booking") or {}
    selected_ids = {room["room_id"] for room in last_booking.get("rooms", [])}

    for floor in hotel.get("floors", []):
        chips = "".join(
            _room_chip(room, room["room_id"] in selected_ids) for room in floor["rooms"]
        )
        st.markdown(
            f"**Floor {floor['floor']}** &nbsp; ◀ stairs / lift &nbsp; {chips}",
            unsafe_allow_html=True,
        )


# ==========================================
# Main App
# ==========================================
def main() -> None:
    st.title("Hotel Room Reservation System")
    st.caption("97 rooms · 10 floors · Optimal grouping by travel time")

    render_controls()

    hotel = fetch_hotel()
    if hotel is None:
        return

    stats = hotel.get("stats", {})
    col_a, col_b, col_c = st.columns(3)
    col_a.metric("Total rooms", stats.get("total", 0))
    col_b.metric("Free", stats.get("free", 0))
    col_c.metric("Booked", stats.get("booked", 0))

    render_feedback(hotel)
    render_floors(hotel)


if __name__ == "__main__":
    main()
