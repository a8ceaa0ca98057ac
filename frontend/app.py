import os

import requests
import streamlit as st

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")


def post_search(payload: dict) -> dict:
    resp = requests.post(f"{BACKEND_URL}/hotels/search", json=payload, timeout=30)
    if resp.status_code == 422:
        detail = resp.json().get("detail")
        raise ValueError(detail if isinstance(detail, str) else "Please check the location you entered.")
    resp.raise_for_status()
    return resp.json()


def post_directions(origin: dict, hotel: dict) -> dict:
    payload = {
        "origin": origin,
        "destination": {"lat": hotel["lat"], "lng": hotel["lng"]},
        "hotel_name": hotel["name"],
    }
    resp = requests.post(f"{BACKEND_URL}/directions", json=payload, timeout=15)
    resp.raise_for_status()
    return resp.json()


def render_stars(rating: float) -> str:
    full = int(round(rating))
    return "★" * full + "☆" * (5 - full)


def render_hotel(hotel: dict, origin: dict) -> None:
    with st.container(border=True):
        image_col, body_col = st.columns([1, 3])
        if hotel["image_url"].startswith("http"):
            image_col.image(hotel["image_url"])
        else:
            image_col.markdown("🏨")
        body_col.markdown(f"### {hotel['name']}")
        body_col.markdown(
            f"{render_stars(hotel['rating'])} {hotel['rating']:.1f} | "
            f"{hotel['distance_text']} | {hotel['price_range']}"
        )
        body_col.caption(hotel["address"])

        with body_col.expander("Details"):
            st.markdown(f"**Phone:** {hotel.get('phone') or 'Not available'}")
            if hotel.get("website"):
                st.markdown(f"**Website:** [{hotel['website']}]({hotel['website']})")
            if hotel["amenities"]:
                st.markdown("**Amenities:** " + ", ".join(hotel["amenities"]))
            if hotel["opening_hours"]:
                st.markdown("**Opening hours**")
                for line in hotel["opening_hours"]:
                    st.markdown(f"- {line}")
            for review in hotel["reviews"]:
                st.markdown(f"> {review['text']}  \n— {review['author']} ({review['rating']:.0f}/5)")

        fetched = st.session_state.setdefault("directions", {})
        if body_col.button("Get directions", key=f"directions-{hotel['id']}"):
            try:
                fetched[hotel["id"]] = post_directions(origin, hotel)
            except requests.RequestException as exc:
                body_col.error(f"Could not get directions: {exc}")

        directions = fetched.get(hotel["id"])
        if directions:
            route = directions.get("route_info")
            if route:
                body_col.caption(
                    f"🚗 {route['duration_minutes']} min drive, {route['distance_km']:.1f} km by road"
                )
            body_col.link_button("Open in Google Maps", directions["directions_url"])


st.set_page_config(page_title="Hotel Finder", layout="centered")
st.title("Find Hotels Near You")
st.caption("Discover hotels with ratings and get directions")

with st.sidebar.form("location_form"):
    st.subheader("Where are you looking for hotels?")
    location = st.text_input("Area name or address", placeholder="e.g. London")
    use_coordinates = st.checkbox("Search by coordinates instead")
    lat = st.number_input("Latitude", min_value=-90.0, max_value=90.0, value=40.7128, format="%.4f")
    lng = st.number_input("Longitude", min_value=-180.0, max_value=180.0, value=-74.0060, format="%.4f")
    radius_km = st.slider("Radius (km)", min_value=1, max_value=20, value=5)
    submitted = st.form_submit_button("Search")

if submitted:
    payload: dict = {
        "radius_meters": int(radius_km * 1000),
        "session_id": st.session_state.get("session_id"),
    }
    if use_coordinates:
        payload["lat"] = float(lat)
        payload["lng"] = float(lng)
    else:
        payload["location"] = location
    try:
        with st.spinner("Finding hotels near you..."):
            result = post_search(payload)
        st.session_state["session_id"] = result["session_id"]
        st.session_state["search"] = result
        st.session_state["directions"] = {}
    except ValueError as exc:
        st.error(str(exc))
    except requests.RequestException as exc:
        st.error(f"Search failed, please try again: {exc}")

search = st.session_state.get("search")

if not search:
    st.info("Enter an area name or coordinates to get started.")
else:
    place = search["location"]
    st.markdown(f"📍 Searching near: **{place['display_address']}**")
    if search.get("notice"):
        st.info(search["notice"])
    st.subheader(f"Hotels near you ({len(search['hotels'])} found)")
    origin = {"lat": place["lat"], "lng": place["lng"]}
    for hotel in search["hotels"]:
        render_hotel(hotel, origin)
