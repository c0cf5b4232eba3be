"""
app.py
Streamlit front end for the multi-location membership system.
Run: streamlit run app.py
"""

from __future__ import annotations

import streamlit as st

import config
import utils
from db import SnapshotStore
from logger import setup_logger
from models import LOCATIONS, MAX_CAPACITY, PAYMENT_METHODS, PLANS
from pricing import format_amount
from reports import capacity_usage, income_share, members_to_frame, summary_to_frame
from service import MembershipService

st.set_page_config(page_title="Fitness Membership", layout="wide")

EMPTY_FORM = {
    "full_name": "",
    "national_id": "",
    "age": "",
    "location_code": LOCATIONS[0],
    "plan_id": "BAS",
    "payment_method": "cash",
}


def get_service() -> MembershipService:
    # One service per browser session, hydrated once from the snapshot
    if "service" not in st.session_state:
        setup_logger(level=config.log_level())
        service = MembershipService(store=SnapshotStore())
        service.load()
        st.session_state.service = service
    return st.session_state.service


def dashboard_page(service: MembershipService):
    st.header("📊 Dashboard")

    summary = service.summarize()

    c1, c2, c3 = st.columns(3)
    c1.metric("Revenue", format_amount(summary.total_revenue))
    c2.metric("Active members", summary.total_count)
    c3.metric("Capacity used", f"{capacity_usage(summary.total_count)}%")
    st.progress(min(summary.total_count / MAX_CAPACITY, 1.0))

    st.divider()

    st.subheader("Performance by location")
    for s in summary.per_location:
        share = income_share(s.income, summary.total_revenue)
        st.write(f"**{s.location_code}** · {s.count} members · {format_amount(s.income)}")
        st.progress(share / 100)
    st.dataframe(summary_to_frame(summary), use_container_width=True, hide_index=True)

    st.divider()

    st.subheader("🧠 Advisor")
    if st.session_state.get("insight"):
        st.info(st.session_state.insight)
        if st.button("New analysis"):
            st.session_state.insight = None
            st.rerun()
    elif st.button("Analyze business", type="primary"):
        with st.spinner("Thinking..."):
            st.session_state.insight = service.ask_advisor()
        st.rerun()


def members_page(service: MembershipService):
    st.header("👥 Members")

    with st.sidebar:
        st.subheader("Search")
        query = st.text_input("Search (name / national ID)")

    members = service.search(query)
    if members:
        st.dataframe(members_to_frame(members), use_container_width=True, hide_index=True)
    else:
        st.caption("No members found.")
        return

    st.divider()

    options = {f"{m.full_name} ({m.national_id})": m.id for m in members}
    chosen = st.selectbox("Member", ["(none)"] + list(options.keys()))
    if chosen != "(none)":
        confirm = st.checkbox("Confirm remove", value=False, key="del_confirm")
        if st.button("Remove", disabled=not confirm):
            service.remove_member(options[chosen])
            st.success("Member removed.")
            st.rerun()


def register_page(service: MembershipService):
    st.header("➕ New member")

    form = st.session_state.setdefault("form", dict(EMPTY_FORM))

    form["full_name"] = st.text_input("Full name", value=form["full_name"])
    col1, col2 = st.columns(2)
    with col1:
        form["national_id"] = st.text_input("National ID (digits only)", value=form["national_id"])
    with col2:
        form["age"] = st.text_input("Age", value=form["age"])

    col1, col2, col3 = st.columns(3)
    with col1:
        form["location_code"] = st.selectbox("Location", LOCATIONS, index=LOCATIONS.index(form["location_code"]))
    with col2:
        plan_ids = list(PLANS.keys())
        form["plan_id"] = st.selectbox(
            "Plan",
            plan_ids,
            index=plan_ids.index(form["plan_id"]),
            format_func=lambda p: f"{PLANS[p].display_name} ({format_amount(PLANS[p].base_price)})",
        )
    with col3:
        form["payment_method"] = st.selectbox(
            "Payment method",
            PAYMENT_METHODS,
            index=PAYMENT_METHODS.index(form["payment_method"]),
            format_func=lambda p: "Card (+5%)" if p == "card" else "Cash / debit",
        )

    st.metric("Projected fee", format_amount(service.projected_fee(form)))

    if st.button("Validate and register", type="primary"):
        result = service.register_member(form)
        if result.ok:
            st.session_state.form = dict(EMPTY_FORM)
            st.session_state.page = "Members"
            st.success(f"Registered {result.member.full_name}.")
            st.rerun()
        else:
            st.error(result.message)


def reports_page(service: MembershipService):
    st.header("🧾 Reports")

    st.subheader("Export members to CSV")
    members = service.members()
    if members:
        st.download_button(
            "Download members.csv",
            data=utils.members_to_csv_bytes(members),
            file_name="members.csv",
            mime="text/csv",
        )
    else:
        st.caption("No members to export.")

    st.divider()

    st.subheader("Revenue by location")
    st.dataframe(summary_to_frame(service.summarize()), use_container_width=True, hide_index=True)

    st.divider()

    st.subheader("Sample data")
    st.caption("Register a few demo members for testing (adds new members each run).")
    if st.button("Insert sample data"):
        results = service.insert_sample_data()
        added = sum(1 for r in results if r.ok)
        st.success(f"Inserted {added} sample members.")
        st.rerun()


def main_app():
    service = get_service()

    st.sidebar.title("🏋️ Fitness Membership")
    st.sidebar.caption(f"{len(service.registry)}/{MAX_CAPACITY} members")

    pages = ["Dashboard", "Members", "New member", "Reports"]
    if "page" not in st.session_state:
        st.session_state.page = "Dashboard"
    st.session_state.page = st.sidebar.radio("Navigate", pages, index=pages.index(st.session_state.page))

    if st.session_state.page == "Dashboard":
        dashboard_page(service)
    elif st.session_state.page == "Members":
        members_page(service)
    elif st.session_state.page == "New member":
        register_page(service)
    elif st.session_state.page == "Reports":
        reports_page(service)


if __name__ == "__main__":
    main_app()
