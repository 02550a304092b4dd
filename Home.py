"""MediPredict — Streamlit single-page disease case forecasting."""

from __future__ import annotations

import asyncio

import altair as alt
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from medipredict.config import (
    CATEGORIES,
    CATEGORY_ICONS,
    DISEASES,
    MONTHS,
    READING_FIELDS,
    READING_PLACEHOLDERS,
    READING_UNITS,
)
from medipredict.derive import DerivedView, category_label, disease_meta, display_name
from medipredict.models import PredictionResult
from medipredict.session import Phase, Session
from medipredict.utils.logging import quiet_transport_logs

st.set_page_config(
    page_title="MediPredict AI",
    page_icon="🏥",
    layout="wide",
)
quiet_transport_logs()

# ── Session ──────────────────────────────────────────────────────────────────
if "session" not in st.session_state:
    st.session_state.session = Session()
    with st.spinner("Fetching from database…"):
        asyncio.run(st.session_state.session.start())

session: Session = st.session_state.session

# ── Sidebar ──────────────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown(
        """
        #### ℹ️ How It Works
        1. Select a disease category and target month
        2. Past case counts load automatically from the database
        3. Enter current environmental readings
        4. Set festival & awareness indicators
        5. Click Generate to get AI predictions

        #### 🤖 Model Info
        Hybrid Bidirectional LSTM + Attention mechanism trained on 10 years of
        Sri Lanka hospital data.
        """
    )
    st.markdown("#### 📌 Disease Categories")
    st.markdown("\n".join(f"- {CATEGORY_ICONS[d]} {category_label(d)}" for d in DISEASES))

st.title("🏥 Disease Case Prediction")
st.caption("AI-powered monthly hospital resource planning for Sri Lanka")


# ── Collecting ───────────────────────────────────────────────────────────────

def _render_history() -> None:
    head, button = st.columns([4, 1])
    head.markdown("**📂 Current / Past Case Counts**")
    if button.button("⟳ Refresh", disabled=session.history.loading):
        with st.spinner("Fetching from database…"):
            asyncio.run(session.refresh_history())

    history = session.history
    if history.warning:
        st.warning(f"⚠ {history.warning}")
    elif history.snapshot is not None:
        counts = history.snapshot.rounded()
        cols = st.columns(max(len(counts), 1))
        for col, (disease, count) in zip(cols, counts.items()):
            col.metric(display_name(disease), count)
    else:
        st.caption("Select a month to load historical averages.")


def _render_inputs() -> None:
    st.subheader("🎯 Selection Inputs")
    left, right = st.columns(2)
    category = left.radio(
        "Disease Category",
        CATEGORIES,
        index=CATEGORIES.index(session.inputs.selection.category),
        format_func=lambda c: f"{CATEGORY_ICONS[c]} {category_label(c)}",
        horizontal=True,
    )
    session.inputs.set_category(category)

    month = right.radio(
        "Target Month",
        range(1, 13),
        index=session.inputs.selection.month - 1,
        format_func=lambda m: MONTHS[m - 1][:3],
        horizontal=True,
    )
    if month != session.inputs.selection.month:
        with st.spinner("Fetching from database…"):
            asyncio.run(session.set_month(month))

    st.subheader("📊 Data Inputs")
    _render_history()

    st.markdown("**🌦 Environmental Factors** · _Manual Input_")
    cols = st.columns(len(READING_FIELDS))
    for col, name in zip(cols, READING_FIELDS):
        raw = col.text_input(
            f"{name.capitalize()} ({READING_UNITS[name]})",
            value=getattr(session.inputs.readings, name) or "",
            placeholder=READING_PLACEHOLDERS[name],
        )
        session.inputs.set_reading(name, raw)
    for name in session.inputs.out_of_range():
        st.caption(f"⚠ {name.capitalize()} looks out of range.")

    st.subheader("🏮 Indicator Inputs")
    left, right = st.columns(2)
    festive = left.radio(
        "Festival / Event Indicator",
        ["No", "Yes"],
        index=1 if session.inputs.indicators.festive else 0,
        horizontal=True,
        help="Are there major festivals or public events this month?",
    )
    session.inputs.set_festive(festive == "Yes")

    awareness = right.slider(
        "Public Awareness Level",
        min_value=0.0,
        max_value=1.0,
        step=0.01,
        value=session.inputs.indicators.awareness,
    )
    session.inputs.set_awareness(awareness)
    label, colour = session.inputs.awareness_tier
    right.markdown(
        f"<span style='background:{colour};color:white;padding:2px 8px;border-radius:8px'>"
        f"{label} — {awareness:.2f}</span>",
        unsafe_allow_html=True,
    )

    if session.error:
        st.error(f"⚠ {session.error}")

    if st.button("🔮 Generate AI Prediction", type="primary", disabled=session.busy):
        with st.spinner("Running Prediction…"):
            asyncio.run(session.submit())
        st.rerun()


# ── Reviewing ────────────────────────────────────────────────────────────────

def _bar_chart(view: DerivedView) -> alt.Chart:
    df = pd.DataFrame(
        [{"name": p.name, "value": p.value, "color": p.color_hint} for p in view.bar_series]
    )
    return (
        alt.Chart(df)
        .mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X("name:N", sort=None, title=None, axis=alt.Axis(labelAngle=-35)),
            y=alt.Y("value:Q", title="Expected cases"),
            color=alt.Color("color:N", scale=None, legend=None),
            tooltip=[alt.Tooltip("name:N", title="Disease"), alt.Tooltip("value:Q", title="Expected cases")],
        )
        .properties(height=260)
    )


def _radar_chart(view: DerivedView) -> go.Figure:
    subjects = [p.subject for p in view.radar_series]
    values = [p.value for p in view.radar_series]
    fig = go.Figure(go.Scatterpolar(
        r=values + values[:1],
        theta=subjects + subjects[:1],
        fill="toself",
        name="Cases",
        line=dict(color="#1399c6", width=2),
        opacity=0.75,
    ))
    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True)),
        height=260,
        margin=dict(l=40, r=40, t=20, b=20),
        showlegend=False,
    )
    return fig


def _render_result(result: PredictionResult, view: DerivedView) -> None:
    head, button = st.columns([4, 1])
    head.subheader("Prediction Results")
    head.markdown(
        f"Target: **{result.requested_month}** · Category: "
        f"**{category_label(result.requested_category)}**"
    )
    if button.button("← New Prediction"):
        session.reset()
        st.rerun()

    st.metric(
        "🏥 Total expected patients",
        f"{result.total_expected_patients:,}",
        help=f"Across all disease categories · {result.requested_month} forecast",
    )

    if session.result_error:
        st.error(f"⚠ {session.result_error}")

    cols = st.columns(min(max(len(view.visible_entries), 1), 4))
    for i, (disease, count) in enumerate(view.visible_entries.items()):
        meta = disease_meta(disease)
        with cols[i % len(cols)]:
            st.metric(f"{meta.icon} {display_name(disease)}", count, view.severity_by_disease[disease],
                      delta_color="off")
            st.caption(meta.ward)
            st.progress(view.bar_fill_pct[disease] / 100)

    left, right = st.columns(2)
    with left:
        st.markdown("**Case Count Comparison**")
        st.altair_chart(_bar_chart(view), use_container_width=True)
    with right:
        st.markdown("**Disease Distribution Radar**")
        st.plotly_chart(_radar_chart(view), use_container_width=True)

    st.markdown("#### 🩺 Resource Allocation Recommendations")
    st.markdown("\n".join(f"- {rec}" for rec in result.recommendations) or "_None provided._")


if session.phase is Phase.REVIEWING and session.result is not None:
    _render_result(session.result, session.view())
else:
    _render_inputs()

st.divider()
st.caption("© 2026 MediPredict AI · Hospital Resource Intelligence System")
