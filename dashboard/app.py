"""Race Ranking Dashboard — Streamlit + Plotly over the race_elo scorer."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from race_elo import RaceEloError

from shared import (
    ACCENT_RED,
    CONSISTENCY_HELP,
    ELO_HELP,
    INPUT_PLACEHOLDER,
    PLOTLY_LAYOUT_DEFAULTS,
    TABLE_COLUMNS,
    RaceRankingService,
    TableSortState,
    build_table_frame,
    format_gap,
    format_lap_time,
    format_percent,
    render_weights_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Race Rankings",
    page_icon="\U0001f3c1",
    layout="wide",
)


# ── Sidebar — scoring weights ────────────────────────────────────────────────

st.sidebar.title("Race Rankings")

weights = render_weights_sidebar()
if weights is None:
    st.stop()

service = RaceRankingService(weights)


# ── Input ────────────────────────────────────────────────────────────────────

st.header("Race Data Input")

raw_text = st.text_area(
    "Paste race data",
    height=240,
    placeholder=INPUT_PLACEHOLDER,
)

if st.button("Calculate Rankings", type="primary"):
    st.session_state["submitted_text"] = raw_text

submitted_text = st.session_state.get("submitted_text")
if submitted_text is None:
    st.info("Paste a lap log above and press **Calculate Rankings**.")
    st.stop()

# Scoring is pure and cheap, so it reruns on every interaction (e.g. weight changes)
try:
    result = service.calculate(submitted_text)
except RaceEloError as exc:
    st.error(str(exc))
    st.stop()

stats = result.stats


# ── Summary metrics ──────────────────────────────────────────────────────────

summary = service.summarise(stats)

m1, m2, m3, m4 = st.columns(4)
m1.metric("Drivers", summary.field_size)
m2.metric("Top ELO", summary.winner)
m3.metric(
    "Fastest Lap", format_lap_time(summary.fastest_lap),
    delta=summary.fastest_driver, delta_color="off",
)
m4.metric("Most Consistent", summary.most_consistent)

st.markdown(
    f'<div style="height:4px;background:{ACCENT_RED};border-radius:2px;'
    f'margin-bottom:1rem"></div>',
    unsafe_allow_html=True,
)


# ── Results table ────────────────────────────────────────────────────────────

st.subheader("Race Statistics")

sort_state: TableSortState = st.session_state.get("table_sort", TableSortState())

header_help = {"consistency_score": CONSISTENCY_HELP, "elo_score": ELO_HELP.format(
    blt=weights.blt,
    consistency=weights.consistency,
    finish_position=weights.finish_position,
)}

header_cols = st.columns(len(TABLE_COLUMNS))
for col, (field, label) in zip(header_cols, TABLE_COLUMNS):
    arrow = ""
    if field == sort_state.field:
        arrow = " ↓" if sort_state.direction == "desc" else " ↑"
    if col.button(f"{label}{arrow}", key=f"sort_{field}", help=header_help.get(field)):
        sort_state = sort_state.toggle(field)
        st.session_state["table_sort"] = sort_state
        st.rerun()

st.dataframe(build_table_frame(stats, sort_state), use_container_width=True)

fastest_lap = summary.fastest_lap
with st.expander("Per-driver detail"):
    for s in stats:
        gap = format_gap(s.best_lap_time, fastest_lap) or ""
        st.markdown(
            f"**#{s.rank} {s.name}** — best {format_lap_time(s.best_lap_time)} {gap}  \n"
            f"BLT {format_percent(s.blt_score)} · "
            f"Consistency {format_percent(s.consistency_score)} "
            f"({s.consistency_points} pts) · "
            f"Finish P{s.position} {format_percent(s.fp_score)} · "
            f"Penalties {s.penalties}"
        )


# ── Chart 1 & 2: ELO score + consistency bands ──────────────────────────────

col_elo, col_bands = st.columns(2)

with col_elo:
    st.subheader("ELO Score")
    chart = service.prepare_elo_chart(stats)
    fig_elo = go.Figure(go.Bar(
        x=chart.names,
        y=chart.elo_percents,
        marker_color=chart.colors,
        hovertemplate="%{x}<br>ELO %{y:.1f}%<extra></extra>",
    ))
    fig_elo.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        yaxis_title="ELO Score (%)",
        yaxis_range=[0, 100],
        height=400,
    )
    st.plotly_chart(fig_elo, use_container_width=True)

with col_bands:
    st.subheader("Laps by Delta to Best Lap")
    breakdown = service.prepare_consistency_breakdown(stats)
    fig_bands = go.Figure()
    for band_label, counts in breakdown.bands.items():
        fig_bands.add_trace(go.Bar(x=breakdown.names, y=counts, name=band_label))
    fig_bands.add_trace(go.Bar(
        x=breakdown.names, y=breakdown.outside, name=">0.4s",
        marker_color="#888888",
    ))
    fig_bands.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        barmode="stack",
        yaxis_title="Laps",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        height=400,
    )
    st.plotly_chart(fig_bands, use_container_width=True)
