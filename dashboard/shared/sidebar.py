"""Sidebar rendering: scoring weight configuration."""

from __future__ import annotations

import streamlit as st

from race_elo import DEFAULT_WEIGHTS, ScoringWeights, ScoringWeightsError, make_weights


def render_weights_sidebar() -> ScoringWeights | None:
    """Render the scoring weight controls in the sidebar.

    Returns the default weights unless custom weights are enabled; returns
    None (after showing an error) when the custom weights are invalid.
    """
    st.sidebar.subheader("Scoring Weights")
    use_custom = st.sidebar.checkbox("Custom weights", value=False)
    if not use_custom:
        st.sidebar.caption(
            f"BLT {DEFAULT_WEIGHTS.blt:.0%} · "
            f"Consistency {DEFAULT_WEIGHTS.consistency:.0%} · "
            f"Finish {DEFAULT_WEIGHTS.finish_position:.0%}"
        )
        return DEFAULT_WEIGHTS

    blt = st.sidebar.slider("Best Lap Time", 0.0, 1.0, DEFAULT_WEIGHTS.blt, 0.05)
    consistency = st.sidebar.slider("Consistency", 0.0, 1.0, DEFAULT_WEIGHTS.consistency, 0.05)
    finish = st.sidebar.slider("Finish Position", 0.0, 1.0, DEFAULT_WEIGHTS.finish_position, 0.05)

    try:
        # Sliders step in 0.05, so round away float noise before validating
        return make_weights(round(blt, 2), round(consistency, 2), round(finish, 2))
    except ScoringWeightsError:
        st.sidebar.error(
            f"Weights must sum to 100% (currently {blt + consistency + finish:.0%})."
        )
        return None
