"""
tipsplit-core Calculator Page

Minimal Streamlit page for splitting a bill interactively.
Shows results, a copyable summary and a per-preset comparison chart.

Usage:
    pip install -e ".[viewer]"
    streamlit run src/tipsplit_core/viewer.py

Requires the package to be installed (e.g. via ``pip install -e .``).
"""

from __future__ import annotations

import logging

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from tipsplit_core.app_config import AppConfig, load_config
from tipsplit_core.calculator import compute
from tipsplit_core.domain.constants import STATUS_CALCULATED, STATUS_READY
from tipsplit_core.domain.entities import BillRequest
from tipsplit_core.domain.errors import BillValidationError
from tipsplit_core.domain.value_objects import RoundingMode
from tipsplit_core.summary import build_summary_fields, format_currency, format_summary
from tipsplit_core.use_cases.preset_comparison import compare_presets

# -- Colors --
BAR_COLOR = "#1a73e8"
SELECTED_COLOR = "#34a853"

_INPUT_KEYS = ["bill", "preset", "custom_tip", "people", "rounding"]

logger = logging.getLogger(__name__)


def _reset() -> None:
    """Clear every input and the last result."""
    for key in _INPUT_KEYS:
        st.session_state.pop(key, None)
    st.session_state["result"] = None
    st.session_state["status"] = STATUS_READY


def _render_inputs(config: AppConfig) -> BillRequest:
    """Render the input card and build the request from its widgets."""
    st.subheader("Inputs")
    bill = st.text_input("Bill", placeholder="e.g. 42.50", key="bill")

    labels = {f"{p}%": rate for p, rate in zip(config.presets.percents(), config.presets.rates)}
    preset_label = st.radio(
        "Tip Presets",
        options=list(labels),
        index=None,
        horizontal=True,
        key="preset",
    )
    custom_tip = st.text_input("Custom Tip %", placeholder="e.g. 17", key="custom_tip")

    col_people, col_rounding = st.columns(2)
    with col_people:
        people = st.number_input(
            "People",
            min_value=config.party.min_people,
            max_value=config.party.max_people,
            value=config.party.min_people,
            step=1,
            key="people",
        )
    with col_rounding:
        modes = list(RoundingMode)
        rounding = st.selectbox(
            "Rounding",
            options=modes,
            index=modes.index(config.rounding_mode()),
            format_func=lambda m: m.label,
            key="rounding",
        )

    return BillRequest(
        bill_amount=bill,
        preset_rate=labels.get(preset_label) if preset_label else None,
        custom_tip_percent=custom_tip,
        people_count=int(people),
        rounding_mode=rounding,
    )


def _render_results(request: BillRequest, config: AppConfig) -> None:
    """Render result metrics and the copyable summary."""
    symbol = config.display.currency_symbol
    result = st.session_state.get("result")

    st.subheader("Results")
    zero = format_currency(0, symbol)
    st.metric("Tip Amount", format_currency(result.tip_amount, symbol) if result else zero)
    st.metric("Total", format_currency(result.total, symbol) if result else zero)
    st.metric("Per Person", format_currency(result.per_person, symbol) if result else zero)

    st.caption("Summary (use the copy icon)")
    st.code(format_summary(build_summary_fields(request, result, symbol)), language=None)


def _render_comparison(request: BillRequest, config: AppConfig) -> None:
    """Render per-person amount for every preset."""
    try:
        table: pd.DataFrame = compare_presets(
            request.bill_amount,
            people_count=request.people_count,
            rounding_mode=request.rounding_mode,
            rates=config.presets.rates,
        )
    except BillValidationError:
        return

    st.header("Preset Comparison")
    selected = request.preset_rate
    colors = [
        SELECTED_COLOR if selected is not None and rate == selected else BAR_COLOR
        for rate in table["tip_rate"]
    ]
    fig = go.Figure(go.Bar(
        x=[f"{p}%" for p in config.presets.percents()],
        y=table["per_person"],
        marker_color=colors,
        text=[format_currency(v, config.display.currency_symbol) for v in table["per_person"]],
        textposition="outside",
    ))
    fig.update_layout(
        xaxis_title="Tip",
        yaxis_title="Per person",
        template="plotly_white",
        height=380,
    )
    st.plotly_chart(fig, use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="Tip Calculator", layout="wide")
    config = load_config()

    st.session_state.setdefault("result", None)
    st.session_state.setdefault("status", STATUS_READY)

    st.title("💸 Tip Calculator")

    col_inputs, col_results = st.columns(2)
    with col_inputs:
        request = _render_inputs(config)
        col_calc, col_reset = st.columns(2)
        if col_calc.button("Calculate", type="primary"):
            if request.preset_rate is not None and str(request.custom_tip_percent or "").strip():
                logger.debug(
                    "Custom tip %r overrides preset %r",
                    request.custom_tip_percent, request.preset_rate,
                )
            outcome = compute(request)
            if isinstance(outcome, BillValidationError):
                st.session_state["status"] = outcome.status_message
            else:
                st.session_state["result"] = outcome
                st.session_state["status"] = STATUS_CALCULATED
        col_reset.button("Reset", on_click=_reset)
        st.caption(st.session_state["status"])

    with col_results:
        _render_results(request, config)

    _render_comparison(request, config)


if __name__ == "__main__":
    main()
