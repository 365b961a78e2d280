"""Streamlit page for reviewing and recording daily cash balances."""

from datetime import date, timedelta
from decimal import Decimal

import streamlit as st
import altair as alt

from src.domain.exceptions import LedgerValidationError
from src.domain.models.balances import BalanceReport, BalanceReportSummary
from src.domain.services.report_summary import summarize_report
from src.infrastructure.container import (
    build_balance_recorder,
    build_record_balance_use_case,
    build_report_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings


def _fetch_report(
    start_date: date,
    end_date: date,
    settings: LedgerSettings,
) -> BalanceReport:
    """Compute the report from the current ledger state."""
    use_case = build_report_use_case(settings=settings)
    return use_case.execute(start_date, end_date)


def _save_balance(balance_date: date, amount: str, note: str) -> None:
    """Record a balance entered in the form."""
    recorder = build_balance_recorder()
    recorder.prepare_storage()
    use_case = build_record_balance_use_case(recorder)
    recorded = use_case.execute(balance_date, amount, note)
    get_usage_logger().info(
        f"Balance saved from dashboard: {recorded.date}={recorded.amount}"
    )


def _format_currency(value: Decimal | None, currency_code: str) -> str:
    """Format currency values for display."""
    if value is None:
        return "—"
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(value):,.0f} {currency_code}"


def _format_delta(value: Decimal | None) -> str:
    """Format signed differences for display."""
    if value is None:
        return "—"
    sign = "+" if value >= 0 else "-"
    return f"{sign}{abs(value):,.0f}"


def _build_table_rows(
    report: BalanceReport,
    currency_code: str,
) -> list[dict[str, str]]:
    """Return one display row per reconciled day."""
    return [
        {
            "Date": day.date.strftime("%d/%m/%y"),
            "In": _format_currency(day.total_in, currency_code),
            "Out": _format_currency(-day.total_out, currency_code),
            "Net": _format_currency(day.net_change, currency_code),
            "Expected": _format_currency(day.expected_balance, currency_code),
            "Recorded": _format_currency(day.recorded_balance, currency_code),
            "Diff.": _format_delta(day.difference),
            "Note": day.note or "",
        }
        for day in report.days
    ]


def _prepare_balance_chart_data(
    report: BalanceReport,
) -> list[dict[str, str | float]]:
    """Prepare long-format chart data for expected and recorded series."""
    data: list[dict[str, str | float]] = []
    for day in report.days:
        data.append(
            {
                "date": day.date.isoformat(),
                "series": "Expected",
                "amount": float(day.expected_balance),
            }
        )
        if day.recorded_balance is not None:
            data.append(
                {
                    "date": day.date.isoformat(),
                    "series": "Recorded",
                    "amount": float(day.recorded_balance),
                }
            )
    return data


def _render_balance_chart(report: BalanceReport) -> None:
    """Render expected vs recorded balances as a line chart."""
    data = _prepare_balance_chart_data(report)
    if not data:
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(range=["#457b9d", "#2e7d32"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.0f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_summary(
    report: BalanceReport,
    summary: BalanceReportSummary,
    currency_code: str,
) -> None:
    """Render the reconciliation summary."""
    st.subheader("Reconciliation")
    if report.previous is not None:
        st.caption(
            f"Previous closing balance ({report.previous.date:%d-%m-%Y}): "
            f"{_format_currency(report.previous.amount, currency_code)}"
        )
    if not summary.has_recorded_balances:
        st.info("No closing balances recorded for this range yet.")
        return
    last = summary.last_recorded
    st.caption(
        f"Last recorded balance ({last.date:%d-%m-%Y}): "
        f"{_format_currency(last.recorded_balance, currency_code)}"
    )
    if not summary.mismatch_days:
        st.success("Recorded balances match the transactions in range.")
        return
    st.warning(
        f"{len(summary.mismatch_days)} day(s) differ between expected and "
        f"recorded balance."
    )
    for day in summary.mismatch_days[:5]:
        st.caption(
            f"{day.date:%d-%m-%Y}: difference {_format_delta(day.difference)} "
            f"(expected "
            f"{_format_currency(day.expected_balance, currency_code)}, "
            f"recorded "
            f"{_format_currency(day.recorded_balance, currency_code)})"
        )
    if len(summary.mismatch_days) > 5:
        st.caption(f"... and {len(summary.mismatch_days) - 5} more")


def _render_balance_form(end_date: date) -> None:
    """Render the form recording a closing balance."""
    with st.form("record_balance"):
        balance_date = st.date_input("Balance date", value=end_date)
        amount = st.text_input("Counted balance", placeholder="0")
        note = st.text_input("Note")
        submitted = st.form_submit_button("Save balance")
    if not submitted:
        return
    try:
        _save_balance(balance_date, amount, note)
    except LedgerValidationError as exc:
        st.error(str(exc))
        return
    st.success(f"Balance saved for {balance_date:%d-%m-%Y}.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Daily Cash Balances", layout="wide")
    st.title("Daily Cash Balances")

    settings = LedgerSettings.from_env()
    today = date.today()
    start_date = st.sidebar.date_input(
        "From",
        value=today - timedelta(days=13),
    )
    end_date = st.sidebar.date_input("To", value=today)
    _render_balance_form(end_date)

    try:
        report = _fetch_report(start_date, end_date, settings)
    except LedgerValidationError as exc:
        st.error(str(exc))
        return

    summary = summarize_report(report, settings.mismatch_tolerance)
    _render_summary(report, summary, settings.currency_code)
    _render_balance_chart(report)
    st.dataframe(
        _build_table_rows(report, settings.currency_code),
        width="stretch",
        hide_index=True,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
