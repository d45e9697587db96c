"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases import (
    BreakdownSource,
    BudgetOverview,
    BudgetRecommendation,
    CategoryBreakdown,
    ExpenseSource,
    ExpenseStatistics,
)
from src.domain.exceptions import FinanceError
from src.domain.models import (
    Asset,
    BillReminder,
    BillStatus,
    BudgetCategory,
    BudgetState,
    DailyExpense,
    EntryKind,
    IncomeEntry,
    InterestResult,
    LedgerEntry,
    Liability,
    LiabilityStatus,
    Trend,
)
from src.domain.services.amounts import format_amount, parse_amount
from src.domain.services.interest import (
    COMPOUNDING_FREQUENCIES,
    compound_interest,
    simple_interest,
)
from src.domain.services.reminders import (
    DEFAULT_REMINDER_DAYS,
    MAX_REMINDER_DAYS,
    REMINDER_VIEWS,
    filter_reminders,
)
from src.infrastructure.container import (
    FinanceServices,
    build_finance_services,
)
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

SERVICES_KEY = "finvault_services"
FLASH_KEY = "finvault_flash"
PAID_BILLS_KEY = "finvault_paid_bills"
PAGES = [
    "Dashboard",
    "Assets",
    "Liabilities",
    "Budget",
    "Income",
    "Daily Expenses",
    "Recommendations",
    "Tools",
]
PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy and pandas are usable for Altair charts."""
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Charts unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "Charts unavailable: numpy is not fully installed."
    if not hasattr(pandas, "Timestamp"):
        return False, "Charts unavailable: pandas is not fully installed."
    return True, None


def _get_services() -> FinanceServices:
    """Return the ledger services for this browser session.

    The first call builds the services from the environment. With the
    memory backend the sample portfolio is loaded so the dashboard has
    something to show.
    """
    if SERVICES_KEY not in st.session_state:
        services = build_finance_services()
        if services.settings.backend == "memory":
            services.seed_sample_data().execute()
        st.session_state[SERVICES_KEY] = services
    return st.session_state[SERVICES_KEY]


def _format_delta(value: Decimal, symbol: str) -> str:
    """Format signed values for metric deltas."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{format_amount(value, symbol)}"


def _prepare_donut_chart_data(
    breakdown: CategoryBreakdown,
    symbol: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Aggregated totals by category.
        symbol: Currency symbol for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        breakdown.categories,
        key=lambda item: item.total,
        reverse=True,
    )
    rows = [(item.category, item.total) for item in sorted_items]
    top_rows = rows[:max_categories]
    other_amount = sum(
        (total for _, total in rows[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_rows.append(("Other", other_amount))
    total_amount = sum((total for _, total in rows), start=Decimal("0"))

    data: list[dict[str, str | float]] = []
    for category, amount in top_rows:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": format_amount(amount, symbol),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_donut_chart(
    breakdown: CategoryBreakdown,
    title: str,
    symbol: str,
    max_categories: int = 6,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of amounts by category.

    Args:
        breakdown: Aggregated totals by category.
        title: Chart title to display above the donut.
        symbol: Currency symbol for labels.
        max_categories: Maximum categories before grouping into Other.
        chart_size: Width/height for the chart canvas.
    """
    st.subheader(title)
    if not breakdown.categories:
        st.info("No amounts available for the chart.")
        return
    data, _ = _prepare_donut_chart_data(
        breakdown,
        symbol,
        max_categories=max_categories,
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, use_container_width=True)


def _prepare_budget_chart_data(
    overview: BudgetOverview,
) -> list[dict[str, str | float]]:
    """Return budgeted and spent amounts in long format for a bar chart."""
    data: list[dict[str, str | float]] = []
    for category in overview.categories:
        data.append(
            {
                "category": category.title,
                "measure": "Budgeted",
                "amount": float(category.budgeted),
            }
        )
        data.append(
            {
                "category": category.title,
                "measure": "Spent",
                "amount": float(category.spent),
            }
        )
    return data


def _render_budget_chart(overview: BudgetOverview) -> None:
    """Render grouped bars of budgeted against spent per category."""
    data = _prepare_budget_chart_data(overview)
    if not data:
        st.info("No budget categories yet.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("category:N", title=None),
        xOffset="measure:N",
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color(
            "measure:N",
            scale=alt.Scale(range=["#457b9d", "#e76f51"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=["category:N", "measure:N", "amount:Q"],
    )
    st.altair_chart(chart, use_container_width=True)


def _prepare_trend_chart_data(
    statistics: ExpenseStatistics,
) -> list[dict[str, str | float]]:
    """Return month totals ready for a line chart."""
    return [
        {"month": item.month, "total": float(item.total)}
        for item in statistics.monthly_trend
    ]


def _budget_rows(
    overview: BudgetOverview,
    symbol: str,
) -> list[dict[str, str]]:
    """Return display rows for the budget table."""
    return [
        {
            "Category": category.title,
            "Budgeted": format_amount(category.budgeted, symbol),
            "Spent": format_amount(category.spent, symbol),
            "Used": f"{category.percentage}%",
            "Status": category.status.value.title(),
        }
        for category in overview.categories
    ]


def _entry_rows(
    entries: Sequence[LedgerEntry],
    symbol: str,
) -> list[dict[str, str]]:
    """Return display rows for a list of ledger entries."""
    rows: list[dict[str, str]] = []
    for entry in entries:
        if isinstance(entry, Asset):
            rows.append(
                {
                    "Title": entry.title,
                    "Value": format_amount(entry.value, symbol),
                    "Type": entry.type,
                    "Date": entry.date.isoformat(),
                    "Change": _format_delta(entry.change, symbol),
                }
            )
        elif isinstance(entry, Liability):
            rows.append(
                {
                    "Title": entry.title,
                    "Amount": format_amount(entry.amount, symbol),
                    "Type": entry.type,
                    "Interest": f"{entry.interest_rate}%",
                    "Payment": (
                        f"{format_amount(entry.payment_amount, symbol)} "
                        f"{entry.payment_period}"
                    ),
                    "Due": entry.due_date.isoformat(),
                    "Status": entry.status.value.title(),
                }
            )
        elif isinstance(entry, IncomeEntry):
            rows.append(
                {
                    "Title": entry.title,
                    "Amount": format_amount(entry.amount, symbol),
                    "Description": entry.description,
                }
            )
        elif isinstance(entry, DailyExpense):
            rows.append(
                {
                    "Title": entry.title,
                    "Amount": format_amount(entry.amount, symbol),
                    "Category": entry.category,
                    "Date": entry.date.isoformat(),
                    "Notes": entry.notes or "",
                }
            )
    return rows


def _flash(message: str) -> None:
    """Queue a success message and rerun so tables show the change."""
    st.session_state[FLASH_KEY] = message
    st.rerun()


def _show_flash() -> None:
    """Show the message queued by the previous run, once."""
    message = st.session_state.pop(FLASH_KEY, None)
    if message:
        st.success(message)


def _save_entry(services: FinanceServices, entry: LedgerEntry) -> None:
    """Store an entry submitted from a form, then rerun the page."""
    try:
        result = services.save_entry().execute(entry)
    except FinanceError as exc:
        get_app_logger().error(f"Failed to save entry: {exc}")
        st.error(str(exc))
        return
    get_usage_logger().info(f"Saved {type(entry).__name__} {entry.title}")
    verb = "Added" if result.created else "Updated"
    _flash(f"{verb} {entry.title}.")


def _render_delete_control(
    services: FinanceServices,
    kind: EntryKind,
    entries: Sequence[LedgerEntry],
) -> None:
    """Render a selectbox and button removing one entry."""
    if not entries:
        return
    labels = {f"{entry.title} ({entry.id[:8]})": entry for entry in entries}
    choice = st.selectbox(
        "Remove an entry",
        options=list(labels),
        key=f"delete_{kind.value}",
    )
    if st.button("Remove", key=f"delete_{kind.value}_button"):
        entry = labels[choice]
        try:
            services.delete_entry().execute(kind, entry.id)
        except FinanceError as exc:
            get_app_logger().error(f"Failed to delete entry: {exc}")
            st.error(str(exc))
            return
        get_usage_logger().info(f"Removed {kind.value} {entry.title}")
        _flash(f"Removed {entry.title}.")


def _render_dashboard(services: FinanceServices) -> None:
    """Render headline metrics, charts and budget alerts."""
    symbol = services.settings.currency_symbol
    net_worth = services.net_worth().execute()
    surplus = services.surplus().execute(source=ExpenseSource.BUDGET)
    overview = services.budget_overview().execute()

    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric("Assets", format_amount(net_worth.asset_total, symbol))
    liabilities_col.metric(
        "Liabilities",
        format_amount(net_worth.liability_total, symbol),
    )
    net_worth_col.metric(
        "Net Worth",
        format_amount(net_worth.net_worth, symbol),
    )
    income_col, expenses_col, surplus_col = st.columns(3)
    income_col.metric("Income", format_amount(surplus.income_total, symbol))
    expenses_col.metric(
        "Expenses",
        format_amount(surplus.expense_total, symbol),
    )
    surplus_col.metric(
        "Surplus",
        format_amount(surplus.surplus, symbol),
        _format_delta(surplus.surplus, symbol),
    )

    charts_ok, charts_message = _check_altair_dependencies()
    if not charts_ok:
        st.warning(charts_message)
    else:
        breakdown = services.category_breakdown()
        left, right = st.columns(2)
        with left:
            _render_donut_chart(
                breakdown.execute(BreakdownSource.ASSETS),
                "Assets by Type",
                symbol,
            )
        with right:
            _render_donut_chart(
                breakdown.execute(BreakdownSource.DAILY_EXPENSES),
                "Daily Expenses by Category",
                symbol,
            )

    st.subheader("Budget Alerts")
    alerts = [
        category
        for category in overview.categories
        if category.status is not BudgetState.NORMAL
    ]
    if not alerts:
        st.caption("Every budget category is on track.")
    for category in alerts:
        message = (
            f"{category.title}: {category.percentage}% of "
            f"{format_amount(category.budgeted, symbol)} spent"
        )
        if category.status is BudgetState.DANGER:
            st.error(message)
        else:
            st.warning(message)


def _render_assets_page(services: FinanceServices) -> None:
    symbol = services.settings.currency_symbol
    assets = services.repository.list_assets()
    st.subheader("Assets")
    st.dataframe(_entry_rows(assets, symbol), hide_index=True)
    with st.form("add_asset", clear_on_submit=True):
        title = st.text_input("Title")
        value = st.text_input("Value", placeholder="42,000")
        asset_type = st.text_input("Type", placeholder="Investment")
        valued_on = st.date_input("Valuation date", value=date.today())
        change = st.text_input("Change since last valuation", value="0")
        submitted = st.form_submit_button("Add asset")
    if submitted and title:
        change_amount = parse_amount(change)
        _save_entry(
            services,
            Asset(
                title=title,
                value=parse_amount(value),
                type=asset_type,
                date=valued_on,
                change=change_amount,
                trend=Trend.DOWN if change_amount < 0 else Trend.UP,
            ),
        )
    _render_delete_control(services, EntryKind.ASSET, assets)


def _render_liabilities_page(services: FinanceServices) -> None:
    symbol = services.settings.currency_symbol
    liabilities = services.repository.list_liabilities()
    st.subheader("Liabilities")
    st.dataframe(_entry_rows(liabilities, symbol), hide_index=True)
    with st.form("add_liability", clear_on_submit=True):
        title = st.text_input("Title")
        amount = st.text_input("Outstanding amount")
        liability_type = st.text_input("Type", placeholder="Secured")
        interest_rate = st.text_input("Interest rate (%)", value="0")
        payment_amount = st.text_input("Payment amount")
        payment_period = st.selectbox(
            "Payment period",
            ["monthly", "quarterly", "yearly"],
        )
        due_date = st.date_input("Next due date", value=date.today())
        status = st.selectbox(
            "Status",
            [status.value for status in LiabilityStatus],
        )
        submitted = st.form_submit_button("Add liability")
    if submitted and title:
        _save_entry(
            services,
            Liability(
                title=title,
                amount=parse_amount(amount),
                type=liability_type,
                interest_rate=parse_amount(interest_rate),
                payment_amount=parse_amount(payment_amount),
                due_date=due_date,
                payment_period=payment_period,
                status=LiabilityStatus(status),
            ),
        )
    _render_delete_control(services, EntryKind.LIABILITY, liabilities)


def _render_budget_page(services: FinanceServices) -> None:
    symbol = services.settings.currency_symbol
    overview = services.budget_overview().execute()
    st.subheader("Budget")
    budgeted_col, spent_col, remaining_col = st.columns(3)
    budgeted_col.metric(
        "Budgeted",
        format_amount(overview.total_budgeted, symbol),
    )
    spent_col.metric("Spent", format_amount(overview.total_spent, symbol))
    remaining_col.metric(
        "Remaining",
        format_amount(overview.remaining, symbol),
    )
    st.dataframe(_budget_rows(overview, symbol), hide_index=True)
    charts_ok, _ = _check_altair_dependencies()
    if charts_ok:
        _render_budget_chart(overview)
    with st.form("add_budget", clear_on_submit=True):
        title = st.text_input("Category")
        budgeted = st.text_input("Budgeted")
        spent = st.text_input("Spent", value="0")
        submitted = st.form_submit_button("Add category")
    if submitted and title:
        _save_entry(
            services,
            BudgetCategory(
                title=title,
                budgeted=parse_amount(budgeted),
                spent=parse_amount(spent),
            ),
        )
    _render_delete_control(services, EntryKind.BUDGET, overview.categories)


def _render_income_page(services: FinanceServices) -> None:
    symbol = services.settings.currency_symbol
    incomes = services.repository.list_incomes()
    st.subheader("Income")
    st.dataframe(_entry_rows(incomes, symbol), hide_index=True)
    with st.form("add_income", clear_on_submit=True):
        title = st.text_input("Source")
        amount = st.text_input("Amount")
        description = st.text_input("Description")
        submitted = st.form_submit_button("Add income")
    if submitted and title:
        _save_entry(
            services,
            IncomeEntry(
                title=title,
                amount=parse_amount(amount),
                description=description,
            ),
        )
    _render_delete_control(services, EntryKind.INCOME, incomes)


def _render_daily_expenses_page(services: FinanceServices) -> None:
    symbol = services.settings.currency_symbol
    expenses = services.repository.list_daily_expenses()
    st.subheader("Daily Expenses")
    st.dataframe(_entry_rows(expenses, symbol), hide_index=True)
    with st.form("add_daily_expense", clear_on_submit=True):
        title = st.text_input("Title")
        amount = st.text_input("Amount")
        category = st.text_input("Category", placeholder="Groceries")
        spent_on = st.date_input("Date", value=date.today())
        notes = st.text_input("Notes")
        submitted = st.form_submit_button("Add expense")
    if submitted and title:
        _save_entry(
            services,
            DailyExpense(
                title=title,
                amount=parse_amount(amount),
                category=category,
                date=spent_on,
                notes=notes or None,
            ),
        )
    _render_delete_control(services, EntryKind.DAILY_EXPENSE, expenses)


def _render_recommendation(
    recommendation: BudgetRecommendation,
    symbol: str,
) -> None:
    """Render a weekly budget recommendation."""
    weekly_col, savings_col, confidence_col = st.columns(3)
    weekly_col.metric(
        "Next week",
        format_amount(recommendation.weekly_total, symbol, places=0),
    )
    savings_col.metric(
        "Save",
        format_amount(recommendation.savings_recommendation, symbol, places=0),
    )
    confidence_col.metric(
        "Confidence",
        f"{recommendation.confidence_score}%",
    )
    st.dataframe(
        [
            {
                "Category": item.category,
                "Amount": format_amount(item.amount, symbol, places=0),
                "Share": f"{item.percent_of_total}%",
                "Versus average": item.compared_to_average.value,
            }
            for item in recommendation.categories
        ],
        hide_index=True,
    )
    for category in recommendation.categories:
        if category.warning:
            st.warning(category.warning)
    for line in recommendation.rationale:
        st.caption(line)


def _render_recommendations_page(services: FinanceServices) -> None:
    symbol = services.settings.currency_symbol
    statistics = services.expense_statistics().execute()
    st.subheader("Spending Statistics")
    count_col, total_col = st.columns(2)
    count_col.metric("Expenses logged", statistics.expense_count)
    total_col.metric(
        "Total spent",
        format_amount(statistics.total_amount, symbol),
    )
    st.dataframe(
        [
            {
                "Category": item.category,
                "Count": item.count,
                "Total": format_amount(item.total, symbol),
            }
            for item in statistics.categories
        ],
        hide_index=True,
    )
    trend = _prepare_trend_chart_data(statistics)
    charts_ok, _ = _check_altair_dependencies()
    if trend and charts_ok:
        chart = alt.Chart(alt.Data(values=trend)).mark_line(
            point=True
        ).encode(
            x=alt.X("month:N", title=None),
            y=alt.Y("total:Q", title="Spent"),
        )
        st.altair_chart(chart, use_container_width=True)

    st.subheader("Budget Recommendation")
    _render_recommendation(
        services.budget_recommendation().execute(),
        symbol,
    )


def _prepare_growth_chart_data(
    result: InterestResult,
) -> list[dict[str, int | float]]:
    """Return year-end balances ready for a line chart."""
    return [
        {"year": point.year, "amount": float(point.amount)}
        for point in result.schedule
    ]


def _render_interest_result(result: InterestResult, symbol: str) -> None:
    principal_col, interest_col, total_col = st.columns(3)
    principal_col.metric("Principal", format_amount(result.principal, symbol))
    interest_col.metric("Interest", format_amount(result.interest, symbol))
    total_col.metric("Total", format_amount(result.total, symbol))
    data = _prepare_growth_chart_data(result)
    charts_ok, _ = _check_altair_dependencies()
    if data and charts_ok:
        chart = alt.Chart(alt.Data(values=data)).mark_line(
            point=True
        ).encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("amount:Q", title="Balance"),
            tooltip=["year:O", "amount:Q"],
        )
        st.altair_chart(chart, use_container_width=True)


def _render_simple_interest(symbol: str) -> None:
    with st.form("simple_interest"):
        principal = st.text_input("Principal", value="10000")
        rate = st.text_input("Annual rate (%)", value="10")
        years = st.text_input("Years", value="5")
        submitted = st.form_submit_button("Calculate")
    if not submitted:
        return
    try:
        result = simple_interest(principal, rate, years)
    except ValueError as exc:
        st.error(str(exc))
        return
    _render_interest_result(result, symbol)


def _render_compound_interest(symbol: str) -> None:
    with st.form("compound_interest"):
        principal = st.text_input("Principal", value="10000")
        rate = st.text_input("Annual rate (%)", value="10")
        years = st.text_input("Years", value="5")
        frequency = st.selectbox(
            "Compounding",
            list(COMPOUNDING_FREQUENCIES),
        )
        submitted = st.form_submit_button("Calculate")
    if not submitted:
        return
    try:
        result = compound_interest(
            principal,
            rate,
            years,
            periods_per_year=COMPOUNDING_FREQUENCIES[frequency],
        )
    except ValueError as exc:
        st.error(str(exc))
        return
    _render_interest_result(result, symbol)


_BILL_STATUS_LABELS = {
    BillStatus.UPCOMING: "Upcoming",
    BillStatus.DUE: "Due Today",
    BillStatus.OVERDUE: "Overdue",
    BillStatus.PAID: "Paid",
}


def _reminder_rows(
    reminders: Sequence[BillReminder],
    symbol: str,
) -> list[dict[str, str]]:
    """Return display rows for the bill reminder table."""
    return [
        {
            "Bill": reminder.title,
            "Amount": format_amount(reminder.amount, symbol),
            "Due": reminder.due_date.isoformat(),
            "Days left": str(reminder.days_until_due),
            "Status": _BILL_STATUS_LABELS[reminder.status],
        }
        for reminder in reminders
    ]


def _render_bill_reminders(services: FinanceServices) -> None:
    """Render reminders for liability due dates with a mark-paid control.

    Paid marks live in the browser session, next to the services.
    """
    symbol = services.settings.currency_symbol
    paid_ids = st.session_state.setdefault(PAID_BILLS_KEY, set())
    reminder_days = st.slider(
        "Remind me this many days ahead",
        min_value=0,
        max_value=MAX_REMINDER_DAYS,
        value=DEFAULT_REMINDER_DAYS,
    )
    view = st.radio("Show", REMINDER_VIEWS, horizontal=True)
    reminders = services.bill_reminders().execute(
        reminder_days=reminder_days,
        paid_ids=paid_ids,
    )
    due_soon = [reminder for reminder in reminders if reminder.needs_reminder]
    if due_soon:
        plural = "s" if len(due_soon) > 1 else ""
        st.warning(f"{len(due_soon)} bill{plural} due soon!")
    st.dataframe(
        _reminder_rows(filter_reminders(reminders, view), symbol),
        hide_index=True,
    )
    unpaid = {
        f"{reminder.title} ({reminder.due_date.isoformat()})": reminder
        for reminder in reminders
        if reminder.status is not BillStatus.PAID
    }
    if not unpaid:
        return
    choice = st.selectbox("Bill", options=list(unpaid), key="pay_bill")
    if st.button("Mark as paid", key="pay_bill_button"):
        reminder = unpaid[choice]
        paid_ids.add(reminder.liability_id)
        get_usage_logger().info(f"Marked bill {reminder.title} as paid")
        _flash(f"Marked {reminder.title} as paid.")


def _render_tools_page(services: FinanceServices) -> None:
    symbol = services.settings.currency_symbol
    st.subheader("Interest Calculator")
    simple_tab, compound_tab = st.tabs(["Simple interest", "Compound interest"])
    with simple_tab:
        _render_simple_interest(symbol)
    with compound_tab:
        _render_compound_interest(symbol)
    st.subheader("Bill Reminders")
    _render_bill_reminders(services)


_PAGE_RENDERERS = {
    "Dashboard": _render_dashboard,
    "Assets": _render_assets_page,
    "Liabilities": _render_liabilities_page,
    "Budget": _render_budget_page,
    "Income": _render_income_page,
    "Daily Expenses": _render_daily_expenses_page,
    "Recommendations": _render_recommendations_page,
    "Tools": _render_tools_page,
}


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="FinVault", layout="wide")
    st.title("FinVault")

    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"Page view: {page}")
    services = _get_services()
    st.caption(
        f"Backend: {services.settings.backend}, "
        f"currency: {services.settings.currency_code}"
    )
    _show_flash()
    _PAGE_RENDERERS[page](services)


if __name__ == "__main__":  # pragma: no cover
    main()
