"""
Dashboard KPIs and period reports.

Everything here is a pure function over already-loaded collections. The
current time is always passed in by the caller.
"""
from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Sequence, Tuple, Union

from .clock import isoformat_z
from .i18n import period_label
from .schemas import (
    CategoryTotal,
    FinanceKind,
    FinanceTransaction,
    KPIs,
    Period,
    Rabbit,
    RabbitStatus,
    Report,
    StockItem,
)

TOP_CATEGORY_LIMIT = 5
UNCATEGORIZED = "uncategorized"
WEEK_DAYS = 7


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _total(finances: Iterable[FinanceTransaction], kind: FinanceKind) -> float:
    return sum(f.amount for f in finances if f.kind == kind)


def _count_status(rabbits: Iterable[Rabbit], status: RabbitStatus) -> int:
    return sum(1 for r in rabbits if r.status == status)


def low_stock_items(stocks: Iterable[StockItem]) -> List[StockItem]:
    return [s for s in stocks if s.is_low()]


def stock_value(stocks: Iterable[StockItem]) -> float:
    return sum(s.quantity * s.unit_price for s in stocks)


def compute_kpis(
    rabbits: Sequence[Rabbit],
    finances: Sequence[FinanceTransaction],
    stocks: Sequence[StockItem],
    as_of: Union[date, datetime],
) -> KPIs:
    month = [
        f for f in finances
        if f.date.year == as_of.year and f.date.month == as_of.month
    ]
    revenue = _total(month, FinanceKind.SALE)
    expenses = _total(month, FinanceKind.PURCHASE)

    return KPIs(
        total_rabbits=len(rabbits),
        ready_for_sale_count=_count_status(rabbits, RabbitStatus.READY_FOR_SALE),
        breeder_count=_count_status(rabbits, RabbitStatus.BREEDER),
        monthly_revenue=revenue,
        monthly_expenses=expenses,
        monthly_profit=revenue - expenses,
        low_stock_count=len(low_stock_items(stocks)),
    )


def period_bounds(period: Period, as_of: Union[date, datetime]) -> Tuple[datetime, datetime]:
    """Start and end of a report period; both ends inclusive, end is ``as_of``."""
    end = _as_datetime(as_of)
    period = Period(period)

    if period == Period.THIS_WEEK:
        start = end - timedelta(days=WEEK_DAYS)
    elif period == Period.THIS_YEAR:
        start = datetime.combine(date(end.year, 1, 1), time.min, tzinfo=end.tzinfo)
    else:
        start = datetime.combine(date(end.year, end.month, 1), time.min, tzinfo=end.tzinfo)

    return start, end


def finances_in_period(
    finances: Iterable[FinanceTransaction], start: datetime, end: datetime
) -> List[FinanceTransaction]:
    out = []
    for f in finances:
        day = datetime.combine(f.date, time.min, tzinfo=start.tzinfo)
        if start <= day <= end:
            out.append(f)
    return out


def top_expense_categories(
    finances: Iterable[FinanceTransaction], limit: int = TOP_CATEGORY_LIMIT
) -> List[CategoryTotal]:
    by_category: dict[str, float] = defaultdict(float)
    for f in finances:
        if f.kind != FinanceKind.PURCHASE:
            continue
        category = f.category.strip() or UNCATEGORIZED
        by_category[category] += f.amount

    # Stable sort keeps first-seen order among equal totals
    ranked = sorted(by_category.items(), key=lambda item: item[1], reverse=True)
    return [CategoryTotal(category=c, amount=a) for c, a in ranked[:limit]]


def compute_report(
    rabbits: Sequence[Rabbit],
    finances: Sequence[FinanceTransaction],
    stocks: Sequence[StockItem],
    period: Period,
    as_of: Union[date, datetime],
) -> Report:
    start, end = period_bounds(period, as_of)
    in_period = finances_in_period(finances, start, end)

    revenue = _total(in_period, FinanceKind.SALE)
    expenses = _total(in_period, FinanceKind.PURCHASE)

    return Report(
        period=Period(period),
        start=start,
        end=end,
        total_rabbits=len(rabbits),
        status_counts={s: _count_status(rabbits, s) for s in RabbitStatus},
        revenue=revenue,
        expenses=expenses,
        profit=revenue - expenses,
        stock_items=len(stocks),
        stock_value=stock_value(stocks),
        low_stock_count=len(low_stock_items(stocks)),
        top_expense_categories=top_expense_categories(in_period),
        rabbits=list(rabbits),
        finances=in_period,
        stocks=list(stocks),
    )


def build_export(report: Report, generated_at: datetime, language: str = "fr") -> dict:
    """The downloadable report document.

    The envelope keys are those of the exports already in circulation, so
    older files and new ones can be read by the same tooling.
    """
    return {
        "periode": period_label(report.period, language),
        "dateGeneration": isoformat_z(generated_at),
        "resume": {
            "totalLapins": report.total_rabbits,
            "pretsVente": report.status_counts.get(RabbitStatus.READY_FOR_SALE, 0),
            "reproducteurs": report.status_counts.get(RabbitStatus.BREEDER, 0),
            "totalVentes": report.revenue,
            "totalAchats": report.expenses,
            "stocksBas": report.low_stock_count,
        },
        "detailsLapins": [r.model_dump(mode="json") for r in report.rabbits],
        "detailsFinances": [f.model_dump(mode="json") for f in report.finances],
        "detailsStocks": [s.model_dump(mode="json") for s in report.stocks],
    }


def export_filename(generated_at: datetime) -> str:
    return f"rapport-cunigestion-{generated_at.date().isoformat()}.json"
