# budget_tracker/report.py
from budget_tracker.core.models import OverrunStatus, Summary


def _entry_lines(entries, joiner, empty_text):
    if not entries:
        return [empty_text]
    return [
        f"{i}: ${e.amount:.2f} {joiner} '{e.label}' on {e.date}"
        for i, e in entries
    ]


def format_summary(summary: Summary) -> str:
    """Render a ledger summary the way the interactive display shows it."""
    lines = ["", "--- Income ---"]
    lines += _entry_lines(summary.income, "from", "No income records.")
    lines += ["", "--- Expenses ---"]
    lines += _entry_lines(summary.expenses, "for", "No expense records.")
    lines += [
        "",
        f"Total Income: ${summary.total_income:.2f}",
        f"Total Expenses: ${summary.total_expenses:.2f}",
        f"Remaining Budget: ${summary.remaining_budget:.2f}",
    ]
    return "\n".join(lines)


def format_overrun(status: OverrunStatus) -> str:
    totals = (
        f"Total Expenses: ${status.total_expenses:.2f}, "
        f"Budget: ${status.budget_limit:.2f}"
    )
    if status.exceeded:
        return f"Warning: You have exceeded your budget! {totals}"
    return f"Your expenses are within the budget. {totals}"
