# budget_tracker/core/ledger.py
import logging
from typing import List, Tuple

from budget_tracker.core.models import Entry, OverrunStatus, Summary

logger = logging.getLogger(__name__)

DEFAULT_BUDGET = 1000.0


class Ledger:
    """
    In-memory record of income and expense entries plus a budget limit.

    Entries keep their insertion order and are never edited or removed.
    Amounts and dates are expected to be validated by the caller.
    """

    def __init__(self, budget_limit: float = DEFAULT_BUDGET):
        self.budget_limit = budget_limit
        self._income: List[Entry] = []
        self._expenses: List[Entry] = []

    @property
    def income_entries(self) -> Tuple[Entry, ...]:
        return tuple(self._income)

    @property
    def expense_entries(self) -> Tuple[Entry, ...]:
        return tuple(self._expenses)

    def add_income(self, amount: float, source: str, date: str) -> None:
        self._income.append(Entry(amount=amount, label=source, date=date))
        logger.debug("Income added: %s from %r on %s", amount, source, date)

    def add_expense(self, amount: float, category: str, date: str) -> None:
        self._expenses.append(Entry(amount=amount, label=category, date=date))
        logger.debug("Expense added: %s for %r on %s", amount, category, date)

    def total_income(self) -> float:
        return sum(e.amount for e in self._income)

    def total_expenses(self) -> float:
        return sum(e.amount for e in self._expenses)

    def remaining_budget(self) -> float:
        # income minus expenses; budget_limit plays no part here
        return self.total_income() - self.total_expenses()

    def check_overrun(self) -> OverrunStatus:
        total = self.total_expenses()
        return OverrunStatus(
            exceeded=total > self.budget_limit,
            total_expenses=total,
            budget_limit=self.budget_limit,
        )

    def set_budget_limit(self, new_limit: float) -> None:
        logger.debug("Budget limit changed from %s to %s", self.budget_limit, new_limit)
        self.budget_limit = new_limit

    def render_summary(self) -> Summary:
        return Summary(
            income=tuple(enumerate(self._income, start=1)),
            expenses=tuple(enumerate(self._expenses, start=1)),
            total_income=self.total_income(),
            total_expenses=self.total_expenses(),
            remaining_budget=self.remaining_budget(),
        )
