# budget_tracker/core/models.py
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Entry:
    amount: float
    label: str
    date: str


@dataclass(frozen=True)
class OverrunStatus:
    exceeded: bool
    total_expenses: float
    budget_limit: float


@dataclass(frozen=True)
class Summary:
    """Income and expense listings (1-based index, entry) plus the totals."""
    income: Tuple[Tuple[int, Entry], ...]
    expenses: Tuple[Tuple[int, Entry], ...]
    total_income: float
    total_expenses: float
    remaining_budget: float
