"""Income and cost ledger with plain-text persistence."""

from __future__ import annotations

import datetime as _dt
import os
import re
from dataclasses import dataclass, field

from .jalali import current_date
from .persian import GROUP_SEPARATOR, format_number, to_english_digits

COST_CATEGORIES = (
    "تفریح", "خورد و خوراک", "رفت‌وآمد", "قبوض", "پزشکی", "لباس", "سایر",
)
CURRENCY = "تومان"
MIN_INCOME = 1
MAX_INCOME = 1_000_000_000

_INTEGER = re.compile(r"[+-]?[0-9]+")


class LedgerError(Exception):
    """Raised when a ledger operation cannot be carried out."""


def _parse_int(text: str) -> int | None:
    candidate = to_english_digits(text).strip()
    if _INTEGER.fullmatch(candidate):
        return int(candidate)
    return None


def _strip_amount(text: str, currency: str) -> str:
    return text.replace(currency, "").replace(GROUP_SEPARATOR, "")


@dataclass
class Ledger:
    """Lists of income and cost entries with their running totals."""

    incomes: list[str] = field(default_factory=list)
    costs: list[str] = field(default_factory=list)
    total_income: int = 0
    total_cost: int = 0

    @property
    def balance(self) -> int:
        return self.total_income - self.total_cost

    @staticmethod
    def _check_index(items: list[str], index: int | None) -> int:
        if index is None or not 0 <= index < len(items):
            raise LedgerError("هیچ موردی انتخاب نشده است")
        return index

    def add_income(self, amount, source: str, today: _dt.date | None = None) -> str:
        """Record an income entry and return its text."""
        amount_text = str(amount).strip()
        if not amount_text or not source:
            raise LedgerError("لطفاً مبلغ و منبع را وارد کنید.")
        value = _parse_int(amount_text)
        if value is None or not MIN_INCOME <= value <= MAX_INCOME:
            raise LedgerError(
                f"مبلغ باید عددی بین {format_number(MIN_INCOME)} و {format_number(MAX_INCOME)} باشد"
            )
        item = f"{current_date(today)} - {source} - {format_number(value)} {CURRENCY} "
        self.incomes.append(item)
        self.total_income += value
        return item

    def remove_income(self, index: int) -> int:
        """Remove the income entry at index and return the amount taken off."""
        index = self._check_index(self.incomes, index)
        parts = self.incomes[index].split(" - ")
        if len(parts) < 3:
            raise LedgerError("فرمت آیتم نادرست است")
        amount = _parse_int(_strip_amount(parts[2], " " + CURRENCY)) or 0
        del self.incomes[index]
        self.total_income -= amount
        return amount

    def add_cost(
        self,
        amount,
        category: str,
        description: str = "",
        today: _dt.date | None = None,
    ) -> str:
        """Record a cost entry and return its text."""
        amount_text = str(amount).strip()
        if not amount_text:
            raise LedgerError("مقدار هزینه خالی است")
        value = _parse_int(amount_text) or 0
        description = description or category
        item = (
            f"{current_date(today)} -  {category} - {description} -  "
            f"{format_number(value)} {CURRENCY}"
        )
        self.costs.append(item)
        self.total_cost += value
        return item

    def remove_cost(self, index: int) -> int:
        """Remove the cost entry at index.

        The totals are adjusted by the number read from the third
        dash-separated field of the entry, which is returned.
        """
        index = self._check_index(self.costs, index)
        fields = self.costs[index].split("-")
        if len(fields) < 3:
            raise LedgerError("فرمت آیتم نادرست است")
        amount = _parse_int(_strip_amount(fields[2].strip(), CURRENCY)) or 0
        del self.costs[index]
        self.total_cost -= amount
        return amount

    def month_totals(self, month_name: str) -> dict[str, int]:
        """Sum costs per category for entries dated in the named month."""
        totals: dict[str, int] = {}
        for item in self.costs:
            parts = item.split(" - ")
            if len(parts) < 4:
                continue
            date_part = parts[0].strip()
            category = parts[1].strip()
            if month_name not in date_part:
                continue
            amount = _parse_int(_strip_amount(parts[3], CURRENCY)) or 0
            totals[category] = totals.get(category, 0) + amount
        return dict(sorted(totals.items()))

    def save(self, path: str | os.PathLike = "data.txt") -> None:
        """Write the ledger to a text file."""
        with open(path, "w", encoding="utf-8") as out:
            for line in self.incomes:
                out.write(f"INCOME:{line}\n")
            for line in self.costs:
                out.write(f"COST:{line}\n")
            out.write(f"TOTAL_INCOME:{self.total_income}\n")
            out.write(f"TOTAL_COST:{self.total_cost}\n")


def load_ledger(path: str | os.PathLike = "data.txt") -> Ledger:
    """Read a ledger from a text file; a missing file gives an empty ledger."""
    ledger = Ledger()
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        return ledger
    with handle:
        for raw in handle:
            line = raw.rstrip("\r\n")
            if line.startswith("INCOME:"):
                ledger.incomes.append(line[len("INCOME:"):])
            elif line.startswith("COST:"):
                ledger.costs.append(line[len("COST:"):])
            elif line.startswith("TOTAL_INCOME:"):
                ledger.total_income = _parse_int(line.split(":", 1)[1]) or 0
            elif line.startswith("TOTAL_COST:"):
                ledger.total_cost = _parse_int(line.split(":", 1)[1]) or 0
    return ledger