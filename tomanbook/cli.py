"""Command-line front end for the ledger."""

from __future__ import annotations

import argparse
import datetime as _dt
import sys

from .jalali import PERSIAN_MONTHS
from .ledger import COST_CATEGORIES, Ledger, LedgerError, load_ledger
from .persian import format_number

_BAR_WIDTH = 40


def _print_balance(ledger: Ledger) -> None:
    print(f"درآمد کل: {format_number(ledger.total_income)}")
    print(f"هزینه کل: {format_number(ledger.total_cost)}")
    print(f"موجودی: {format_number(ledger.balance)}")


def _cmd_income(ledger: Ledger, args: argparse.Namespace) -> None:
    print(ledger.add_income(args.amount, args.source, _dt.date.today()))
    _print_balance(ledger)


def _cmd_cost(ledger: Ledger, args: argparse.Namespace) -> None:
    print(ledger.add_cost(args.amount, args.category, args.description, _dt.date.today()))
    _print_balance(ledger)


def _cmd_remove_income(ledger: Ledger, args: argparse.Namespace) -> None:
    ledger.remove_income(args.index - 1)
    _print_balance(ledger)


def _cmd_remove_cost(ledger: Ledger, args: argparse.Namespace) -> None:
    ledger.remove_cost(args.index - 1)
    _print_balance(ledger)


def _cmd_list(ledger: Ledger, args: argparse.Namespace) -> None:
    print("درآمدها:")
    for number, item in enumerate(ledger.incomes, start=1):
        print(f"{number}. {item}")
    print("هزینه‌ها:")
    for number, item in enumerate(ledger.costs, start=1):
        print(f"{number}. {item}")
    _print_balance(ledger)


def _cmd_balance(ledger: Ledger, args: argparse.Namespace) -> None:
    _print_balance(ledger)


def _cmd_chart(ledger: Ledger, args: argparse.Namespace) -> None:
    totals = ledger.month_totals(args.month)
    print("نمودار هزینه‌ها در " + args.month)
    peak = max(totals.values(), default=0)
    for category, amount in totals.items():
        length = round(_BAR_WIDTH * amount / peak) if peak > 0 else 0
        print(f"{category}: {'█' * max(length, 0)} {format_number(amount)}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tomanbook", description="Personal income and cost book.")
    parser.add_argument("--data", default="data.txt", help="ledger file (default: data.txt)")
    commands = parser.add_subparsers(dest="command", required=True)

    income = commands.add_parser("income", help="add an income")
    income.add_argument("amount")
    income.add_argument("source")
    income.set_defaults(handler=_cmd_income)

    cost = commands.add_parser("cost", help="add a cost")
    cost.add_argument("amount")
    cost.add_argument("category", choices=COST_CATEGORIES)
    cost.add_argument("-d", "--description", default="")
    cost.set_defaults(handler=_cmd_cost)

    remove_income = commands.add_parser("remove-income", help="remove an income by number")
    remove_income.add_argument("index", type=int)
    remove_income.set_defaults(handler=_cmd_remove_income)

    remove_cost = commands.add_parser("remove-cost", help="remove a cost by number")
    remove_cost.add_argument("index", type=int)
    remove_cost.set_defaults(handler=_cmd_remove_cost)

    commands.add_parser("list", help="show all entries").set_defaults(handler=_cmd_list)
    commands.add_parser("balance", help="show totals").set_defaults(handler=_cmd_balance)

    chart = commands.add_parser("chart", help="costs per category for a month")
    chart.add_argument("month", choices=PERSIAN_MONTHS)
    chart.set_defaults(handler=_cmd_chart)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one ledger command and save the ledger afterwards."""
    args = _build_parser().parse_args(argv)
    ledger = load_ledger(args.data)
    status = 0
    try:
        args.handler(ledger, args)
    except LedgerError as exc:
        print(f"خطا: {exc}", file=sys.stderr)
        status = 1
    ledger.save(args.data)
    return status


if __name__ == "__main__":
    sys.exit(main())