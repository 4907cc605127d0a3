"""A personal ledger of incomes and costs in tomans, dated by the Jalali calendar."""

__version__ = "0.1.0"
__all__ = ["__version__"]