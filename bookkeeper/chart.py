"""
Chart of accounts.

A static table mapping account numbers to account names.
Numbers are opaque strings: "512" and "5120" are different
accounts, and classification is always done by string prefix.

The table also holds one synthetic "CLASS <digit>" key per
top-level class, naming that class.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from bookkeeper.config import get_settings

logger = logging.getLogger(__name__)

CLASS_PREFIX = "CLASS "


def is_numeric(account_number: str) -> bool:
    """Plain ASCII digits only; no sign, spaces or underscores."""
    return account_number.isascii() and account_number.isdigit()


def numeric_sort_key(account_number: str) -> tuple:
    """Sort numeric account numbers by value, anything else after them."""
    if is_numeric(account_number):
        return (0, int(account_number), account_number)
    return (1, 0, account_number)


def short_account_number(account_number: str) -> str:
    """
    Display form of an account number.

    Trailing zeros are dropped while the value stays above 10,
    so "51200" becomes "512" and "10000" becomes "10".
    """
    if not is_numeric(account_number):
        return account_number
    value = int(account_number)
    while value % 10 == 0 and value > 10:
        value //= 10
    return str(value)


class ChartOfAccounts:
    """
    Read-only account number -> account name lookup.

    Built once and passed to whatever needs it. Never mutated.
    """

    def __init__(self, entries: Mapping[str, str]):
        self._entries = MappingProxyType(
            {str(number): str(name) for number, name in entries.items()}
        )

    @classmethod
    def from_mapping(cls, entries: Mapping[str, str]) -> "ChartOfAccounts":
        return cls(entries)

    @classmethod
    def from_json(cls, path: str | Path) -> "ChartOfAccounts":
        """Load a chart from a JSON object of number -> name."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(
                f"Chart of accounts in {path} must be a JSON object"
            )
        chart = cls(data)
        logger.info("Loaded %d chart entries from %s", len(chart), path)
        return chart

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, account_number: object) -> bool:
        """True for real accounts only, never for a class header."""
        return (
            isinstance(account_number, str)
            and not account_number.startswith(CLASS_PREFIX)
            and account_number in self._entries
        )

    def resolve(self, account_number: str) -> str:
        """
        Return the account name, or "" if the number is not in the chart.

        A miss is not an error: reports still render, just without
        a name for that account.
        """
        if account_number not in self:
            logger.debug("Account %s not in chart of accounts", account_number)
            return ""
        return self._entries[account_number]

    @staticmethod
    def class_of(account_number: str) -> str:
        """Top-level class of an account: its leading digit."""
        return account_number[:1]

    def class_name(self, class_digit: str) -> str:
        return self._entries.get(f"{CLASS_PREFIX}{class_digit}", "")

    def accounts(self) -> list[tuple[str, str]]:
        """All real accounts (class headers excluded), in numeric order."""
        items = [
            (number, name)
            for number, name in self._entries.items()
            if not number.startswith(CLASS_PREFIX)
        ]
        return sorted(items, key=lambda item: numeric_sort_key(item[0]))

    def grouped_by_class(self) -> dict[str, list[tuple[str, str]]]:
        """Accounts grouped by leading digit, groups in class order."""
        groups: dict[str, list[tuple[str, str]]] = {}
        for number, name in self.accounts():
            groups.setdefault(self.class_of(number), []).append((number, name))
        return dict(sorted(groups.items()))


@lru_cache()
def get_chart() -> ChartOfAccounts:
    """
    Return the process-wide chart, loaded once from CHART_OF_ACCOUNTS_PATH.

    Also used as a FastAPI dependency, so tests can override it
    with a smaller fixture chart.
    """
    return ChartOfAccounts.from_json(get_settings().CHART_OF_ACCOUNTS_PATH)
