"""Cash machine: PIN check, withdrawals and note breakdowns."""

from __future__ import annotations

from collections.abc import Sequence

CURRENCY_NOTES = (2000, 500, 200, 100, 50, 20, 10, 5, 2, 1)
"""Denominations used to break an amount into notes and coins."""

ATM_NOTES = (2000, 500, 200, 100)
"""Notes the cash machine holds."""

DEFAULT_BALANCE = 20000


def note_breakdown(amount: int, denominations: Sequence[int] = CURRENCY_NOTES) -> dict[int, int]:
    """Greedy count of each denomination in *amount*, largest first.

    Whatever is smaller than the smallest denomination is left out.
    """
    if amount < 0:
        raise ValueError("amount cannot be negative")
    if any(note <= 0 for note in denominations):
        raise ValueError("denominations must be positive")
    counts: dict[int, int] = {}
    remaining = amount
    for note in denominations:
        counts[note], remaining = divmod(remaining, note)
    return counts


class Atm:
    """An account behind a PIN, paying out in :data:`ATM_NOTES`."""

    def __init__(self, pin: int, balance: int = DEFAULT_BALANCE) -> None:
        self._pin = pin
        self._balance = balance
        self._verified = False

    @property
    def balance(self) -> int:
        """Money left in the account."""
        return self._balance

    @property
    def verified(self) -> bool:
        """Whether the right PIN has been entered."""
        return self._verified

    def verify(self, pin: int) -> bool:
        """Check *pin*; a correct one unlocks withdrawals."""
        self._verified = pin == self._pin
        return self._verified

    def withdraw(self, amount: int) -> dict[int, int]:
        """Take *amount* from the balance and return the notes paid out."""
        if not self._verified:
            raise PermissionError("PIN not verified")
        if amount < 0:
            raise ValueError("amount cannot be negative")
        if amount > self._balance:
            raise ValueError("insufficient balance")
        self._balance -= amount
        return note_breakdown(amount, ATM_NOTES)