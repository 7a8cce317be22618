"""
Domain error types.

Services raise these; the API layer turns them into HTTP
status codes. They stay ValueError subclasses so a caller
that only knows about ValueError still catches them.
"""


class DomainError(ValueError):
    """Base class for bookkeeping errors."""


class ValidationError(DomainError):
    """
    Malformed input or a broken double-entry rule.

    Raised for an unknown DEBIT/CREDIT enumerant, a negative or
    non-numeric amount, or total debits not matching total credits
    when a balance is created.
    """


class NotFoundError(DomainError):
    """Requested balance does not exist."""


def balance_not_found(balance_id: int) -> str:
    return f"Balance {balance_id} not found"


def unbalanced(total_debit, total_credit) -> str:
    return (
        f"Balance does not balance: "
        f"debits={total_debit}, credits={total_credit}"
    )
