"""
Chart of accounts API endpoints.

Read-only: the chart is configuration loaded at start-up.
"""

from fastapi import APIRouter, Depends, HTTPException

from bookkeeper.chart import ChartOfAccounts, get_chart, short_account_number
from bookkeeper.schemas.chart import ChartAccountResponse, ChartClassResponse

router = APIRouter(prefix="/chart-of-accounts", tags=["Chart of accounts"])


@router.get("", response_model=list[ChartClassResponse])
def list_chart(chart: ChartOfAccounts = Depends(get_chart)):
    """The whole chart, grouped by top-level class."""
    return [
        ChartClassResponse(
            class_digit=digit,
            class_name=chart.class_name(digit),
            accounts=[
                ChartAccountResponse(
                    account_number=number,
                    short_number=short_account_number(number),
                    account_name=name,
                )
                for number, name in accounts
            ],
        )
        for digit, accounts in chart.grouped_by_class().items()
    ]


@router.get("/{account_number}", response_model=ChartAccountResponse)
def get_account(
    account_number: str,
    chart: ChartOfAccounts = Depends(get_chart),
):
    """Look up a single account number."""
    if account_number not in chart:
        raise HTTPException(
            status_code=404,
            detail=f"Account {account_number} not in chart of accounts",
        )
    return ChartAccountResponse(
        account_number=account_number,
        short_number=short_account_number(account_number),
        account_name=chart.resolve(account_number),
    )
