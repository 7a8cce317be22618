"""
Balance API endpoints.

The API layer is thin — it handles HTTP concerns (status codes,
response formatting) and delegates all business logic to
BalanceService and ReportService.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeper.chart import ChartOfAccounts, get_chart
from bookkeeper.errors import NotFoundError, ValidationError
from bookkeeper.models.base import get_db
from bookkeeper.services.balance_service import BalanceService
from bookkeeper.services.report_service import ReportService
from bookkeeper.schemas.balance import (
    BalanceCreate,
    BalanceResponse,
    BalanceSummary,
)
from bookkeeper.schemas.reports import (
    BalanceReport,
    FinancialStatements,
    LedgerAccount,
    RecordingBook,
    TrialBalance,
)

router = APIRouter(prefix="/balances", tags=["Balances"])


@router.post("", response_model=BalanceResponse, status_code=201)
def create_balance(
    request: BalanceCreate,
    db: Session = Depends(get_db),
    chart: ChartOfAccounts = Depends(get_chart),
):
    """
    Create a balance with all its recordings.

    Total debits must equal total credits across every
    recording, otherwise nothing is stored.
    """
    service = BalanceService(db, chart)
    try:
        balance = service.create_balance(request)
        db.commit()
        return balance
    except ValidationError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[BalanceSummary])
def list_balances(
    db: Session = Depends(get_db),
    chart: ChartOfAccounts = Depends(get_chart),
):
    """List every balance, oldest first."""
    return BalanceService(db, chart).list_balances()


@router.get("/{balance_id}", response_model=BalanceResponse)
def get_balance(
    balance_id: int,
    db: Session = Depends(get_db),
    chart: ChartOfAccounts = Depends(get_chart),
):
    """Get a balance with its recordings and transaction lines."""
    service = BalanceService(db, chart)
    try:
        return service.get_balance(balance_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{balance_id}/report", response_model=BalanceReport)
def get_report(
    balance_id: int,
    db: Session = Depends(get_db),
    chart: ChartOfAccounts = Depends(get_chart),
):
    """
    Every derived view of a balance in one response.

    Reports are recomputed from the transaction lines on each
    request; nothing derived is stored.
    """
    service = ReportService(db, chart)
    try:
        return service.get_report(balance_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{balance_id}/recording-book", response_model=RecordingBook)
def get_recording_book(
    balance_id: int,
    db: Session = Depends(get_db),
    chart: ChartOfAccounts = Depends(get_chart),
):
    service = ReportService(db, chart)
    try:
        return service.get_recording_book(balance_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{balance_id}/ledger", response_model=list[LedgerAccount])
def get_ledger(
    balance_id: int,
    db: Session = Depends(get_db),
    chart: ChartOfAccounts = Depends(get_chart),
):
    service = ReportService(db, chart)
    try:
        return service.get_ledger(balance_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{balance_id}/trial-balance", response_model=TrialBalance)
def get_trial_balance(
    balance_id: int,
    db: Session = Depends(get_db),
    chart: ChartOfAccounts = Depends(get_chart),
):
    service = ReportService(db, chart)
    try:
        return service.get_trial_balance(balance_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{balance_id}/statements", response_model=FinancialStatements)
def get_statements(
    balance_id: int,
    db: Session = Depends(get_db),
    chart: ChartOfAccounts = Depends(get_chart),
):
    """Income statement and balance sheet."""
    service = ReportService(db, chart)
    try:
        return service.get_statements(balance_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
