from __future__ import annotations

import csv
import logging
from datetime import timezone
from pathlib import Path
from typing import Iterable, TextIO

from ..errors import WriteError
from .models import Transfer
from .units import FIL_DECIMALS, format_fil

logger = logging.getLogger(__name__)

LEDGER_HEADERS = [
    "Operation Date",
    "Status",
    "Currency Ticker",
    "Operation Type",
    "Operation Amount",
    "Operation Fees",
    "Operation Hash",
    "Account Name",
    "Account xpub",
    "Countervalue Ticker",
]
# "Countervalue at Operation Date" and "Countervalue at CSV Export" are not exported

STATUS = "Confirmed"
CURRENCY_TICKER = "FIL"
COUNTERVALUE_TICKER = "USD"
DEFAULT_ACCOUNT_NAME = "Filfox API"


def format_operation_date(t: Transfer) -> str:
    return t.timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def ledger_row(t: Transfer, account_name: str = DEFAULT_ACCOUNT_NAME, decimals: int = FIL_DECIMALS) -> list[str]:
    fee = t.total_fee
    if t.is_incoming:
        op_type = "IN"
        amount = abs(t.amount)
        xpub = t.to_address
    else:
        # Ledger counts the fee as part of an outgoing amount
        op_type = "OUT"
        amount = abs(t.amount) + fee
        xpub = t.from_address

    return [
        format_operation_date(t),
        STATUS,
        CURRENCY_TICKER,
        op_type,
        format_fil(amount, decimals),
        format_fil(fee, decimals),
        t.message_id,
        account_name,
        xpub,
        COUNTERVALUE_TICKER,
    ]


def write_ledger_csv(
    out: TextIO,
    transfers: Iterable[Transfer],
    *,
    account_name: str = DEFAULT_ACCOUNT_NAME,
    decimals: int = FIL_DECIMALS,
) -> int:
    """
    Write transfers as a Ledger Live operations CSV. Returns the number of rows.
    Rows already written stay in `out` when a write fails.
    """
    writer = csv.writer(out)
    written = 0
    try:
        writer.writerow(LEDGER_HEADERS)
        for t in transfers:
            writer.writerow(ledger_row(t, account_name=account_name, decimals=decimals))
            written += 1
        out.flush()
    except (OSError, csv.Error) as e:
        raise WriteError(str(e), getattr(out, "name", None)) from e
    return written


def export_ledger_csv(path: Path | str, transfers: Iterable[Transfer], **kwargs) -> int:
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            written = write_ledger_csv(f, transfers, **kwargs)
    except OSError as e:
        raise WriteError(str(e), str(path)) from e

    logger.debug("Wrote %d ledger rows to %s", written, path)
    return written


def default_output_name(wallet: str) -> str:
    return f"{wallet[:9]}.csv"
