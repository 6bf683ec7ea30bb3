from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from ..errors import IncompleteTransferError, ParseError, UnknownTypeError
from ..filfox.models import FilfoxTransferRecord
from .models import BURN_FEE, MINER_FEE, RECEIVE, SEND, Transfer

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class _Draft:
    height: int
    timestamp: datetime
    message_id: str
    from_address: str
    to_address: str
    amount: int | None = None
    miner_fee: int | None = None
    burn_fee: int | None = None

    def freeze(self) -> Transfer:
        if self.amount is None:
            raise IncompleteTransferError(self.message_id)
        return Transfer(
            height=self.height,
            timestamp=self.timestamp,
            message_id=self.message_id,
            from_address=self.from_address,
            to_address=self.to_address,
            amount=self.amount,
            miner_fee=self.miner_fee,
            burn_fee=self.burn_fee,
        )


def parse_atto(value: str, message_id: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise ParseError(value, message_id)
    try:
        return int(value)
    except ValueError as e:
        # int() refuses strings longer than sys.get_int_max_str_digits()
        raise ParseError(value, message_id) from e


def parse_timestamp(ts: int, message_id: str) -> datetime:
    try:
        return datetime.fromtimestamp(ts, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as e:
        raise ParseError(str(ts), message_id, field="timestamp") from e


def reconcile_transfers(records: Iterable[FilfoxTransferRecord]) -> list[Transfer]:
    """
    Merge per-type transfer records into one Transfer per message.

    Height, timestamp and addresses come from the first record of a message.
    Amount and fees are last-wins. Result is most recent first; equal
    timestamps keep the order in which their messages were first seen.
    """
    drafts: dict[str, _Draft] = {}

    for rec in records:
        draft = drafts.get(rec.message)
        if draft is None:
            draft = _Draft(
                height=rec.height,
                timestamp=parse_timestamp(rec.timestamp, rec.message),
                message_id=rec.message,
                from_address=rec.from_,
                to_address=rec.to,
            )
            drafts[rec.message] = draft

        value = parse_atto(rec.value, rec.message)

        if rec.type in (SEND, RECEIVE):
            draft.amount = value
        elif rec.type == BURN_FEE:
            draft.burn_fee = value
        elif rec.type == MINER_FEE:
            draft.miner_fee = value
        else:
            raise UnknownTypeError(rec.type, rec.message)

    transfers = [d.freeze() for d in drafts.values()]
    transfers.sort(key=lambda t: t.timestamp, reverse=True)
    return transfers
