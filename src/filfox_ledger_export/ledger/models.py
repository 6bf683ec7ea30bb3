from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .units import atto_to_fil

SEND = "send"
RECEIVE = "receive"
MINER_FEE = "miner-fee"
BURN_FEE = "burn-fee"


def _short(address: str, n: int = 6) -> str:
    return address[:n] + "…"


@dataclass(frozen=True)
class Transfer:
    height: int
    timestamp: datetime  # UTC
    message_id: str
    from_address: str
    to_address: str
    amount: int  # attoFIL, negative for outgoing
    miner_fee: int | None = None
    burn_fee: int | None = None

    @property
    def is_incoming(self) -> bool:
        return self.amount > 0

    @property
    def total_fee(self) -> int:
        return abs(self.miner_fee or 0) + abs(self.burn_fee or 0)

    def __str__(self) -> str:
        return (
            f"[{self.timestamp.isoformat()}] {self.message_id}: "
            f"{_short(self.from_address)} -> {_short(self.to_address)}, "
            f"amount: {atto_to_fil(self.amount):>12.2f} FIL | "
            f"miner fee: {self.miner_fee} | burn fee: {self.burn_fee}"
        )
