from __future__ import annotations

from decimal import Decimal

FIL_DECIMALS = 18


def atto_to_fil(atto: int | None, decimals: int = FIL_DECIMALS) -> Decimal:
    if atto is None:
        return Decimal(0)
    return Decimal(atto).scaleb(-decimals)


def format_fil(atto: int, decimals: int = FIL_DECIMALS) -> str:
    """
    Render an attoFIL integer as FIL using only the digits it needs.

    Exact integer arithmetic, so at most `decimals` fractional digits:
      10**18 -> "1", 5 * 10**17 -> "0.5", 1 -> "0.000000000000000001"
    """
    sign = "-" if atto < 0 else ""
    whole, frac = divmod(abs(atto), 10**decimals)
    if decimals == 0 or frac == 0:
        return f"{sign}{whole}"
    frac_digits = f"{frac:0{decimals}d}".rstrip("0")
    return f"{sign}{whole}.{frac_digits}"
