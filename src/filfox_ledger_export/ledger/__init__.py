from .export import default_output_name, export_ledger_csv, write_ledger_csv
from .models import Transfer
from .reconcile import reconcile_transfers
from .units import FIL_DECIMALS, atto_to_fil, format_fil

__all__ = [
    "Transfer",
    "reconcile_transfers",
    "write_ledger_csv",
    "export_ledger_csv",
    "default_output_name",
    "FIL_DECIMALS",
    "atto_to_fil",
    "format_fil",
]
