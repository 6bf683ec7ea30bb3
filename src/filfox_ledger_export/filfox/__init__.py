from .client import FilfoxClient
from .models import FilfoxTransferRecord, FilfoxTransfersPage

__all__ = [
    "FilfoxClient",
    "FilfoxTransferRecord",
    "FilfoxTransfersPage",
]
