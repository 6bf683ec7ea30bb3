from __future__ import annotations


class FilfoxExportError(RuntimeError):
    """Base class for every error that aborts an export run."""


class NetworkError(FilfoxExportError):
    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Filfox request failed: {url}. Error: {reason}")


class APIError(FilfoxExportError):
    def __init__(self, status_code: int, url: str, detail: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Filfox API error: {status_code} at {url}. {detail}")


class DecodeError(FilfoxExportError):
    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Filfox response could not be decoded: {url}. Error: {reason}")


class ParseError(FilfoxExportError):
    def __init__(self, value: str, message_id: str, field: str = "amount"):
        self.value = value
        self.message_id = message_id
        self.field = field
        super().__init__(f"Failed to parse {field} {value!r} of message {message_id}")


class UnknownTypeError(FilfoxExportError):
    def __init__(self, transfer_type: str, message_id: str):
        self.transfer_type = transfer_type
        self.message_id = message_id
        super().__init__(f"Unknown transfer type {transfer_type!r} in message {message_id}")


class IncompleteTransferError(FilfoxExportError):
    def __init__(self, message_id: str):
        self.message_id = message_id
        super().__init__(f"Transfer {message_id} is missing its send/receive amount")


class WriteError(FilfoxExportError):
    def __init__(self, reason: str, path: str | None = None):
        self.path = path
        where = f" to {path}" if path else ""
        super().__init__(f"Failed to write ledger CSV{where}: {reason}")
