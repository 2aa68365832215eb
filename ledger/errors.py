"""Ledger exception types."""


class LedgerError(Exception):
    """Base class for all ledger errors."""


class ValidationError(LedgerError, ValueError):
    """Malformed or missing input. Raised before anything is persisted."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        # Plain JSON-safe dicts: no echoed input, no exception objects in ctx
        details = exc.errors(include_url=False, include_context=False, include_input=False)
        fields = ", ".join(".".join(str(p) for p in e["loc"]) or "<root>" for e in details)
        return cls(f"Invalid fields: {fields}", details)


class NotFoundError(LedgerError, LookupError):
    """The referenced trade id does not exist."""

    def __init__(self, trade_id: int):
        super().__init__(f"Trade {trade_id} not found")
        self.trade_id = trade_id


class StorageError(LedgerError):
    """The underlying transaction failed and was rolled back."""
