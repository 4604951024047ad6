"""
Domain errors raised by the store services.
"""


class TransactionNotFoundError(ValueError):
    """Raised when an operation references a transaction id that does not exist."""

    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} not found")


class StoreUnavailableError(RuntimeError):
    """Raised when the underlying database fails or cannot be reached."""
