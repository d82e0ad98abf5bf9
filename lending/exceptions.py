"""Exception hierarchy for the lending ledger."""


class LendingError(Exception):
    """Base exception for all lending ledger errors."""


class InvalidArgumentError(LendingError, ValueError):
    """Raised when an amount, term count or date is not acceptable."""


class PersistenceError(LendingError):
    """Raised when a ledger write could not be committed."""


class ImmutableLedgerEntryError(LendingError):
    """Raised on an attempt to change or remove a received repayment."""
