"""Exception taxonomy for loan terms and engine configuration."""


class AmortizyError(Exception):
    """Base class for all amortizy errors."""


class ValidationError(AmortizyError, ValueError):
    """A LoanTerms field failed validation. Raised at construction time."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class ConfigurationError(AmortizyError, LookupError):
    """Static configuration is missing an entry (payment table, calendar market)."""
