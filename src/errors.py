from decimal import Decimal
from typing import List


class PaymentsError(Exception):
    """Base class for every error reported to the user."""


class MissingArgumentError(PaymentsError):
    def __init__(self):
        super().__init__("An argument for file path must be provided, like so: python main.py transactions.csv")


class InvalidExtensionError(PaymentsError):
    def __init__(self):
        super().__init__("The file must have a csv extension")


class NonExistentFileError(PaymentsError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Incorrect file path argument provided: {path}")


class MalformedRecordError(PaymentsError):
    """Raised for the first input row that cannot be decoded. Fatal for the run."""

    def __init__(self, line_number: int, row: List[str], reason: str):
        self.line_number = line_number
        self.row = row
        self.reason = reason
        super().__init__(f"Malformed record on line {line_number}: {reason} ({','.join(row)})")


class InsufficientFundsError(PaymentsError):
    def __init__(self, requested: Decimal, available: Decimal):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Failed withdrawal, amount: {requested} is greater than available funds: {available}"
        )


class ConfigError(PaymentsError):
    pass
