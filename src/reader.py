import csv
import logging
import os
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterator, List, Optional

from errors import InvalidExtensionError, MalformedRecordError, MissingArgumentError, NonExistentFileError
from models import Transaction, TransactionType

logger = logging.getLogger(__name__)

VALID_FILE_EXTENSION = "csv"

MAX_CLIENT_ID = 2**16 - 1
MAX_TRANSACTION_ID = 2**32 - 1

# Amounts carry at most 4 fractional digits and must fit the default 28 digit decimal context.
MAX_FRACTIONAL_DIGITS = 4
MAX_INTEGER_DIGITS = 24

FIELDS = ("type", "client", "tx", "amount")


def get_file_path(argv: List[str]) -> str:
    """Return the input path from the command line arguments, validating it first."""
    if len(argv) < 2:
        raise MissingArgumentError()

    path = argv[1]
    _, extension = os.path.splitext(path)
    if extension.lstrip(".") != VALID_FILE_EXTENSION:
        raise InvalidExtensionError()

    if not os.path.isfile(path):
        raise NonExistentFileError(path)

    return path


def read_transactions(filepath: str) -> Iterator[Transaction]:
    """
    Stream transactions from a CSV file in file order.

    The header row names the columns; whitespace around headers and values is
    ignored and rows may leave out the trailing amount. The first row that
    cannot be decoded raises MalformedRecordError.
    """
    with open(filepath, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f, restval="")
        rows = iter(reader)
        while True:
            try:
                row = next(rows)
            except StopIteration:
                return
            except UnicodeDecodeError as e:
                raise MalformedRecordError(reader.line_num + 1, [], f"file is not valid UTF-8: {e.reason}") from e
            except csv.Error as e:
                raise MalformedRecordError(reader.line_num, [], str(e)) from e
            yield parse_row(row, reader.line_num)


def parse_row(row: Dict[Optional[str], str], line_number: int) -> Transaction:
    """Parse CSV row into Transaction."""
    raw = [value for key, value in row.items() if key is not None]
    try:
        normalized = {k.strip(): (v or "").strip() for k, v in row.items() if k is not None}
        if None in row:
            raise ValueError(f"too many fields, expected at most {len(FIELDS)}")

        transaction_type = TransactionType(normalized["type"].lower())
        client_id = _parse_id(normalized["client"], MAX_CLIENT_ID, "client")
        transaction_id = _parse_id(normalized["tx"], MAX_TRANSACTION_ID, "tx")

        amount = None
        amount_str = normalized.get("amount", "")
        if amount_str:
            amount = Decimal(amount_str)
            if not amount.is_finite():
                raise ValueError(f"amount {amount_str!r} is not a finite number")
            if -amount.as_tuple().exponent > MAX_FRACTIONAL_DIGITS:
                raise ValueError(f"amount {amount_str!r} has more than {MAX_FRACTIONAL_DIGITS} fractional digits")
            if amount and amount.adjusted() >= MAX_INTEGER_DIGITS:
                raise ValueError(f"amount {amount_str!r} has more than {MAX_INTEGER_DIGITS} integer digits")
    except KeyError as e:
        raise MalformedRecordError(line_number, raw, f"missing column {e}") from e
    except InvalidOperation as e:
        raise MalformedRecordError(line_number, raw, f"invalid amount {normalized.get('amount')!r}") from e
    except ValueError as e:
        raise MalformedRecordError(line_number, raw, str(e)) from e

    return Transaction(
        transaction_type=transaction_type,
        client_id=client_id,
        transaction_id=transaction_id,
        amount=amount,
    )


def _parse_id(value: str, maximum: int, name: str) -> int:
    # int() would also take signs, underscores and non-ASCII digits.
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"{name} {value!r} is not an unsigned integer")
    number = int(value)
    if not 0 <= number <= maximum:
        raise ValueError(f"{name} {number} out of range 0..{maximum}")
    return number
