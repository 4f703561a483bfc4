import csv
from decimal import Context, Decimal, getcontext
from typing import Dict, TextIO

from models import ClientAccount

PRECISION = Decimal("0.0001")

HEADER = ("client", "available", "held", "total", "locked")


def format_decimal(value: Decimal) -> str:
    """Format decimal with exactly 4 decimal places."""
    # Balances can outgrow the default context once accumulated.
    context = Context(prec=max(getcontext().prec, value.adjusted() + 5))
    return f"{value.quantize(PRECISION, context=context):f}"


def write_accounts(accounts: Dict[int, ClientAccount], stream: TextIO) -> None:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(HEADER)
    for client_id in sorted(accounts.keys()):
        account = accounts[client_id]
        writer.writerow((
            client_id,
            format_decimal(account.available),
            format_decimal(account.held),
            format_decimal(account.total),
            str(account.locked).lower(),
        ))
