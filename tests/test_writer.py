import sys
import os
import io
from decimal import Decimal

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from models import ClientAccount
from writer import format_decimal, write_accounts


class TestFormatDecimal:
    def test_pads_to_four_places(self):
        assert format_decimal(Decimal("1.5")) == "1.5000"
        assert format_decimal(Decimal("0")) == "0.0000"

    def test_keeps_four_places(self):
        assert format_decimal(Decimal("1.2345")) == "1.2345"

    def test_rounds_extra_places(self):
        assert format_decimal(Decimal("2.00005")) == "2.0000"
        assert format_decimal(Decimal("2.00015")) == "2.0002"

    def test_negative(self):
        assert format_decimal(Decimal("-30")) == "-30.0000"

    def test_beyond_default_precision(self):
        assert format_decimal(Decimal("1e30")) == "1" + "0" * 30 + ".0000"
        assert format_decimal(Decimal("-12345678901234567890123456789.12345")) == "-12345678901234567890123456789.1234"


class TestWriteAccounts:
    def test_header_and_sorted_rows(self):
        accounts = {
            2: ClientAccount(client_id=2, available=Decimal("2")),
            1: ClientAccount(client_id=1, available=Decimal("1.5"), held=Decimal("0.25"), locked=True),
        }
        stream = io.StringIO()

        write_accounts(accounts, stream)

        assert stream.getvalue() == '\n'.join([
            "client,available,held,total,locked",
            "1,1.5000,0.2500,1.7500,true",
            "2,2.0000,0.0000,2.0000,false",
            "",
        ])

    def test_no_accounts(self):
        stream = io.StringIO()
        write_accounts({}, stream)
        assert stream.getvalue() == "client,available,held,total,locked\n"
