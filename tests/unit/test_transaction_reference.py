"""
Tests para la generación de referencias de transacción.

La siguiente referencia es la última + 1, con al menos 3 dígitos.
"""

import pytest

from gestion_reservas.domain.value_objects.transaction_reference import TransactionReference


class TestNextAfter:
    def test_empty_table_starts_at_txn001(self):
        assert TransactionReference.next_after(None) == "TXN001"

    @pytest.mark.parametrize(
        "last, expected",
        [
            ("TXN001", "TXN002"),
            ("TXN009", "TXN010"),
            ("TXN041", "TXN042"),
            ("TXN998", "TXN999"),
        ],
    )
    def test_increments_and_pads(self, last, expected):
        assert TransactionReference.next_after(last) == expected

    def test_grows_past_three_digits(self):
        """Pasado el 999 la referencia sigue creciendo, sin error."""
        assert TransactionReference.next_after("TXN999") == "TXN1000"
        assert TransactionReference.next_after("TXN1000") == "TXN1001"

    @pytest.mark.parametrize("garbage", ["", "PAY001", "TXN", "TXNabc", "TXN000"])
    def test_unreadable_reference_restarts(self, garbage):
        assert TransactionReference.next_after(garbage) == "TXN001"


class TestParse:
    def test_parse_valid(self):
        reference = TransactionReference.parse(" TXN042 ")

        assert reference == TransactionReference(42)
        assert str(reference) == "TXN042"

    def test_parse_invalid_returns_none(self):
        assert TransactionReference.parse("REF-42") is None

    def test_number_must_be_positive(self):
        with pytest.raises(ValueError):
            TransactionReference(0)
