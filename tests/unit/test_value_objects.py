from datetime import date
from decimal import Decimal

import pytest

from gestion_reservas.domain.errors import InvalidDateRangeError, InvalidMoneyError
from gestion_reservas.domain.value_objects import Money, StayDates


class TestMoney:
    def test_quantizes_to_cents(self):
        assert Money(Decimal("120")).amount == Decimal("120.00")
        assert Money(Decimal("10.5")).amount == Decimal("10.50")

    def test_parse_accepts_comma_separator(self):
        assert Money.parse("120,50").amount == Decimal("120.50")
        assert Money.parse(" 99.9 ").amount == Decimal("99.90")

    @pytest.mark.parametrize("raw", ["abc", "12,34,56", "NaN", "Infinity"])
    def test_parse_rejects_non_numeric(self, raw):
        with pytest.raises(InvalidMoneyError):
            Money.parse(raw)

    @pytest.mark.parametrize("raw", ["1e30", "100000000", "120,505", "0.001"])
    def test_parse_rejects_out_of_range_or_extra_decimals(self, raw):
        with pytest.raises(InvalidMoneyError):
            Money.parse(raw)

    def test_parse_accepts_column_limits(self):
        assert Money.parse("99999999,99").amount == Decimal("99999999.99")
        assert Money.parse("120.500").amount == Decimal("120.50")

    def test_huge_amount_raises_domain_error(self):
        with pytest.raises(InvalidMoneyError):
            Money(Decimal("1e30"))

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidMoneyError):
            Money.parse("-5")

    def test_zero_and_positive(self):
        assert Money.parse("0").is_zero()
        assert Money.parse("0,01").is_positive()


class TestStayDates:
    def test_nights(self):
        stay = StayDates(start=date(2025, 7, 1), end=date(2025, 7, 8))
        assert stay.nights == 7

    @pytest.mark.parametrize("end", [date(2025, 7, 1), date(2025, 6, 30)])
    def test_end_must_be_after_start(self, end):
        with pytest.raises(InvalidDateRangeError):
            StayDates(start=date(2025, 7, 1), end=end)

    def test_overlaps(self):
        july = StayDates(start=date(2025, 7, 1), end=date(2025, 7, 8))

        assert july.overlaps_with(StayDates(start=date(2025, 7, 7), end=date(2025, 7, 10)))
        # Salida y entrada el mismo día no se solapan
        assert not july.overlaps_with(StayDates(start=date(2025, 7, 8), end=date(2025, 7, 10)))
