import pytest

from amortizy.engine.payment_counts import PAYMENT_COUNTS, total_payments
from amortizy.errors import ConfigurationError
from amortizy.models.enums import Frequency


class TestTotalPayments:
    def test_six_month_daily(self):
        assert total_payments(6, Frequency.DAILY) == 124

    def test_twelve_month_daily(self):
        assert total_payments(12, Frequency.DAILY) == 248

    def test_twelve_month_weekly(self):
        assert total_payments(12, Frequency.WEEKLY) == 53

    def test_eighteen_month_weekly(self):
        assert total_payments(18, Frequency.WEEKLY) == 79

    def test_every_supported_term_has_both_frequencies(self):
        for term in (6, 9, 12, 15, 18):
            for frequency in Frequency:
                assert (term, frequency) in PAYMENT_COUNTS

    def test_missing_pair_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="24 months"):
            total_payments(24, Frequency.DAILY)

    def test_configuration_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            total_payments(7, Frequency.WEEKLY)
