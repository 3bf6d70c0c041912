from decimal import Decimal
import dataclasses

from amortizy.engine.principal import (
    effective_principal,
    grace_period_interest,
    principal_with_origination,
)
from amortizy.models.enums import FeeTreatment


class TestPrincipalWithOrigination:
    def test_adds_origination_fee(self, origination_terms):
        assert principal_with_origination(origination_terms) == Decimal("110000")


class TestGracePeriodInterest:
    def test_zero_without_grace(self, origination_terms):
        assert grace_period_interest(origination_terms) == Decimal("0")

    def test_simple_daily_accrual(self, origination_terms):
        terms = dataclasses.replace(origination_terms, grace_period_days=3)
        expected = Decimal("110000") * Decimal("0.1775") / Decimal("365") * 3
        assert abs(grace_period_interest(terms) - expected) < Decimal("0.000001")


class TestEffectivePrincipal:
    def test_origination_only(self, origination_terms):
        assert effective_principal(origination_terms) == Decimal("110000.00")

    def test_grace_capitalizes_interest(self, origination_terms):
        terms = dataclasses.replace(origination_terms, grace_period_days=3)
        effective = effective_principal(terms)
        assert Decimal("110000.00") < effective < Decimal("110500.00")

    def test_longer_grace_increases_principal(self, origination_terms):
        short = dataclasses.replace(origination_terms, grace_period_days=5)
        long = dataclasses.replace(origination_terms, grace_period_days=10)
        assert effective_principal(long) > effective_principal(short)

    def test_add_to_principal_fee(self, origination_terms):
        terms = dataclasses.replace(
            origination_terms,
            additional_fee=Decimal("5000"),
            additional_fee_treatment=FeeTreatment.ADD_TO_PRINCIPAL,
        )
        assert effective_principal(terms) == Decimal("115000.00")

    def test_distributed_fee_not_in_principal(self, origination_terms):
        terms = dataclasses.replace(origination_terms, additional_fee=Decimal("5000"))
        assert effective_principal(terms) == Decimal("110000")
