from enum import Enum


class Frequency(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"


class InterestMethod(Enum):
    SIMPLE = "simple"            # Recomputed each period from the outstanding balance
    PRECOMPUTED = "precomputed"  # Fixed upfront, split evenly across payments


class FeeTreatment(Enum):
    DISTRIBUTED = "distributed"
    ADD_TO_PRINCIPAL = "add_to_principal"
    SEPARATE_PAYMENT = "separate_payment"


class PaymentType(Enum):
    GRACE_PERIOD = "Grace Period"
    ADDITIONAL_FEE_PAYMENT = "Additional Fee Payment"
    INTEREST_ONLY = "Interest Only"
    REGULAR = "Regular Payment"
