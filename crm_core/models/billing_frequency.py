"""
BillingFrequency entity

Recurring billing interval offered for products
"""

from .generated.billing_frequency_generated import BillingFrequencyGenerated


class BillingFrequency(BillingFrequencyGenerated):
    """Recurring billing interval offered for products"""

    __tablename__ = "billing_frequency"

    # Custom columns, properties and methods for BillingFrequency go here.
    # The generated mapping lives in BillingFrequencyGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
