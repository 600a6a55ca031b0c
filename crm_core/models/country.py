"""
Country entity

Country reference data
"""

from .generated.country_generated import CountryGenerated


class Country(CountryGenerated):
    """Country reference data"""

    __tablename__ = "country"

    # Custom columns, properties and methods for Country go here.
    # The generated mapping lives in CountryGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
