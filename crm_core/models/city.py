"""
City entity

City reference data
"""

from .generated.city_generated import CityGenerated


class City(CityGenerated):
    """City reference data"""

    __tablename__ = "city"

    # Custom columns, properties and methods for City go here.
    # The generated mapping lives in CityGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
