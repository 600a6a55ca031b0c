# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run. Customise Country in
# crm_core/models/country.py or attach behaviour through crm_core.hooks.
"""
Country generated base

Country reference data
"""

import uuid

import sqlalchemy as sa
from sqlalchemy.orm import mapped_column

from ...core.database import Base
from ..mixins import AuditMixin


class CountryGenerated(AuditMixin, Base):
    """Generated mapping for Country"""

    __abstract__ = True

    __entity_name__ = "Country"
    __entity_label__ = "Country"
    __plural_label__ = "Countries"
    __searchable_fields__ = (
        "name",
        "official_name",
        "native_name",
        "iso_code",
        "iso3_code",
        "numeric_code",
        "phone_code",
        "capital",
        "region",
        "subregion",
        "currency_code",
        "currency_symbol",
        "flag_emoji",
    )
    __sortable_fields__ = (
        "name",
        "official_name",
        "native_name",
        "iso_code",
        "iso3_code",
        "numeric_code",
        "phone_code",
        "capital",
        "region",
        "subregion",
        "currency_code",
        "currency_symbol",
        "flag_emoji",
        "latitude",
        "longitude",
        "population",
        "eu_member",
        "active",
        "created_at",
        "updated_at",
    )
    __filterable_fields__ = (
        "name",
        "official_name",
        "native_name",
        "iso_code",
        "iso3_code",
        "numeric_code",
        "phone_code",
        "capital",
        "region",
        "subregion",
        "currency_code",
        "currency_symbol",
        "flag_emoji",
        "latitude",
        "longitude",
        "population",
        "eu_member",
        "active",
        "created_at",
        "updated_at",
    )

    id = mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4)
    name = mapped_column(sa.String(255), nullable=False, index=True)
    official_name = mapped_column(sa.String(255))
    native_name = mapped_column(sa.String(255))
    iso_code = mapped_column(sa.String(2), nullable=False, unique=True)
    iso3_code = mapped_column(sa.String(3))
    numeric_code = mapped_column(sa.String(3))
    phone_code = mapped_column(sa.String(10))
    capital = mapped_column(sa.String(100))
    region = mapped_column(sa.String(100))
    subregion = mapped_column(sa.String(100))
    currency_code = mapped_column(sa.String(3))
    currency_symbol = mapped_column(sa.String(10))
    flag_emoji = mapped_column(sa.String(10))
    languages = mapped_column(sa.JSON)
    timezones = mapped_column(sa.JSON)
    latitude = mapped_column(sa.Numeric(10, 7))
    longitude = mapped_column(sa.Numeric(10, 7))
    population = mapped_column(sa.Integer)
    eu_member = mapped_column(sa.Boolean, nullable=False, default=False)
    active = mapped_column(sa.Boolean, nullable=False, default=True)
