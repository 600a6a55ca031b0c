"""
Company entity

Organization a contact works for or a deal is made with
"""

from .generated.company_generated import CompanyGenerated


class Company(CompanyGenerated):
    """Organization a contact works for or a deal is made with"""

    __tablename__ = "company"

    # Custom columns, properties and methods for Company go here.
    # The generated mapping lives in CompanyGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
