"""
Contact entity

Person the organization is in contact with
"""

from .generated.contact_generated import ContactGenerated


class Contact(ContactGenerated):
    """Person the organization is in contact with"""

    __tablename__ = "contact"

    # Custom columns, properties and methods for Contact go here.
    # The generated mapping lives in ContactGenerated and is rewritten on
    # every run; lifecycle behaviour can also be attached with crm_core.hooks.
