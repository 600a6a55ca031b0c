"""
CRM Core
Entity catalog, persistence and API for the CRM domain
"""

__version__ = "0.3.0"
