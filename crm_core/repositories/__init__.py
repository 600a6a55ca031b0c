"""
CRM Entity Repositories
"""

from .base import EntityRepository, PaginatedResult, SearchCriteria

__all__ = ["EntityRepository", "PaginatedResult", "SearchCriteria"]
