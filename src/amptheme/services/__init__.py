"""Service layer — end-to-end document rewriting returning ServiceResult."""

from amptheme.services.result import ServiceError, ServiceResult

__all__ = ["ServiceError", "ServiceResult"]
