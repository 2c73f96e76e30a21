"""
Aura Services

Service layer containing the synthesis, indicator and analysis engines
plus the session store. Each service has a defined interface (contract)
and implementation.
"""

from aura.services.base import BaseService, ServiceError

__all__ = ["BaseService", "ServiceError"]
