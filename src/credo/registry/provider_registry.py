"""
In-process Provider Identity Registry

This module provides:
- ErrorCode: closed set of rejection codes returned by mutating operations
- Result / RegistryError: outcome of a mutation, optionally unwrapped into an exception
- Provider: immutable snapshot of one credentialed provider
- ProviderRegistry: lock-guarded, dict-backed record store with ownership rules
"""

import logging
import threading
from dataclasses import dataclass, asdict, replace
from enum import IntEnum
from typing import Any, Dict, Hashable, List, Optional

logger = logging.getLogger(__name__)

# Principals are opaque to the registry; only equality is used.
Principal = Hashable


class ErrorCode(IntEnum):
    """Rejection codes for register / update / deactivate"""
    NOT_AUTHORIZED = 100
    ALREADY_REGISTERED = 101
    NOT_FOUND = 102


class RegistryError(Exception):
    """Raised by Result.unwrap() for a rejected operation."""

    def __init__(self, code: ErrorCode):
        super().__init__(f"{code.name} ({int(code)})")
        self.code = code


@dataclass(frozen=True)
class Result:
    """Outcome of a mutating registry operation."""
    error: Optional[ErrorCode] = None

    @classmethod
    def success(cls) -> 'Result':
        return cls()

    @classmethod
    def failure(cls, code: ErrorCode) -> 'Result':
        return cls(error=ErrorCode(code))

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> None:
        if self.error is not None:
            raise RegistryError(self.error)


@dataclass(frozen=True)
class Provider:
    """Provider record dataclass"""
    provider_id: str
    owner: Principal
    name: str
    specialty: str
    license_number: str
    active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Provider':
        """Create from dictionary."""
        data = dict(data)
        active = data.setdefault('active', True)
        if not isinstance(active, bool):
            raise TypeError(f"active must be a bool, got {type(active).__name__}")
        return cls(**data)


def _require_str(field_name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a str, got {type(value).__name__}")
    return value


# ---------------------------------------------------------------------------
# In-memory registry
# ---------------------------------------------------------------------------

class ProviderRegistry:
    """Thread-safe, dict-backed provider identity registry.

    Each provider is owned by the principal that registered it, and a
    principal may register at most one provider. Only the owner may update a
    profile; the owner or the registry admin may deactivate it. Records are
    never removed.
    """

    def __init__(self, admin: Principal):
        self._admin = admin
        self._lock = threading.Lock()
        self._providers: Dict[str, Provider] = {}
        self._owners: Dict[Principal, str] = {}  # owner -> provider_id

    @property
    def admin(self) -> Principal:
        return self._admin

    def _reject(self, op: str, provider_id: str, caller: Principal, code: ErrorCode) -> Result:
        logger.warning("%s %r by %r rejected: %s", op, provider_id, caller, code.name)
        return Result.failure(code)

    # -- mutations ----------------------------------------------------------

    def register(self, provider_id: str, name: str, specialty: str,
                 license_number: str, caller: Principal) -> Result:
        """Register a new provider owned by *caller*."""
        provider = Provider(
            provider_id=_require_str("provider_id", provider_id),
            owner=caller,
            name=_require_str("name", name),
            specialty=_require_str("specialty", specialty),
            license_number=_require_str("license_number", license_number),
        )
        with self._lock:
            if caller in self._owners or provider_id in self._providers:
                return self._reject("register", provider_id, caller, ErrorCode.ALREADY_REGISTERED)
            self._providers[provider_id] = provider
            self._owners[caller] = provider_id
        logger.info("Registered provider %r for %r", provider_id, caller)
        return Result.success()

    def update(self, provider_id: str, name: str, specialty: str,
               license_number: str, caller: Principal) -> Result:
        """Replace the profile fields of a provider. Owner only."""
        _require_str("provider_id", provider_id)
        _require_str("name", name)
        _require_str("specialty", specialty)
        _require_str("license_number", license_number)
        with self._lock:
            current = self._providers.get(provider_id)
            if current is None:
                return self._reject("update", provider_id, caller, ErrorCode.NOT_FOUND)
            if current.owner != caller:
                return self._reject("update", provider_id, caller, ErrorCode.NOT_AUTHORIZED)
            self._providers[provider_id] = replace(
                current, name=name, specialty=specialty, license_number=license_number,
            )
        logger.info("Updated provider %r", provider_id)
        return Result.success()

    def deactivate(self, provider_id: str, caller: Principal) -> Result:
        """Mark a provider inactive. Owner or admin; repeat calls succeed."""
        _require_str("provider_id", provider_id)
        with self._lock:
            current = self._providers.get(provider_id)
            if current is None:
                return self._reject("deactivate", provider_id, caller, ErrorCode.NOT_FOUND)
            if caller != current.owner and caller != self._admin:
                return self._reject("deactivate", provider_id, caller, ErrorCode.NOT_AUTHORIZED)
            if current.active:
                self._providers[provider_id] = replace(current, active=False)
        logger.info("Deactivated provider %r by %r", provider_id, caller)
        return Result.success()

    # -- reads --------------------------------------------------------------

    def get_provider(self, provider_id: str) -> Optional[Provider]:
        with self._lock:
            return self._providers.get(provider_id)

    def get_provider_by_principal(self, principal: Principal) -> Optional[Provider]:
        with self._lock:
            provider_id = self._owners.get(principal)
            if provider_id is None:
                return None
            return self._providers.get(provider_id)

    def is_active(self, provider_id: str) -> bool:
        provider = self.get_provider(provider_id)
        return provider is not None and provider.active

    def list_providers(self, active: Optional[bool] = None) -> List[Provider]:
        """All providers in registration order, optionally filtered by *active*."""
        with self._lock:
            providers = list(self._providers.values())
        if active is None:
            return providers
        return [p for p in providers if p.active == active]

    def provider_count(self, active: Optional[bool] = None) -> int:
        if active is None:
            with self._lock:
                return len(self._providers)
        return len(self.list_providers(active=active))

    def __contains__(self, provider_id: object) -> bool:
        with self._lock:
            return provider_id in self._providers

    def __len__(self) -> int:
        return self.provider_count()
