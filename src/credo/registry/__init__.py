"""
In-process Provider Identity Registry

This package provides:
1. ProviderRegistry — lock-guarded registry mapping provider ids to owners and profiles
2. Provider — immutable provider record
3. Result, ErrorCode, RegistryError — closed outcome taxonomy for mutations
"""

from .provider_registry import (
    ErrorCode,
    Principal,
    Provider,
    ProviderRegistry,
    RegistryError,
    Result,
)

__version__ = '0.1.0'
__all__ = [
    'ErrorCode',
    'Principal',
    'Provider',
    'ProviderRegistry',
    'RegistryError',
    'Result',
]
