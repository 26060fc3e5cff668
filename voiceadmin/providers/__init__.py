"""Provider registry and management.

Inventory providers are registered by name so configuration can select one
without importing provider modules directly.
"""

from __future__ import annotations

from voiceadmin.core.interfaces import InventoryProvider
from voiceadmin.providers.aws import EC2Inventory
from voiceadmin.providers.aws.constants import DEFAULT_REGION
from voiceadmin.providers.exceptions import (
    ProviderAPIError,
    ProviderConnectionError,
    ProviderCredentialsError,
    ProviderError,
    ProviderTimeoutError,
)

_PROVIDERS: dict[str, dict[str, type[InventoryProvider] | str | None]] = {}


def register_provider(
    name: str,
    inventory_class: type[InventoryProvider],
    default_region: str | None = None,
) -> None:
    """Register a cloud provider implementation.

    Parameters
    ----------
    name : str
        Provider name (e.g., 'aws')
    inventory_class : type[InventoryProvider]
        Inventory class implementing the InventoryProvider protocol
    default_region : str | None
        Default region for this provider
    """
    _PROVIDERS[name] = {
        "inventory": inventory_class,
        "default_region": default_region,
    }


def get_provider(name: str) -> dict[str, type[InventoryProvider] | str | None]:
    """Get a registered provider by name.

    Raises
    ------
    ValueError
        If provider is not registered
    """
    if name not in _PROVIDERS:
        raise ValueError(f"Unknown provider: {name}")
    return _PROVIDERS[name]


def list_providers() -> list[str]:
    """List all registered provider names."""
    return list(_PROVIDERS.keys())


def get_default_region(provider_name: str) -> str:
    """Get the default region for a provider.

    Parameters
    ----------
    provider_name : str
        Provider name

    Returns
    -------
    str
        Default region for the provider

    Raises
    ------
    ValueError
        If provider is not registered or has no default region
    """
    provider_info = get_provider(provider_name)
    default_region = provider_info.get("default_region")

    if default_region is None:
        raise ValueError(f"No default region defined for provider: {provider_name}")

    return default_region


__all__ = [
    "register_provider",
    "get_provider",
    "list_providers",
    "get_default_region",
    "ProviderError",
    "ProviderCredentialsError",
    "ProviderAPIError",
    "ProviderConnectionError",
    "ProviderTimeoutError",
]

register_provider("aws", EC2Inventory, DEFAULT_REGION)
