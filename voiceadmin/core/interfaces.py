"""Provider-facing protocols and records shared across voiceadmin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class Instance:
    """A compute instance as reported by the provider.

    Attributes
    ----------
    instance_id : str
        Provider identifier of the instance
    state : str
        Lifecycle state name (e.g. 'running')
    tags : list[dict[str, Any]] | None
        Provider tag list of ``{"Key": ..., "Value": ...}`` entries, or None
        when the provider omitted tags entirely
    """

    instance_id: str
    state: str
    tags: list[dict[str, Any]] | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Instance:
        """Build an Instance from a describe_instances item.

        Raises
        ------
        KeyError
            If the item has no InstanceId
        """
        return cls(
            instance_id=data["InstanceId"],
            state=(data.get("State") or {}).get("Name", ""),
            tags=data.get("Tags"),
        )


class InventoryProvider(Protocol):
    """Read and terminate operations against one provider region."""

    region: str

    def list_running_instances(self) -> list[Instance]:
        """Return running instances in provider order."""
        ...

    def count_running_instances(self) -> int:
        """Return the number of running instances."""
        ...

    def terminate_instances(self, instance_ids: list[str]) -> list[str]:
        """Terminate all given instances in one call."""
        ...
