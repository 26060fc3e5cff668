"""Per-session state carried between voice turns."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

REGION_ATTRIBUTE = "region"


@dataclass(frozen=True)
class SessionState:
    """State the skill keeps for one voice session.

    The voice platform stores the serialised form in
    ``session.attributes`` and sends it back on the next turn.

    Attributes
    ----------
    region : str | None
        Spoken region name selected by the user, or None
    """

    region: str | None = None

    @classmethod
    def from_attributes(cls, attributes: dict[str, Any] | None) -> SessionState:
        """Read state from a session attribute map, ignoring unknown keys."""
        if not attributes:
            return cls()
        region = attributes.get(REGION_ATTRIBUTE)
        if not isinstance(region, str) or not region:
            region = None
        return cls(region=region)

    @classmethod
    def from_session(cls, session: dict[str, Any] | None) -> SessionState:
        """Read state from the request's session object."""
        return cls.from_attributes((session or {}).get("attributes"))

    def with_region(self, region: str) -> SessionState:
        return replace(self, region=region)

    def to_attributes(self) -> dict[str, Any]:
        """Serialise state for the response's sessionAttributes."""
        if self.region is None:
            return {}
        return {REGION_ATTRIBUTE: self.region}
