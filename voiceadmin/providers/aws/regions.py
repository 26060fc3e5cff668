"""Spoken region name lookup."""

from __future__ import annotations

from collections.abc import Mapping

from voiceadmin.providers.aws.constants import DEFAULT_REGION, SPOKEN_REGIONS


class RegionDirectory:
    """Resolve spoken region names to AWS region identifiers.

    Parameters
    ----------
    extra_regions : Mapping[str, str] | None
        Additional spoken name mappings layered over the built-in table
    default_region : str
        Identifier returned for names that are not in the table
    """

    def __init__(
        self,
        extra_regions: Mapping[str, str] | None = None,
        default_region: str = DEFAULT_REGION,
    ) -> None:
        self._regions = dict(SPOKEN_REGIONS)
        if extra_regions:
            self._regions.update(extra_regions)
        self.default_region = default_region

    def resolve(self, spoken_name: str | None) -> str:
        """Return the region identifier for a spoken name.

        Never raises; unknown, empty or missing names give the default.

        Parameters
        ----------
        spoken_name : str | None
            Region name as captured by the voice platform (e.g. 'Virginia')

        Returns
        -------
        str
            AWS region identifier (e.g. 'us-east-1')
        """
        if not isinstance(spoken_name, str):
            return self.default_region
        return self._regions.get(spoken_name, self.default_region)

    def names(self) -> list[str]:
        """Return the spoken names this directory knows about."""
        return list(self._regions)


_DEFAULT_DIRECTORY = RegionDirectory()


def resolve_region(spoken_name: str | None) -> str:
    """Resolve a spoken name using the built-in table only."""
    return _DEFAULT_DIRECTORY.resolve(spoken_name)
