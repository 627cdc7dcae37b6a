"""Region lookup: source location name -> (locationID, locality)."""

import logging
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class Region(BaseModel):
    """Darwin Core location terms for one region."""

    location_id: str
    locality: str


def default_regions() -> dict[str, Region]:
    return {
        "Flanders": Region(location_id="ISO_3166-2:BE-VLG", locality="Flemish Region"),
        "Wallonia": Region(location_id="ISO_3166-2:BE-WAL", locality="Walloon Region"),
        "Brussels": Region(location_id="ISO_3166-2:BE-BRU", locality="Brussels-Capital Region"),
    }


class RegionLookup(BaseModel):
    """Fixed mapping of the Belgian regions; unknown names resolve to nulls."""

    regions: dict[str, Region] = Field(default_factory=default_regions)

    def resolve(self, location: object) -> tuple[str | None, str | None]:
        """
        Look up locationID and locality for a source location value.

        Matching is exact. Anything not in the table (null included) returns
        (None, None); it never raises.

        Examples:
            >>> RegionLookup().resolve("Flanders")
            ('ISO_3166-2:BE-VLG', 'Flemish Region')
            >>> RegionLookup().resolve("Belgium")
            (None, None)
        """
        if not isinstance(location, str):
            return None, None
        region = self.regions.get(location)
        if region is None:
            return None, None
        return region.location_id, region.locality

    def unknown(self, locations: list[object]) -> list[str]:
        """Distinct non-null values that are not in the table, in order of first appearance."""
        out: list[str] = []
        for loc in locations:
            if isinstance(loc, str) and loc not in self.regions and loc not in out:
                out.append(loc)
        return out


def parse_region_config(data: dict[str, Any] | None) -> RegionLookup:
    """
    Parse a pre-loaded YAML mapping (name -> {location_id, locality}) into a RegionLookup.

    None or an empty mapping gives the default Belgian regions.

    Raises:
        ValueError: If the mapping or one of its entries has the wrong shape
    """
    if not data:
        return RegionLookup()
    if not isinstance(data, dict):
        raise ValueError("regions must be a mapping")

    regions: dict[str, Region] = {}
    for name, block in data.items():
        if not isinstance(block, dict):
            raise ValueError(f"region {name!r} must be a mapping with location_id and locality")
        regions[str(name)] = Region(**block)
    logger.debug("Parsed %d regions: %s", len(regions), list(regions))
    return RegionLookup(regions=regions)
