"""Region adjacency used for the neighbor-region bonus.

Region ids follow the job board's reference table. The default adjacency is
built from the internal borders of Uzbekistan's regions; every edge is
stored in both directions and the resulting table is read-only.
"""

from types import MappingProxyType
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple

from jobboard.utils.coercion import coerce_identifier

REGION_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "1": "Toshkent shahri",
        "2": "Toshkent viloyati",
        "3": "Andijon",
        "4": "Buxoro",
        "5": "Farg'ona",
        "6": "Jizzax",
        "7": "Xorazm",
        "8": "Namangan",
        "9": "Navoiy",
        "10": "Qashqadaryo",
        "11": "Samarqand",
        "12": "Sirdaryo",
        "13": "Surxondaryo",
        "14": "Qoraqalpog'iston",
    }
)

UZBEKISTAN_BORDERS: Tuple[Tuple[str, str], ...] = (
    ("1", "2"),
    ("2", "8"),
    ("2", "12"),
    ("3", "5"),
    ("3", "8"),
    ("5", "8"),
    ("6", "9"),
    ("6", "11"),
    ("6", "12"),
    ("4", "7"),
    ("4", "9"),
    ("4", "10"),
    ("9", "11"),
    ("9", "14"),
    ("10", "11"),
    ("10", "13"),
    ("7", "14"),
)


class RegionAdjacency:
    """Immutable, symmetric region adjacency table."""

    def __init__(self, neighbors: Mapping[Any, Iterable[Any]]):
        """Build the table from a region -> neighbors mapping.

        Ids are coerced to strings, self references are dropped, and each
        edge is mirrored so lookups work in both directions.

        Args:
            neighbors: Mapping of region id to the ids it borders
        """
        table = {}
        for region, adjacent in neighbors.items():
            region_id = coerce_identifier(region)
            if region_id is None:
                continue
            for other in adjacent or ():
                other_id = coerce_identifier(other)
                if other_id is None or other_id == region_id:
                    continue
                table.setdefault(region_id, set()).add(other_id)
                table.setdefault(other_id, set()).add(region_id)

        self._table: Mapping[str, FrozenSet[str]] = MappingProxyType(
            {region: frozenset(adjacent) for region, adjacent in table.items()}
        )

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Any, Any]]) -> "RegionAdjacency":
        """Build the table from (region, region) border pairs."""
        neighbors = {}
        for left, right in edges:
            neighbors.setdefault(left, []).append(right)
        return cls(neighbors)

    def neighbors_of(self, region_id: Any) -> FrozenSet[str]:
        """Return the regions bordering region_id (empty if unknown)."""
        key = coerce_identifier(region_id)
        if key is None:
            return frozenset()
        return self._table.get(key, frozenset())

    def are_neighbors(self, left: Any, right: Any) -> bool:
        """Whether two distinct regions share a border."""
        right_id = coerce_identifier(right)
        if right_id is None:
            return False
        return right_id in self.neighbors_of(left)

    def as_dict(self) -> dict:
        """Plain dict copy with sorted neighbor lists."""
        return {region: sorted(adjacent) for region, adjacent in self._table.items()}

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, region_id: Any) -> bool:
        key = coerce_identifier(region_id)
        return key is not None and key in self._table


DEFAULT_ADJACENCY = RegionAdjacency.from_edges(UZBEKISTAN_BORDERS)


def region_name(region_id: Any) -> Optional[str]:
    """Uzbek display name of a region, or None if unknown."""
    key = coerce_identifier(region_id)
    if key is None:
        return None
    return REGION_NAMES.get(key)
