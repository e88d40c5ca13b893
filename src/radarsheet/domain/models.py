"""
Immutable radar domain model.

A Radar owns its Rings and Quadrants; each Quadrant holds its Blips in
row order and every Blip references one of the Radar's Rings.
"""

from dataclasses import dataclass, field

from radarsheet.config.settings import MAX_RINGS


@dataclass(frozen=True)
class Ring:
    """Concentric adoption band, ordered by first occurrence in the data."""

    name: str
    order: int

    def __post_init__(self) -> None:
        if self.order < 0:
            msg = f"Ring order must be >= 0, got {self.order}"
            raise ValueError(msg)


@dataclass(frozen=True)
class Blip:
    """A single technology item plotted on the radar."""

    name: str
    ring: Ring
    is_new: bool
    topic: str = ""
    description: str = ""


@dataclass(frozen=True)
class Quadrant:
    """Named category holding blips in insertion order."""

    name: str
    blips: tuple[Blip, ...] = ()

    def __len__(self) -> int:
        return len(self.blips)


@dataclass(frozen=True)
class Radar:
    """
    Complete validated radar.

    Construction checks the model invariants: unique quadrant names, at most
    four rings with unique names, and every blip on one of those rings.
    """

    quadrants: tuple[Quadrant, ...]
    rings: tuple[Ring, ...]
    _by_name: dict[str, Quadrant] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.rings) > MAX_RINGS:
            msg = f"A radar holds at most {MAX_RINGS} rings, got {len(self.rings)}"
            raise ValueError(msg)
        if len({ring.name for ring in self.rings}) != len(self.rings):
            msg = "Ring names must be unique"
            raise ValueError(msg)

        by_name: dict[str, Quadrant] = {}
        for quadrant in self.quadrants:
            if quadrant.name in by_name:
                msg = f"Duplicate quadrant: {quadrant.name!r}"
                raise ValueError(msg)
            by_name[quadrant.name] = quadrant

        # Identity check: blips must point at this radar's ring objects
        ring_ids = {id(ring) for ring in self.rings}
        for quadrant in self.quadrants:
            for blip in quadrant.blips:
                if id(blip.ring) not in ring_ids:
                    msg = f"Blip {blip.name!r} references unknown ring {blip.ring.name!r}"
                    raise ValueError(msg)

        object.__setattr__(self, "_by_name", by_name)

    def quadrant(self, name: str) -> Quadrant:
        """
        Look up a quadrant by name, ignoring case.

        Raises:
            KeyError: If no quadrant has that name.
        """
        key = name.strip().capitalize()
        if key not in self._by_name:
            available = ", ".join(self._by_name)
            msg = f"Unknown quadrant '{name}'. Available: {available}"
            raise KeyError(msg)
        return self._by_name[key]

    def ring(self, name: str) -> Ring:
        """Look up a ring by exact name."""
        for ring in self.rings:
            if ring.name == name:
                return ring
        msg = f"Unknown ring '{name}'"
        raise KeyError(msg)

    @property
    def blips(self) -> list[Blip]:
        """All blips in quadrant order."""
        return [blip for quadrant in self.quadrants for blip in quadrant.blips]
