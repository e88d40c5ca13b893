"""
Radar assembly.

Builds the immutable Radar from sanitized items in one ordered pass:
rings are numbered by first occurrence, blips are grouped by capitalized
quadrant name in row order. Assembly is all-or-nothing.
"""

from collections.abc import Iterable, Sequence
from itertools import count

from radarsheet.config.settings import MAX_RINGS
from radarsheet.domain.models import Blip, Quadrant, Radar, Ring
from radarsheet.ingestion.sanitizer import SanitizedItem
from radarsheet.validation import messages
from radarsheet.validation.headers import Field
from radarsheet.validation.result import ErrorKind, Ok, Result, fail

# Data rows start below the header row
FIRST_DATA_ROW = 2


def quadrant_key(name: str) -> str:
    """Canonical quadrant name: first letter upper, the rest lower."""
    return name.capitalize()


class DomainAssembler:
    """
    Assembles sanitized items into a Radar.

    Each call to ``assemble`` uses its own accumulators; nothing is shared
    between runs.
    """

    def __init__(self, max_rings: int = MAX_RINGS) -> None:
        """
        Initialize assembler.

        Args:
            max_rings: Maximum number of distinct rings (at most 4).
        """
        if not 1 <= max_rings <= MAX_RINGS:
            msg = f"max_rings must be between 1 and {MAX_RINGS}, got {max_rings}"
            raise ValueError(msg)
        self.max_rings = max_rings

    def assemble(
        self,
        items: Iterable[SanitizedItem],
        row_numbers: Sequence[int] | None = None,
    ) -> Result[Radar]:
        """
        Build a Radar from items in sheet order.

        Args:
            items: Sanitized items, in row order.
            row_numbers: Sheet row of each item, for error reports. When
                omitted, items are numbered from row 2 without gaps.

        Returns:
            Ok with the Radar, or the first failure: Err(MissingField) for a
            blank ring or quadrant, Err(TooManyRings) on the first ring name
            beyond ``max_rings``.
        """
        rings: dict[str, Ring] = {}
        quadrants: dict[str, list[Blip]] = {}

        if row_numbers is None:
            numbered = zip(count(FIRST_DATA_ROW), items)
        else:
            numbered = zip(row_numbers, items, strict=True)

        for row, item in numbered:
            blank = [
                f.value
                for f, value in ((Field.RING, item.ring), (Field.QUADRANT, item.quadrant))
                if not value
            ]
            if blank:
                return fail(
                    ErrorKind.MISSING_FIELD,
                    messages.MISSING_FIELD.format(row=row, fields=" and ".join(blank)),
                    fields=tuple(blank),
                    row=row,
                )

            ring = rings.get(item.ring)
            if ring is None:
                if len(rings) == self.max_rings:
                    return fail(
                        ErrorKind.TOO_MANY_RINGS,
                        messages.TOO_MANY_RINGS.format(max_rings=self.max_rings),
                        fields=(*rings, item.ring),
                        row=row,
                    )
                ring = Ring(name=item.ring, order=len(rings))
                rings[item.ring] = ring

            quadrants.setdefault(quadrant_key(item.quadrant), []).append(
                Blip(
                    name=item.name,
                    ring=ring,
                    is_new=item.is_new,
                    topic=item.topic,
                    description=item.description,
                )
            )

        return Ok(
            Radar(
                quadrants=tuple(
                    Quadrant(name=name, blips=tuple(blips))
                    for name, blips in quadrants.items()
                ),
                rings=tuple(rings.values()),
            )
        )
