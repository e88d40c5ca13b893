"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import radarsheet

    assert radarsheet.__version__


def test_validation_module_imports() -> None:
    """Verify validation module structure is correct."""
    from radarsheet.validation import (
        ConsoleReporter,
        ContentValidator,
        ErrorKind,
        HeaderValidator,
        RadarBuildError,
    )

    assert ContentValidator is not None
    assert HeaderValidator is not None
    assert ConsoleReporter is not None
    assert RadarBuildError is not None
    assert {kind.value for kind in ErrorKind} == {
        "SheetMalformed",
        "MalformedHeaders",
        "TooManyRings",
        "SheetNotFound",
        "MissingField",
    }


def test_pipeline_module_imports() -> None:
    """Verify pipeline entry points are exported."""
    from radarsheet.assembly import DomainAssembler, build_radar, ingest_sheet
    from radarsheet.domain import Blip, Quadrant, Radar, Ring
    from radarsheet.ingestion import RowSanitizer, read_sheet

    assert all(
        obj is not None
        for obj in (
            DomainAssembler,
            build_radar,
            ingest_sheet,
            Blip,
            Quadrant,
            Radar,
            Ring,
            RowSanitizer,
            read_sheet,
        )
    )
