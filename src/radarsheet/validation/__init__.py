"""Header and content validation with tagged results."""

from radarsheet.validation.content import ContentValidator
from radarsheet.validation.headers import (
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    ColumnBindings,
    Field,
    HeaderValidator,
    label_headers,
)
from radarsheet.validation.reporter import ConsoleReporter
from radarsheet.validation.result import (
    Err,
    ErrorKind,
    IngestionError,
    Ok,
    RadarBuildError,
    Result,
)

__all__ = [
    "OPTIONAL_FIELDS",
    "REQUIRED_FIELDS",
    "ColumnBindings",
    "ConsoleReporter",
    "ContentValidator",
    "Err",
    "ErrorKind",
    "Field",
    "HeaderValidator",
    "IngestionError",
    "Ok",
    "RadarBuildError",
    "Result",
    "label_headers",
]
