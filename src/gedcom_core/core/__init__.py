from .exceptions import (
    DuplicateXref,
    GedcomError,
    GedcomStructureError,
    GedcomSyntaxError,
    LevelOutOfRange,
    LevelSkip,
    MalformedLevel,
    MalformedXref,
    OrphanRecord,
    ParseExecutionError,
    UnknownTag,
    UnresolvedXref,
    XrefTooLong,
)

__all__ = [
    "DuplicateXref",
    "GedcomError",
    "GedcomStructureError",
    "GedcomSyntaxError",
    "LevelOutOfRange",
    "LevelSkip",
    "MalformedLevel",
    "MalformedXref",
    "OrphanRecord",
    "ParseExecutionError",
    "UnknownTag",
    "UnresolvedXref",
    "XrefTooLong",
]
