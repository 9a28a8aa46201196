# src/niml/records/config.py

from dataclasses import dataclass

from .fields import DEFAULT_TAG


@dataclass(frozen=True)
class FillerConfig:
    """Configuration for the record filler.

    ``tag`` is the metadata key holding a field's document key override
    (``field(metadata={"niml": ...})`` / ``Field(json_schema_extra={"niml": ...})``).
    """

    tag: str = DEFAULT_TAG

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("tag must not be empty")
