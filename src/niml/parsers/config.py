# src/niml/parsers/config.py

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ParserConfig:
    """Syntax markers of the niml format.

    Immutable. Explicit. The defaults describe the format as documented:

        ;; comment
        (topic)
        / key = "value"  ;; inline comment
    """

    comment_marker: str = ";;"
    declaration_prefix: str = "/"
    topic_open: str = "("
    topic_close: str = ")"
    assignment: str = "="
    quote: str = '"'

    def __post_init__(self) -> None:
        for f in fields(self):
            if not getattr(self, f.name):
                raise ValueError(f"{f.name} must not be empty")
