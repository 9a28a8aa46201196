# src/niml/parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> ParsedDocument:
        """
        Parse configuration text and return its key/value structure.

        Requirements:
        - Deterministic output for same input
        - Never raises on malformed lines, they are skipped
        - The result shares no mutable state with the parser
        """
        raise NotImplementedError
