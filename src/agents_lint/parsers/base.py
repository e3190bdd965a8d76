# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedMarkdown


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> ParsedMarkdown:
        """
        Parse raw document text into a structured, deterministic representation.

        Requirements:
        - Total: any string yields a result, nothing is raised
        - Deterministic output for same input
        - Line numbers are 1-based
        """
        raise NotImplementedError
