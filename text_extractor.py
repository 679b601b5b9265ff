"""
Text extraction module supporting multiple input formats.
Every extractor yields the source as an ordered sequence of text chunks.
"""

import os
from typing import Iterable, Iterator, List, Optional, Tuple, Union
from abc import ABC, abstractmethod

import PyPDF2
import docx

from config import OUTPUT_CONFIG


class TextExtractor(ABC):
    """Abstract base class for text extractors."""

    @abstractmethod
    def extract(self, source: Union[str, object]) -> Iterator[str]:
        """Yield text chunks from the source."""

    def extract_all(self, source: Union[str, object]) -> List[str]:
        """Return every chunk from the source as a list."""
        return list(self.extract(source))


class PDFExtractor(TextExtractor):
    """Extract text from PDF files, one chunk per page."""

    def __init__(self, page_range: Optional[Tuple[int, int]] = None):
        """
        Initialize PDF extractor.

        Args:
            page_range: Optional tuple of (start_page, end_page) for page selection
        """
        self.page_range = page_range

    def extract(self, source: Union[str, object]) -> Iterator[str]:
        """Yield the text of each selected page."""
        if isinstance(source, str):
            with open(source, "rb") as pdf_file:
                pdf_reader = PyPDF2.PdfReader(pdf_file)
                yield from self._extract_from_reader(pdf_reader)
        else:
            # Assume it's already a file-like object
            pdf_reader = PyPDF2.PdfReader(source)
            yield from self._extract_from_reader(pdf_reader)

    def _extract_from_reader(self, pdf_reader) -> Iterator[str]:
        """Yield page text from a PDF reader object."""
        total_pages = len(pdf_reader.pages)

        if self.page_range:
            start_page = max(0, self.page_range[0])
            end_page = min(total_pages, self.page_range[1])
        else:
            start_page = 0
            end_page = total_pages

        for page_num in range(start_page, end_page):
            yield pdf_reader.pages[page_num].extract_text() or ""

        if OUTPUT_CONFIG["verbose"]:
            print(f"Extracted text from {max(0, end_page - start_page)} pages")


class TextFileExtractor(TextExtractor):
    """Extract text from plain text files, one chunk per line."""

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize text file extractor.

        Args:
            encoding: File encoding (default: utf-8)
        """
        self.encoding = encoding

    def extract(self, source: Union[str, object]) -> Iterator[str]:
        """Yield lines from a text file or file-like object."""
        if not isinstance(source, str):
            # Assume it's already a file-like object
            yield from source
            return
        with open(source, "r", encoding=self.encoding) as f:
            yield from f


class DOCXExtractor(TextExtractor):
    """Extract text from DOCX files, one chunk per paragraph."""

    def extract(self, source: Union[str, object]) -> Iterator[str]:
        document = docx.Document(source)
        for paragraph in document.paragraphs:
            yield paragraph.text


class StringExtractor(TextExtractor):
    """Extract text from a string or an iterable of strings (pass-through)."""

    def extract(self, source: Union[str, Iterable[str]]) -> Iterator[str]:
        if isinstance(source, str):
            yield source
        else:
            for chunk in source:
                yield str(chunk)


class TextExtractorFactory:
    """Factory for creating appropriate text extractors."""

    @staticmethod
    def create_extractor(input_type: str, **kwargs) -> TextExtractor:
        """
        Create a text extractor based on input type.

        Args:
            input_type: Type of input ('pdf', 'txt', 'docx', 'string')
            **kwargs: Additional arguments for specific extractors

        Returns:
            Appropriate TextExtractor instance
        """
        extractors = {
            "pdf": PDFExtractor,
            "txt": TextFileExtractor,
            "text_file": TextFileExtractor,
            "docx": DOCXExtractor,
            "string": StringExtractor,
        }

        input_type = input_type.lower()
        if input_type not in extractors:
            raise ValueError(f"Unsupported input type: {input_type}")

        extractor_class = extractors[input_type]

        # Filter kwargs for the specific extractor
        if input_type == "pdf":
            return extractor_class(page_range=kwargs.get("page_range"))
        elif input_type in {"txt", "text_file"}:
            return extractor_class(encoding=kwargs.get("encoding", "utf-8"))
        else:
            return extractor_class()

    @staticmethod
    def detect_file_type(filepath: str) -> str:
        """
        Detect file type based on extension.

        Args:
            filepath: Path to the file

        Returns:
            Detected file type
        """
        ext = os.path.splitext(filepath)[1].lower()
        type_map = {
            ".pdf": "pdf",
            ".txt": "txt",
            ".text": "txt",
            ".md": "txt",
            ".docx": "docx",
        }
        return type_map.get(ext, "txt")  # Default to text

    @classmethod
    def extract_chunks(
        cls,
        source: Union[str, Iterable[str]],
        input_type: Optional[str] = None,
        **kwargs,
    ) -> Iterator[str]:
        """
        Yield text chunks from a file path, a literal string, or an iterable.

        Args:
            source: Path to a file, text string, or iterable of text chunks
            input_type: Type of input (auto-detected if None)
            **kwargs: Additional arguments for the extractor

        Returns:
            Iterator over text chunks
        """
        if input_type is None:
            if isinstance(source, str) and os.path.isfile(source):
                input_type = cls.detect_file_type(source)
            else:
                input_type = "string"

        extractor = cls.create_extractor(input_type, **kwargs)
        return extractor.extract(source)
