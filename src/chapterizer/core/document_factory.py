"""Factory for opening document accessors based on file format."""

from pathlib import Path

from chapterizer.core.document import DocumentAccessor


class DocumentFactory:
    """Factory for creating the appropriate accessor for a file."""

    SUPPORTED_FORMATS = {
        ".pdf": "pdf",
        ".txt": "text",
    }

    @classmethod
    def open(cls, path: Path, text_backend: str = "pypdf") -> DocumentAccessor:
        """Open a document accessor for the given file.

        Args:
            path: Path to the document (PDF or form-feed paginated text)
            text_backend: PDF text extraction library, "pypdf" or "pdfplumber"

        Returns:
            DocumentAccessor for the file; use it as a context manager

        Raises:
            ValueError: If file format is not supported
            FileNotFoundError: If file does not exist
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        suffix = path.suffix.lower()

        if suffix not in cls.SUPPORTED_FORMATS:
            supported = ", ".join(cls.SUPPORTED_FORMATS.keys())
            raise ValueError(
                f"Unsupported format: {suffix}. Supported formats: {supported}"
            )

        if suffix == ".pdf":
            from chapterizer.core.pdf_document import PdfDocument

            return PdfDocument(path, text_backend=text_backend)  # type: ignore[arg-type]
        elif suffix == ".txt":
            from chapterizer.core.text_document import TextDocument

            return TextDocument.from_path(path)

        # Should never reach here, but satisfy type checker
        raise ValueError(f"Unsupported format: {suffix}")

    @classmethod
    def detect_format(cls, path: Path) -> str:
        """Detect file format from extension ("pdf", "text" or "unknown")."""
        return cls.SUPPORTED_FORMATS.get(path.suffix.lower(), "unknown")

    @classmethod
    def is_supported(cls, path: Path) -> bool:
        """Check if file format is supported."""
        return path.suffix.lower() in cls.SUPPORTED_FORMATS
