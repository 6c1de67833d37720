"""
Plain-text extraction for uploaded documents (.txt, .pdf, .docx).

The PDF and DOCX libraries are imported inside their parsers so that the
scoring engine, which only ever sees extracted text, never loads them.
"""
from __future__ import annotations
import io
import logging
import os
from typing import BinaryIO

from . import config as CFG

log = logging.getLogger(__name__)


class UnsupportedFormat(ValueError):
    """Raised for any file extension outside CFG.SUPPORTED_EXTENSIONS."""
    def __init__(self, extension: str) -> None:
        self.extension = extension
        shown = f".{extension}" if extension else "(none)"
        super().__init__(f"Unsupported file type {shown}. Use .pdf, .docx or .txt")


def file_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lstrip(".").lower()


def _parse_txt(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _parse_pdf(stream: BinaryIO) -> str:
    from PyPDF2 import PdfReader

    reader = PdfReader(stream)
    pages = [(page.extract_text() or "") for page in reader.pages]
    return "\n\n".join(pages).strip()


def _parse_docx(stream: BinaryIO) -> str:
    from docx import Document

    doc = Document(stream)
    lines = []
    for para in doc.paragraphs:
        for line in para.text.replace("\u00a0", " ").split("\n"):
            line = line.strip()
            if line:
                lines.append(line)
    return "\n".join(lines)


def extract_bytes(filename: str, data: bytes) -> str:
    """Extract plain text from file content; the extension of `filename` picks the parser."""
    ext = file_extension(filename)
    if ext not in CFG.SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(ext)
    log.info("Extracting text from %s (%d bytes)", filename, len(data))
    if ext == "txt":
        return _parse_txt(data)
    if ext == "pdf":
        return _parse_pdf(io.BytesIO(data))
    return _parse_docx(io.BytesIO(data))


def extract(path: str) -> str:
    """Extract plain text from a file on disk."""
    ext = file_extension(path)
    if ext not in CFG.SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(ext)
    with open(path, "rb") as f:
        return extract_bytes(os.path.basename(path), f.read())
