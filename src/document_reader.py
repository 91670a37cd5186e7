"""Turn uploaded file bytes into plain text.

Plain text is decoded as UTF-8; PDFs go through pypdf, collecting the text
fragments of each page and joining them the same way for every file so
tokenization sees consistent spacing.
"""
from __future__ import annotations

import io

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from src.config import PDF_MIME, TEXT_MIME
from src.log import get_logger
from src.models import Document, Upload

log = get_logger(__name__)


class DecodeError(ValueError):
    """A single file could not be turned into text."""


# ── Plain text ──────────────────────────────────────────────────────────


def decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc


# ── PDF ─────────────────────────────────────────────────────────────────


def extract_pdf_pages(data: bytes) -> list[list[str]]:
    """Return the ordered text fragments of every page in the PDF."""
    try:
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted:
            # Many résumé PDFs are "encrypted" with an empty user password.
            reader.decrypt("")
        pages: list[list[str]] = []
        for page in reader.pages:
            fragments: list[str] = []

            def _collect(text, cm, tm, font_dict, font_size) -> None:
                text = text.strip()
                if text:
                    fragments.append(text)

            page.extract_text(visitor_text=_collect)
            pages.append(fragments)
    except PyPdfError as exc:
        raise DecodeError(f"unreadable PDF ({exc})") from exc
    except Exception as exc:
        # pypdf surfaces malformed input as assorted builtin errors too.
        raise DecodeError(f"unreadable PDF ({type(exc).__name__}: {exc})") from exc
    return pages


def join_pages(pages: list[list[str]]) -> str:
    """Fragments of a page are space-joined; every page ends with a newline."""
    return "".join(" ".join(fragments) + "\n" for fragments in pages)


def decode_pdf(data: bytes) -> str:
    pages = extract_pdf_pages(data)
    log.debug("Extracted %d page(s) from PDF", len(pages))
    return join_pages(pages)


# ── Dispatch ────────────────────────────────────────────────────────────


def read_upload(upload: Upload) -> Document:
    """Decode one upload into a Document; raises DecodeError on failure."""
    mime = (upload.mime_type or "").lower()
    if mime == TEXT_MIME:
        content = decode_text(upload.data)
    elif mime == PDF_MIME:
        content = decode_pdf(upload.data)
    else:
        raise DecodeError(f"unsupported file type: {upload.mime_type or 'unknown'}")
    return Document(name=upload.name, content=content)
