"""Data models for résumés, uploads and ranking results."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Document:
    name: str
    content: str


@dataclass(frozen=True)
class ScoredDocument:
    name: str
    content: str
    similarity: float

    @classmethod
    def from_document(cls, doc: Document, similarity: float) -> ScoredDocument:
        return cls(name=doc.name, content=doc.content, similarity=similarity)

    @property
    def percent(self) -> int:
        """Similarity as a whole-number percentage for display."""
        return int(round(self.similarity * 100))


@dataclass(frozen=True)
class Upload:
    """A raw file handed over by the UI, before decoding."""

    name: str
    mime_type: str
    data: bytes


@dataclass(frozen=True)
class FileFailure:
    name: str
    reason: str


@dataclass
class IngestResult:
    documents: list[Document] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)


@dataclass(frozen=True)
class ScoringFailure:
    index: int
    name: str
    reason: str


@dataclass
class Ranking:
    results: list[ScoredDocument] = field(default_factory=list)
    failures: list[ScoringFailure] = field(default_factory=list)
