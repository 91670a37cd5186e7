"""In-memory state of one ranking session: documents, job text, results."""
from __future__ import annotations

from typing import Sequence

from src.config import Settings, load_settings
from src.ingest import BatchTooLargeError, ingest_batch
from src.log import get_logger
from src.models import Document, IngestResult, ScoredDocument, ScoringFailure, Upload
from src.scorer import rank_documents

log = get_logger(__name__)

MSG_WELCOME = "Upload CVs and/or enter a job description to see results."
MSG_TOO_MANY = "Please upload at most {limit} CVs."
MSG_LOADED = "{count} new CV(s) loaded successfully."
MSG_NONE_LOADED = "No valid CVs could be loaded. Please try .txt or .pdf files."
MSG_REMOVED = "File removed. You can upload more or analyze the current ones."
MSG_RANKED = "Ranking complete."
MSG_SCORING_FAILED = "Could not score: {names}."


class RankingSession:
    """Single owner of the document collection.

    Every mutation replaces the collection tuple and re-runs the ranking, so
    ``ranked`` always reflects the current job description and documents.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or load_settings()
        self._documents: tuple[Document, ...] = ()
        self._job_description = ""
        self._ranked: list[ScoredDocument] = []
        self._failures: list[ScoringFailure] = []
        self.message = MSG_WELCOME

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    @property
    def job_description(self) -> str:
        return self._job_description

    @property
    def ranked(self) -> list[ScoredDocument]:
        return list(self._ranked)

    @property
    def failures(self) -> list[ScoringFailure]:
        return list(self._failures)

    # ── Mutations ───────────────────────────────────────────────────────

    def add_uploads(self, uploads: Sequence[Upload]) -> IngestResult:
        if not uploads:
            return IngestResult()
        try:
            result = ingest_batch(uploads, self.settings)
        except BatchTooLargeError as exc:
            self.message = MSG_TOO_MANY.format(limit=exc.limit)
            return IngestResult()

        if result.documents:
            self._documents = self._documents + tuple(result.documents)
            message = MSG_LOADED.format(count=len(result.documents))
        else:
            message = MSG_NONE_LOADED
        if result.failures:
            message += " Failed to read: " + ", ".join(f.name for f in result.failures) + "."
        if result.skipped:
            message += " Skipped unsupported: " + ", ".join(result.skipped) + "."
        self.message = message
        self._rerank()
        return result

    def remove(self, index: int) -> Document:
        if not 0 <= index < len(self._documents):
            raise IndexError(f"no document at position {index}")
        removed = self._documents[index]
        self._documents = self._documents[:index] + self._documents[index + 1:]
        log.info("Removed %s (%d left)", removed.name, len(self._documents))
        self.message = MSG_REMOVED
        self._rerank()
        return removed

    def set_job_description(self, text: str | None) -> None:
        text = text or ""
        if text == self._job_description:
            return
        self._job_description = text
        self._rerank()
        if self._ranked and not self._failures:
            self.message = MSG_RANKED

    def clear(self) -> None:
        self._documents = ()
        self._job_description = ""
        self.message = MSG_WELCOME
        self._rerank()

    # ── Ranking ─────────────────────────────────────────────────────────

    def _rerank(self) -> None:
        ranking = rank_documents(self._job_description, self._documents)
        self._ranked = ranking.results
        self._failures = ranking.failures
        if ranking.failures:
            names = ", ".join(f.name for f in ranking.failures)
            self.message = MSG_SCORING_FAILED.format(names=names)
