"""Decode an upload batch into Documents, one worker per file."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from src.config import Settings, load_settings
from src.document_reader import read_upload
from src.log import get_logger
from src.models import Document, FileFailure, IngestResult, Upload

log = get_logger(__name__)


class BatchTooLargeError(ValueError):
    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"{count} files uploaded, at most {limit} allowed per batch")
        self.count = count
        self.limit = limit


def _decode_upload(upload: Upload) -> Document | FileFailure:
    """Wrapper for parallel decoding; a failure never leaves this function."""
    try:
        doc = read_upload(upload)
        log.info("[%s] decoded %d chars", upload.name, len(doc.content))
        return doc
    except Exception as exc:
        log.error("[%s] FAILED: %s", upload.name, exc)
        return FileFailure(name=upload.name, reason=str(exc))


def ingest_batch(uploads: Sequence[Upload], settings: Settings | None = None) -> IngestResult:
    """Validate and decode *uploads*.

    The whole batch is rejected with BatchTooLargeError when it exceeds the
    configured limit. Unsupported types are skipped; decode failures are
    recorded per file. Documents come back in upload order.
    """
    settings = settings or load_settings()
    result = IngestResult()
    if not uploads:
        return result

    if len(uploads) > settings.max_batch_files:
        log.warning("Rejected batch of %d files (limit %d)", len(uploads), settings.max_batch_files)
        raise BatchTooLargeError(len(uploads), settings.max_batch_files)

    accepted: list[Upload] = []
    for upload in uploads:
        if (upload.mime_type or "").lower() in settings.accepted_types:
            accepted.append(upload)
        else:
            log.warning("Skipping unsupported file type: %s (%s)", upload.name, upload.mime_type or "unknown")
            result.skipped.append(upload.name)

    if not accepted:
        return result

    workers = min(settings.decode_workers, len(accepted))
    log.info("Decoding %d file(s) with %d worker(s)...", len(accepted), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_decode_upload, upload) for upload in accepted]
        for future in futures:
            outcome = future.result()
            if isinstance(outcome, FileFailure):
                result.failures.append(outcome)
            else:
                result.documents.append(outcome)

    log.info(
        "Batch done: %d loaded, %d skipped, %d failed",
        len(result.documents), len(result.skipped), len(result.failures),
    )
    return result
