"""Score résumés against a job description and rank them."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from src.log import get_logger
from src.models import Document, Ranking, ScoredDocument, ScoringFailure
from src.tokenizer import term_set

log = get_logger(__name__)

_TWO_PLACES = Decimal("0.01")


def _round2(value: float) -> float:
    # Decimal(float) is the exact binary value, so 0.125 -> 0.13 and 1/3 -> 0.33.
    return float(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def score(job_description: Any, content: Any) -> float:
    """Fraction of the job description's unique terms found in *content*.

    Not symmetric: the document's length and term repetitions do not
    matter, only how much of the job vocabulary it covers.
    """
    if not job_description or not content:
        return 0.0
    job_terms = term_set(job_description)
    if not job_terms:
        return 0.0
    doc_terms = term_set(content)
    common = sum(1 for term in doc_terms if term in job_terms)
    return _round2(common / len(job_terms))


def rank_documents(job_description: str, documents: Iterable[Document]) -> Ranking:
    """Score and sort *documents*; a document that fails to score is left out.

    Returns an empty ranking when there is no job description or nothing to
    rank, which is different from every document scoring zero.
    """
    documents = list(documents)
    if not (job_description or "").strip() or not documents:
        return Ranking()

    scored: list[ScoredDocument] = []
    failures: list[ScoringFailure] = []
    for index, doc in enumerate(documents):
        try:
            scored.append(ScoredDocument.from_document(doc, score(job_description, doc.content)))
        except Exception as exc:
            log.error("Scoring %r failed: %s", getattr(doc, "name", index), exc)
            failures.append(
                ScoringFailure(index=index, name=str(getattr(doc, "name", index)), reason=str(exc))
            )

    # sorted() is stable: equal scores keep their upload order.
    results = sorted(scored, key=lambda s: -s.similarity)
    log.info(
        "Ranked %d document(s) against %d job term(s); %d failed",
        len(results), len(term_set(job_description)), len(failures),
    )
    return Ranking(results=results, failures=failures)


def rank(job_description: str, documents: Iterable[Document]) -> list[ScoredDocument]:
    return rank_documents(job_description, documents).results
