"""Streamlit UI for ranking CVs against a job description."""
from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from src.log import get_logger
from src.models import Upload
from src.session import RankingSession

log = get_logger(__name__)

_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #e8eaf6 0%, #f3e5f5 40%, #e0f2f1 100%);
}
.block-container {
    padding-top: 2rem;
    max-width: 960px;
}
[data-testid="stExpander"] {
    background: rgba(255,255,255,0.5);
    backdrop-filter: blur(10px);
    -webkit-backdrop-filter: blur(10px);
    border-radius: 12px;
    border: 1px solid rgba(255,255,255,0.35);
}
.status-line {
    padding: 0.6rem 0.9rem;
    background: rgba(255,255,255,0.65);
    border-left: 3px solid #4a90d9;
    border-radius: 6px;
    font-size: 0.95rem;
}
.cv-content {
    white-space: pre-wrap;
    font-size: 0.85rem;
    color: #333;
}
h1, h2, h3 {
    color: #1a1a2e;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _session() -> RankingSession:
    if "ranking_session" not in st.session_state:
        st.session_state["ranking_session"] = RankingSession()
        st.session_state["uploader_key"] = 0
    return st.session_state["ranking_session"]


def _to_upload(uploaded) -> Upload:
    return Upload(name=uploaded.name, mime_type=uploaded.type or "", data=uploaded.getvalue())


def _results_frame(session: RankingSession) -> pd.DataFrame:
    rows = [
        {"rank": i, "name": r.name, "match": r.percent}
        for i, r in enumerate(session.ranked, 1)
    ]
    return pd.DataFrame(rows, columns=["rank", "name", "match"])


# ── Sections ─────────────────────────────────────────────────────────────


def section_upload(session: RankingSession) -> None:
    st.subheader("1 — Upload CVs")
    limit = session.settings.max_batch_files
    uploaded = st.file_uploader(
        f"Drop up to {limit} CVs here (PDF or TXT)",
        accept_multiple_files=True,
        key=f"uploader_{st.session_state['uploader_key']}",
    )
    if uploaded:
        with st.spinner("Loading and processing CVs…"):
            session.add_uploads([_to_upload(f) for f in uploaded])
        # New key empties the widget so the same file can be uploaded again.
        st.session_state["uploader_key"] += 1
        st.rerun()

    if session.documents:
        st.markdown(f"**Loaded CVs ({len(session.documents)})**")
        for i, doc in enumerate(session.documents):
            c1, c2 = st.columns([5, 1])
            c1.markdown(f"📄 {doc.name}")
            if c2.button("Remove", key=f"remove_{i}", use_container_width=True):
                session.remove(i)
                st.rerun()


def section_job(session: RankingSession) -> None:
    st.subheader("2 — Job Description")
    text = st.text_area(
        "Paste the job offer",
        value=session.job_description,
        height=180,
        placeholder="e.g. Senior Python developer with Django, PostgreSQL and AWS experience…",
    )
    session.set_job_description(text)


def section_results(session: RankingSession) -> None:
    ranked = session.ranked
    if not ranked:
        return

    st.divider()
    st.subheader("Results")
    st.dataframe(
        _results_frame(session),
        use_container_width=True,
        column_config={
            "rank": st.column_config.NumberColumn("#", width="small"),
            "name": st.column_config.TextColumn("CV"),
            "match": st.column_config.ProgressColumn("Match", min_value=0, max_value=100, format="%d%%"),
        },
        hide_index=True,
    )

    for i, result in enumerate(ranked, 1):
        with st.expander(f"{i}. {result.name} — {result.percent}%"):
            st.markdown(f'<div class="cv-content">{_escape(result.content)}</div>', unsafe_allow_html=True)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


# ── Main ─────────────────────────────────────────────────────────────────


def main() -> None:
    st.set_page_config(page_title="CV Ranker", page_icon="📑")
    st.markdown(_CSS, unsafe_allow_html=True)
    st.header("CV Ranker")
    st.write("Rank résumés by how much of the job description's vocabulary they cover.")

    session = _session()
    section_upload(session)
    st.divider()
    section_job(session)

    st.markdown(f'<div class="status-line">{_escape(session.message)}</div>', unsafe_allow_html=True)

    section_results(session)

    with st.sidebar:
        st.markdown("**Session**")
        st.metric("CVs loaded", len(session.documents))
        if st.button("🗑️ Clear everything", use_container_width=True):
            session.clear()
            st.rerun()


main()
