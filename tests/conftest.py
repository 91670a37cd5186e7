import io
import os

import pytest

os.environ.setdefault("RANKER_LOG_DIR", "off")

from src.config import Settings
from src.models import Upload


def make_pdf(*pages: str) -> bytes:
    """Build a PDF with one line of text per page."""
    from reportlab.pdfgen import canvas

    buf = io.BytesIO()
    c = canvas.Canvas(buf)
    for text in pages:
        c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


def text_upload(name: str, text: str) -> Upload:
    return Upload(name=name, mime_type="text/plain", data=text.encode("utf-8"))


@pytest.fixture
def settings() -> Settings:
    return Settings(max_batch_files=20, decode_workers=4)
