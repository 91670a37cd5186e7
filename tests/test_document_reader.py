import pytest

from src.document_reader import (
    DecodeError,
    decode_pdf,
    decode_text,
    extract_pdf_pages,
    join_pages,
    read_upload,
)
from src.models import Document, Upload
from src.tokenizer import tokenize

from conftest import make_pdf


def test_decode_text_utf8_and_bom():
    assert decode_text("Ingeniera de software".encode("utf-8")) == "Ingeniera de software"
    assert decode_text(b"\xef\xbb\xbfpython") == "python"


def test_decode_text_rejects_invalid_bytes():
    with pytest.raises(DecodeError):
        decode_text(b"\xff\xfe\xfa not text")


def test_join_pages_spaces_fragments_and_ends_pages_with_newline():
    pages = [["Senior", "Python", "Developer"], [], ["Django"]]
    assert join_pages(pages) == "Senior Python Developer\n\nDjango\n"


def test_join_pages_without_pages():
    assert join_pages([]) == ""


def test_extract_pdf_pages_reads_text_per_page():
    data = make_pdf("Senior Python Developer", "Django and PostgreSQL")
    pages = extract_pdf_pages(data)
    assert len(pages) == 2
    assert tokenize(" ".join(pages[0])) == ["senior", "python", "developer"]
    assert tokenize(" ".join(pages[1])) == ["django", "and", "postgresql"]


def test_decode_pdf_one_line_per_page():
    content = decode_pdf(make_pdf("Data Engineer", "Spark Kafka"))
    assert content.endswith("\n")
    assert content.count("\n") == 2
    assert tokenize(content) == ["data", "engineer", "spark", "kafka"]


def test_decode_pdf_rejects_garbage():
    with pytest.raises(DecodeError):
        decode_pdf(b"this is not a pdf at all")


def test_read_upload_dispatches_on_mime_type():
    doc = read_upload(Upload(name="cv.txt", mime_type="text/plain", data=b"python sql"))
    assert doc == Document(name="cv.txt", content="python sql")

    pdf = read_upload(Upload(name="cv.pdf", mime_type="application/pdf", data=make_pdf("Go Rust")))
    assert pdf.name == "cv.pdf"
    assert tokenize(pdf.content) == ["go", "rust"]


def test_read_upload_unknown_type():
    with pytest.raises(DecodeError):
        read_upload(Upload(name="cv.docx", mime_type="application/msword", data=b"..."))
