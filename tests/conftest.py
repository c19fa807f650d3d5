"""
Shared fixtures: fake HTTP responses and small generated menu PDFs.
"""

import pytest
import requests
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


class FakeResponse:
    def __init__(self, status_code=200, text="", content=b"", chunks=None):
        self.status_code = status_code
        self.text = text
        self.content = content
        self._chunks = chunks

    def iter_content(self, chunk_size=1):
        if self._chunks is not None:
            for chunk in self._chunks:
                if isinstance(chunk, Exception):
                    raise chunk
                yield chunk
            return
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start:start + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def fake_http(monkeypatch):
    """Route ``requests.get`` to canned responses keyed by URL."""
    routes = {}
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        response = routes.get(url)
        if response is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(requests, "get", fake_get)
    fake_get.routes = routes
    fake_get.calls = calls
    return fake_get


@pytest.fixture
def make_pdf(tmp_path):
    """Write a PDF with one page per entry in ``pages`` and return its path."""
    def _make(pages, name="menu.pdf"):
        path = tmp_path / name
        pdf = canvas.Canvas(str(path), pagesize=A4)
        for lines in pages:
            y = 800
            for line in lines:
                pdf.drawString(72, y, line)
                y -= 20
            pdf.showPage()
        pdf.save()
        return path

    return _make
