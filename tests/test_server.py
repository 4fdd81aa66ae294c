import pytest
from fastapi.testclient import TestClient

from summarizer_cli.server.main import app

ARTICLE = (
    "Solar power is growing quickly across the world. "
    "Many homes now install solar panels on their roofs. "
    "The price of panels has dropped sharply in ten years. "
    "Wind power also supplies clean energy to cities. "
    "Some people worry about storing energy at night. "
    "Batteries store solar energy for later use. "
    "Governments offer grants to support clean energy. "
    "It was a quiet day."
)


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


class TestSummarizeEndpoint:

    def test_health(self, client):
        assert client.get("/health").json() == {"ok": True}

    def test_cors_allows_any_origin_without_credentials(self, client):
        r = client.get("/health", headers={"Origin": "http://example.com"})
        assert r.headers["access-control-allow-origin"] == "*"
        assert "access-control-allow-credentials" not in r.headers

    def test_summarize(self, client):
        r = client.post("/summarize", json={"text": ARTICLE, "ratio": 50})
        assert r.status_code == 200
        body = r.json()
        assert body["error"] is None
        assert body["degenerate"] is False
        assert body["metrics"]["summary_sentence_count"] == 4
        assert body["metrics"]["compression_ratio"] == 50

    def test_default_ratio(self, client):
        body = client.post("/summarize", json={"text": ARTICLE}).json()
        assert body["metrics"]["summary_sentence_count"] == 3

    def test_short_text_rejected(self, client):
        r = client.post("/summarize", json={"text": "Too short.", "ratio": 40})
        assert r.status_code == 400
        assert "at least 50 characters" in r.json()["detail"]

    def test_bad_ratio_rejected(self, client):
        r = client.post("/summarize", json={"text": ARTICLE, "ratio": 95})
        assert r.status_code == 400

    def test_core_error_returned_in_body(self, client):
        digits = "123 456 789 101 112 131 415 161 718 192 021 222 324 252 627."
        body = client.post("/summarize", json={"text": digits, "ratio": 40}).json()
        assert body["error"] == "No valid sentences found"
        assert body["summary"] == digits
        assert body["metrics"] is None


class TestFileEndpoints:

    def test_upload_txt(self, client):
        r = client.post(
            "/summarize/file",
            files={"file": ("article.txt", ARTICLE.encode("utf-8"), "text/plain")},
            data={"ratio": "70"},
        )
        assert r.status_code == 200
        assert r.json()["metrics"]["summary_sentence_count"] == 6

    def test_upload_with_byte_order_mark(self, client):
        r = client.post(
            "/summarize/file",
            files={"file": ("article.txt", b"\xef\xbb\xbf" + ARTICLE.encode("utf-8"), "text/plain")},
            data={"ratio": "70"},
        )
        assert r.status_code == 200
        body = r.json()
        assert "\ufeff" not in body["summary"]
        assert body["summary"].startswith("Solar power")

    def test_upload_wrong_type(self, client):
        r = client.post("/summarize/file", files={"file": ("article.pdf", b"%PDF", "application/pdf")})
        assert r.status_code == 400
        assert r.json()["detail"] == "Please upload a .txt file"

    def test_upload_not_utf8(self, client):
        r = client.post("/summarize/file", files={"file": ("article.txt", b"\xff\xfe\xfa" * 30, "text/plain")})
        assert r.status_code == 400

    def test_download(self, client):
        r = client.post("/summarize/download", json={"text": ARTICLE, "ratio": 40})
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/plain")
        disposition = r.headers["content-disposition"]
        assert 'filename="summary_' in disposition and disposition.endswith('.txt"')
        expected = client.post("/summarize", json={"text": ARTICLE, "ratio": 40}).json()["summary"]
        assert r.text == expected


class TestStatsEndpoint:

    def test_stats(self, client):
        body = client.post("/stats", json={"text": ARTICLE}).json()
        assert body == {"characters": len(ARTICLE), "words": 62, "sentences": 8, "reading_minutes": 1}

    def test_stats_empty(self, client):
        body = client.post("/stats", json={"text": ""}).json()
        assert body["words"] == 0
