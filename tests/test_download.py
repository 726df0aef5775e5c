"""Tests for archive downloads and PDF generation."""

import httpx

from secio.download import DownloadApi, build_download_request, build_pdf_request, filing_path
from secio.models import DownloadOptions, Err, HttpError


class TestBuilders:
    """Test download request builders."""

    def test_download_request(self):
        request = build_download_request(
            "https://archive.sec-api.io", "815094/000156459021006205/abmd-8k_20210211.htm", DownloadOptions(api_key="key")
        )
        assert request.method == "GET"
        assert request.url == "https://archive.sec-api.io/815094/000156459021006205/abmd-8k_20210211.htm"
        assert request.headers == {"Authorization": "key"}
        assert request.params == {}
        assert request.raw is True

    def test_download_request_leading_slash(self):
        request = build_download_request("https://archive.sec-api.io/", "/1/2/a.htm", DownloadOptions(api_key="key"))
        assert request.url == "https://archive.sec-api.io/1/2/a.htm"

    def test_pdf_request_always_uses_token(self):
        url = "https://www.sec.gov/Archives/edgar/data/320193/000032019323000106/aapl-20230930.htm"
        request = build_pdf_request("https://api.sec-api.io/filing-reader", url, DownloadOptions(api_key="key"))

        assert request.params == {"token": "key", "url": url}
        assert request.headers == {}
        assert request.raw is True

    def test_filing_path(self):
        assert filing_path("815094", "000156459021006205", "abmd-8k_20210211.htm") == (
            "815094/000156459021006205/abmd-8k_20210211.htm"
        )

    def test_filing_path_strips_accession_dashes(self):
        assert filing_path("320193", "0000320193-23-000106", "aapl.htm") == "320193/000032019323000106/aapl.htm"


class TestDownloadApi:
    """Test DownloadApi against a mock transport."""

    def test_download_returns_raw_bytes(self, settings, http, transport):
        """Test that HTML bodies are returned undecoded."""
        transport.response = httpx.Response(200, content=b"<html>filing</html>", headers={"content-type": "text/html"})

        result = DownloadApi(settings, http).download("815094/000156459021006205/abmd-8k_20210211.htm", DownloadOptions(api_key="key"))

        assert result.value == b"<html>filing</html>"
        assert transport.last.url.host == "archive.sec-api.io"
        assert transport.last.headers["Authorization"] == "key"
        assert "token" not in transport.last.url.params

    def test_download_by_identifiers(self, settings, http, transport):
        DownloadApi(settings, http).download_by_identifiers(
            "815094", "000156459021006205", "abmd-8k_20210211.htm", DownloadOptions(api_key="key")
        )
        assert transport.last.url.path == "/815094/000156459021006205/abmd-8k_20210211.htm"

    def test_download_error(self, settings, http, transport):
        transport.response = httpx.Response(403, json={"error": "forbidden"})

        result = DownloadApi(settings, http).download("1/2/a.htm", DownloadOptions(api_key="key"))

        assert result == Err(error=HttpError(status=403, body={"error": "forbidden"}))

    def test_generate_pdf(self, settings, http, transport):
        transport.response = httpx.Response(200, content=b"%PDF-1.7 ...", headers={"content-type": "application/pdf"})
        url = "https://www.sec.gov/Archives/edgar/data/320193/000032019323000106/aapl-20230930.htm"

        result = DownloadApi(settings, http).generate_pdf(url, DownloadOptions(api_key="key"))

        assert result.value == b"%PDF-1.7 ..."
        assert transport.last.url.path == "/filing-reader"
        assert transport.last.url.params["token"] == "key"
        assert transport.last.url.params["url"] == url
        assert "Authorization" not in transport.last.headers


class TestDownloadToFile:
    """Test DownloadApi.download_to_file()."""

    def test_writes_file(self, settings, http, transport, tmp_path):
        transport.response = httpx.Response(200, content=b"Mock filing content")

        result = DownloadApi(settings, http).download_to_file(
            "815094/000156459021006205/abmd-8k_20210211.htm", DownloadOptions(api_key="key"), output_dir=tmp_path
        )

        assert result.is_ok
        assert result.value == tmp_path / "abmd-8k_20210211.htm"
        assert result.value.read_bytes() == b"Mock filing content"

    def test_custom_filename_and_new_directory(self, settings, http, transport, tmp_path):
        transport.response = httpx.Response(200, content=b"Content")
        output_dir = tmp_path / "new_dir" / "subdir"
        assert not output_dir.exists()

        result = DownloadApi(settings, http).download_to_file(
            "1/2/a.htm", DownloadOptions(api_key="key"), output_dir=output_dir, filename="custom.htm"
        )

        assert result.value.name == "custom.htm"
        assert output_dir.exists()

    def test_error_writes_nothing(self, settings, http, transport, tmp_path):
        transport.response = httpx.Response(404, text="not found")

        result = DownloadApi(settings, http).download_to_file("1/2/a.htm", DownloadOptions(api_key="key"), output_dir=tmp_path)

        assert result.error.status == 404
        assert list(tmp_path.iterdir()) == []

    def test_transport_error_passed_through(self, settings, http, transport, tmp_path):
        error = httpx.ConnectError("dns failure")
        transport.error = error

        result = DownloadApi(settings, http).download_to_file("1/2/a.htm", DownloadOptions(api_key="key"), output_dir=tmp_path)

        assert result.error is error
