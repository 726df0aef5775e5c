"""Download filings and exhibits from the archive, or render them as PDF."""

import logging
from pathlib import Path

from secio.base import BaseApi
from secio.models import ApiRequest, DownloadOptions, Ok, Result

logger = logging.getLogger(__name__)


def filing_path(cik: str, accession_no: str, filename: str) -> str:
    """
    Compose an archive path from filing identifiers.

    Args:
        cik: Filer CIK without leading zeros
        accession_no: Accession number; dashes are removed
        filename: Document filename

    Returns:
        Path of the form "{cik}/{accession_no}/{filename}"
    """
    return f"{cik}/{accession_no.replace('-', '')}/{filename}"


def build_download_request(archive_url: str, path: str, options: DownloadOptions) -> ApiRequest:
    url = f"{archive_url.rstrip('/')}/{path.lstrip('/')}"
    return ApiRequest(method="GET", url=url, headers={"Authorization": options.api_key}, raw=True)


def build_pdf_request(pdf_url: str, url: str, options: DownloadOptions) -> ApiRequest:
    # The filing reader only accepts the credential as a query parameter
    return ApiRequest(method="GET", url=pdf_url, params={"token": options.api_key, "url": url}, raw=True)


class DownloadApi(BaseApi):
    """Client for the archive and filing-reader endpoints."""

    def download(self, path: str, options: DownloadOptions) -> Result:
        """
        Download a filing or exhibit.

        Args:
            path: Path below the archive root, e.g.
                "815094/000156459021006205/abmd-8k_20210211.htm"
            options: DownloadOptions with the credential

        Returns:
            Ok with the raw bytes, Err otherwise
        """
        return self._dispatch(build_download_request(self._settings.archive_url, path, options))

    def download_by_identifiers(self, cik: str, accession_no: str, filename: str, options: DownloadOptions) -> Result:
        return self.download(filing_path(cik, accession_no, filename), options)

    def download_to_file(
        self,
        path: str,
        options: DownloadOptions,
        output_dir: Path | str | None = None,
        filename: str | None = None,
    ) -> Result:
        """
        Download a document and write it to disk.

        Args:
            path: Path below the archive root
            options: DownloadOptions with the credential
            output_dir: Directory to save the file (default: current directory)
            filename: Custom filename (default: last segment of ``path``)

        Returns:
            Ok with the written Path, or the download's Err unchanged
        """
        result = self.download(path, options)
        if not result.is_ok:
            return result

        if filename is None:
            filename = path.rstrip("/").rsplit("/", 1)[-1]

        if output_dir is None:
            output_path = Path(filename)
        else:
            output_path = Path(output_dir) / filename

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(result.value)
        logger.info("Saved %s (%d bytes)", output_path, len(result.value))

        return Ok(value=output_path)

    def generate_pdf(self, url: str, options: DownloadOptions) -> Result:
        """
        Render a filing or exhibit as PDF.

        Args:
            url: Full sec.gov URL of the document
            options: DownloadOptions with the credential

        Returns:
            Ok with the PDF bytes, Err otherwise
        """
        return self._dispatch(build_pdf_request(self._settings.pdf_url, url, options))
