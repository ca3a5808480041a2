#!python3
"""Control file loader for local dpkg status files and remote indexes."""
import gzip
import zlib

import requests

from http_client import HttpClient
from loggingex import generate_logger
from pathlibex import is_remote_source

logger = generate_logger(name=__name__, debug=__debug__, filepath=__file__)

REPOSITORY_INDEX = "Packages.gz"


class FileAccessError(OSError):
    """The control file could not be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"cannot read control file {source}: {reason}")
        self.source = source
        self.reason = reason


class ControlFileLoader:
    """Read the full text of a control file.

    ``source`` is either a filesystem path or an http(s) URL. Sources ending
    in ``.gz`` are decompressed, and a URL ending in ``/`` is taken to be a
    repository directory holding ``Packages.gz``.
    """

    def __init__(self, http_client=None):
        self._http = http_client

    def load(self, source: str) -> str:
        """Return the decoded contents of ``source``.

        Parameters
        ----------
        source : str
            Path or URL of the control file.

        Returns
        -------
        str
            The file contents decoded as UTF-8.

        Raises
        ------
        FileAccessError
            If the source is missing, unreadable or not a valid archive.
        """
        if is_remote_source(source):
            url = source + REPOSITORY_INDEX if source.endswith("/") else source
            data = self._read_remote(url)
        else:
            url = source
            data = self._read_local(source)

        if url.lower().endswith(".gz"):
            data = self._gunzip(url, data)

        logger.debug("loaded %d bytes from %s", len(data), url)
        return data.decode("utf-8", errors="replace")

    def _read_local(self, path: str) -> bytes:
        try:
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            logger.error("failed to read %s: %s", path, exc)
            raise FileAccessError(path, exc.strerror or str(exc)) from exc

    def _read_remote(self, url: str) -> bytes:
        if self._http is None:
            self._http = HttpClient()
        logger.info("fetching control file %s", url)
        try:
            return self._http.fetch_content(url)
        except requests.RequestException as exc:
            logger.error("failed to fetch %s: %s", url, exc)
            raise FileAccessError(url, str(exc)) from exc

    @staticmethod
    def _gunzip(source: str, data: bytes) -> bytes:
        try:
            return gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as exc:
            logger.error("failed to decompress %s: %s", source, exc)
            raise FileAccessError(source, f"corrupt gzip data: {exc}") from exc
