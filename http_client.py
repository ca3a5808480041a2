#!python3
"""HTTP client used to fetch remote control files."""
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_USER_AGENT = "dpkg-status-viewer/1.0"


class HttpClient:
    """requests session with urllib3 retries mounted for http and https."""

    def __init__(
        self,
        session=None,
        timeout=30,
        retries=3,
        backoff=0.5,
        status_forcelist=None,
        user_agent=DEFAULT_USER_AGENT,
    ):
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = user_agent
        self._timeout = timeout

        if status_forcelist is None:
            status_forcelist = [429, 500, 502, 503, 504]

        retry = Retry(
            total=retries,
            connect=retries,
            read=retries,
            status=retries,
            backoff_factor=backoff,
            status_forcelist=status_forcelist,
            allowed_methods=frozenset(["GET", "HEAD"]),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

    def get(self, url: str, headers: dict = None) -> requests.Response:
        """Issue a GET request through the retrying session.

        Parameters
        ----------
        url : str
            url to GET
        headers : dict, optional
            extra headers to include in the request, by default None

        Returns
        -------
        requests.Response
            Response object
        """
        return self._session.get(url, headers=headers, timeout=self._timeout)

    def fetch_content(self, url: str) -> bytes:
        """Download a resource and return its body.

        Parameters
        ----------
        url : str
            url to download

        Returns
        -------
        bytes
            raw response body

        Raises
        ------
        requests.RequestException
            on connection failures and non-2xx responses
        """
        response = self.get(url)
        response.raise_for_status()
        return response.content
