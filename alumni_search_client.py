"""Alumni Search Engine API client.

A thin wrapper around the backend's REST endpoints using the
``requests`` library.  It is meant for scripts and other services
that need to query or feed the alumni collection:

* :meth:`AlumniSearchAPI.ping` – liveness check.
* :meth:`AlumniSearchAPI.search` – filtered search.
* :meth:`AlumniSearchAPI.get_contact` – contact card for one id.
* :meth:`AlumniSearchAPI.get_stats` – aggregated statistics.
* :meth:`AlumniSearchAPI.add_alumni` / :meth:`AlumniSearchAPI.add_bulk`
  – append records.
* :meth:`AlumniSearchAPI.download` – records by id or by batch year.

Every method returns a tuple ``(data, error)``.  The backend reports
application errors (unknown id, bad payload) inside an HTTP 200 body;
the client turns those into an ``error`` as well, so callers only
have to check one place.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class AlumniSearchAPI:
    """Client for the Alumni Search Engine backend."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the backend, e.g. ``http://localhost:5050``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (or the raw text for non-JSON responses) and ``error`` is
            ``None``.  On failure ``data`` is ``None`` and ``error`` has
            the keys ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("Error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError:
            return response.text, None

    @staticmethod
    def _app_error(data: Any) -> Optional[Error]:
        """Return an error for ``{"Error": ...}`` bodies, else ``None``."""
        if isinstance(data, dict) and "Error" in data:
            return {"status_code": 200, "message": data["Error"]}
        return None

    def _list(self, path: str, params: Dict[str, Any]) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], self._app_error(data) or {"status_code": 200, "message": "Unexpected response"}

    def _post_status(self, path: str, body: Any) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("POST", path, json_body=body)
        if error:
            return False, error
        if isinstance(data, dict) and data.get("Status") == "Success":
            return True, None
        return False, {"status_code": 200, "message": "Rejected by server"}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def ping(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the backend's liveness message."""
        return self._request("GET", "/")

    def search(self, **filters: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search alumni.

        Keyword arguments are any of ``id``, ``name``, ``department``,
        ``year``, ``location`` and ``company``; ``None`` values are
        dropped.
        """
        params = {key: value for key, value in filters.items() if value is not None}
        return self._list("/search", params)

    def get_contact(self, alumni_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return ``{ID, Name, Email, Phone}`` for one alumnus."""
        data, error = self._request("GET", "/contact", params={"id": alumni_id})
        if error:
            return None, error
        app_error = self._app_error(data)
        if app_error:
            return None, app_error
        return data, None

    def get_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the statistics report."""
        return self._request("GET", "/stats")

    def download(
        self, alumni_id: Any | None = None, batch: Any | None = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return the records for ``alumni_id`` or, failing that, ``batch``."""
        params: Dict[str, Any] = {}
        if alumni_id is not None:
            params["id"] = alumni_id
        if batch is not None:
            params["batch"] = batch
        return self._list("/download", params)

    def add_alumni(self, record: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Add one record; the server assigns its id."""
        return self._post_status("/add", record)

    def add_bulk(self, records: List[Dict[str, Any]]) -> Tuple[bool, Optional[Error]]:
        """Add several records in one request."""
        return self._post_status("/add-bulk", records)
