import json
import logging
from typing import Any, Dict, Iterator, List, Optional

import httpx

from config import settings

logger = logging.getLogger(__name__)

class ClientError(Exception):
    def __init__(self, status_code: Optional[int], message: str):
        super().__init__(f"{status_code}: {message}" if status_code else message)
        self.status_code = status_code
        self.message = message

class FoodRescueClient:
    """HTTP access to the FoodRescue API, used by the presentation layer.

    ``http`` may be any ``httpx.Client`` (including FastAPI's ``TestClient``);
    paths are resolved against ``base_path``.
    """

    def __init__(self, http: Optional[httpx.Client] = None, base_path: str = ""):
        self.http = http or httpx.Client(base_url=settings.API_BASE_URL, timeout=30.0)
        self.base_path = base_path.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.base_path}{path}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self.http.request(method, self._url(path), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Request to {path} failed: {str(e)}")
            raise ClientError(None, str(e)) from e

        if not response.is_success:
            raise ClientError(response.status_code, _error_message(response))

        return response.json()

    def insert_submission(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/submissions", json=payload)

    def recent_submissions(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        params = {"limit": limit} if limit else None
        return self._request("GET", "/submissions/recent", params=params)

    def list_ngos(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/ngos")

    def invoke_function(self, name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", f"/functions/{name}", json=body)

    def stream_submission_inserts(self) -> Iterator[Dict[str, Any]]:
        """Yield each inserted food_submissions row as it is announced."""
        with self.http.stream("GET", self._url("/submissions/stream")) as response:
            if not response.is_success:
                response.read()
                raise ClientError(response.status_code, _error_message(response))

            event = None
            for line in response.iter_lines():
                if line.startswith("event:"):
                    event = line[len("event:"):].strip()
                elif line.startswith("data:") and event == "INSERT":
                    yield json.loads(line[len("data:"):].strip())
                elif not line:
                    event = None

def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase

    if isinstance(body, dict):
        detail = body.get("error") or body.get("detail")
        if isinstance(detail, str):
            return detail
    return response.text
