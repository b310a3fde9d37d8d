"""HTTP client for the recruitment CRM API."""

from typing import Any, Callable, Dict, List, Optional

import requests
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class CRMApiClient:
    """Authenticated client for every CRM endpoint.

    ``token_provider`` is called before each request so short-lived ID
    tokens can be refreshed by the caller. The sheet methods match what
    :class:`recruit_crm.sheet.SheetGrid` expects from its backend.
    """

    def __init__(
        self,
        base_url: str,
        token_provider: Callable[[], str],
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        self.session = session or requests.Session()
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token_provider()}",
            "Content-Type": "application/json",
        }

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> Any:
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            headers=self._headers(),
            params=params or None,
            json=json,
            timeout=self.timeout
        )

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.warning(
                "API request failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message
            )
            raise ApiError(response.status_code, message)
        return response.json()

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or "Request failed"

        if isinstance(body, dict):
            return str(body.get("detail") or body.get("error") or body)
        return str(body)

    # Clients

    def list_clients(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/clients")

    def create_client(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/clients", json=data)

    def update_client(self, client_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/clients/{client_id}", json=data)

    def delete_client(self, client_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/clients/{client_id}")

    # Jobs

    def list_jobs(self, client_id: Optional[str] = None) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/jobs", params={"client_id": client_id})

    def create_job(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/jobs", json=data)

    def update_job(self, job_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/jobs/{job_id}", json=data)

    def delete_job(self, job_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/jobs/{job_id}")

    # Candidates

    def list_candidates(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/candidates")

    def create_candidate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/candidates", json=data)

    # Candidate sheet

    def list_sheet_candidates(self, client_name: str, job_title: str) -> List[Dict[str, Any]]:
        return self._request(
            "GET", "/api/candidates/sheet", params={"clientName": client_name, "jobTitle": job_title}
        )

    def create_sheet_candidate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/candidates/sheet", json=data)

    def update_sheet_candidate(self, row_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", "/api/candidates/sheet", json={**data, "id": row_id})

    def delete_sheet_candidate(self, row_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/candidates/sheet/{row_id}")

    # Applications

    def list_applications(
        self,
        job_id: Optional[str] = None,
        client_id: Optional[str] = None,
        candidate_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return self._request(
            "GET",
            "/api/applications",
            params={"jobId": job_id, "clientId": client_id, "candidateId": candidate_id}
        )

    def create_application(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/applications", json=data)

    def update_application(
        self,
        application_id: str,
        status: Optional[str] = None,
        notes: Optional[str] = None
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": application_id}
        if status is not None:
            data["status"] = status
        if notes is not None:
            data["notes"] = notes
        return self._request("PUT", "/api/applications", json=data)

    def delete_application(self, application_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/applications/{application_id}")

    def health(self) -> Dict[str, Any]:
        response = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, self._error_message(response))
        return response.json()
