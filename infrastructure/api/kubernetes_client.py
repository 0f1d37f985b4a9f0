"""Kubernetes API client for endpoint discovery and node lookups."""
import logging
import ssl
from pathlib import Path
from typing import Any, Dict, Optional, Union

import httpx

from config.settings import settings
from domain.entities.endpoints import EndpointsList
from domain.errors import DirectoryQueryFailed
from domain.interfaces.directory import IDirectoryService

logger = logging.getLogger(__name__)


class KubernetesClient(IDirectoryService):
    """Asynchronous, read-only client for the core/v1 API.

    Authenticates with the pod's service account unless a base URL and token
    are passed explicitly.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        *,
        verify: Union[bool, ssl.SSLContext, None] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url  = (base_url or settings.kube_api_url()).rstrip('/')
        self.token     = token if token is not None else self._service_account_token()
        self.verify    = verify if verify is not None else self._service_account_ca()
        self.timeout   = timeout or settings.KUBE_REQUEST_TIMEOUT
        self.transport = transport
        self.session: Optional[httpx.AsyncClient] = None

    @staticmethod
    def _service_account_token() -> str:
        if settings.KUBE_TOKEN:
            return settings.KUBE_TOKEN
        path = settings.SERVICE_ACCOUNT_DIR / 'token'
        return path.read_text().strip() if path.exists() else ''

    @staticmethod
    def _service_account_ca() -> Union[bool, ssl.SSLContext]:
        path: Path = settings.SERVICE_ACCOUNT_DIR / "ca.crt"
        return ssl.create_default_context(cafile=str(path)) if path.exists() else True

    async def __aenter__(self):
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        self.session = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout,
            verify=self.verify,
            transport=self.transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        if not self.base_url:
            raise DirectoryQueryFailed("kubernetes API address unknown: set KUBE_API_URL or run in-cluster")
        if self.session is None:
            raise DirectoryQueryFailed("kubernetes client used outside of its context")
        try:
            response = await self.session.get(path, params=params)
        except httpx.HTTPError as exc:
            raise DirectoryQueryFailed(f"GET {path} failed: {exc}") from exc

        if response.status_code != 200:
            raise DirectoryQueryFailed(
                f"GET {path} returned HTTP {response.status_code}: {response.text[:200]}"
            )
        try:
            return response.json()
        except ValueError as exc:
            raise DirectoryQueryFailed(f"GET {path} returned invalid JSON") from exc

    # ── Endpoints ──────────────────────────────────────────────────────

    async def list_endpoints(self, namespace: str, label_selector: str) -> EndpointsList:
        path = f"/api/v1/namespaces/{namespace}/endpoints" if namespace else "/api/v1/endpoints"
        params = {"labelSelector": label_selector} if label_selector else None
        data = await self._get(path, params)
        endpoints = EndpointsList.from_dict(data)
        logger.debug("listed %d endpoints objects from %s", len(endpoints.items), path)
        return endpoints

    # ── Nodes ──────────────────────────────────────────────────────────

    async def get_node(self, name: str) -> Dict[str, Any]:
        return await self._get(f"/api/v1/nodes/{name}")
