"""
HTTP adapter binding form controllers and stores to the JSON API.

Requests run in a worker thread so the event loop driving the forms stays
responsive while a mutation is in flight. No timeout is set by default: a
mutation runs to completion.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import requests

from client.forms import FormActions
from client.store import OptimisticListStore, OptimisticStore
from domain.models import Entity
from domain.resources import Resource
from settings import settings

logger = logging.getLogger(__name__)

NETWORK_ERROR = "Network error, please try again"


class RemoteActions:
    """Mutation actions and read queries of one resource over HTTP."""

    def __init__(
        self,
        resource: Resource,
        user_id: str,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.resource = resource
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers[settings.AUTH_HEADER] = user_id

    def _url(self, entity_id: Optional[str] = None) -> str:
        url = f"{self.base_url}/api/{self.resource.plural}"
        return f"{url}/{entity_id}" if entity_id else url

    def _mutate(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Optional[str]:
        try:
            resp = self._session.request(method, url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json().get("error")
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            return NETWORK_ERROR

    # Blocking calls

    def create_sync(self, values: Dict[str, Any]) -> Optional[str]:
        return self._mutate("POST", self._url(), values)

    def update_sync(self, values: Dict[str, Any]) -> Optional[str]:
        return self._mutate("PUT", self._url(values["id"]), values)

    def delete_sync(self, entity_id: str) -> Optional[str]:
        return self._mutate("DELETE", self._url(entity_id))

    def fetch_sync(self, entity_id: str) -> Optional[Entity]:
        resp = self._session.get(self._url(entity_id), timeout=self.timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return self.resource.entity_cls.from_dict(resp.json())

    def list_sync(self, **filters) -> List[Entity]:
        params = {k: v for k, v in filters.items() if v is not None}
        resp = self._session.get(self._url(), params=params, timeout=self.timeout)
        resp.raise_for_status()
        return [self.resource.entity_cls.from_dict(item) for item in resp.json()]

    # Coroutine wrappers used by the form controllers

    async def create(self, values: Dict[str, Any]) -> Optional[str]:
        return await asyncio.to_thread(self.create_sync, values)

    async def update(self, values: Dict[str, Any]) -> Optional[str]:
        return await asyncio.to_thread(self.update_sync, values)

    async def delete(self, entity_id: str) -> Optional[str]:
        return await asyncio.to_thread(self.delete_sync, entity_id)

    def form_actions(self) -> FormActions:
        return FormActions(create=self.create, update=self.update, delete=self.delete)

    def refresher(self, store: OptimisticStore, entity_id: str):
        """Refresh callback that reloads one entity into `store`."""

        async def _refresh() -> None:
            entity = await asyncio.to_thread(self.fetch_sync, entity_id)
            store.set_base(entity)

        return _refresh

    def list_refresher(self, store: OptimisticListStore, **filters):
        """Refresh callback that reloads a list view into `store`."""

        async def _refresh() -> None:
            items = await asyncio.to_thread(self.list_sync, **filters)
            store.set_base(items)

        return _refresh
