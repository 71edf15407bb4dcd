"""
In-process adapter: forms call the server actions directly, without HTTP.
Used by scripts and tests running next to the database.
"""
import asyncio
from typing import Any, Dict, Optional

from client.forms import FormActions
from client.store import OptimisticListStore, OptimisticStore
from domain.resources import Resource
from services import actions, queries
from services.auth import AuthSession


class LocalActions:
    def __init__(self, resource: Resource, auth: AuthSession) -> None:
        self.resource = resource
        self.auth = auth

    async def create(self, values: Dict[str, Any]) -> Optional[str]:
        return await asyncio.to_thread(actions.create_entity_action, self.resource, values, self.auth)

    async def update(self, values: Dict[str, Any]) -> Optional[str]:
        return await asyncio.to_thread(actions.update_entity_action, self.resource, values, self.auth)

    async def delete(self, entity_id: str) -> Optional[str]:
        return await asyncio.to_thread(actions.delete_entity_action, self.resource, entity_id, self.auth)

    def form_actions(self) -> FormActions:
        return FormActions(create=self.create, update=self.update, delete=self.delete)

    def refresher(self, store: OptimisticStore, entity_id: str):
        def _refresh() -> None:
            store.set_base(queries.get_entity_by_id(self.resource, self.auth, entity_id))

        return _refresh

    def list_refresher(self, store: OptimisticListStore, **filters):
        def _refresh() -> None:
            store.set_base(queries.get_entities(self.resource, self.auth, **filters))

        return _refresh
