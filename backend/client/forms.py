"""
Form controllers: validate, show the change immediately, then ask the server.

    Idle -> Validating -> Invalid                      (errors shown, nothing sent)
    Idle -> Validating -> Submitting -> Settled        (create / update)
    Idle -> Deleting -> Settled                        (delete)

One controller drives one form for one entity instance. While a mutation is in
flight the controller is `pending` and refuses to start another one.
"""
import logging
from copy import deepcopy
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from client.notifications import NotificationSink
from client.reconcile import EditingSurface, Refresh, reconcile
from domain.models import (
    OPTIMISTIC_ID,
    Entity,
    Failure,
    MutationAction,
    MutationResult,
    PendingMutation,
    Success,
    utcnow,
)
from domain.resources import Resource
from domain.schemas import FieldErrors, validate_field, validate_params

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Error"


class FormState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    SUBMITTING = "submitting"
    DELETING = "deleting"
    SETTLED = "settled"


@dataclass
class FormActions:
    """The three server mutation actions a form may call; each answers None or an error."""
    create: Callable[[Dict[str, Any]], Awaitable[Optional[str]]]
    update: Callable[[Dict[str, Any]], Awaitable[Optional[str]]]
    delete: Callable[[str], Awaitable[Optional[str]]]


class FormController:
    """
    Drives the create/update/delete form of one resource.

    `fixed` holds fields supplied out-of-band (e.g. the author of a book opened
    from the author's page); they are not user-editable and win over form input.
    `store` is anything with `apply(PendingMutation)` and `rollback(values)`.
    """

    def __init__(
        self,
        resource: Resource,
        actions: FormActions,
        *,
        entity: Optional[Entity] = None,
        fixed: Optional[Mapping[str, Any]] = None,
        store=None,
        surface: Optional[EditingSurface] = None,
        notify: Optional[NotificationSink] = None,
        refresh: Optional[Refresh] = None,
        navigate: Optional[Callable[[str], None]] = None,
        back_path: Optional[str] = None,
        post_success: Optional[Callable[[], None]] = None,
    ) -> None:
        self.resource = resource
        self.actions = actions
        self.entity = deepcopy(entity)
        self.fixed = dict(fixed or {})
        self.store = store
        self.surface = surface
        self.notify = notify
        self.refresh = refresh
        self.navigate = navigate
        self.back_path = back_path
        self.post_success = post_success

        self.state = FormState.IDLE
        self.errors: FieldErrors = {}
        self.is_deleting = False
        self._pending = False

    # -- view state -------------------------------------------------------

    @property
    def editing(self) -> bool:
        return self.entity is not None and bool(self.entity.id) and self.entity.id != OPTIMISTIC_ID

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def has_errors(self) -> bool:
        return any(self.errors.values())

    @property
    def can_save(self) -> bool:
        return not self._pending and not self.has_errors

    @property
    def can_delete(self) -> bool:
        return self.editing and not self._pending and not self.is_deleting and not self.has_errors

    @property
    def save_label(self) -> str:
        if self.editing:
            return "Saving..." if self._pending else "Save"
        return "Creating..." if self._pending else "Create"

    @property
    def delete_label(self) -> str:
        return "Deleting..." if self.is_deleting else "Delete"

    def first_error(self, name: str) -> Optional[str]:
        messages = self.errors.get(name)
        return messages[0] if messages else None

    @property
    def schema(self):
        return self.resource.update_schema if self.editing else self.resource.insert_schema

    def handle_change(self, name: str, value: Any) -> None:
        """Re-check one field as the user edits it."""
        messages = validate_field(self.resource.insert_schema, name, value)
        if messages:
            self.errors[name] = messages
        else:
            self.errors.pop(name, None)

    # -- mutations --------------------------------------------------------

    def _tentative(self, values: Dict[str, Any]) -> Entity:
        if self.editing:
            return replace(deepcopy(self.entity), **values)
        now = utcnow()
        return self.resource.entity_cls(
            id=OPTIMISTIC_ID,
            user_id="",
            created_at=now,
            updated_at=now,
            **values,
        )

    async def _call(self, call: Awaitable[Optional[str]], action: MutationAction) -> Optional[str]:
        try:
            return await call
        except Exception:
            logger.exception("%s %s action raised", self.resource.name, action.value)
            return FALLBACK_ERROR

    async def _settle(self, action: MutationAction, result: MutationResult) -> MutationResult:
        try:
            await reconcile(
                action,
                result,
                label=self.resource.label,
                store=self.store,
                surface=self.surface,
                refresh=self.refresh,
                notify=self.notify,
                post_success=self.post_success,
            )
        finally:
            self._pending = False
            self.state = FormState.SETTLED
        return result

    async def submit(self, form_data: Mapping[str, Any]) -> Optional[MutationResult]:
        """
        Validate and send a create or update.

        Returns None when nothing was sent (still pending, or invalid input),
        otherwise the settled result.
        """
        if self._pending:
            logger.debug("%s form busy, submission ignored", self.resource.name)
            return None

        self.errors = {}
        self.state = FormState.VALIDATING
        # An unchecked checkbox is absent from the submission and means False
        unchecked = {name: False for name in self.resource.checkboxes if name not in form_data}
        payload = {**dict(form_data), **unchecked, **self.fixed}
        schema_payload = {**payload, "id": self.entity.id} if self.editing else payload
        values, errors = validate_params(self.schema, schema_payload, partial=self.editing)
        if errors:
            self.errors = errors
            self.state = FormState.INVALID
            return None
        values.pop("id", None)

        action = MutationAction.UPDATE if self.editing else MutationAction.CREATE
        previous = deepcopy(self.entity) if self.editing else None
        tentative = self._tentative(values)

        if self.surface is not None:
            self.surface.close()
        self._pending = True
        self.state = FormState.SUBMITTING
        if self.store is not None:
            self.store.apply(PendingMutation(action=action, data=tentative))

        if action == MutationAction.UPDATE:
            error = await self._call(self.actions.update({**values, "id": self.entity.id}), action)
        else:
            error = await self._call(self.actions.create(values), action)

        if error:
            result: MutationResult = Failure(message=error, values=previous, attempted=tentative)
        else:
            result = Success()
            if action == MutationAction.UPDATE:
                self.entity = tentative
        return await self._settle(action, result)

    async def delete(self) -> Optional[MutationResult]:
        """Delete the entity being edited; a no-op while the delete control is disabled."""
        if not self.can_delete:
            return None

        entity = deepcopy(self.entity)
        self.is_deleting = True
        self._pending = True
        self.state = FormState.DELETING
        if self.surface is not None:
            self.surface.close()
        if self.store is not None:
            self.store.apply(PendingMutation(action=MutationAction.DELETE, data=entity))
        if self.navigate is not None and self.back_path:
            self.navigate(self.back_path)

        error = await self._call(self.actions.delete(entity.id), MutationAction.DELETE)
        self.is_deleting = False

        result: MutationResult = (
            Failure(message=error, values=entity, attempted=entity) if error else Success()
        )
        return await self._settle(MutationAction.DELETE, result)
