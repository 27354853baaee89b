"""
Parcel Registry Service.

Owns the active parcels, the loading queue, the undo stack and the delivered
log, and implements every operation the menu exposes. Each operation either
completes or raises an AppException before touching any container.
"""

import logging
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from parcel_tracker.app.core.config import Settings, settings as default_settings
from parcel_tracker.app.core.exceptions import (
    DuplicateParcelError,
    ParcelNotFoundError,
    QueueUnderflowError,
    UndoUnderflowError,
    validation_exception_handler,
)
from parcel_tracker.app.models.action import Action
from parcel_tracker.app.models.action_enums import ActionType
from parcel_tracker.app.models.parcel import Parcel
from parcel_tracker.app.schemas.parcel import ParcelCreate, ParcelLookup, ParcelWeightUpdate
from parcel_tracker.app.schemas.report import SummaryReport
from parcel_tracker.app.services.audit import DeliveredLog
from parcel_tracker.app.services.loading_queue import LoadingQueue
from parcel_tracker.app.services.reporting import ReportingService
from parcel_tracker.app.services.undo_stack import UndoStack

logger = logging.getLogger("parcel_tracker")


def _validate(schema, **values):
    try:
        return schema(**values)
    except ValidationError as e:
        raise validation_exception_handler(e) from e


class ParcelRegistry:
    """
    In-memory parcel registry.

    Containers:
        active    - insertion-ordered list of parcels awaiting delivery
        queue     - LoadingQueue of parcel copies awaiting dispatch
        undo      - UndoStack of ADD / UPDATE / DELETE actions
        delivered - DeliveredLog audit trail
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings
        self._active: List[Parcel] = []
        self._queue = LoadingQueue()
        self._undo = UndoStack()
        self._delivered = DeliveredLog()

    # Lookups

    def _find(self, parcel_id: int) -> Optional[Parcel]:
        for parcel in self._active:
            if parcel.id == parcel_id:
                return parcel
        return None

    def _require(self, parcel_id: Any) -> Parcel:
        lookup = _validate(ParcelLookup, id=parcel_id)
        parcel = self._find(lookup.id)
        if parcel is None:
            raise ParcelNotFoundError(lookup.id)
        return parcel

    def get_parcel(self, parcel_id: Any) -> Parcel:
        """
        Return a copy of the first active parcel with the given ID.

        Raises:
            MalformedInputError: If parcel_id is not an integer
            ParcelNotFoundError: If no active parcel matches
        """
        return self._require(parcel_id).copy()

    def active_parcels(self) -> List[Parcel]:
        return [parcel.copy() for parcel in self._active]

    def queued_parcels(self) -> List[Parcel]:
        return self._queue.snapshot()

    def delivered_parcels(self) -> List[Parcel]:
        return self._delivered.entries()

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    def last_action(self) -> Optional[Action]:
        return self._undo.peek()

    # Operations

    def register(
        self,
        parcel_id: Any,
        sender: str,
        recipient: str,
        address: str,
        weight: Any,
        priority: Any
    ) -> Parcel:
        """
        Register a new parcel and record it for undo.

        Args:
            parcel_id: Parcel ID (integer or integer text)
            sender: Sender name
            recipient: Recipient name
            address: Delivery address
            weight: Weight in kg (number or numeric text)
            priority: Delivery priority within the configured range

        Returns:
            Copy of the registered parcel

        Raises:
            MalformedInputError: If id, weight or priority cannot be parsed
            OutOfRangeError: If priority is outside the allowed range
            DuplicateParcelError: If unique IDs are enforced and the ID is taken
        """
        data = _validate(
            ParcelCreate,
            id=parcel_id,
            sender=sender,
            recipient=recipient,
            address=address,
            weight=weight,
            priority=priority
        )

        if self.config.enforce_unique_ids:
            taken = {p.id for p in self._active} | {p.id for p in self._queue.snapshot()}
            if data.id in taken:
                raise DuplicateParcelError(data.id)

        parcel = Parcel(**data.model_dump())
        self._active.append(parcel)
        self._undo.record(ActionType.ADD, parcel)

        logger.info("Parcel registered", extra={"parcel_id": parcel.id, "action": ActionType.ADD.value})
        return parcel.copy()

    def update_weight(self, parcel_id: Any, weight: Any) -> Tuple[Parcel, Parcel]:
        """
        Overwrite the weight of an active parcel.

        The lookup happens before the weight is parsed, so an unknown ID is
        reported even when the weight is also malformed.

        Returns:
            (previous, updated) parcel copies
        """
        parcel = self._require(parcel_id)
        update = _validate(ParcelWeightUpdate, weight=weight)

        previous = parcel.copy()
        self._undo.record(ActionType.UPDATE, previous)
        parcel.weight = update.weight

        logger.info(
            "Parcel weight updated",
            extra={"parcel_id": parcel.id, "action": ActionType.UPDATE.value,
                   "old_weight": previous.weight, "new_weight": parcel.weight}
        )
        return previous, parcel.copy()

    def load(self, parcel_id: Any) -> Parcel:
        """Copy an active parcel into the loading queue. Not recorded for undo."""
        parcel = self._require(parcel_id)
        self._queue.push(parcel)

        logger.info("Parcel loaded", extra={"parcel_id": parcel.id, "priority": parcel.priority})
        return parcel.copy()

    def dispatch_next(self) -> Parcel:
        """
        Remove the most urgent parcel from the loading queue.

        Raises:
            QueueUnderflowError: If the loading queue is empty
        """
        if not self._queue:
            raise QueueUnderflowError()

        parcel = self._queue.pop()
        logger.info("Parcel dispatched", extra={"parcel_id": parcel.id, "priority": parcel.priority})
        return parcel

    def complete_delivery(self, parcel_id: Any) -> Parcel:
        """Move an active parcel to the delivered log and record it for undo."""
        parcel = self._require(parcel_id)

        self._delivered.record(parcel)
        self._active.remove(parcel)
        self._undo.record(ActionType.DELETE, parcel)

        logger.info("Parcel delivered", extra={"parcel_id": parcel.id, "action": ActionType.DELETE.value})
        return parcel.copy()

    def undo(self) -> Tuple[Action, bool]:
        """
        Reverse the most recent ADD, UPDATE or DELETE.

        ADD and UPDATE are silently skipped when the parcel is no longer
        active. Undoing a DELETE leaves the delivered log untouched unless
        reconcile_delivered_on_undo is enabled.

        Returns:
            (action, applied) where applied is False for a skipped reversal

        Raises:
            UndoUnderflowError: If no actions are recorded
        """
        if not self._undo:
            raise UndoUnderflowError()

        action = self._undo.pop()
        snapshot = action.data
        applied = True

        if action.type == ActionType.ADD:
            parcel = self._find(snapshot.id)
            if parcel is not None:
                self._active.remove(parcel)
            else:
                applied = False

        elif action.type == ActionType.DELETE:
            self._active.append(snapshot.copy())
            if self.config.reconcile_delivered_on_undo:
                self._delivered.retract(snapshot.id)

        elif action.type == ActionType.UPDATE:
            parcel = self._find(snapshot.id)
            if parcel is not None:
                parcel.weight = snapshot.weight
            else:
                applied = False

        logger.info(
            "Action undone",
            extra={"parcel_id": snapshot.id, "action": action.type.value, "applied": applied}
        )
        return action, applied

    def generate_report(self) -> SummaryReport:
        return ReportingService.build_summary(self._active, self._delivered.entries())
