"""
Get Audit Events Use Case

Retrieves access gate audit events with pagination.
"""

from typing import Any, Dict, Optional

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events.

    Business Rules:
    - Caller is an authenticated Dean (checked by the API dependency)
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Each event includes action, actor, session id, timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, limit: int = 50, cursor: Optional[str] = None
    ) -> Result[Dict[str, Any]]:
        """
        Execute get audit events use case.

        Args:
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor
        """
        async with self.uow:
            events, next_cursor = await self.uow.audit_events.get_paginated(
                limit=limit, cursor=cursor
            )

            events_list = [
                {
                    "action": event.action,
                    "actor": event.actor.value,
                    "session_id": str(event.session_id) if event.session_id else None,
                    "timestamp": event.created_at.isoformat() + "Z",
                    "metadata": event.event_metadata or {},
                }
                for event in events
            ]

            return Return.ok({"events": events_list, "next_cursor": next_cursor})
