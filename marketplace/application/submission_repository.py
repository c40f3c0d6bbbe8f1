"""Event submission repository protocol."""

from typing import List, Optional, Protocol

from marketplace.domain.models.event_submission import EventSubmission, SubmissionStatus


class EventSubmissionRepository(Protocol):
    async def add(self, submission: EventSubmission) -> EventSubmission:
        ...

    async def get(self, submission_id: str) -> Optional[EventSubmission]:
        ...

    async def compare_and_set(
        self,
        submission: EventSubmission,
        expected_status: SubmissionStatus,
    ) -> bool:
        """
        Atomically write status, decision fields and slug if the stored status equals expected_status.
        Returns False when another writer got there first.
        """
        ...

    async def list(
        self,
        *,
        seller_id: Optional[str] = None,
        status: Optional[SubmissionStatus] = None,
    ) -> List[EventSubmission]:
        """Equality-filtered list, newest submitted_at first."""
        ...
