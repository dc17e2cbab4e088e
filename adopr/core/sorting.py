from typing import Iterable, Tuple

from adopr.core.schema.pr import PullRequestRecord


def sort_by_creation(
    records: Iterable[PullRequestRecord],
) -> Tuple[PullRequestRecord, ...]:
    """Oldest first. Records without a creation date lead; ties keep input order."""
    return tuple(sorted(records, key=_creation_key))


def _creation_key(record: PullRequestRecord) -> tuple[bool, float]:
    if record.created_at is None:
        return (False, 0.0)
    return (True, record.created_at.timestamp())
