"""
In-memory grant store - add, edit, remove grants.
"""

from dataclasses import replace
from itertools import count
from typing import Dict, Iterator, List, Optional
import logging

from vestcalc.models.grant import Grant

logger = logging.getLogger(__name__)


class GrantStore:
    """
    Ordered collection of grants keyed by id.

    Ids come from a monotonic counter so two grants added in the same
    instant still get distinct ids. Insertion order is the display order
    and edits keep an entry where it is.
    """

    def __init__(self):
        self._grants: Dict[int, Grant] = {}
        self._ids = count(1)

    def __len__(self) -> int:
        return len(self._grants)

    def __iter__(self) -> Iterator[Grant]:
        return iter(list(self._grants.values()))

    def __contains__(self, grant_id) -> bool:
        return grant_id in self._grants

    def all(self) -> List[Grant]:
        return list(self._grants.values())

    def get(self, grant_id: int) -> Optional[Grant]:
        return self._grants.get(grant_id)

    def add(self, fields: dict) -> Grant:
        """Create a grant from ``fields`` with a fresh id and append it."""
        fields = {k: v for k, v in fields.items() if k != 'id'}
        grant = Grant(id=next(self._ids), **fields)
        grant.validate()
        self._grants[grant.id] = grant
        logger.debug(f"Added grant {grant!r}")
        return grant

    def edit(self, grant_id: int, fields: dict) -> Optional[Grant]:
        """
        Replace the grant with ``grant_id`` by a copy carrying ``fields``.

        Fields not given keep their current value. Returns the new grant,
        or None when no grant has that id.
        """
        existing = self._grants.get(grant_id)
        if existing is None:
            logger.debug(f"Edit ignored, no grant with id {grant_id}")
            return None

        fields = {k: v for k, v in fields.items() if k != 'id'}
        updated = replace(existing, **fields)
        updated.validate()
        # Assigning to an existing key keeps its position in the dict
        self._grants[grant_id] = updated
        logger.debug(f"Edited grant {updated!r}")
        return updated

    def remove(self, grant_id: int):
        """Drop the grant with ``grant_id``; unknown ids are ignored."""
        if self._grants.pop(grant_id, None) is not None:
            logger.debug(f"Removed grant {grant_id}")

    def clear(self):
        self._grants.clear()
