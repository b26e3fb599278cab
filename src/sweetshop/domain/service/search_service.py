"""Domain service: multi-criteria sweet search."""

from __future__ import annotations

import logging

from sweetshop.domain.exceptions import InvalidArgumentError, ValidationError
from sweetshop.domain.model.search_criteria import SearchCriteria
from sweetshop.domain.model.sweet import Sweet
from sweetshop.domain.repository.sweet_repository import SweetRepository

logger = logging.getLogger(__name__)


class SweetSearchService:

    def __init__(self, sweet_repo: SweetRepository) -> None:
        self._sweet_repo = sweet_repo

    def search(self, criteria: SearchCriteria) -> list[Sweet]:
        """Return every sweet matching all specified criteria.

        Criteria are validated before the store is read, so a malformed
        query never touches it.  Results keep the store's order; no
        match yields an empty list.
        """
        if not isinstance(criteria, SearchCriteria):
            raise InvalidArgumentError(
                f"Search criteria must be a SearchCriteria, got {type(criteria).__name__}"
            )
        try:
            criteria.validate()
        except ValidationError as exc:
            logger.warning("Rejected search %r: %s", criteria, exc)
            raise

        results = [s for s in self._sweet_repo.get_all() if criteria.matches(s)]
        logger.debug("Search %r matched %d sweet(s)", criteria, len(results))
        return results
