"""Module: owner_search."""

import logging

from petclinic.core.outcomes import ListPage, NotFound, SearchOutcome, SingleMatch
from petclinic.db.models.owner import Owner
from petclinic.repositories.owners import OwnerRepository

logger = logging.getLogger(__name__)


class OwnerSearch:
    """
    Resolve a last-name filter and page number into a search outcome.

    No match gives ``NotFound``, exactly one gives ``SingleMatch`` with the
    owner id, anything more gives ``ListPage``. The decision is made on the
    total match count, so a page past the end of a multi-match search is an
    empty ``ListPage`` rather than ``NotFound``.
    """

    def __init__(
        self,
        owners: OwnerRepository,
        page_size: int = 5,
        trim_whitespace: bool = False,
        case_sensitive: bool = True,
    ):
        self.owners = owners
        self.page_size = page_size
        self.trim_whitespace = trim_whitespace
        self.case_sensitive = case_sensitive

    def resolve(self, last_name: str | None, page: int = 1) -> SearchOutcome[Owner]:
        prefix = last_name or ""
        if self.trim_whitespace:
            prefix = prefix.strip()

        result = self.owners.search_by_last_name(
            prefix,
            page_size=self.page_size,
            page=page,
            case_sensitive=self.case_sensitive,
        )

        if result.total_items == 0:
            logger.debug("Owner search %r: no match", prefix)
            return NotFound("owner", prefix)

        if result.total_items == 1:
            # The single match sits on page 1; fetch it if another page was requested.
            items = result.items or self.owners.search_by_last_name(
                prefix, page_size=self.page_size, page=1, case_sensitive=self.case_sensitive
            ).items
            logger.debug("Owner search %r: single match %s", prefix, items[0].id)
            return SingleMatch(items[0].id)

        logger.debug(
            "Owner search %r: %s matches, page %s of %s",
            prefix,
            result.total_items,
            result.current_page,
            result.total_pages,
        )
        return ListPage(
            items=result.items,
            current_page=result.current_page,
            total_pages=result.total_pages,
            total_items=result.total_items,
        )
