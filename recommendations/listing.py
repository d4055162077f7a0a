"""
Listing state, search filtering and load lifecycle for the recommendations view.

This module holds the non-visual logic of the listing page so it can be exercised
without a browser:

- filter_recommendations(): case-insensitive substring search over title,
  description, address and category name. A blank query returns the input
  sequence itself.
- ListingState: page-local state (items, load phase, query, view mode). The
  filtered view is derived on every read and never stored.
- ListingLoader: single-shot loader driving ListingState through
  idle -> loading -> ready | error.
- resolve_display_state(): which of loading / error / empty / no-matches / list
  the page should show.

# NOTE: A ListingState belongs to one activation of the listing page. When the
    page is left, the state is disposed; a response that arrives afterwards is
    dropped instead of being applied.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from recommendations.models import Recommendation

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading recommendations..."
LOAD_ERROR_MESSAGE = "Failed to load recommendations"
EMPTY_MESSAGE = "No recommendations yet."

_RECOMMENDATION_LIST = TypeAdapter(List[Recommendation])


class LoadPhase(str, Enum):
    """Lifecycle of the one-time listing load."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ViewMode(str, Enum):
    """Presentation layouts for the filtered list."""
    GRID = "grid"
    TABLE = "table"


class DisplayState(str, Enum):
    """What the listing page renders, in precedence order."""
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    NO_MATCHES = "no_matches"
    LIST = "list"


def no_matches_message(query: str) -> str:
    """Message shown when a non-empty list has no match for query."""
    return f'No recommendations match "{query}".'


def searchable_fields(recommendation: Recommendation) -> List[str]:
    """Text fields a search query is matched against."""
    return [
        recommendation.title,
        recommendation.description,
        recommendation.address,
        recommendation.category.name,
    ]


def matches_query(recommendation: Recommendation, folded_query: str) -> bool:
    """
    Check whether a recommendation matches an already case-folded query.

    Args:
        recommendation: Item to test
        folded_query: Query passed through str.casefold()

    Returns:
        True if folded_query is a substring of at least one searchable field
    """
    return any(folded_query in text.casefold() for text in searchable_fields(recommendation))


def filter_recommendations(items: Sequence[Recommendation], query: str) -> Sequence[Recommendation]:
    """
    Derive the filtered view of items for a search query.

    A blank (empty or whitespace-only) query returns items unchanged - the very
    same sequence object. Otherwise the result holds the matching items in their
    original relative order.

    Args:
        items: Loaded recommendations, newest first
        query: Free text typed by the user

    Returns:
        Sequence of matching recommendations
    """
    if not query or not query.strip():
        return items

    folded = query.casefold()
    return [item for item in items if matches_query(item, folded)]


@dataclass
class ListingState:
    """
    State container for one activation of the listing page.

    Attributes:
        items: Recommendations in store order (newest first); empty until loaded
        load_phase: Current LoadPhase
        query: Search text, default empty
        mode: ViewMode, default grid
        alive: False once the owning page has been torn down
        load_requests: Number of load requests issued (0 or 1)
    """
    items: List[Recommendation] = field(default_factory=list)
    load_phase: LoadPhase = LoadPhase.IDLE
    query: str = ""
    mode: ViewMode = ViewMode.GRID
    error_message: Optional[str] = None
    alive: bool = True
    load_requests: int = 0

    @property
    def filtered(self) -> Sequence[Recommendation]:
        """Items matching the current query (recomputed on every access)."""
        return filter_recommendations(self.items, self.query)

    def begin_load(self) -> bool:
        """
        Enter the loading phase.

        Returns:
            True if the caller should issue the request; False when a load has
            already started, finished, or the state has been disposed.
        """
        if not self.alive or self.load_phase is not LoadPhase.IDLE:
            return False
        self.load_phase = LoadPhase.LOADING
        self.load_requests += 1
        return True

    def resolve_load(self, items: Sequence[Recommendation]) -> bool:
        """
        Apply a successful load result.

        Returns:
            True if applied, False if the response was discarded
        """
        if not self._accepts_response():
            return False
        self.items = list(items)
        self.load_phase = LoadPhase.READY
        self.error_message = None
        return True

    def fail_load(self, message: str = LOAD_ERROR_MESSAGE) -> bool:
        """
        Mark the load as failed. The failure is terminal for this activation.

        Returns:
            True if applied, False if the response was discarded
        """
        if not self._accepts_response():
            return False
        self.load_phase = LoadPhase.ERROR
        self.error_message = message
        return True

    def set_query(self, query: Optional[str]) -> None:
        self.query = query or ""

    def set_mode(self, mode: Any) -> None:
        self.mode = ViewMode(mode)

    def dispose(self) -> None:
        """Tear the state down; later load responses are ignored."""
        self.alive = False

    def display_state(self) -> DisplayState:
        return resolve_display_state(self.load_phase, self.items, self.filtered, self.query)

    def _accepts_response(self) -> bool:
        if not self.alive:
            logger.debug("Discarding listing response for a disposed state")
            return False
        if self.load_phase is not LoadPhase.LOADING:
            logger.debug("Discarding listing response in phase %s", self.load_phase.value)
            return False
        return True


def resolve_display_state(
    load_phase: LoadPhase,
    items: Sequence[Recommendation],
    filtered: Sequence[Recommendation],
    query: str,
) -> DisplayState:
    """
    Decide what the listing page shows.

    Precedence: loading, error, empty store, no matches for a non-blank query,
    then the list itself. An idle state (load not yet started) renders as loading.
    """
    if load_phase in (LoadPhase.IDLE, LoadPhase.LOADING):
        return DisplayState.LOADING
    if load_phase is LoadPhase.ERROR:
        return DisplayState.ERROR
    if not items:
        return DisplayState.EMPTY
    if not filtered and query and query.strip():
        return DisplayState.NO_MATCHES
    return DisplayState.LIST


class ListingLoader:
    """
    Single-shot loader for the listing page.

    The fetch callable performs the HTTP request and returns the decoded JSON
    list, or None on any transport / status failure (see
    streamlit_app.utils.api_client.fetch_recommendations).
    """

    def __init__(self, state: ListingState, fetch: Callable[[], Optional[Any]]):
        self.state = state
        self._fetch = fetch

    def activate(self) -> bool:
        """
        Issue the load request if it has not been issued yet.

        Returns:
            True if a request was made during this call
        """
        if not self.state.begin_load():
            return False

        raw = self._fetch()
        if raw is None:
            self.state.fail_load()
            return True

        try:
            items = _RECOMMENDATION_LIST.validate_python(raw)
        except ValidationError as e:
            logger.error("Recommendations payload did not parse: %s", e)
            self.state.fail_load()
            return True

        self.state.resolve_load(items)
        return True
