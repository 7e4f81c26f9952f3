"""
GraphQL client for marking a movie as watched.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from watchsync.config.models import MUTATION_URL
from watchsync.logging_utils import log_event
from watchsync.transport import KinopoiskTransport

logger = logging.getLogger(__name__)

MOVIE_SET_WATCHED_OPERATION = "MovieSetWatched"
MOVIE_SET_WATCHED_QUERY = (
    "mutation MovieSetWatched($movieId: Long!) { movie { watched { "
    "set(input: {movieId: $movieId}) { error { message __typename } status __typename } "
    "__typename } __typename } } "
)
SUCCESS_STATUS = "SUCCESS"


def build_set_watched_payload(movie_id: int) -> dict[str, Any]:
    return {
        "operationName": MOVIE_SET_WATCHED_OPERATION,
        "variables": {"movieId": movie_id},
        "query": MOVIE_SET_WATCHED_QUERY,
    }


class MutationClient:
    """
    Issues MovieSetWatched mutations through the shared transport.
    """

    def __init__(self, *, transport: KinopoiskTransport, url: str = MUTATION_URL) -> None:
        self._transport = transport
        self._url = url

    def set_watched(self, movie_id: int) -> bool:
        """
        Return True iff the mutation response reports a SUCCESS status.
        """

        payload = build_set_watched_payload(movie_id)
        try:
            body = self._transport.post_json(self._url, payload)
        except ValueError as exc:
            log_event(
                logger,
                logging.WARNING,
                "mutation_response_invalid",
                movie_id=movie_id,
                error=str(exc),
            )
            return False
        except requests.RequestException as exc:
            log_event(
                logger,
                logging.WARNING,
                "mutation_request_failed",
                movie_id=movie_id,
                error=str(exc),
            )
            return False

        result = _set_result(body)
        status = result.get("status")
        if status != SUCCESS_STATUS:
            log_event(
                logger,
                logging.DEBUG,
                "mutation_rejected",
                movie_id=movie_id,
                status=status,
                error=result.get("error"),
            )
            return False
        return True


def _set_result(body: Any) -> dict[str, Any]:
    node = body
    for key in ("data", "movie", "watched", "set"):
        if not isinstance(node, dict):
            return {}
        node = node.get(key)
    return node if isinstance(node, dict) else {}
