"""
Configuration models for harvest and replay.
"""

from __future__ import annotations

from dataclasses import dataclass, field

CLASS_MATCH_MODES = ("token", "substring")

KINOPOISK_ORIGIN = "https://www.kinopoisk.ru"
FIRST_PAGE_URL_TPL = f"{KINOPOISK_ORIGIN}/user/{{user_id}}/votes/list/vs/novote/perpage/200/"
PAGE_URL_TPL = f"{KINOPOISK_ORIGIN}/user/{{user_id}}/votes/list/vs/novote/page/{{page}}/"
MUTATION_URL = "https://graphql.kinopoisk.ru/graphql/?operationName=MovieSetWatched"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class ListingMarkup:
    """
    Class names that identify the pieces of a watched-listing page.
    """

    paging_marker_class: str = "pagesFromTo"
    container_class: str = "profileFilmsList"
    entry_classes: tuple[str, ...] = ("item", "item even")
    info_class: str = "info"
    name_class: str = "nameRus"
    class_match: str = "token"


@dataclass(frozen=True)
class WatchSyncSettings:
    """
    Runtime settings for harvest and replay.
    """

    user_agent: str = DEFAULT_USER_AGENT
    cookie: str = ""
    timeout_seconds: float = 30.0
    page_delay_seconds: float = 5.0
    replay_delay_seconds: float = 1.0
    max_fetch_attempts: int | None = None
    first_page_url_tpl: str = FIRST_PAGE_URL_TPL
    page_url_tpl: str = PAGE_URL_TPL
    mutation_url: str = MUTATION_URL
    origin: str = KINOPOISK_ORIGIN
    markup: ListingMarkup = field(default_factory=ListingMarkup)

    def page_url(self, *, user_id: str, page: int) -> str:
        """
        URL of one listing page; the first page also fixes the page size.
        """

        if page <= 1:
            return self.first_page_url_tpl.format(user_id=user_id)
        return self.page_url_tpl.format(user_id=user_id, page=page)
