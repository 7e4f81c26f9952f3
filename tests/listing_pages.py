"""
HTML builders for watched-listing test pages.
"""

from __future__ import annotations


def entry(record_id: str, name: str, *, css: str = "item") -> str:
    return (
        f'<div class="{css}">'
        '<div class="poster"><img src="/images/sm_film.jpg"></div>'
        '<div class="info">'
        f'<div class="nameRus"><a href="/film/{record_id}/">{name}</a></div>'
        '<div class="nameEng">-</div>'
        "</div>"
        "</div>"
    )


def listing_page(*entries: str, marker: str | None = None) -> str:
    marker_html = f'<div class="pagesFromTo">{marker}</div>' if marker is not None else ""
    body = "\n".join(entries)
    return (
        "<html><body>"
        '<div class="navigator">'
        f"{marker_html}"
        "</div>"
        '<div class="profileFilmsList">\n'
        f"{body}\n"
        "</div>"
        "</body></html>"
    )
