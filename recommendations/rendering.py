"""
HTML rendering of recommendation lists.

Both layouts are plain functions of the filtered list, so the Streamlit page only
has to pass the result to st.markdown(..., unsafe_allow_html=True).

- Grid: one card per recommendation (image, title, category badge, two-line
  description, address, website link).
- Table: one row per recommendation with fixed column proportions.

All user-provided text and URLs are escaped, and line breaks become <br/> so
the markup stays a single raw HTML block. Only http(s) URLs are written into
href / src. Website links open in a new tab with rel="noopener noreferrer" so
the opened page gets no handle on this one.
The CSS classes used here are defined in streamlit_app/ui/styles.py.
"""

from html import escape
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urlsplit

from recommendations.models import Recommendation

WEBSITE_LINK_LABEL = "Visit Website →"

# Only these URL schemes are ever written into href / src attributes
LINKABLE_SCHEMES = ("http", "https")

# (header, width) - widths always add up to 100%
TABLE_COLUMNS: List[Tuple[str, str]] = [
    ("Title", "40%"),
    ("Category", "15%"),
    ("Address", "30%"),
    ("Actions", "15%"),
]


def text_html(value: str) -> str:
    """
    Escape user text for element content.

    Line breaks become <br/> so the output never contains a newline: a blank
    line would end the raw HTML block when the result goes through st.markdown.
    """
    return "<br/>".join(escape(line) for line in value.splitlines())


def attribute_text(value: str) -> str:
    """Escape user text for an attribute value, whitespace runs collapsed."""
    return escape(" ".join(value.split()), quote=True)


def linkable_url(url: Optional[str]) -> Optional[str]:
    """
    Return url if it may be used as a link or image source, else None.

    Submitted URLs only have to be absolute; javascript:, data: and other
    schemes are dropped here.
    """
    if not url:
        return None
    url = url.strip()
    if any(ch.isspace() for ch in url):
        return None
    if urlsplit(url).scheme.lower() not in LINKABLE_SCHEMES:
        return None
    return url


def website_link_html(url: Optional[str]) -> str:
    """
    Anchor opening url in a new browsing context without an opener reference.

    Returns an empty string when url is missing or not an http(s) URL.
    """
    url = linkable_url(url)
    if url is None:
        return ""
    return (
        f'<a class="rec-link" href="{escape(url, quote=True)}" '
        f'target="_blank" rel="noopener noreferrer">{escape(WEBSITE_LINK_LABEL)}</a>'
    )


def category_badge_html(name: str) -> str:
    return f'<span class="rec-badge">{text_html(name)}</span>'


def render_card_html(recommendation: Recommendation) -> str:
    """
    Render a single grid card.

    Args:
        recommendation: Item to render

    Returns:
        HTML string for one <div class="rec-card">
    """
    parts = ['<div class="rec-card">']

    image_url = linkable_url(recommendation.image_url)
    if image_url:
        parts.append(
            '<div class="rec-card-image">'
            f'<img src="{escape(image_url, quote=True)}" '
            f'alt="{attribute_text(recommendation.title)}" loading="lazy"/>'
            "</div>"
        )

    parts.append('<div class="rec-card-body">')
    parts.append(
        '<div class="rec-card-header">'
        f'<h3 class="rec-title">{text_html(recommendation.title)}</h3>'
        f"{category_badge_html(recommendation.category.name)}"
        "</div>"
    )
    parts.append(f'<p class="rec-description rec-clamp-2">{text_html(recommendation.description)}</p>')
    parts.append(f'<p class="rec-address">{text_html(recommendation.address)}</p>')
    parts.append(website_link_html(recommendation.website))
    parts.append("</div>")

    parts.append("</div>")
    return "".join(parts)


def render_grid_html(recommendations: Sequence[Recommendation]) -> str:
    """
    Render the card grid, one card per item in the given order.

    Returns:
        HTML string wrapped in <div class="rec-grid">
    """
    cards = "".join(render_card_html(rec) for rec in recommendations)
    return f'<div class="rec-grid">{cards}</div>'


def render_table_row_html(recommendation: Recommendation) -> str:
    actions = website_link_html(recommendation.website)
    return (
        "<tr>"
        "<td>"
        f'<div class="rec-title">{text_html(recommendation.title)}</div>'
        f'<div class="rec-description rec-clamp-2">{text_html(recommendation.description)}</div>'
        "</td>"
        f"<td>{category_badge_html(recommendation.category.name)}</td>"
        f'<td class="rec-address">{text_html(recommendation.address)}</td>'
        f"<td>{actions}</td>"
        "</tr>"
    )


def render_table_html(recommendations: Sequence[Recommendation]) -> str:
    """
    Render the table layout, one row per item in the given order.

    Column proportions come from TABLE_COLUMNS and the table uses a fixed layout,
    so long titles or addresses wrap instead of resizing columns.

    Returns:
        HTML string for <table class="rec-table">
    """
    colgroup = "".join(f'<col style="width: {width}"/>' for _, width in TABLE_COLUMNS)
    header = "".join(f"<th>{escape(title)}</th>" for title, _ in TABLE_COLUMNS)
    rows = "".join(render_table_row_html(rec) for rec in recommendations)
    return (
        '<table class="rec-table">'
        f"<colgroup>{colgroup}</colgroup>"
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{rows}</tbody>"
        "</table>"
    )
