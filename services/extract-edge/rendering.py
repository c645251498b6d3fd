"""HTML for the page image viewer."""

import html

PNG_DATA_URI = "data:image/png;base64,{payload}"


def page_image_uri(payload: str) -> str:
    return PNG_DATA_URI.format(payload=payload)


def page_image_html(payload: str, page_index: int, zoom: float) -> str:
    """Render one page image at the given zoom; page_index is 0-based."""
    src = html.escape(page_image_uri(payload), quote=True)
    return (
        f'<img src="{src}" alt="Page {page_index + 1}" '
        f'style="transform: scale({zoom}); transform-origin: top center;" />'
    )
