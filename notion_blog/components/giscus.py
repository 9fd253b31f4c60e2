"""
giscus comment section.

Maps per-page CommentEmbedProps onto the giscus widget contract and renders
the ``<giscus-widget>`` custom element inside the styled comments container.
The widget itself loads lazily in the browser; nothing here does I/O.
"""

from html import escape

from ..models import CommentEmbedProps, GiscusWidgetProps

CONTAINER_CLASS = "giscusComments"
WIDGET_TAG = "giscus-widget"
WIDGET_MODULE_URL = "https://esm.sh/giscus"

# Fixed widget options, identical on every page.
WIDGET_ID = "comments"
MAPPING = "pathname"
STRICT = "0"
REACTIONS_ENABLED = "1"
EMIT_METADATA = "0"
INPUT_POSITION = "top"
LANG = "zh-TW"
LOADING = "lazy"


def theme_for(dark_mode: bool) -> str:
    return "dark" if dark_mode else "light"


def giscus_props(props: CommentEmbedProps) -> GiscusWidgetProps:
    """Translate page properties into the giscus widget property set."""
    return GiscusWidgetProps(
        id=WIDGET_ID,
        repo=props.repo,
        repoId=props.repo_id,
        category=props.category,
        categoryId=props.category_id,
        mapping=MAPPING,
        strict=STRICT,
        reactionsEnabled=REACTIONS_ENABLED,
        emitMetadata=EMIT_METADATA,
        inputPosition=INPUT_POSITION,
        theme=theme_for(props.dark_mode),
        lang=LANG,
        loading=LOADING,
    )


def render_giscus_comments(props: CommentEmbedProps) -> str:
    """Render the comments container wrapping a single giscus widget."""
    widget_props = giscus_props(props)
    # custom element attributes are lowercase in HTML
    attributes = " ".join(
        f'{name.lower()}="{escape(value, quote=True)}"'
        for name, value in widget_props.to_dict().items()
    )
    return (
        f'<div class="{CONTAINER_CLASS}">'
        f"<{WIDGET_TAG} {attributes}></{WIDGET_TAG}>"
        f"</div>"
    )


def giscus_loader_script() -> str:
    """Module script defining the giscus-widget element; include once per page."""
    return f'<script type="module" src="{WIDGET_MODULE_URL}"></script>'
