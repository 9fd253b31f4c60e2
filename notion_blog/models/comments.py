from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class CommentEmbedProps:
    """Per-page inputs for the comment section."""
    dark_mode: bool
    repo: str  # "owner/name"
    repo_id: str
    category: str
    category_id: str


@dataclass(frozen=True)
class GiscusWidgetProps:
    """
    Property set understood by the giscus widget.

    Field names follow the widget's own contract so ``to_dict()`` can be
    handed over as-is.
    """
    id: str
    repo: str
    repoId: str
    category: str
    categoryId: str
    mapping: str
    strict: str
    reactionsEnabled: str
    emitMetadata: str
    inputPosition: str
    theme: str
    lang: str
    loading: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
