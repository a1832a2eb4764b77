"""
content-engine - typed content blocks, validation and HTML rendering for a
page builder.
"""

from content_engine.domain.entities import (
    BlockKind,
    ContentBlock,
    ContentEngineError,
    ContentPage,
    ContentTemplate,
    UnknownBlockKindError,
)

__version__ = "0.1.0"

__all__ = [
    "BlockKind",
    "ContentBlock",
    "ContentEngineError",
    "ContentPage",
    "ContentTemplate",
    "UnknownBlockKindError",
    "__version__",
]
