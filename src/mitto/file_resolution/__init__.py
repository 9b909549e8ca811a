"""File resolution exports."""

from .document_loading import load_document, load_file, resolve_file
from .resolution_outcomes import ResolutionStatus, ResolvedFile
from .upward_search import find_upward

__all__ = [
    "ResolutionStatus",
    "ResolvedFile",
    "find_upward",
    "load_document",
    "load_file",
    "resolve_file",
]
