"""Data classes for the rename and copy workflow."""

from sprm.core.rename.data_classes import (
    FileAction,
    OperationOutcome,
    RunConfig,
    TransformRequest,
    TransformResult,
)

__all__ = [
    "FileAction",
    "OperationOutcome",
    "RunConfig",
    "TransformRequest",
    "TransformResult",
]
