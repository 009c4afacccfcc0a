"""Pure name transformation logic, free of filesystem access."""

from sprm.modules.logic.name_transform_logic import NameTransformLogic, transform

__all__ = [
    "NameTransformLogic",
    "transform",
]
