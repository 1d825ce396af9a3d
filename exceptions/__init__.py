"""
Exceptions module exports
"""

from .recipe_exceptions import (
    RecipePipelineError,
    InvalidInputError,
    GenerationFailedError,
    LabelDetectionError,
    MalformedDraftRecipeError
)

__all__ = [
    'RecipePipelineError',
    'InvalidInputError',
    'GenerationFailedError',
    'LabelDetectionError',
    'MalformedDraftRecipeError'
]
