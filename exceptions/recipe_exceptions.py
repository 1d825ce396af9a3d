"""
Custom exception classes for the fridge recipe pipeline
"""


class RecipePipelineError(Exception):
    """Base exception for the fridge recipe pipeline"""
    pass


class InvalidInputError(RecipePipelineError):
    """Raised when no usable ingredients remain after merging and cleaning"""
    def __init__(self, message: str = "No valid ingredients detected"):
        self.message = message
        super().__init__(message)


class GenerationFailedError(RecipePipelineError):
    """Raised when the recipe generation service fails or times out"""
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Recipe generation failed: {detail}")


class LabelDetectionError(RecipePipelineError):
    """Raised when the image label detector cannot produce labels"""
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Ingredient detection failed: {detail}")


class MalformedDraftRecipeError(RecipePipelineError):
    """Raised when a draft recipe's ingredient data cannot be flattened"""
    def __init__(self, title: str, reason: str):
        self.title = title
        self.reason = reason
        super().__init__(f"Draft recipe '{title}' is malformed: {reason}")
