"""Exceptions raised while generating models."""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class RenderFailure(GeneratorError):
    """A model could not be rendered or formatted."""

    pass


class WriteFailure(GeneratorError):
    """A generated model could not be written to disk."""

    def __init__(self, filename: str, reason: Exception):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not create model file '{filename}': {reason}")
