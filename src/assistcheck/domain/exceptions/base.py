"""Base exceptions for assistcheck domain."""


class AssistCheckError(Exception):
    """Root exception for all assistcheck errors.

    All domain exceptions inherit from this.
    Allows catching all assistcheck-specific errors.

    Declaration problems found while validating candidates are NOT
    exceptions: they are ValidationFailure values reported to a sink.
    """
