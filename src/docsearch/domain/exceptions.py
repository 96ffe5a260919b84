"""Domain exceptions."""


class DocSearchError(Exception):
    """Base exception for docsearch."""

    pass


class ValidationError(DocSearchError):
    """Validation failed for client input."""

    pass


class NotFound(DocSearchError):
    """Requested resource was not found."""

    pass


class DependencyError(DocSearchError):
    """An external collaborator (chunker, embedder, vector store) failed."""

    pass


class EmbeddingCountMismatch(DependencyError):
    """Embedder returned a different number of vectors than texts sent."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} embeddings, got {actual}")
        self.expected = expected
        self.actual = actual
