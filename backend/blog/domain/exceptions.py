"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(Exception):
    """Raised when input is missing a required field or is malformed."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class NoOpError(Exception):
    """Raised when an update carries no field to change."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"No fields to update for {entity_type} '{entity_id}'")


class ConflictError(Exception):
    """A rename target already existed and was replaced.

    Never raised past the filesystem adapter; it is built so the
    replacement can be logged with a uniform message.
    """

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Rename target '{target}' already existed and was replaced")


class IOFailure(Exception):
    """Raised when a filesystem stat/read/write/rename/remove fails."""

    def __init__(self, operation: str, path: str, cause: OSError):
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(f"{operation} failed for '{path}': {cause.strerror or cause}")


class ParseFailure(Exception):
    """Raised when serialized tags or front matter cannot be decoded.

    Callers always catch it and fall back to an empty/default value.
    """

    def __init__(self, what: str, source: str, detail: str):
        self.what = what
        self.source = source
        super().__init__(f"Could not parse {what} of '{source}': {detail}")
