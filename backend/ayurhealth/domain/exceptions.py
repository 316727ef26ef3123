"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, field: str = "id"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type} with {field} '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class BlogStoreError(Exception):
    """Raised when the backing blog store fails or cannot be reached.

    Store-agnostic — covers Supabase HTTP errors and transport failures alike.
    A ``status_code`` of ``None`` means the request never got a response.
    """

    def __init__(self, store: str, status_code: int | None, message: str):
        self.store = store
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{store}] {status_code}: {message}")
