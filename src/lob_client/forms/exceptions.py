"""Errors raised while encoding request records."""


class UnsupportedFieldTypeError(TypeError):
    """Raised when a record field has a type the form encoder does not know.

    This means the record definitions and the encoder are out of sync. It is a
    programming error, so it deliberately does not derive from LobError.
    """

    def __init__(self, record_type: type, field_name: str, annotation):
        self.record_type = record_type
        self.field_name = field_name
        self.annotation = annotation
        super().__init__(
            f"Unknown field type: {annotation!r} "
            f"(field '{field_name}' of {record_type.__name__})"
        )
