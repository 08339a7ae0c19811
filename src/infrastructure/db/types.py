from __future__ import annotations

import json
from enum import Enum as PyEnum

from sqlalchemy import Enum, String, Text, TypeDecorator
from sqlalchemy.dialects.postgresql import ARRAY


class StringList(TypeDecorator):
    """Stores a list of strings as ARRAY in PostgreSQL, JSON in SQLite."""

    impl = Text
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(ARRAY(String))
        else:
            return dialect.type_descriptor(Text)

    def process_bind_param(self, value, dialect):
        if value is None:
            value = []
        if dialect.name == "postgresql":
            return value
        else:
            return json.dumps(value)

    def process_result_value(self, value, dialect):
        if dialect.name == "postgresql":
            return value if value is not None else []
        else:
            if value is None:
                return []
            return json.loads(value) if value else []


def value_enum(enum_cls: type[PyEnum], length: int = 32) -> Enum:
    """Non-native enum column persisting member values instead of names."""
    return Enum(
        enum_cls,
        native_enum=False,
        length=length,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )
