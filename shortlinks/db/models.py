"""
Database Models for Short Links Service

This module defines the SQLModel database schema for:
- Link: Stores the mapping between a short name and its destination URL

Design Decisions:
- UUID primary key generated by the application at creation time
- Unique index on name: uniqueness is enforced by the database, never by a
  pre-check, so concurrent creates cannot both succeed
- url stored as Text, exactly as submitted
"""

import uuid

from sqlalchemy import String, Text
from sqlmodel import Column, Field, SQLModel

from shortlinks.core.validators import MAX_NAME_LENGTH


class Link(SQLModel, table=True):
    """
    Main table storing short name to URL mappings.

    Fields:
    - id: UUID primary key, immutable after creation
    - name: Unique short name used as the redirect lookup key
    - url: Destination URL for the redirect

    Indexes:
    - name: Unique index for fast lookups (most critical path)
    """
    __tablename__ = "links"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(
        sa_column=Column(String(MAX_NAME_LENGTH), nullable=False, unique=True, index=True),
        max_length=MAX_NAME_LENGTH
    )
    url: str = Field(sa_column=Column(Text, nullable=False))
