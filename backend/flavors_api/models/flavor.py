"""
Acme Flavors Backend: Flavor SQLAlchemy Model
=============================================

What:  ORM model representing the `flavors` table.
Why:   Maps Python objects to database rows for type-safe queries.
How:   Inherits from the shared DeclarativeBase; the schema initializer
       creates the table from this metadata on every startup.

Table Design:
    - id: SERIAL primary key, assigned by the store
    - name: VARCHAR(255) NOT NULL, no default
    - is_favorite: defaults to false when the insert omits it
    - created_at / updated_at: timestamptz, CURRENT_TIMESTAMP at insertion
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, false, text
from sqlalchemy.orm import Mapped, mapped_column

from flavors_api.database import Base


class Flavor(Base):
    """
    A single ice-cream flavor.

    Lifecycle:
        1. Inserted by the seed step or POST /api/flavors
        2. name / is_favorite overwritten by PUT /api/flavors/{id}
        3. Removed by DELETE /api/flavors/{id} (no soft delete)
    """

    __tablename__ = "flavors"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    is_favorite: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
    )

    # Timestamps come from the store clock so seed rows and API rows agree
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return (
            f"<Flavor(id={self.id}, name='{self.name}', "
            f"is_favorite={self.is_favorite})>"
        )
