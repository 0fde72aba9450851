from __future__ import annotations

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class UserRecord(SQLModel, table=True):
    __tablename__ = "user"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    email: str = Field(index=True)


class AccountRecord(SQLModel, table=True):
    """Amounts are stored as integer minor units (pence)."""

    __tablename__ = "account"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    balance_minor: int = Field(default=0, ge=0)
    withdrawn_minor: int = Field(default=0, le=0)
    paid_in_minor: int = Field(default=0, ge=0)
