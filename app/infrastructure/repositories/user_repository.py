"""Persistence layer for DevVault members."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Role, User
from app.infrastructure.models import UserModel


class UserRepository:
    """Look up members by id or email and register new ones."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        """Return the member registered with ``email``, ignoring case."""

        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            role_id=user.role.id,
            name=user.name,
            email=user.email,
            password=user.password,
            is_active=user.is_active,
        )
        if user.created_at is not None:
            model.created_at = user.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        role = model.role
        if role is None:
            raise ValueError(f"User {model.id} has no role")
        return User(
            id=model.id,
            role=Role(id=role.id, name=role.name, alias=role.alias),
            name=model.name,
            email=model.email,
            password=model.password,
            is_active=model.is_active,
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]
