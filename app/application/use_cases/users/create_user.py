"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import ADMIN_ROLE_ALIAS, MEMBER_ROLE_ALIAS, User
from app.infrastructure.repositories import RoleRepository, UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import now_for_storage

_ROLE_NAMES = {
    ADMIN_ROLE_ALIAS: "Administrator",
    MEMBER_ROLE_ALIAS: "Member",
}


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str = MEMBER_ROLE_ALIAS,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValueError("Email is already registered")

    alias = role_alias.lower()
    if alias not in _ROLE_NAMES:
        raise ValueError(f"Unknown role '{role_alias}'")
    role = RoleRepository(session).get_or_create(alias=alias, name=_ROLE_NAMES[alias])

    user = User(
        id=None,
        role=role,
        name=name,
        email=email,
        password=get_password_hash(password),
        is_active=True,
        created_at=now_for_storage(),
    )
    return repository.create(user)
