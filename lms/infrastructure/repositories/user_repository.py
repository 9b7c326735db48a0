"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from lms.domain.entities import ALL_CAMPUSES, Role, User
from lms.infrastructure.models import RoleModel, UserModel


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self._get_model(email=email.strip().lower())
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            role_id=user.role.id,
            name=user.name,
            email=user.email.strip().lower(),
            password=user.password,
            campus=user.campus,
            is_active=user.is_active,
        )
        if user.created_at is not None:
            model.created_at = user.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def record_login(self, user_id: int, when: datetime) -> None:
        self.session.query(UserModel).filter(UserModel.id == user_id).update(
            {UserModel.last_login: when}, synchronize_session=False
        )
        self.session.commit()

    def list_ids(
        self,
        *,
        role_alias: str | None = None,
        campus: str | None = None,
        exclude_ids: Iterable[int] = (),
        active_only: bool = True,
    ) -> list[int]:
        """Return user ids matching the role and campus filters, oldest first.

        Users attached to ``ALL_CAMPUSES`` match every ``campus`` filter.
        """

        query = self.session.query(UserModel.id)
        if role_alias is not None:
            query = query.join(RoleModel, UserModel.role_id == RoleModel.id).filter(
                RoleModel.alias == role_alias
            )
        if campus is not None:
            query = query.filter(UserModel.campus.in_((campus, ALL_CAMPUSES)))
        excluded = [user_id for user_id in exclude_ids if user_id is not None]
        if excluded:
            query = query.filter(UserModel.id.notin_(excluded))
        if active_only:
            query = query.filter(UserModel.is_active.is_(True))
        return [user_id for (user_id,) in query.order_by(UserModel.id).all()]

    def get_map_by_ids(self, user_ids: Sequence[int]) -> dict[int, User]:
        if not user_ids:
            return {}

        unique_ids = {int(user_id) for user_id in user_ids}
        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.id.in_(unique_ids))
        )
        return {model.id: self._to_entity(model) for model in query.all()}

    def _get_model(self, **filters) -> UserModel | None:
        return (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter_by(**filters)
            .first()
        )

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        if model.role is None:
            msg = "User role is not set"
            raise ValueError(msg)
        return User(
            id=model.id,
            role=Role(id=model.role.id, name=model.role.name, alias=model.role.alias),
            name=model.name,
            email=model.email,
            password=model.password,
            campus=model.campus,
            is_active=model.is_active,
            created_at=model.created_at,
            last_login=model.last_login,
        )


__all__ = ["UserRepository"]
