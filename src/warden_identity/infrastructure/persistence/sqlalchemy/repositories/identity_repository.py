"""SQLAlchemy implementation of IdentityRepository."""

import logging
from typing import Optional, Union
from uuid import UUID, uuid4

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from warden_auth.time import ensure_tz_aware, utc_now
from warden_identity.domain.identity import (
    Email,
    EmailAlreadyExistsError,
    Identity,
    IdentityRepository,
    NewIdentity,
)
from warden_identity.infrastructure.persistence.sqlalchemy.models import IdentityModel

logger = logging.getLogger(__name__)


class IdentityRepositorySQLAlchemy(IdentityRepository):
    """SQLAlchemy implementation of the IdentityRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: Union[str, Email]) -> Optional[Identity]:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(IdentityModel).where(IdentityModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_id(self, identity_id: UUID) -> Optional[Identity]:
        stmt = select(IdentityModel).where(IdentityModel.id == identity_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, candidate: NewIdentity) -> Identity:
        identity = Identity(
            id=uuid4(),
            email=candidate.email.value,
            password_hash=candidate.password_hash,
            created_at=utc_now(),
        )
        stmt = insert(IdentityModel).values(
            id=identity.id,
            email=identity.email,
            password_hash=identity.password_hash,
            created_at=identity.created_at,
        )
        try:
            await self._session.execute(stmt)
        except IntegrityError as e:
            raise EmailAlreadyExistsError(identity.email) from e

        logger.info("Created identity: %s (email: %s)", identity.id, identity.email)
        return identity

    async def update(self, identity: Identity) -> Optional[Identity]:
        email_value = Email(identity.email).value
        stmt = (
            update(IdentityModel)
            .where(IdentityModel.id == identity.id)
            .values(email=email_value, password_hash=identity.password_hash)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as e:
            raise EmailAlreadyExistsError(email_value) from e

        if result.rowcount == 0:
            return None

        logger.debug("Updated identity: %s", identity.id)
        return await self._refresh(identity.id)

    async def delete(self, identity_id: UUID) -> bool:
        stmt = (
            delete(IdentityModel)
            .where(IdentityModel.id == identity_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Deleted identity: %s", identity_id)
        return deleted

    async def _refresh(self, identity_id: UUID) -> Optional[Identity]:
        stmt = (
            select(IdentityModel)
            .where(IdentityModel.id == identity_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    def _map_to_domain(self, model: IdentityModel) -> Identity:
        return Identity.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
        )
