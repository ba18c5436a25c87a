"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from payslip_service.database import init_db
from payslip_service.services import PayslipReader, PayslipStore


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, factory = init_db()
    async with factory() as session:
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_payslip_store(db: DbSession) -> PayslipStore:
    return PayslipStore(db)


def get_payslip_reader(db: DbSession) -> PayslipReader:
    return PayslipReader(db)


# Type aliases for cleaner dependency injection
Store = Annotated[PayslipStore, Depends(get_payslip_store)]
Reader = Annotated[PayslipReader, Depends(get_payslip_reader)]
