"""共享的 pytest fixtures"""

from typing import List

import pytest
import pytest_asyncio

from BhapTracker.cogs.Bhap.BhapLogic import BhapLogic
from BhapTracker.dto.UserDto import UserDto
from BhapTracker.share.DatabaseHandler import DatabaseHandler
from BhapTracker.share.UnitOfWork import UnitOfWork


@pytest_asyncio.fixture
async def db_handler(tmp_path):
    """在临时目录中创建一个全新的数据库"""
    handler = DatabaseHandler()
    handler.initialize(str(tmp_path / "bhap.db"))
    await handler.init_db()
    yield handler
    await handler.close()


async def create_users(db_handler: DatabaseHandler, count: int) -> List[UserDto]:
    users = []
    async with UnitOfWork(db_handler, write=True) as uow:
        for i in range(count):
            user = await uow.user.create_user(
                email=f"user{i}@example.com", first_name=f"First{i}", last_name=f"Last{i}"
            )
            users.append(UserDto.model_validate(user))
        await uow.commit()
    return users


@pytest_asyncio.fixture
async def users(db_handler) -> List[UserDto]:
    """五个注册用户，第一个作为作者"""
    return await create_users(db_handler, 5)


@pytest.fixture
def logic(db_handler) -> BhapLogic:
    return BhapLogic(db_handler, max_create_attempts=3)
