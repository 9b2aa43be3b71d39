from typing import Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from BhapTracker.models.User import User
from BhapTracker.share.errors import NotFound


class UserService:
    """
    提供处理用户相关数据库操作的服务。
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, email: str, first_name: str, last_name: str) -> User:
        new_user = User(email=email, first_name=first_name, last_name=last_name)
        self.session.add(new_user)
        await self.session.flush()
        await self.session.refresh(new_user)
        return new_user

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        return await self.session.get(User, user_id)

    async def get_user(self, user_id: int) -> User:
        """
        根据ID获取用户，不存在时抛出 NotFound。
        """
        user = await self.get_user_by_id(user_id)
        if user is None:
            raise NotFound(f"没有ID为 {user_id} 的用户。")
        return user

    async def count_users(self) -> int:
        """
        获取注册用户总数
        """
        result = await self.session.exec(select(func.count(User.id)))  # type: ignore
        count = result.one_or_none()
        return count if count is not None else 0
