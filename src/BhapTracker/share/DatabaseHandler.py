import logging
import os
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

load_dotenv()
logger = logging.getLogger("bhap_tracker.database")

# 连接上带有该执行选项时，事务以 BEGIN IMMEDIATE 开始
IMMEDIATE_OPTION = "bhap_begin_immediate"


class DatabaseHandler:
    """
    负责数据库引擎的创建、会话管理和建表。
    通过 initialize_db_handler 和 get_db_handler 获取共享的实例。

    读事务以普通的 BEGIN 开始，在 WAL 模式下不会阻塞，也不会被写事务阻塞。
    写事务 (UnitOfWork(write=True)) 以 BEGIN IMMEDIATE 开始，一开始就持有写锁，
    其他写事务会在 SQLite 的 busy timeout 内等待。
    这保证了 "分配 ID + 插入" 以及 "检查投票 + 插入" 都是原子的。
    """

    def __init__(self):
        self._async_engine: Optional[AsyncEngine] = None
        self._initialized = False

    def initialize(self, db_name: Optional[str] = None):
        """
        执行实际的初始化，设置数据库引擎。
        这个方法应该只被调用一次。

        Args:
            db_name: 数据库文件路径。未提供时读取环境变量 DATABASE_NAME。
        """
        if self._initialized:
            logger.warning("DatabaseHandler 已经初始化，跳过重复初始化。")
            return

        logger.info("正在初始化 DatabaseHandler...")

        db_name = db_name or os.getenv("DATABASE_NAME", "data/database.db")
        db_dir = os.path.dirname(db_name)
        if db_dir and not os.path.exists(db_dir):
            logger.info(f"数据库目录 '{db_dir}' 不存在，正在创建...")
            os.makedirs(db_dir)

        sqlite_url = f"sqlite+aiosqlite:///{db_name}"
        connect_args = {"timeout": 15}

        sql_echo_str = os.getenv("SQL_ECHO", "False")
        sql_echo = sql_echo_str.lower() in ("true", "1", "t")

        self._async_engine = create_async_engine(
            sqlite_url, echo=sql_echo, connect_args=connect_args
        )

        @event.listens_for(self._async_engine.sync_engine, "connect")
        def _on_connect(dbapi_connection, connection_record):
            # 关闭驱动自带的事务管理，由下面的 begin 监听器发出 BEGIN
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA journal_mode=WAL;")
            finally:
                cursor.close()

        @event.listens_for(self._async_engine.sync_engine, "begin")
        def _on_begin(conn):
            if conn.get_execution_options().get(IMMEDIATE_OPTION):
                conn.exec_driver_sql("BEGIN IMMEDIATE")
            else:
                conn.exec_driver_sql("BEGIN")

        self._initialized = True
        logger.info("DatabaseHandler 初始化完成。")

    async def init_db(self):
        """
        初始化数据库，创建所有定义的表 (包含索引)。
        """
        if not self._initialized or not self._async_engine:
            raise RuntimeError("DatabaseHandler 尚未初始化。请先调用 initialize_db_handler。")

        import BhapTracker.models  # noqa: F401

        async with self._async_engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    def get_session(self) -> AsyncSession:
        """
        创建一个新的异步数据库会话实例。
        """
        if not self._initialized or not self._async_engine:
            raise RuntimeError("DatabaseHandler 尚未初始化。请先调用 initialize_db_handler。")
        # 提交后不使对象过期，DTO 可以在事务结束后继续读取属性
        return AsyncSession(self._async_engine, expire_on_commit=False)

    async def close(self):
        """
        释放连接池中的所有连接。
        """
        if self._async_engine is not None:
            await self._async_engine.dispose()
            logger.info("数据库连接已关闭。")


_db_handler_instance: Optional[DatabaseHandler] = None


def initialize_db_handler(db_name: Optional[str] = None) -> DatabaseHandler:
    """
    创建并初始化 DatabaseHandler 的单例实例。
    """
    global _db_handler_instance
    if _db_handler_instance is None:
        _db_handler_instance = DatabaseHandler()
        _db_handler_instance.initialize(db_name)
    return _db_handler_instance


def get_db_handler() -> DatabaseHandler:
    """
    获取 DatabaseHandler 的单例实例。
    如果实例尚未初始化，将引发 RuntimeError。
    """
    if _db_handler_instance is None:
        raise RuntimeError(
            "DatabaseHandler 实例尚未创建。请确保在程序启动时调用了 initialize_db_handler。"
        )
    return _db_handler_instance
