import asyncio
import logging
import os

from dotenv import load_dotenv

from BhapTracker.cogs.Bhap.BhapLogic import BhapLogic
from BhapTracker.share.DatabaseHandler import get_db_handler, initialize_db_handler
from BhapTracker.share.LoggingConfigurator import LoggingConfigurator

# --- .env 和 日志配置 ---
load_dotenv()
log_level = os.getenv("LOG_LEVEL", "INFO")
configurator = LoggingConfigurator(rootLogLevel=log_level)
configurator.configure()

logger = logging.getLogger("bhap_tracker")
# --- 日志配置结束 ---


async def main_async():
    """初始化数据库并列出当前所有 BHAP"""
    initialize_db_handler()
    db_handler = get_db_handler()

    logger.info("正在检查数据库表...")
    try:
        await db_handler.init_db()
        logger.info("数据库表处理成功。")

        logic = BhapLogic(db_handler)
        bhaps = await logic.list_bhaps()
        logger.info(f"当前共有 {len(bhaps)} 个 BHAP。")
        for bhap in bhaps:
            logger.info(f"  BHAP {bhap.id}: [{bhap.status.value}] {bhap.title}")
    finally:
        await db_handler.close()


def main():
    """主入口函数"""
    asyncio.run(main_async())


if __name__ == "__main__":
    main()
