"""
日志配置
"""
import logging

from cardbox.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = None) -> None:
    """初始化根日志（重复调用只更新级别）"""
    level = (level or settings.log_level).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)
    # SQL 回显交给 engine echo 控制
    logging.getLogger("passlib").setLevel(logging.ERROR)
