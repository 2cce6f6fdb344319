import logging
import os
import sys
from datetime import datetime
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str, log_dir: Optional[str] = None) -> Optional[str]:
    """
    配置根日志记录器

    输出到控制台；指定 log_dir 时额外按启动时间生成日志文件。
    已有的处理器会被清除，返回日志文件路径（未写文件时为 None）。
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    log_filename = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_filename = os.path.join(log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
        handlers.append(logging.FileHandler(log_filename, encoding='utf-8'))

    # 清除可能已存在的处理器，然后添加新的处理器
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # 降低watchfiles日志级别，避免频繁输出
    logging.getLogger('watchfiles').setLevel(logging.ERROR)
    logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

    return log_filename
