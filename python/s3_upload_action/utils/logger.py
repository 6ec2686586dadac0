"""ロギング設定ユーティリティ"""
import logging
import sys
from typing import Optional
from ..models.config import LoggingConfig
from .actions import escape_data


class AnnotationFormatter(logging.Formatter):
    """ログレコードをワークフローコマンドとして整形"""

    COMMANDS = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


class LoggerManager:
    """ロガーの設定と管理"""

    _logger: Optional[logging.Logger] = None

    @classmethod
    def setup(cls, config: LoggingConfig) -> logging.Logger:
        """ロガーをセットアップ"""
        if cls._logger is not None:
            return cls._logger

        # ログレベルの設定
        log_level = getattr(logging, config.level.upper(), logging.INFO)

        # ランナー上ではアノテーション形式、それ以外は通常の形式
        if config.annotations:
            formatter: logging.Formatter = AnnotationFormatter("%(message)s")
        else:
            formatter = logging.Formatter(config.format, datefmt="%Y-%m-%d %H:%M:%S")

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)

        logger = logging.getLogger("s3_upload_action")
        logger.setLevel(log_level)
        logger.handlers = [console_handler]
        logger.propagate = False

        cls._logger = logger
        return logger

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """設定済みのロガーを取得"""
        if cls._logger is None:
            raise RuntimeError("Logger not initialized. Call setup() first.")
        return cls._logger

    @classmethod
    def reset(cls) -> None:
        """セットアップ済みのロガーを破棄"""
        if cls._logger is not None:
            cls._logger.handlers = []
        cls._logger = None
