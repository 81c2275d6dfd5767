"""
應用程式設定

使用 Pydantic BaseSettings 管理環境變數和配置
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    應用程式設定

    從環境變數和 .env 文件讀取設定

    Attributes:
        log_level: 日誌級別 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: 日誌格式
        validate_edges: 計算前是否檢查邊端點在 1..n 範圍內
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DUALCONN_",
        case_sensitive=False,
    )

    # 日誌設定
    log_level: str = "INFO"
    log_format: str = "%(message)s"

    # 輸入檢查
    validate_edges: bool = True


def configure_logging(app_settings: AppSettings | None = None) -> None:
    """
    依設定初始化根日誌

    Args:
        app_settings: 應用程式設定，預設使用全局設定
    """
    app_settings = app_settings or settings
    logging.basicConfig(
        level=app_settings.log_level.upper(),
        format=app_settings.log_format,
    )


# 創建全局設定實例
settings = AppSettings()
