"""
应用配置
从环境变量和 .env 文件读取，变量前缀为 LIBRARY_
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """图书服务配置"""

    # 应用信息
    app_title: str = "Library API"
    app_version: str = "1.0.0"
    app_description: str = "图书(ISBN-13)增删改查与标题搜索服务"

    # 数据库设置
    database_url: str = "data/library.db"

    # API Key，留空则不校验
    api_key: str = ""

    # 服务器设置
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # 日志
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_",
        env_file=".env",
        extra="ignore",
    )


# 全局配置实例
settings = Settings()
