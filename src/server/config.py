"""
配置加载模块：支持 .env、环境变量、工作目录 config.json（或 CONFIG_FILE 指定）多来源合并。
公开接口：
- Config: 读取配置的设置类
- config: Config 的单例实例
内部方法：
- Config.settings_customise_sources: 自定义配置来源顺序
- Config.parse_cors_origins: 将字符串/JSON 解析为 List[str]
"""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Annotated, Any, Dict, List, Tuple

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class Config(BaseSettings):
    app_title: str = "Certificate Request Service"
    # 邮箱校验是否查询 DNS，默认只校验语法
    email_check_deliverability: bool = False
    email_allow_smtputf8: bool = True
    # 交由 parse_cors_origins 解析，允许逗号分隔的字符串
    cors_origins: Annotated[List[str], NoDecode] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value: Any) -> List[str]:
        """支持从环境变量以 JSON 或分隔符（逗号/分号/空白）解析 cors_origins。"""
        if value is None or value == "":
            return []
        if isinstance(value, list):
            return [str(v) for v in value]
        if isinstance(value, str):
            text = value.strip()
            try:
                loaded = json.loads(text)
                if isinstance(loaded, list):
                    return [str(v) for v in loaded]
            except json.JSONDecodeError:
                pass
            return [p for p in re.split(r"[\s,;]+", text) if p]
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """自定义配置来源顺序：入参 > 环境变量 > .env > config.json > secrets。"""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonFileSettingsSource(settings_cls),
            file_secret_settings,
        )


class JsonFileSettingsSource(PydanticBaseSettingsSource):
    """从工作目录的 config.json（或 CONFIG_FILE 指定路径）加载配置。"""

    def __init__(self, settings_cls: type[BaseSettings]):
        super().__init__(settings_cls)
        self._data: Dict[str, Any] | None = None

    def _load(self) -> Dict[str, Any]:
        if self._data is None:
            cfg_path = os.environ.get("CONFIG_FILE")
            path = Path(cfg_path) if cfg_path else Path.cwd() / "config.json"
            self._data = {}
            if path.exists():
                with path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    self._data = data
        return self._data

    def __call__(self) -> Dict[str, Any]:
        data = self._load()
        # 只保留已声明的字段
        return {k: v for k, v in data.items() if k in self.settings_cls.model_fields}

    def get_field_value(self, field, field_name: str):  # type: ignore[override]
        data = self._load()
        if field_name in data:
            return data[field_name], field_name, True
        return None, field_name, False


config = Config()
