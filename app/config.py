# app/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリ全体で使う設定クラス。
    .env から環境変数を読み込み、属性として参照できるようにする。

    ※ 解析ロジック自体（しきい値・係数）は固定値なのでここには置かない。
    """

    # ---------- API ----------
    # APP_TITLE=... で FastAPI のタイトルを上書きできる
    app_title: str = "Post Content Analyzer"

    # 1リクエストで受け付ける本文の最大文字数（超えたら 413）
    max_content_chars: int = 500_000

    # ---------- ログ ----------
    # LOG_LEVEL=DEBUG にすると解析ごとの集計値も出る
    log_level: str = "INFO"

    # ---------- Pydantic Settings 設定 ----------
    model_config = SettingsConfigDict(
        env_file=".env",            # .env を読む
        env_file_encoding="utf-8",
        extra="ignore",             # 定義外の環境変数があっても無視（エラーにしない）
    )


@lru_cache
def get_settings() -> Settings:
    """Settings をシングルトン的に使うためのヘルパ。"""
    return Settings()


# 他のモジュールからは `from app.config import settings` で利用
settings = get_settings()
