# models/content_models.py

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TokenizedContent(BaseModel):
    """
    本文をトークン化した結果。
    - text: タグ除去・空白正規化済みのプレーンテキスト
    - words / sentences: text から分割したもの
    - paragraphs: 元の（タグ除去前の）本文を空行で分割したもの
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    words: Tuple[str, ...] = ()
    sentences: Tuple[str, ...] = ()
    paragraphs: Tuple[str, ...] = ()


class HeadingCounts(BaseModel):
    """見出しレベル (h1〜h6) ごとの出現数。"""

    model_config = ConfigDict(frozen=True)

    h1: int = Field(0, ge=0)
    h2: int = Field(0, ge=0)
    h3: int = Field(0, ge=0)
    h4: int = Field(0, ge=0)
    h5: int = Field(0, ge=0)
    h6: int = Field(0, ge=0)

    def total(self) -> int:
        return self.h1 + self.h2 + self.h3 + self.h4 + self.h5 + self.h6


class LinkCounts(BaseModel):
    """
    リンク数。
    broken はリンク到達確認をしていないので常に 0。
    """

    model_config = ConfigDict(frozen=True)

    internal: int = Field(0, ge=0)
    external: int = Field(0, ge=0)
    broken: int = Field(0, ge=0)


class ImageCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(0, ge=0)
    with_alt: int = Field(0, ge=0)
    without_alt: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _check_partition(self) -> "ImageCounts":
        # alt あり + alt なし は必ず total と一致する
        if self.with_alt + self.without_alt != self.total:
            raise ValueError(
                f"with_alt ({self.with_alt}) + without_alt ({self.without_alt}) "
                f"must equal total ({self.total})"
            )
        return self


class ContentStatistics(BaseModel):
    """
    1記事分の構造統計。
    SEO スコアラーにそのまま渡す中間モデル。
    """

    model_config = ConfigDict(frozen=True)

    word_count: int = Field(0, ge=0)
    character_count: int = Field(0, ge=0)
    character_count_no_spaces: int = Field(0, ge=0)
    paragraph_count: int = Field(0, ge=0)
    sentence_count: int = Field(0, ge=0)

    # 空の本文でも 1 分を下回らない
    reading_time_minutes: int = Field(1, ge=1)
    speaking_time_minutes: int = Field(1, ge=1)

    headings: HeadingCounts = Field(default_factory=HeadingCounts)
    links: LinkCounts = Field(default_factory=LinkCounts)
    images: ImageCounts = Field(default_factory=ImageCounts)

    lists: int = Field(0, ge=0)
    code_blocks: int = Field(0, ge=0)
