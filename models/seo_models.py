# models/seo_models.py

from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, Field


# キーワード密度の判定（目標レンジ 1〜3%）
KeywordDensityStatus = Literal["low", "optimal", "high"]


class SeoCategoryScore(BaseModel):
    """カテゴリ単位のスコアと、画面にそのまま出すメッセージ。"""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    message: str


class SeoReport(BaseModel):
    """
    SEO スコア全体。
    overall は 7 カテゴリの単純平均（四捨五入）。
    """

    model_config = ConfigDict(frozen=True)

    overall: int = Field(..., ge=0, le=100)

    title: SeoCategoryScore
    meta_description: SeoCategoryScore
    keywords: SeoCategoryScore
    headings: SeoCategoryScore
    images: SeoCategoryScore
    links: SeoCategoryScore
    # 本文の長さで決まる（ReadabilityReport とは無関係）
    readability: SeoCategoryScore

    def category_scores(self) -> Dict[str, SeoCategoryScore]:
        """カテゴリ名 → スコアを固定順で返す。"""
        return {
            "title": self.title,
            "meta_description": self.meta_description,
            "keywords": self.keywords,
            "headings": self.headings,
            "images": self.images,
            "links": self.links,
            "readability": self.readability,
        }
