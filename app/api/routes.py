# app/api/routes.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from agents.readability_agent import analyze_readability
from agents.seo_agent import analyze_seo
from agents.structure_agent import analyze_structure
from app.config import settings
from app.graph.lg_workflow import analyze_content
from models.analysis_models import ContentAnalysis
from models.content_models import ContentStatistics
from models.readability_models import ReadabilityReport
from models.seo_models import SeoReport

logger = logging.getLogger(__name__)

router = APIRouter()


# --------- Request / Response モデル ---------


class ContentRequest(BaseModel):
    content: str = ""


class SeoRequest(ContentRequest):
    title: Optional[str] = None
    meta_description: Optional[str] = None
    focus_keyword: Optional[str] = None
    # 事前に計算済みの統計があれば再利用する
    stats: Optional[ContentStatistics] = None


class AnalyzeRequest(ContentRequest):
    title: Optional[str] = None
    meta_description: Optional[str] = None
    focus_keyword: Optional[str] = None


def _check_content_size(content: str) -> None:
    if len(content) > settings.max_content_chars:
        logger.warning(
            "[api] content too large: chars=%s limit=%s",
            len(content),
            settings.max_content_chars,
        )
        raise HTTPException(
            status_code=413,
            detail=f"content exceeds {settings.max_content_chars} characters",
        )


# --------- エンドポイント ---------


@router.get("/health")
def api_health() -> dict:
    return {"status": "ok"}


@router.post("/analyze/structure", response_model=ContentStatistics)
def api_analyze_structure(payload: ContentRequest) -> ContentStatistics:
    _check_content_size(payload.content)
    logger.info("[api.analyze-structure] chars=%s", len(payload.content))
    return analyze_structure(payload.content)


@router.post("/analyze/readability", response_model=ReadabilityReport)
def api_analyze_readability(payload: ContentRequest) -> ReadabilityReport:
    _check_content_size(payload.content)
    logger.info("[api.analyze-readability] chars=%s", len(payload.content))
    return analyze_readability(payload.content)


@router.post("/analyze/seo", response_model=SeoReport)
def api_analyze_seo(payload: SeoRequest) -> SeoReport:
    """
    SEO スコアだけを返す API。
    stats が省略された場合はサーバ側で analyze_structure() を実行する。
    """
    _check_content_size(payload.content)
    logger.info(
        "[api.analyze-seo] chars=%s stats=%s focus_keyword=%s",
        len(payload.content),
        "YES" if payload.stats else "NO",
        "YES" if payload.focus_keyword else "NO",
    )
    return analyze_seo(
        payload.content,
        title=payload.title,
        meta_description=payload.meta_description,
        focus_keyword=payload.focus_keyword,
        stats=payload.stats,
    )


@router.post("/analyze", response_model=ContentAnalysis)
def api_analyze(payload: AnalyzeRequest) -> ContentAnalysis:
    """
    エディタの「Deep Analyze」相当。

    1) 構造統計
    2) 読みやすさ
    3) SEO スコア + キーワード密度
    """
    _check_content_size(payload.content)
    logger.info("[api.analyze] start chars=%s", len(payload.content))

    result = analyze_content(
        content=payload.content,
        title=payload.title,
        meta_description=payload.meta_description,
        focus_keyword=payload.focus_keyword,
    )

    logger.info("[api.analyze] done overall=%s", result.seo.overall)
    return result
