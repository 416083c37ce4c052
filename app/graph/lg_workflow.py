# app/graph/lg_workflow.py
from __future__ import annotations

import logging
from typing import Optional

from app.graph.lg_state import GraphState, create_initial_state
from app.graph import nodes
from models.analysis_models import ContentAnalysis

logger = logging.getLogger(__name__)


def run_workflow(
    content: str,
    title: Optional[str] = None,
    meta_description: Optional[str] = None,
    focus_keyword: Optional[str] = None,
) -> GraphState:
    """
    「Deep Analyze」用のシンプルな直列ワークフロー。

    structure → readability → seo
    （seo は structure の結果を使う。readability は独立）
    """
    logger.info(
        "[lg_workflow] run_workflow start chars=%s focus_keyword=%s",
        len(content or ""),
        "YES" if focus_keyword else "NO",
    )

    state = create_initial_state(
        content=content,
        title=title,
        meta_description=meta_description,
        focus_keyword=focus_keyword,
    )

    # 1) 構造統計
    state = nodes.structure_node(state)

    # 2) 読みやすさ
    state = nodes.readability_node(state)

    # 3) SEO スコア（1 の ContentStatistics を利用）
    state = nodes.seo_node(state)

    logger.info(
        "[lg_workflow] run_workflow done current_node=%s",
        state.get("current_node"),
    )
    return state


def analyze_content(
    content: str,
    title: Optional[str] = None,
    meta_description: Optional[str] = None,
    focus_keyword: Optional[str] = None,
) -> ContentAnalysis:
    """run_workflow() の結果を ContentAnalysis にまとめて返すショートカット。"""
    state = run_workflow(
        content=content,
        title=title,
        meta_description=meta_description,
        focus_keyword=focus_keyword,
    )
    return ContentAnalysis(
        statistics=state["statistics"],
        readability=state["readability"],
        seo=state["seo"],
        keyword_density=state.get("keyword_density"),
        keyword_density_status=state.get("keyword_density_status"),
        progress_messages=state.get("progress_messages", []),
    )
