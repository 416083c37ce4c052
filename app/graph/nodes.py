# app/graph/nodes.py
from __future__ import annotations

import logging
from typing import List

from app.graph.lg_state import GraphState
from agents.structure_agent import analyze_structure
from agents.readability_agent import analyze_readability
from agents.seo_agent import analyze_seo, calculate_keyword_density, classify_keyword_density

from models.content_models import ContentStatistics
from models.readability_models import ReadabilityReport
from models.seo_models import SeoReport

logger = logging.getLogger(__name__)


def _log_progress(state: GraphState, node: str, message: str) -> GraphState:
    """
    進捗ログを state に積むユーティリティ。
    state は dict (GraphState) として扱う。
    """
    line = f"[{node}] {message}"

    messages: List[str] = list(state.get("progress_messages", []))
    messages.append(line)

    state["progress_messages"] = messages
    state["current_node"] = node

    logger.info(line)
    return state


# ---------- Structure ノード ----------


def structure_node(state: GraphState) -> GraphState:
    """
    Structure ノード:
    本文から ContentStatistics を生成して state に詰める。
    """
    state = _log_progress(state, "structure", "start: counting structure")

    stats: ContentStatistics = analyze_structure(state["content"])
    state["statistics"] = stats

    state = _log_progress(
        state,
        "structure",
        f"done: words={stats.word_count} headings={stats.headings.total()} images={stats.images.total}",
    )
    return state


# ---------- Readability ノード ----------


def readability_node(state: GraphState) -> GraphState:
    """
    Readability ノード:
    Structure とは独立に、本文から ReadabilityReport を計算する。
    """
    state = _log_progress(state, "readability", "start: scoring readability")

    report: ReadabilityReport = analyze_readability(state["content"])
    state["readability"] = report

    state = _log_progress(
        state,
        "readability",
        f"done: ease={report.flesch_reading_ease} difficulty={report.difficulty}",
    )
    return state


# ---------- SEO ノード ----------


def seo_node(state: GraphState) -> GraphState:
    """
    SEO ノード:
    Structure ノードの ContentStatistics を使って SeoReport を計算する。
    フォーカスキーワードがあればキーワード密度も出す。
    """
    state = _log_progress(state, "seo", "start: scoring SEO")

    stats: ContentStatistics = state["statistics"]
    focus_keyword = state.get("focus_keyword")

    report: SeoReport = analyze_seo(
        state["content"],
        title=state.get("title"),
        meta_description=state.get("meta_description"),
        focus_keyword=focus_keyword,
        stats=stats,
    )
    state["seo"] = report
    state["keyword_density"] = None
    state["keyword_density_status"] = None
    if focus_keyword:
        density = calculate_keyword_density(state["content"], focus_keyword)
        state["keyword_density"] = density
        state["keyword_density_status"] = classify_keyword_density(density)

    state = _log_progress(state, "seo", f"done: overall={report.overall}")
    return state
