# agents/seo_agent.py

from __future__ import annotations

import logging
from typing import Optional

from agents.structure_agent import analyze_structure
from models.content_models import ContentStatistics
from models.seo_models import KeywordDensityStatus, SeoCategoryScore, SeoReport
from services.rounding import round_half_up
from services.text_tokenizer import tokenize

logger = logging.getLogger(__name__)

# ============================================================
# 判定しきい値（文字数・語数）
# ============================================================

TITLE_MIN_LENGTH: int = 30
TITLE_MAX_LENGTH: int = 60

META_DESCRIPTION_MIN_LENGTH: int = 120
META_DESCRIPTION_MAX_LENGTH: int = 160

# タイトル・本文の両方に含まれ、かつ本文でこの回数以上使われていれば満点
KEYWORD_OPTIMAL_OCCURRENCES: int = 3

CONTENT_SHORT_WORDS: int = 300
CONTENT_MEDIUM_WORDS: int = 600
CONTENT_LONG_FORM_WORDS: int = 2500

# キーワード密度 (%) の目標レンジ
KEYWORD_DENSITY_MIN: float = 1.0
KEYWORD_DENSITY_MAX: float = 3.0


# ============================================================
# カテゴリ別スコア
# ============================================================

def score_title(title: Optional[str]) -> SeoCategoryScore:
    if not title:
        return SeoCategoryScore(score=0, message="Add a title to your post")
    if len(title) < TITLE_MIN_LENGTH:
        return SeoCategoryScore(score=50, message="Title is too short (aim for 50-60 characters)")
    if len(title) > TITLE_MAX_LENGTH:
        return SeoCategoryScore(score=70, message="Title is too long (aim for 50-60 characters)")
    return SeoCategoryScore(score=100, message="Title length is optimal")


def score_meta_description(meta_description: Optional[str]) -> SeoCategoryScore:
    if not meta_description:
        return SeoCategoryScore(score=0, message="Add a meta description")
    if len(meta_description) < META_DESCRIPTION_MIN_LENGTH:
        return SeoCategoryScore(
            score=50,
            message="Meta description is too short (aim for 150-160 characters)",
        )
    if len(meta_description) > META_DESCRIPTION_MAX_LENGTH:
        return SeoCategoryScore(score=70, message="Meta description is too long")
    return SeoCategoryScore(score=100, message="Meta description length is optimal")


def score_keywords(
    content: str,
    title: Optional[str],
    focus_keyword: Optional[str],
) -> SeoCategoryScore:
    """
    フォーカスキーワードの使い方を評価する。
    本文はタグ込みの生データをそのまま小文字化して検索する。
    """
    if not focus_keyword:
        return SeoCategoryScore(score=30, message="Consider adding a focus keyword")

    keyword_lower = focus_keyword.lower()
    content_lower = (content or "").lower()
    title_lower = (title or "").lower()

    in_title = keyword_lower in title_lower
    in_content = keyword_lower in content_lower
    occurrences = content_lower.count(keyword_lower)

    if in_title and in_content and occurrences >= KEYWORD_OPTIMAL_OCCURRENCES:
        return SeoCategoryScore(score=100, message="Keyword usage is optimal")
    if in_content:
        return SeoCategoryScore(score=70, message="Add keyword to title for better SEO")
    return SeoCategoryScore(score=40, message="Use your focus keyword more in the content")


def score_headings(stats: ContentStatistics) -> SeoCategoryScore:
    headings = stats.headings
    if headings.total() == 0:
        return SeoCategoryScore(score=30, message="Add headings to structure your content")
    if headings.h1 > 1:
        return SeoCategoryScore(score=60, message="Use only one H1 heading")
    if headings.h2 >= 2:
        return SeoCategoryScore(score=100, message="Good heading structure")
    return SeoCategoryScore(
        score=70,
        message="Add more subheadings (H2, H3) for better structure",
    )


def score_images(stats: ContentStatistics) -> SeoCategoryScore:
    images = stats.images
    if images.total == 0:
        return SeoCategoryScore(score=40, message="Add images to make content more engaging")
    if images.without_alt > 0:
        return SeoCategoryScore(
            score=70,
            message=f"{images.without_alt} image(s) missing alt text",
        )
    return SeoCategoryScore(score=100, message="All images have alt text")


def score_links(stats: ContentStatistics) -> SeoCategoryScore:
    links = stats.links
    if links.internal + links.external == 0:
        return SeoCategoryScore(score=50, message="Add internal and external links")
    if links.internal == 0:
        return SeoCategoryScore(score=70, message="Add internal links to other content")
    if links.external == 0:
        return SeoCategoryScore(score=80, message="Consider adding external references")
    return SeoCategoryScore(score=100, message="Good link diversity")


def score_content_length(stats: ContentStatistics) -> SeoCategoryScore:
    """語数だけで判定する（ReadabilityReport は見ない）。"""
    word_count = stats.word_count
    if word_count < CONTENT_SHORT_WORDS:
        return SeoCategoryScore(score=50, message="Content is too short (aim for 600+ words)")
    if word_count < CONTENT_MEDIUM_WORDS:
        return SeoCategoryScore(score=70, message="Consider adding more content")
    if word_count > CONTENT_LONG_FORM_WORDS:
        return SeoCategoryScore(score=90, message="Long-form content detected")
    return SeoCategoryScore(score=100, message="Content length is good")


# ============================================================
# メインロジック
# ============================================================

def analyze_seo(
    content: str,
    title: Optional[str] = None,
    meta_description: Optional[str] = None,
    focus_keyword: Optional[str] = None,
    stats: Optional[ContentStatistics] = None,
) -> SeoReport:
    """
    7 カテゴリのスコアと総合スコアを計算して SeoReport を返す。

    stats には analyze_structure() の結果を渡す想定。
    省略された場合はここで analyze_structure(content) を計算する。
    """
    content = content or ""
    if stats is None:
        stats = analyze_structure(content)

    categories = {
        "title": score_title(title),
        "meta_description": score_meta_description(meta_description),
        "keywords": score_keywords(content, title, focus_keyword),
        "headings": score_headings(stats),
        "images": score_images(stats),
        "links": score_links(stats),
        "readability": score_content_length(stats),
    }

    total = sum(c.score for c in categories.values())
    overall = int(round_half_up(total / len(categories)))

    logger.debug(
        "[seo_agent] overall=%s scores=%s",
        overall,
        {name: c.score for name, c in categories.items()},
    )
    return SeoReport(overall=overall, **categories)


def calculate_keyword_density(content: str, focus_keyword: Optional[str]) -> float:
    """
    本文（タグ除去後）に対するキーワード密度 (%) を返す。
    キーワードなし・語数 0 の場合は 0.0。
    """
    if not focus_keyword:
        return 0.0

    tokens = tokenize(content)
    word_count = len(tokens.words)
    if word_count == 0:
        return 0.0

    occurrences = tokens.text.lower().count(focus_keyword.lower())
    return round_half_up(occurrences / word_count * 100, 2)


def classify_keyword_density(density: float) -> KeywordDensityStatus:
    """目標レンジ (1〜3%) に対して low / optimal / high を返す。境界値は optimal。"""
    if density < KEYWORD_DENSITY_MIN:
        return "low"
    if density > KEYWORD_DENSITY_MAX:
        return "high"
    return "optimal"
