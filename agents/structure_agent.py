# agents/structure_agent.py

from __future__ import annotations

import logging
import math

from models.content_models import (
    ContentStatistics,
    HeadingCounts,
    ImageCounts,
    LinkCounts,
)
from services import markup_scanner
from services.text_tokenizer import count_non_space_chars, tokenize

logger = logging.getLogger(__name__)

# ============================================================
# 時間見積もり用パラメータ（1分あたりの語数）
# ============================================================

READING_WORDS_PER_MINUTE: int = 200
SPEAKING_WORDS_PER_MINUTE: int = 150


def _estimate_minutes(word_count: int, words_per_minute: int) -> int:
    """語数から所要時間（分）を見積もる。0 語でも 1 分を返す。"""
    return max(1, math.ceil(word_count / words_per_minute))


def _count_links(content: str) -> LinkCounts:
    hrefs = markup_scanner.find_link_hrefs(content)
    internal = sum(1 for href in hrefs if markup_scanner.is_internal_href(href))
    # リンク切れチェックはしない（broken は常に 0）
    return LinkCounts(internal=internal, external=len(hrefs) - internal, broken=0)


def _count_images(content: str) -> ImageCounts:
    tags = markup_scanner.find_image_tags(content)
    with_alt = sum(1 for tag in tags if markup_scanner.has_alt_text(tag))
    return ImageCounts(total=len(tags), with_alt=with_alt, without_alt=len(tags) - with_alt)


def analyze_structure(content: str) -> ContentStatistics:
    """
    本文（HTML 混じり可）から ContentStatistics を生成する。

    - 語数・文字数・段落数・文数（文字数はタグ除去後のテキストで数える）
    - 見出しレベル別の数
    - 内部 / 外部リンク数
    - alt 有無別の画像数
    - リスト数・コードブロック数
    - 読了時間 / 読み上げ時間

    壊れたマークアップでも例外は出さず、数えられないタグは無視する。
    """
    content = content or ""
    tokens = tokenize(content)

    heading_counts = markup_scanner.count_headings(content)
    word_count = len(tokens.words)

    stats = ContentStatistics(
        word_count=word_count,
        character_count=len(tokens.text),
        character_count_no_spaces=count_non_space_chars(tokens.text),
        paragraph_count=len(tokens.paragraphs),
        sentence_count=len(tokens.sentences),
        reading_time_minutes=_estimate_minutes(word_count, READING_WORDS_PER_MINUTE),
        speaking_time_minutes=_estimate_minutes(word_count, SPEAKING_WORDS_PER_MINUTE),
        headings=HeadingCounts(**{f"h{level}": n for level, n in heading_counts.items()}),
        links=_count_links(content),
        images=_count_images(content),
        lists=markup_scanner.count_lists(content),
        code_blocks=markup_scanner.count_code_blocks(content),
    )

    logger.debug(
        "[structure_agent] words=%s sentences=%s headings=%s links=%s/%s images=%s",
        stats.word_count,
        stats.sentence_count,
        stats.headings.total(),
        stats.links.internal,
        stats.links.external,
        stats.images.total,
    )
    return stats
