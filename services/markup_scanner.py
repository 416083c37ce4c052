# services/markup_scanner.py

from __future__ import annotations

import re
from typing import Dict, List

# ============================================================
# タグ種別ごとのスキャンルール
# （完全な HTML パースはしない。開始タグをパターンで数えるだけ）
# ============================================================

HEADING_LEVELS = (1, 2, 3, 4, 5, 6)

HEADING_OPEN_PATTERNS: Dict[int, "re.Pattern[str]"] = {
    level: re.compile(rf"<h{level}[^>]*>", re.IGNORECASE) for level in HEADING_LEVELS
}

# href の値が空でない <a> のみ対象。グループ 1 が href の値
ANCHOR_HREF_PATTERN = re.compile(r"""<a[^>]*href=["']([^"']+)["'][^>]*>""", re.IGNORECASE)

IMG_TAG_PATTERN = re.compile(r"<img[^>]*>", re.IGNORECASE)
IMG_ALT_PATTERN = re.compile(r"""alt=["'][^"']+["']""", re.IGNORECASE)

LIST_OPEN_PATTERN = re.compile(r"<[uo]l[^>]*>", re.IGNORECASE)

# <pre><code> の組は 2 つとして数える
CODE_OPEN_PATTERN = re.compile(r"<pre[^>]*>|<code[^>]*>", re.IGNORECASE)

# href の値がこれに当たれば内部リンク（大文字小文字は区別しない）
INTERNAL_HREF_PATTERN = re.compile(r"localhost|/", re.IGNORECASE)


def count_headings(content: str) -> Dict[int, int]:
    """見出しレベル → 開始タグ数。"""
    content = content or ""
    return {
        level: len(pattern.findall(content))
        for level, pattern in HEADING_OPEN_PATTERNS.items()
    }


def find_link_hrefs(content: str) -> List[str]:
    return ANCHOR_HREF_PATTERN.findall(content or "")


def is_internal_href(href: str) -> bool:
    """
    href に localhost か / を含めば内部リンク扱い。
    https://example.com/ のような外部 URL も内部扱いになるが、そのままにしている。
    """
    return INTERNAL_HREF_PATTERN.search(href) is not None


def find_image_tags(content: str) -> List[str]:
    return IMG_TAG_PATTERN.findall(content or "")


def has_alt_text(img_tag: str) -> bool:
    return IMG_ALT_PATTERN.search(img_tag) is not None


def count_lists(content: str) -> int:
    return len(LIST_OPEN_PATTERN.findall(content or ""))


def count_code_blocks(content: str) -> int:
    return len(CODE_OPEN_PATTERN.findall(content or ""))
