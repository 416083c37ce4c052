# services/text_tokenizer.py

from __future__ import annotations

import re
from typing import List

from models.content_models import TokenizedContent

# HTML パーサではなく「< と > の間を消す」だけの簡易ルール。
# エンティティのデコードもしない。
_TAG_PATTERN = re.compile(r"<[^>]*>")
# エディタ（ブラウザ）側の空白判定と同じ文字集合。
# Python の \s は \x1c-\x1f や \x85 も含み、\ufeff を含まないので使わない
WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_PATTERN = re.compile("[" + re.escape(WHITESPACE_CHARS) + "]+")
_SENTENCE_END_PATTERN = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK_PATTERN = re.compile(r"\n\n+")


def strip_markup(content: str) -> str:
    """タグを空白 1 文字に置き換え、空白の連続を 1 つにまとめて trim する。"""
    text = _TAG_PATTERN.sub(" ", content or "")
    text = _WHITESPACE_PATTERN.sub(" ", text)
    return text.strip(WHITESPACE_CHARS)


def split_words(text: str) -> List[str]:
    return [w for w in _WHITESPACE_PATTERN.split(text) if w]


def split_sentences(text: str) -> List[str]:
    """. ! ? の連続で区切る。空白だけの断片は捨てる。"""
    return [s for s in _SENTENCE_END_PATTERN.split(text) if s.strip(WHITESPACE_CHARS)]


def split_paragraphs(content: str) -> List[str]:
    """
    タグ除去「前」の本文を 2 つ以上の改行で区切る。
    ※ プレーンテキストではなく元の本文を対象にする点に注意
    """
    return [p for p in _PARAGRAPH_BREAK_PATTERN.split(content or "") if p.strip(WHITESPACE_CHARS)]


def tokenize(content: str) -> TokenizedContent:
    """
    本文を TokenizedContent に変換する。
    構造解析・読みやすさ・SEO のすべてがここを通る。
    """
    content = content or ""
    text = strip_markup(content)
    return TokenizedContent(
        text=text,
        words=tuple(split_words(text)),
        sentences=tuple(split_sentences(text)),
        paragraphs=tuple(split_paragraphs(content)),
    )


def count_non_space_chars(text: str) -> int:
    return len(_WHITESPACE_PATTERN.sub("", text))
