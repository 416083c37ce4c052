# agents/readability_agent.py

from __future__ import annotations

import logging
import re

from models.readability_models import DifficultyType, ReadabilityReport
from services.rounding import round_half_up
from services.text_tokenizer import count_non_space_chars, tokenize

logger = logging.getLogger(__name__)

# 英語向けの簡易音節カウント用パターン
_SILENT_ENDING_PATTERN = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y_PATTERN = re.compile(r"^y")
_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]{1,2}")

# 3 音節以上を「複雑語」とみなす（Gunning Fog 用）
COMPLEX_WORD_SYLLABLES: int = 3

# (下限値, ラベル) を上から順に判定する
DIFFICULTY_THRESHOLDS = (
    (90, "very_easy"),
    (80, "easy"),
    (70, "fairly_easy"),
    (60, "standard"),
    (50, "fairly_difficult"),
    (30, "difficult"),
)


def count_syllables(word: str) -> int:
    """
    単語の音節数をざっくり見積もる。

    - 3 文字以下は 1
    - 語末の無音 e / es / ed を落とす
    - 語頭の y を落とす
    - 母音 (a, e, i, o, u, y) のまとまりを数える
    - 0 になった場合も最低 1 を返す
    """
    word = word.lower()
    if len(word) <= 3:
        return 1

    word = _SILENT_ENDING_PATTERN.sub("", word, count=1)
    word = _LEADING_Y_PATTERN.sub("", word, count=1)
    groups = _VOWEL_GROUP_PATTERN.findall(word)
    return len(groups) if groups else 1


def classify_difficulty(reading_ease: float) -> DifficultyType:
    for lower_bound, label in DIFFICULTY_THRESHOLDS:
        if reading_ease >= lower_bound:
            return label  # type: ignore[return-value]
    return "very_difficult"


def _ratio(numerator: float, word_count: int) -> float:
    # 語数 0 のときは割り算せずに 0 扱い
    if word_count == 0:
        return 0.0
    return numerator / word_count


def analyze_readability(content: str) -> ReadabilityReport:
    """
    5 つの古典的な読みやすさ指標を計算して ReadabilityReport を返す。

    途中計算は丸めずに行い、最後にだけ丸める。
    語数 0 でもゼロ除算にならないようにガードしている。
    """
    tokens = tokenize(content)
    words = tokens.words

    word_count = len(words)
    sentence_count = max(1, len(tokens.sentences))
    char_count = count_non_space_chars(tokens.text)

    syllable_counts = [count_syllables(w) for w in words]
    complex_words = sum(1 for n in syllable_counts if n >= COMPLEX_WORD_SYLLABLES)

    avg_words_per_sentence = word_count / sentence_count
    avg_syllables_per_word = _ratio(sum(syllable_counts), word_count)

    reading_ease = 206.835 - (1.015 * avg_words_per_sentence) - (84.6 * avg_syllables_per_word)
    reading_ease = max(0.0, min(100.0, reading_ease))

    kincaid_grade = max(
        0.0,
        (0.39 * avg_words_per_sentence) + (11.8 * avg_syllables_per_word) - 15.59,
    )

    gunning_fog = max(
        0.0,
        0.4 * (avg_words_per_sentence + _ratio(100 * complex_words, word_count)),
    )

    automated_index = max(
        0.0,
        (4.71 * _ratio(char_count, word_count)) + (0.5 * avg_words_per_sentence) - 21.43,
    )

    letters_per_100 = _ratio(char_count, word_count) * 100
    sentences_per_100 = _ratio(sentence_count, word_count) * 100
    coleman_liau = max(0.0, (0.0588 * letters_per_100) - (0.296 * sentences_per_100) - 15.8)

    report = ReadabilityReport(
        flesch_kincaid_grade=round_half_up(kincaid_grade, 1),
        flesch_reading_ease=int(round_half_up(reading_ease)),
        gunning_fog_index=round_half_up(gunning_fog, 1),
        automated_readability_index=round_half_up(automated_index, 1),
        coleman_liau_index=round_half_up(coleman_liau, 1),
        average_words_per_sentence=round_half_up(avg_words_per_sentence, 1),
        average_syllables_per_word=round_half_up(avg_syllables_per_word, 2),
        difficulty=classify_difficulty(reading_ease),
    )

    logger.debug(
        "[readability_agent] words=%s sentences=%s ease=%s difficulty=%s",
        word_count,
        sentence_count,
        report.flesch_reading_ease,
        report.difficulty,
    )
    return report
