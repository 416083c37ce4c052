# models/readability_models.py

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# -----------------------------------------
# 難易度ラベル（Flesch Reading Ease から決まる）
# -----------------------------------------
DifficultyType = Literal[
    "very_easy",         # >= 90
    "easy",              # >= 80
    "fairly_easy",       # >= 70
    "standard",          # >= 60
    "fairly_difficult",  # >= 50
    "difficult",         # >= 30
    "very_difficult",
]


class ReadabilityReport(BaseModel):
    """読みやすさ指標のまとめ。

    Attributes:
        flesch_kincaid_grade (float): 学年レベル（0 以上、小数 1 桁）。
        flesch_reading_ease (int): 0〜100、高いほど読みやすい。
        gunning_fog_index (float): 複雑語の割合を重視した学年レベル。
        automated_readability_index (float): 文字数ベースの学年レベル。
        coleman_liau_index (float): 文字数ベースの学年レベル。
        average_words_per_sentence (float): 小数 1 桁。
        average_syllables_per_word (float): 小数 2 桁。
        difficulty (DifficultyType): flesch_reading_ease から決まるラベル。
    """

    model_config = ConfigDict(frozen=True)

    flesch_kincaid_grade: float = Field(0.0, ge=0)
    flesch_reading_ease: int = Field(0, ge=0, le=100)
    gunning_fog_index: float = Field(0.0, ge=0)
    automated_readability_index: float = Field(0.0, ge=0)
    coleman_liau_index: float = Field(0.0, ge=0)
    average_words_per_sentence: float = Field(0.0, ge=0)
    average_syllables_per_word: float = Field(0.0, ge=0)
    difficulty: DifficultyType = "very_difficult"
