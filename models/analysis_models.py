# models/analysis_models.py

from typing import List, Optional
from pydantic import BaseModel, Field

from models.content_models import ContentStatistics
from models.readability_models import ReadabilityReport
from models.seo_models import KeywordDensityStatus, SeoReport


class ContentAnalysis(BaseModel):
    """「Deep Analyze」1回分の結果をまとめたもの。"""

    statistics: ContentStatistics
    readability: ReadabilityReport
    seo: SeoReport
    keyword_density: Optional[float] = None
    keyword_density_status: Optional[KeywordDensityStatus] = None
    progress_messages: List[str] = Field(default_factory=list)
