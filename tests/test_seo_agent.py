import pytest

from agents.seo_agent import (
    analyze_seo,
    calculate_keyword_density,
    classify_keyword_density,
    score_content_length,
    score_headings,
    score_images,
    score_keywords,
    score_links,
    score_meta_description,
    score_title,
)
from agents.structure_agent import analyze_structure
from models.content_models import ContentStatistics, HeadingCounts, ImageCounts, LinkCounts


def _stats(**kwargs) -> ContentStatistics:
    return ContentStatistics(**kwargs)


class TestTitleScore:

    def test_missing_title(self):
        for title in (None, ""):
            result = score_title(title)
            assert result.score == 0
            assert result.message == "Add a title to your post"

    @pytest.mark.parametrize(
        "length, score, message",
        [
            (29, 50, "Title is too short (aim for 50-60 characters)"),
            (30, 100, "Title length is optimal"),
            (60, 100, "Title length is optimal"),
            (61, 70, "Title is too long (aim for 50-60 characters)"),
        ],
    )
    def test_length_boundaries(self, length, score, message):
        result = score_title("x" * length)

        assert result.score == score
        assert result.message == message

    def test_scenario_29_characters(self):
        result = analyze_seo("content", title="12345678901234567890123456789").title

        assert result.score == 50


class TestMetaDescriptionScore:

    def test_missing(self):
        result = score_meta_description(None)

        assert result.score == 0
        assert result.message == "Add a meta description"

    @pytest.mark.parametrize(
        "length, score, message",
        [
            (119, 50, "Meta description is too short (aim for 150-160 characters)"),
            (120, 100, "Meta description length is optimal"),
            (160, 100, "Meta description length is optimal"),
            (161, 70, "Meta description is too long"),
        ],
    )
    def test_length_boundaries(self, length, score, message):
        result = score_meta_description("m" * length)

        assert result.score == score
        assert result.message == message


class TestKeywordScore:

    def test_missing_keyword(self):
        result = score_keywords("anything", "title", None)

        assert result.score == 30
        assert result.message == "Consider adding a focus keyword"

    def test_optimal_usage(self):
        content = "<p>SEO tips: seo matters. Good SEO wins.</p>"
        result = score_keywords(content, "SEO guide for beginners", "seo")

        assert result.score == 100
        assert result.message == "Keyword usage is optimal"

    def test_content_only(self):
        result = score_keywords("seo seo seo", "A title", "SEO")

        assert result.score == 70
        assert result.message == "Add keyword to title for better SEO"

    def test_in_title_but_too_few_occurrences(self):
        result = score_keywords("seo once and seo twice", "SEO title", "seo")

        assert result.score == 70

    def test_not_in_content(self):
        result = score_keywords("nothing relevant", "SEO title", "seo")

        assert result.score == 40
        assert result.message == "Use your focus keyword more in the content"

    def test_markup_is_searched_too(self):
        content = '<a href="/seo">x</a><img alt="seo"><p>seo</p>'
        result = score_keywords(content, "seo", "seo")

        assert result.score == 100

    def test_regex_characters_are_literal(self):
        content = "I like c++ and C++ and more c++."
        result = score_keywords(content, "c++ tips", "c++")

        assert result.score == 100

    def test_occurrences_do_not_overlap(self):
        result = score_keywords("aaaa", "aa", "aa")

        # "aaaa" holds two non-overlapping "aa"
        assert result.score == 70


class TestStatisticsScores:

    def test_headings(self):
        assert score_headings(_stats()).score == 30
        assert score_headings(_stats(headings=HeadingCounts(h1=2, h2=3))).score == 60
        assert score_headings(_stats(headings=HeadingCounts(h2=2))).score == 100
        assert score_headings(_stats(headings=HeadingCounts(h1=1, h3=4))).score == 70

    def test_heading_messages(self):
        assert score_headings(_stats()).message == "Add headings to structure your content"
        assert score_headings(_stats(headings=HeadingCounts(h1=2))).message == "Use only one H1 heading"
        assert score_headings(_stats(headings=HeadingCounts(h2=2))).message == "Good heading structure"
        assert (
            score_headings(_stats(headings=HeadingCounts(h2=1))).message
            == "Add more subheadings (H2, H3) for better structure"
        )

    def test_images(self):
        none = score_images(_stats())
        missing = score_images(_stats(images=ImageCounts(total=5, with_alt=2, without_alt=3)))
        complete = score_images(_stats(images=ImageCounts(total=2, with_alt=2, without_alt=0)))

        assert (none.score, none.message) == (40, "Add images to make content more engaging")
        assert (missing.score, missing.message) == (70, "3 image(s) missing alt text")
        assert (complete.score, complete.message) == (100, "All images have alt text")

    def test_links(self):
        assert score_links(_stats()).score == 50
        assert score_links(_stats(links=LinkCounts(external=3))).score == 70
        assert score_links(_stats(links=LinkCounts(internal=3))).score == 80
        assert score_links(_stats(links=LinkCounts(internal=1, external=1))).score == 100

    def test_link_messages(self):
        assert score_links(_stats()).message == "Add internal and external links"
        assert score_links(_stats(links=LinkCounts(external=1))).message == "Add internal links to other content"
        assert score_links(_stats(links=LinkCounts(internal=1))).message == "Consider adding external references"
        assert score_links(_stats(links=LinkCounts(internal=1, external=1))).message == "Good link diversity"

    @pytest.mark.parametrize(
        "word_count, score, message",
        [
            (0, 50, "Content is too short (aim for 600+ words)"),
            (299, 50, "Content is too short (aim for 600+ words)"),
            (300, 70, "Consider adding more content"),
            (599, 70, "Consider adding more content"),
            (600, 100, "Content length is good"),
            (2500, 100, "Content length is good"),
            (2501, 90, "Long-form content detected"),
        ],
    )
    def test_content_length(self, word_count, score, message):
        result = score_content_length(_stats(word_count=word_count))

        assert (result.score, result.message) == (score, message)


class TestAnalyzeSeo:

    def test_empty_everything(self):
        report = analyze_seo("", stats=analyze_structure(""))

        # 0 + 0 + 30 + 30 + 40 + 50 + 50 = 200 -> 28.57
        assert report.overall == 29
        assert report.title.score == 0
        assert report.meta_description.score == 0
        assert report.keywords.score == 30

    def test_missing_alt_scenario(self):
        content = '<img src="a.png" alt="A cat"><img src="b.png">'
        report = analyze_seo(content, stats=analyze_structure(content))

        assert report.images.score == 70
        assert report.images.message == "1 image(s) missing alt text"

    def test_optimal_post(self):
        body = " ".join(["seo"] * 3 + ["word"] * 700)
        content = (
            "<h1>Guide</h1><h2>Part one</h2><h2>Part two</h2>"
            '<img src="a.png" alt="Chart">'
            '<a href="/related">related</a><a href="example.org">ref</a>'
            f"<p>{body}</p>"
        )
        report = analyze_seo(
            content,
            title="The complete seo guide for small business owners",
            meta_description="d" * 150,
            focus_keyword="seo",
            stats=analyze_structure(content),
        )

        for name, category in report.category_scores().items():
            assert category.score == 100, name
        assert report.overall == 100

    def test_overall_is_rounded_mean(self):
        stats = _stats(
            word_count=400,
            headings=HeadingCounts(h1=1, h2=1),
            images=ImageCounts(total=1, with_alt=1, without_alt=0),
            links=LinkCounts(internal=1),
        )
        report = analyze_seo("text", title="x" * 40, focus_keyword=None, stats=stats)

        # 100 + 0 + 30 + 70 + 100 + 80 + 70 = 450 -> 64.29
        assert report.overall == 64

    def test_stats_default_to_structure_of_content(self):
        content = "<h2>A</h2><h2>B</h2><p>Hello world.</p>"

        assert analyze_seo(content, title="T") == analyze_seo(
            content, title="T", stats=analyze_structure(content)
        )

    def test_category_order(self):
        report = analyze_seo("")

        assert list(report.category_scores()) == [
            "title",
            "meta_description",
            "keywords",
            "headings",
            "images",
            "links",
            "readability",
        ]

    def test_idempotent(self):
        content = "<h1>Hi</h1><p>Some content with a keyword. keyword again.</p>"
        stats = analyze_structure(content)

        first = analyze_seo(content, "Title with keyword", "meta", "keyword", stats)
        second = analyze_seo(content, "Title with keyword", "meta", "keyword", stats)

        assert first.model_dump_json() == second.model_dump_json()


class TestKeywordDensity:

    def test_density(self):
        assert calculate_keyword_density("<p>SEO is fun. Learn SEO today.</p>", "seo") == 33.33

    def test_markup_is_not_counted(self):
        assert calculate_keyword_density('<a href="/seo">link</a>', "seo") == 0.0

    def test_degenerate_inputs(self):
        assert calculate_keyword_density("", "seo") == 0.0
        assert calculate_keyword_density("some text", None) == 0.0
        assert calculate_keyword_density("some text", "") == 0.0

    @pytest.mark.parametrize(
        "density, status",
        [
            (0.0, "low"),
            (0.99, "low"),
            (1.0, "optimal"),
            (2.1, "optimal"),
            (3.0, "optimal"),
            (3.01, "high"),
        ],
    )
    def test_density_status(self, density, status):
        assert classify_keyword_density(density) == status
