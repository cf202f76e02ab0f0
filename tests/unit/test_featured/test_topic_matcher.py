"""Unit tests for keyword topic matching."""

from livefeed.config.constants import DEFAULT_AI_KEYWORDS
from livefeed.featured.topic_matcher import KeywordMatcher, topic_predicate
from tests.helpers.feeds import make_item


class TestKeywordMatcher:
    """Tests for KeywordMatcher."""

    def test_keyword_count_skips_blanks(self) -> None:
        """Blank keywords are ignored."""
        matcher = KeywordMatcher(["ai", " ", "llm"])
        assert matcher.keyword_count == 2

    def test_case_insensitive(self) -> None:
        """Matching ignores case."""
        matcher = KeywordMatcher(["OpenAI"])
        assert matcher.matches("openai ships a model")
        assert matcher.matches("OPENAI")

    def test_short_keyword_not_inside_words(self) -> None:
        """Short keywords do not match inside longer English words."""
        matcher = KeywordMatcher(["ai"])

        assert not matcher.matches("The minister said again")
        assert not matcher.matches("Fresh air")

    def test_short_keyword_standalone(self) -> None:
        """Short keywords match as words, plurals and next to punctuation."""
        matcher = KeywordMatcher(["ai", "llm"])

        assert matcher.matches("AI regulation")
        assert matcher.matches("Generative-AI boom")
        assert matcher.matches("(AI)")
        assert matcher.matches("Open LLMs compared")

    def test_short_keyword_before_korean_particle(self) -> None:
        """Korean particles attach directly and still match."""
        matcher = KeywordMatcher(["ai"])

        assert matcher.matches("AI가 바꾸는 산업")
        assert matcher.matches("국내 AI 스타트업")

    def test_short_keyword_camel_cased(self) -> None:
        """Uppercase keywords glued to a lowercase prefix still match."""
        matcher = KeywordMatcher(["ai"])

        assert matcher.matches("GenAI startups raise record funding")
        assert matcher.matches("xAI releases Grok 3")
        assert matcher.matches("StabilityAI의 새 모델")
        assert not matcher.matches("Thai curry festival")
        assert not KeywordMatcher(["gpt"]).matches("Egypt trade talks")

    def test_short_keyword_followed_by_digit(self) -> None:
        """Model names like GPT4o still match."""
        assert KeywordMatcher(["gpt"]).matches("GPT4o launch")

    def test_long_keyword_is_substring(self) -> None:
        """Longer keywords match anywhere."""
        matcher = KeywordMatcher(["chatgpt", "인공지능"])

        assert matcher.matches("NewChatGPTFeature")
        assert matcher.matches("생성형인공지능 시장")

    def test_find_returns_first_keyword(self) -> None:
        """find() reports the first configured keyword that matches."""
        matcher = KeywordMatcher(["gemini", "claude"])

        assert matcher.find("Claude and Gemini compared") == "gemini"
        assert matcher.find("nothing here") is None
        assert matcher.find("") is None

    def test_default_keywords(self) -> None:
        """The built-in AI list matches English and Korean headlines."""
        matcher = KeywordMatcher(DEFAULT_AI_KEYWORDS)

        assert matcher.matches("딥러닝 칩 수요 급증")
        assert matcher.matches("Copilot gets new features")
        assert not matcher.matches("증시 마감 시황")


class TestTopicPredicate:
    """Tests for topic_predicate."""

    def test_matches_any_field(self) -> None:
        """Title, description and category are all searched."""
        predicate = topic_predicate(["llm"])

        assert predicate(make_item("New LLM"))
        assert predicate(make_item("Plain", description="an LLM story"))
        assert predicate(make_item("Plain", category="llm"))
        assert not predicate(make_item("Plain", description="markets"))

    def test_custom_fields(self) -> None:
        """Only the configured fields are searched."""
        predicate = topic_predicate(["llm"], fields=["title"])

        assert not predicate(make_item("Plain", description="an LLM story"))

    def test_missing_attribute(self) -> None:
        """Missing attributes count as empty text."""
        predicate = topic_predicate(["llm"], fields=["title", "nope"])

        assert predicate(make_item("LLM"))

    def test_accepts_matcher(self) -> None:
        """A prebuilt matcher is reused."""
        predicate = topic_predicate(KeywordMatcher(["gpt"]))

        assert predicate(make_item("GPT-5 rumours"))
