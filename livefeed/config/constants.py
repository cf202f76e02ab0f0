"""Constants for feed topics and the featured section."""

from typing import Final


FEATURED_COUNT: Final[int] = 3

# Item fields searched by the featured topic predicate
FEATURED_FIELDS: Final[tuple[str, ...]] = ("title", "description", "category")

AI_TOPIC_NAME: Final[str] = "ai"

DEFAULT_AI_KEYWORDS: Final[tuple[str, ...]] = (
    "ai",
    "인공지능",
    "머신러닝",
    "딥러닝",
    "chatgpt",
    "오픈ai",
    "openai",
    "llm",
    "생성형",
    "copilot",
    "코파일럿",
    "gpt",
    "claude",
    "gemini",
)

CATEGORY_ALL: Final[str] = "all"

CATEGORY_LABELS: Final[dict[str, str]] = {
    "all": "전체",
    "politics": "정치",
    "economy": "경제",
    "society": "사회",
    "culture": "문화",
    "international": "국제",
    "sports": "스포츠",
    "technology": "기술",
}
