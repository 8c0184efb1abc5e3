"""Constants for the Recipe Normalizer package."""

DOMAIN = "recipe_normalizer"

# Environment variable keys
CONF_API_KEY = "GEMINI_API_KEY"
CONF_MODELS = "RECIPE_NORMALIZER_MODELS"
CONF_TIMEOUT = "RECIPE_NORMALIZER_TIMEOUT"
CONF_MAX_TEXT_LENGTH = "RECIPE_NORMALIZER_MAX_TEXT_LENGTH"

# Default values
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_TEXT_LENGTH = 8000
DEFAULT_TEMPERATURE = 0.7

# Models tried in order; only a "not found" response advances to the next one
DEFAULT_MODELS = [
    "gemini-2.5-flash",
    "gemini-3-flash-preview",
    "gemini-2.5-pro",
]

API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

# Every ingredient quantity leaves the pipeline in this unit
CANONICAL_UNIT = "g"

# Extraction routes recorded on the result
METHOD_STRUCTURED = "structured"
METHOD_LOCAL = "local"
METHOD_EMPTY = "empty"

# Payload keys
DATA_TITLE = "title"
DATA_DESCRIPTION = "description"
DATA_PINNED_COMMENT = "pinned_comment"
DATA_FREEFORM_TEXT = "freeform_text"

# Section markers and keywords
INGREDIENT_MARKERS = [
    "재료", "레시피", "필요한 재료", "준비물", "준비 재료",
    "ingredients", "ingredient", "materials",
]
STEP_MARKERS = [
    "조리방법", "조리 방법", "조리법", "조리순서", "조리 순서", "만드는 법",
    "만드는법", "만들기", "방법", "순서",
    "method", "steps", "instructions", "directions",
]
INGREDIENT_KEYWORDS = [
    "재료", "필요한", "준비물", "레시피", "ingredient", "ingredients", "material", "materials",
]
STEP_KEYWORDS = [
    "조리", "만들기", "만드는", "방법", "순서", "step", "steps", "method",
    "instruction", "instructions", "direction", "directions",
]
# A keyword header is a short line of a few words, one of them a keyword
SECTION_HEADER_MAX_LENGTH = 20
SECTION_HEADER_MAX_WORDS = 3

# Ingredients recorded with no measurable amount
VAGUE_QUANTITY_KEYWORDS = [
    "약간", "조금", "적당히", "적당", "소량", "조금씩", "약간씩", "한꼬집", "꼬집", "톡톡", "취향껏", "기호에",
    "a bit", "a little", "a pinch", "pinch of", "to taste", "as needed", "some",
]

# Decorative emoji stripped ahead of the general character filter
DECORATIVE_EMOJI = "🔗📌⭐👍❤️💬✅👉🔥😋🍳"

# Well-known dishes searched as a last resort when naming a recipe
KNOWN_DISH_NAMES = [
    "제육볶음", "된장찌개", "김치찌개", "어묵볶음", "콩나물무침",
    "계란찜", "시금치나물", "미역국", "콩자반",
]
