import os

# n-gram size used for plagiarism fingerprints
NGRAM_DEFAULT: int = 5
NGRAM_MIN: int = 3
NGRAM_MAX: int = 7

# /* ~~~ similarity thresholds ~~~ */
EARLY_EXIT_SIMILARITY: float = 0.98   # near-exact duplicate, stop scanning
SOURCE_MIN_SIMILARITY: float = 0.30   # below this, an external match is not named
PLAGIARISM_PERCENTILE: float = 0.95

# /* ~~~ document statistics ~~~ */
VARIANCE_FLOOR: float = 0.0001

# /* ~~~ AI-likelihood feature weights (sum of first eight = 1.0) ~~~ */
W_BURSTINESS: float = 0.22
W_TYPE_TOKEN: float = 0.18
W_STOPWORD_MID: float = 0.12
W_WORD_LENGTH: float = 0.12
W_CHAR_ENTROPY: float = 0.10
W_DOC_REPETITION: float = 0.10
W_SENTENCE_REPETITION: float = 0.10
W_PUNCTUATION: float = 0.06
DIGIT_PENALTY: float = 0.08

# Feature centres and scales
STOPWORD_CENTER: float = 0.45
ENTROPY_CENTER: float = 3.5
WORD_LENGTH_BASE: float = 4.0
WORD_LENGTH_SPAN: float = 4.0
PUNCTUATION_SATURATION: int = 8
DIGIT_SATURATION: int = 6

# /* ~~~ highlight safety cap for multi-block scans ~~~ */
MAX_HIGHLIGHT_UNITS: int = 20_000

# Adaptive thresholds used to pick sentences to highlight from a report
AI_HIGHLIGHT_THRESHOLDS = (70, 50)
PLAGIARISM_HIGHLIGHT_THRESHOLDS = (50, 40)
HIGHLIGHT_TOP_FRACTION: float = 0.10

# Tokenizer path: "unicode" (default) or "latin" (ASCII + Latin-1 letters only)
TOKENIZER: str = os.environ.get("TEXTCHECK_TOKENIZER", "unicode").strip().lower()

# Default corpus store DSN: "memory://" or "sqlite:///path/to/corpus.sqlite"
DEFAULT_DB: str = os.environ.get("TEXTCHECK_DB", "memory://")

# Progress logging (set TEXTCHECK_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("TEXTCHECK_VERBOSE") == "1"

# File types accepted by the extraction service
SUPPORTED_EXTENSIONS = {"pdf", "docx", "txt"}

STOPWORDS = frozenset({
    "the", "of", "and", "to", "in", "a", "is", "that", "for", "on", "with", "as",
    "by", "it", "be", "are", "this", "an", "or", "from", "at", "which", "but",
    "not", "we", "our", "their", "also", "can", "have", "has", "was", "were",
    "than", "these", "those", "such", "may", "more", "most", "any", "all",
    "some", "into", "between", "over", "under", "about", "after", "before",
    "during", "through", "per", "i", "you", "he", "she", "they", "them", "his",
    "her", "its", "there", "here",
})
