# Dictionary sentinels
DEFINITION_NOT_FOUND = "No definition found"
DEFINITION_ERROR = "Error fetching definition"
DEFAULT_POS = "noun"

# Ranking / annotation limits
CANDIDATE_POOL_SIZE = 50
TARGET_WORD_COUNT = 20

# Run statuses
STATUS_IDLE = "idle"
STATUS_LOADING = "loading"
STATUS_SUCCESS = "success"
STATUS_NO_RESULTS = "no_results"
STATUS_FAILED = "failed"

# Run error kinds
ERROR_INPUT = "input"
ERROR_NO_RESULTS = "no_results"
ERROR_TRANSPORT = "transport"

# User facing messages
MSG_EMPTY_URL = "Please enter a URL"
MSG_INVALID_URL = "Please enter a valid http(s) URL"
MSG_TOKENIZER_NOT_READY = "Tokenizer not ready"
MSG_RUN_IN_PROGRESS = "An analysis is already running"
MSG_FETCH_FAILED = "Failed to fetch URL"
MSG_NO_CONTENT = "No content received from URL"
MSG_ANALYSIS_FAILED = "Failed to analyze text"
MSG_NO_RESULTS = (
    "Sorry, no Japanese words were found in this article. Please try another URL."
)

# Export
CSV_HEADER = ["Front", "Back", "Part of Speech", "Definition"]
CSV_DELIMITER = ";"
CSV_FILENAME = "anki_import.csv"

# Content / language adapters
FILE_TYPE_HTML = "html"
LANG_JA = "ja"
