# Common utilities
from .config_loader import (
    load_config,
    load_matching_settings,
    load_word_lists_config,
)
from .csv_utils import configure_csv, read_csv
from .log_config import setup_logging
from .text_utils import get_words, string_to_hash, strip_accents
