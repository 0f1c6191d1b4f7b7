"""
Settings and configuration for Locit.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Lexicon database with extra special cases - defaults to data/lexicon.db
DEFAULT_LEXICON_PATH = DATA_DIR / "lexicon.db"

# Environment variable for custom lexicon path
LEXICON_PATH = Path(os.environ.get("LOCIT_LEXICON_PATH", DEFAULT_LEXICON_PATH))

# Debug mode
DEBUG = os.environ.get("LOCIT_DEBUG", "").lower() in ("1", "true", "yes")
