#!/usr/bin/env python3
"""
Improve data/words.json with dictionary definitions and Turkish translations.

Writes data/words_backup.json (verbatim copy of the source) and
data/words_improved.json. The source file is never modified.

Usage:
    python scripts/improve_words_data.py
    python scripts/improve_words_data.py --file data/words.json --delay 0.5
"""

import sys

from word_enrichment.programmatic.enrichment_pipeline import main

if __name__ == "__main__":
    sys.exit(main())
