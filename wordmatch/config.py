from __future__ import annotations
import os

# Server
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', 8080))

# Word list seeded at startup and flushed at shutdown
WORDS_FILE = os.getenv('WORDS_FILE', 'data/words.txt')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
