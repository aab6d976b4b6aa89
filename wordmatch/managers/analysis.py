from __future__ import annotations
from typing import Optional

from ..dictionary import WordStore
from ..errors import InvalidInput, PersistenceIOFailure
from ..logging_config import get_logger
from ..schemas import AnalyzeResult
from ..wordlist import PathLike, load_words, save_words

logger = get_logger(__name__)

class AnalysisManager:
    def __init__(self, store: Optional[WordStore] = None):
        self.store = store if store is not None else WordStore()
        # set when the word file exists but could not be read
        self.load_failed = False

    def analyze(self, text) -> AnalyzeResult:
        if not isinstance(text, str):
            raise InvalidInput('text must be a string')
        # both searches and the add see one consistent store
        with self.store.locked() as store:
            value = store.find_closest_by_score(text)
            lexical = store.find_closest_lexical(text)
            store.add(text)
        logger.debug('analyzed %r -> value=%r lexical=%r', text, value, lexical)
        return AnalyzeResult(value=value, lexical=lexical)

    def load(self, path: PathLike):
        try:
            words = load_words(path)
        except PersistenceIOFailure:
            logger.exception('could not load word list, starting empty')
            words = []
            self.load_failed = True
        else:
            self.load_failed = False
        self.store.seed(words)
        logger.info('loaded %d words from %s', len(self.store), path)

    def save(self, path: PathLike):
        words = self.store.snapshot()
        if self.load_failed:
            # the file still holds words this session never saw
            logger.error('word list was not loaded, not overwriting %s; %d words lost', path, len(words))
            return
        try:
            save_words(path, words)
        except PersistenceIOFailure:
            logger.exception('could not save word list, %d words lost', len(words))
            return
        logger.info('saved %d words to %s', len(words), path)

# Singleton instance
manager = AnalysisManager()
