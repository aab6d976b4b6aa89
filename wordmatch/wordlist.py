from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Union

from .errors import PersistenceIOFailure
from .logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def load_words(path: PathLike) -> List[str]:
    """Read one word per line. A missing file is created empty."""
    path = Path(path)
    if not path.exists():
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        except OSError as e:
            raise PersistenceIOFailure(path, str(e)) from e
        logger.info('file created %s', path)
        return []

    words: List[str] = []
    try:
        # malformed bytes become U+FFFD rather than failing the whole load
        with path.open('r', encoding='utf-8', errors='replace', newline='') as fh:
            for line in fh:
                # blank lines are kept: the empty string is a valid word
                words.append(line.rstrip('\r\n'))
    except OSError as e:
        raise PersistenceIOFailure(path, str(e)) from e
    return words


def save_words(path: PathLike, words: Iterable[str]) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding='utf-8', newline='\n') as fh:
            for word in words:
                fh.write(word)
                fh.write('\n')
    except OSError as e:
        raise PersistenceIOFailure(path, str(e)) from e
