import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from wordmatch.dictionary import WordStore
from wordmatch.errors import InvalidInput, PersistenceIOFailure
from wordmatch.managers.analysis import AnalysisManager


def test_end_to_end_scenario():
    manager = AnalysisManager()

    first = manager.analyze('dog')
    assert first.value is None and first.lexical is None
    assert manager.store.snapshot() == ('dog',)

    second = manager.analyze('cat')
    assert (second.value, second.lexical) == ('dog', 'dog')
    assert manager.store.snapshot() == ('cat', 'dog')

    third = manager.analyze('cat')
    assert third.value == 'dog'
    assert third.lexical == 'cat'
    assert manager.store.snapshot() == ('cat', 'dog')


def test_value_match_never_returns_the_text_itself():
    manager = AnalysisManager(WordStore(['abc', 'abd', 'xyz']))
    assert manager.analyze('abc').value == 'abd'


def test_empty_text_is_searched_and_added():
    manager = AnalysisManager(WordStore(['b', 'a']))
    result = manager.analyze('')
    assert result.value == 'a'
    assert result.lexical == 'a'
    assert '' in manager.store


@pytest.mark.parametrize('text', [None, 42, ['dog'], {'text': 'dog'}])
def test_non_string_text_is_invalid(text):
    manager = AnalysisManager()
    with pytest.raises(InvalidInput):
        manager.analyze(text)
    assert len(manager.store) == 0


def test_concurrent_requests_all_recorded():
    manager = AnalysisManager()
    texts = [f'word{i:03d}' for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(manager.analyze, texts))

    assert list(manager.store.snapshot()) == sorted(texts)
    for text, result in zip(texts, results):
        assert result.value != text


def test_load_seeds_store(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('pear\napple\npear\n', encoding='utf-8')
    manager = AnalysisManager(WordStore(['stale']))
    manager.load(path)
    assert manager.store.snapshot() == ('apple', 'pear')


def test_load_failure_starts_empty(tmp_path, caplog):
    manager = AnalysisManager(WordStore(['stale']))
    with caplog.at_level(logging.ERROR):
        # a directory cannot be read as a word list
        manager.load(tmp_path)
    assert len(manager.store) == 0
    assert 'could not load word list' in caplog.text


def test_save_writes_sorted_words(tmp_path):
    path = tmp_path / 'words.txt'
    manager = AnalysisManager()
    for text in ['pear', 'apple', 'fig']:
        manager.analyze(text)
    manager.save(path)
    assert path.read_text(encoding='utf-8') == 'apple\nfig\npear\n'


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    manager = AnalysisManager(WordStore(['kiwi']))
    with caplog.at_level(logging.ERROR):
        manager.save(tmp_path)
    assert 'could not save word list' in caplog.text


def test_bad_byte_in_word_file_keeps_other_words(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_bytes('apple\nbanana\ncaf\xe9\n'.encode('latin-1'))
    manager = AnalysisManager()
    manager.load(path)
    manager.analyze('kiwi')
    manager.save(path)
    saved = path.read_text(encoding='utf-8').splitlines()
    assert saved == ['apple', 'banana', 'caf\ufffd', 'kiwi']


def test_unreadable_word_file_is_not_overwritten(tmp_path, monkeypatch, caplog):
    path = tmp_path / 'words.txt'
    path.write_text('apple\nbanana\n', encoding='utf-8')

    def fail_load(path):
        raise PersistenceIOFailure(path, 'permission denied')

    monkeypatch.setattr('wordmatch.managers.analysis.load_words', fail_load)
    manager = AnalysisManager()
    manager.load(path)
    manager.analyze('kiwi')
    with caplog.at_level(logging.ERROR):
        manager.save(path)
    assert path.read_text(encoding='utf-8') == 'apple\nbanana\n'
    assert 'not overwriting' in caplog.text
