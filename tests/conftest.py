import pytest
from fastapi.testclient import TestClient

from wordmatch import config, main


@pytest.fixture
def words_file(tmp_path, monkeypatch):
    path = tmp_path / 'words.txt'
    monkeypatch.setattr(config, 'WORDS_FILE', str(path))
    return path


@pytest.fixture
def client(words_file):
    # entering the client runs the lifespan: load on enter, save on exit
    with TestClient(main.app) as client:
        yield client
