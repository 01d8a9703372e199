import pytest

from app import app
from store import DocumentStore


@pytest.fixture
def docs_dir(tmp_path):
    (tmp_path / "a.md").write_text("# Alpha\n\nFirst document.\n", encoding="utf-8")
    (tmp_path / "b.md").write_text("No heading here, just text.\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client():
    previous = app.config['DOCUMENTS']
    app.config['DOCUMENTS'] = DocumentStore()
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
    app.config['DOCUMENTS'] = previous
