from pathlib import Path

from converter import convert
from store import DocumentStore

MARKDOWN_SUFFIX = '.md'


def is_markdown_file(path):
    return path.is_file() and path.suffix == MARKDOWN_SUFFIX


def load_directory(folder, store=None):
    """Render every markdown file directly inside `folder` into a store.

    Any read or conversion error aborts the whole load.
    """
    path = Path(folder)
    if not path.is_dir():
        raise NotADirectoryError(f"{folder} is not a directory")

    if store is None:
        store = DocumentStore()

    for entry in sorted(path.iterdir()):
        if not is_markdown_file(entry):
            continue

        content = entry.read_text(encoding='utf-8')
        store.put(entry.stem, convert(content, entry.stem))
        print(f"Loaded: {entry}")

    print("All Markdown files loaded successfully.")
    return store
