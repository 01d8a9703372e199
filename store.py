import threading


class DocumentStore:
    """In-memory cache of rendered documents keyed by file stem.

    Every operation holds the lock only for its own duration. Loading fills
    the store before the server starts, after that it is only read.
    """

    def __init__(self):
        self._documents = {}
        self._lock = threading.Lock()

    def put(self, name, document):
        with self._lock:
            self._documents[name] = document

    def get(self, name):
        with self._lock:
            return self._documents.get(name)

    def items(self):
        with self._lock:
            return list(self._documents.items())

    def __len__(self):
        with self._lock:
            return len(self._documents)

    def __contains__(self, name):
        with self._lock:
            return name in self._documents
