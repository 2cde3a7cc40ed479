"""
In-memory stand-in for the Firestore client surface used by the services.

Supports document get/set (with merge), auto ids, where/order_by/limit
queries, batches, and the Increment / ArrayUnion / SERVER_TIMESTAMP
transforms.
"""
import copy
import itertools
import operator
from datetime import datetime, timezone

from firebase_admin import firestore

_MISSING = object()

_OPERATORS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, client, collection_name, doc_id):
        self._client = client
        self._collection_name = collection_name
        self.id = doc_id

    def get(self):
        self._client._check("get", self._collection_name)
        return FakeSnapshot(self.id, self._client._docs(self._collection_name).get(self.id))

    def set(self, data, merge=False):
        self._client._check("set", self._collection_name)
        docs = self._client._docs(self._collection_name)
        existing = docs.get(self.id) if merge else None
        docs[self.id] = _apply(existing or {}, data)


class FakeQuery:
    def __init__(self, client, collection_name, filters=(), order=None, limit=None):
        self._client = client
        self._collection_name = collection_name
        self._filters = tuple(filters)
        self._order = order
        self._limit = limit

    def where(self, field, op, value):
        return FakeQuery(self._client, self._collection_name,
                         self._filters + ((field, op, value),), self._order, self._limit)

    def order_by(self, field, direction=firestore.Query.ASCENDING):
        return FakeQuery(self._client, self._collection_name,
                         self._filters, (field, direction), self._limit)

    def limit(self, count):
        return FakeQuery(self._client, self._collection_name,
                         self._filters, self._order, count)

    def stream(self):
        self._client._check("query", self._collection_name)
        matches = [
            (doc_id, data)
            for doc_id, data in self._client._docs(self._collection_name).items()
            if all(_matches(data, f) for f in self._filters)
        ]
        if self._order:
            field, direction = self._order
            matches = [m for m in matches if field in m[1]]
            matches.sort(key=lambda m: m[1][field],
                         reverse=direction == firestore.Query.DESCENDING)
        if self._limit:
            matches = matches[:self._limit]
        return iter([FakeSnapshot(doc_id, data) for doc_id, data in matches])

    def get(self):
        return list(self.stream())


class FakeCollection(FakeQuery):
    def __init__(self, client, name):
        super().__init__(client, name)
        self.name = name

    def document(self, doc_id=None):
        if doc_id is None:
            doc_id = f"auto{next(self._client._ids):06d}"
        return FakeDocumentReference(self._client, self.name, doc_id)


class FakeBatch:
    def __init__(self):
        self._writes = []

    def set(self, reference, data, merge=False):
        self._writes.append((reference, data, merge))

    def commit(self):
        for reference, data, merge in self._writes:
            reference.set(data, merge=merge)
        self._writes = []


class FakeFirestore:
    def __init__(self):
        self.collections = {}
        self.failures = {}
        self._ids = itertools.count(1)

    def collection(self, name):
        return FakeCollection(self, name)

    def batch(self):
        return FakeBatch()

    def fail(self, collection_name, action, message="storage unavailable"):
        """Make every ``action`` ("get", "set", "query") on a collection raise"""
        self.failures[(collection_name, action)] = message

    def docs(self, collection_name):
        """Copy of the stored documents, keyed by id"""
        return copy.deepcopy(self._docs(collection_name))

    def _docs(self, collection_name):
        return self.collections.setdefault(collection_name, {})

    def _check(self, action, collection_name):
        message = self.failures.get((collection_name, action))
        if message is not None:
            raise RuntimeError(message)


def _matches(data, condition):
    field, op, value = condition
    current = data.get(field, _MISSING)
    if current is _MISSING:
        return False
    try:
        return _OPERATORS[op](current, value)
    except TypeError:
        return False


def _apply(existing, updates):
    result = copy.deepcopy(existing)
    for key, value in updates.items():
        if value is firestore.SERVER_TIMESTAMP:
            result[key] = datetime.now(timezone.utc)
        elif isinstance(value, firestore.Increment):
            current = result.get(key)
            base = current if isinstance(current, (int, float)) else 0
            result[key] = base + value.value
        elif isinstance(value, firestore.ArrayUnion):
            current = list(result.get(key) or [])
            for item in value.values:
                if item not in current:
                    current.append(copy.deepcopy(item))
            result[key] = current
        else:
            result[key] = copy.deepcopy(value)
    return result
