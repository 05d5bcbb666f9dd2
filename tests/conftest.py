"""
Shared pytest fixtures.

Tests never talk to a real Firestore project. ``FakeFirestore`` keeps
collections in dicts and implements the slice of the client API that
``RecordStore`` uses: ``collection().where(filter=FieldFilter(...))``,
``stream()``, ``add()`` and ``document().get() / update() / set()``.
"""
import copy
import itertools
import operator

import pytest
from fastapi.testclient import TestClient

from teenhealth.api import deps
from teenhealth.core.config import Settings, get_settings
from teenhealth.main import app
from teenhealth.services.account_service import AccountService
from teenhealth.services.record_store import Collections, RecordStore

_OPS = {
    "==": operator.eq,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocumentRef:
    def __init__(self, docs, doc_id):
        self._docs = docs
        self.id = doc_id

    def get(self):
        return FakeSnapshot(self.id, self._docs.get(self.id))

    def set(self, data, merge=False):
        if merge and self.id in self._docs:
            self._docs[self.id].update(copy.deepcopy(data))
        else:
            self._docs[self.id] = copy.deepcopy(data)

    def update(self, data):
        if self.id not in self._docs:
            raise KeyError(self.id)
        self._docs[self.id].update(copy.deepcopy(data))


class FakeQuery:
    def __init__(self, docs, filters=(), limit=None):
        self._docs = docs
        self._filters = list(filters)
        self._limit = limit

    def where(self, field_path=None, op_string=None, value=None, *, filter=None):
        if filter is not None:
            field_path, op_string, value = filter.field_path, filter.op_string, filter.value
        return FakeQuery(self._docs, self._filters + [(field_path, _OPS[op_string], value)], self._limit)

    def limit(self, count):
        return FakeQuery(self._docs, self._filters, count)

    def _matches(self, data):
        for field, op, value in self._filters:
            if field not in data or data[field] is None:
                return False
            if not op(data[field], value):
                return False
        return True

    def stream(self):
        matched = [(doc_id, data) for doc_id, data in list(self._docs.items()) if self._matches(data)]
        if self._limit is not None:
            matched = matched[:self._limit]
        for doc_id, data in matched:
            yield FakeSnapshot(doc_id, data)


class FakeCollection(FakeQuery):
    _ids = itertools.count(1)

    def __init__(self, docs):
        super().__init__(docs)

    def document(self, doc_id=None):
        return FakeDocumentRef(self._docs, doc_id or self._new_id())

    def add(self, data):
        ref = self.document()
        ref.set(data)
        return None, ref

    def _new_id(self):
        return f"doc{next(self._ids)}"


class FakeFirestore:
    def __init__(self):
        self.collections = {}

    def collection(self, name):
        return FakeCollection(self.collections.setdefault(name, {}))

    def docs(self, name):
        """Stored documents of a collection, for assertions."""
        return list(self.collections.get(name, {}).values())


TEST_SETTINGS = Settings(
    JWT_SECRET_KEY="test-secret",
    PAYMENT_API_URL="https://payments.test/v1",
    PAYMENT_API_KEY="pk_test",
    _env_file=None,
)


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def store(fake_db):
    return RecordStore(fake_db)


@pytest.fixture
def accounts(store):
    return AccountService(store, TEST_SETTINGS)


@pytest.fixture
def client(store):
    app.dependency_overrides[deps.get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS
    # Not used as a context manager: startup (Firebase init) is skipped
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(accounts):
    """Register an account and return (account, auth headers)."""

    def _make(email="teen@example.com", password="s3cretpass", role="adolescent"):
        account = accounts.register(email, password, role)
        token = accounts.login(email, password)
        return account, {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def link_guardian(store):
    def _link(adolescent_id, guardian_id):
        store.insert(Collections.ADOLESCENTS, {"userId": adolescent_id, "guardianId": guardian_id})

    return _link
