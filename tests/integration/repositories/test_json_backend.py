"""Integration tests for the JSON file backend."""

import json

import pytest

from errors import StorageError
from models import Response
from repositories import JsonResponseStorage, configure_backend, get_storage, InMemoryResponseStorage


class TestJsonFile:

    def test_file_layout(self, data_dir):
        repo = JsonResponseStorage(data_dir=data_dir)
        response = Response(text="Nice trail", score=0.4, confidence=0.4)
        repo.insert(response)

        data = json.loads((data_dir / "responses.json").read_text())

        assert data == {"responses": [{
            "id": str(response.id),
            "text": "Nice trail",
            "score": 0.4,
            "confidence": 0.4,
        }]}

    def test_survives_reload(self, data_dir):
        first = JsonResponseStorage(data_dir=data_dir)
        a = Response(text="a", score=0.2, confidence=0.2)
        b = Response(text="b", score=-0.2, confidence=0.2)
        first.insert(a)
        first.insert(b)

        second = JsonResponseStorage(data_dir=data_dir)

        assert second.fetch_all() == [a, b]

    def test_no_temp_file_left(self, data_dir):
        repo = JsonResponseStorage(data_dir=data_dir)
        repo.insert(Response(text="a"))
        assert [p.name for p in data_dir.iterdir()] == ["responses.json"]

    def test_corrupt_file_raises(self, data_dir):
        data_dir.mkdir()
        (data_dir / "responses.json").write_text("{not json")

        with pytest.raises(StorageError):
            JsonResponseStorage(data_dir=data_dir).fetch_all()

    def test_corrupt_record_skipped(self, data_dir):
        data_dir.mkdir()
        good = Response(text="good", score=0.3, confidence=0.3)
        (data_dir / "responses.json").write_text(json.dumps({"responses": [
            {"id": "nope", "text": 5},
            good.to_record(),
        ]}))

        assert JsonResponseStorage(data_dir=data_dir).fetch_all() == [good]

    def test_unwritable_dir_raises(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("a file, not a directory")
        repo = JsonResponseStorage(data_dir=blocker / "data")

        with pytest.raises(StorageError):
            repo.insert(Response(text="a"))


class TestBackendSelection:

    def test_configure_json(self, data_dir):
        configure_backend("json", data_dir=data_dir)
        try:
            storage = get_storage()
            assert isinstance(storage, JsonResponseStorage)
            assert storage.path == data_dir / "responses.json"
            assert get_storage() is storage
        finally:
            configure_backend("memory")

    def test_configure_memory(self):
        configure_backend("memory")
        assert isinstance(get_storage(), InMemoryResponseStorage)

    def test_unknown_backend(self):
        configure_backend("carrier-pigeon")
        try:
            with pytest.raises(ValueError):
                get_storage()
        finally:
            configure_backend("memory")


class TestMalformedFiles:
    """Files that cannot be fully parsed must never be overwritten."""

    def write_raw(self, data_dir, content: bytes):
        data_dir.mkdir()
        path = data_dir / "responses.json"
        path.write_bytes(content)
        return path

    def test_unreadable_record_survives_insert(self, data_dir):
        good = Response(text="ok", score=0.3, confidence=0.3)
        bad = {"id": "not-a-uuid", "text": "mine", "score": 2.0, "confidence": 1.5}
        path = self.write_raw(data_dir, json.dumps({"responses": [bad, good.to_record()]}).encode())
        repo = JsonResponseStorage(data_dir=data_dir)

        repo.insert(Response(text="great", score=0.6, confidence=0.6))

        on_disk = json.loads(path.read_text())["responses"]
        assert on_disk[0] == bad
        assert [r["text"] for r in on_disk] == ["mine", "ok", "great"]
        assert [r.text for r in repo.fetch_all()] == ["ok", "great"]

    def test_unreadable_record_survives_update_and_delete(self, data_dir):
        a = Response(text="a", score=0.1, confidence=0.1)
        b = Response(text="b", score=0.2, confidence=0.2)
        bad = {"text": "no id"}
        path = self.write_raw(data_dir, json.dumps({"responses": [a.to_record(), bad, b.to_record()]}).encode())
        repo = JsonResponseStorage(data_dir=data_dir)

        assert repo.update(b.id, {"text": "b2"})
        assert repo.delete(a.id)

        on_disk = json.loads(path.read_text())["responses"]
        assert on_disk == [bad, {**b.to_record(), "text": "b2"}]

    def test_bare_list_raises_and_file_untouched(self, data_dir):
        content = json.dumps([{"text": "mine", "score": 0.5, "confidence": 0.5}]).encode()
        path = self.write_raw(data_dir, content)
        repo = JsonResponseStorage(data_dir=data_dir)

        with pytest.raises(StorageError):
            repo.fetch_all()
        with pytest.raises(StorageError):
            repo.insert(Response(text="x"))

        assert path.read_bytes() == content

    @pytest.mark.parametrize("content", [
        b'{"responses": null}',
        b'{"responses": {"a": 1}}',
        b'{"other": []}',
        b'"just a string"',
    ])
    def test_unexpected_layout_raises(self, data_dir, content):
        self.write_raw(data_dir, content)
        with pytest.raises(StorageError):
            JsonResponseStorage(data_dir=data_dir).fetch_all()

    def test_invalid_utf8_raises(self, data_dir):
        self.write_raw(data_dir, b'{"responses": ["\xff\xfe"]}')
        with pytest.raises(StorageError):
            JsonResponseStorage(data_dir=data_dir).fetch_all()

    def test_empty_object_is_empty(self, data_dir):
        self.write_raw(data_dir, b"{}")
        assert JsonResponseStorage(data_dir=data_dir).fetch_all() == []
