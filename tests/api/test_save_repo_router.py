import json

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from api.main import create_app
from repos.archive import RepoArchive


def make_record(full_name: str, stars: int) -> dict:
    return {
        "full_name": full_name,
        "description": f"{full_name} description",
        "stargazers_count": stars,
        "forks_count": 0,
        "html_url": f"https://github.com/{full_name}",
    }


@pytest.fixture
def archive_path(tmp_path):
    return tmp_path / "public" / "repoData.json"


@pytest.fixture
def client(archive_path):
    app = create_app()
    app.container.repo_archive.override(
        providers.Singleton(RepoArchive, path=archive_path)
    )
    with TestClient(app) as test_client:
        yield test_client
    app.container.repo_archive.reset_override()


def read_archive(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestSaveRepo:
    def test_creates_archive_with_one_record(self, client, archive_path):
        record = make_record("octo/hello", 3)
        response = client.post("/api/saveRepo", json=record)

        assert response.status_code == 200
        assert response.json() == {"message": "Data saved successfully!"}
        assert read_archive(archive_path) == [record]

    def test_appends_to_existing_archive(self, client, archive_path):
        archive_path.parent.mkdir(parents=True)
        archive_path.write_text(json.dumps([make_record("a/a", 1)]), encoding="utf-8")

        response = client.post("/api/saveRepo", json=make_record("b/b", 2))

        assert response.json() == {"message": "Data saved successfully!"}
        stored = read_archive(archive_path)
        assert [r["full_name"] for r in stored] == ["a/a", "b/b"]
        assert [r["stargazers_count"] for r in stored] == [1, 2]

    def test_sequential_posts_keep_submission_order(self, client, archive_path):
        names = [f"owner/repo{i}" for i in range(4)]
        for i, name in enumerate(names):
            assert client.post("/api/saveRepo", json=make_record(name, i)).status_code == 200

        assert [r["full_name"] for r in read_archive(archive_path)] == names

    def test_unknown_fields_pass_through(self, client, archive_path):
        record = make_record("octo/hello", 3)
        record["topics"] = ["python"]
        client.post("/api/saveRepo", json=record)
        assert read_archive(archive_path)[0]["topics"] == ["python"]

    def test_invalid_json_is_500(self, client, archive_path):
        response = client.post(
            "/api/saveRepo",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save data"}
        assert not archive_path.exists()

    def test_non_array_archive_is_500_and_untouched(self, client, archive_path):
        archive_path.parent.mkdir(parents=True)
        archive_path.write_text('{"precious": "data"}', encoding="utf-8")

        response = client.post("/api/saveRepo", json=make_record("b/b", 2))

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save data"}
        assert read_archive(archive_path) == {"precious": "data"}

    def test_non_object_body_is_500(self, client):
        response = client.post("/api/saveRepo", json=[1, 2, 3])
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save data"}


class TestWriteFailure:
    def test_unwritable_archive_is_500(self, tmp_path):
        app = create_app()
        # a directory cannot be rewritten as a file
        app.container.repo_archive.override(providers.Singleton(RepoArchive, path=tmp_path))
        with TestClient(app) as client:
            response = client.post("/api/saveRepo", json=make_record("octo/hello", 1))
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save data"}


class TestArchiveFile:
    def test_missing_archive_is_404(self, client):
        assert client.get("/repoData.json").status_code == 404

    def test_served_oldest_first(self, client):
        client.post("/api/saveRepo", json=make_record("a/a", 1))
        client.post("/api/saveRepo", json=make_record("b/b", 2))

        response = client.get("/repoData.json")

        assert response.status_code == 200
        assert [r["full_name"] for r in response.json()] == ["a/a", "b/b"]


class TestHealth:
    def test_reports_archive_presence(self, client):
        assert client.get("/health/").json() == {"status": "ok", "archive": "absent"}
        client.post("/api/saveRepo", json=make_record("a/a", 1))
        assert client.get("/health/").json() == {"status": "ok", "archive": "present"}
