from datetime import datetime, timezone

from app.models.application_file_model import ApplicationFile
from app.models.base import Base


def seed_row(db, file_id, application_id, uploaded_at, name="offer.pdf"):
    f = ApplicationFile(
        id=file_id,
        application_id=application_id,
        name=name,
        path=f"http://testserver/uploads/{file_id}_{name}",
        size=10,
        mime_type="application/pdf",
        hash="0" * 64,
        uploaded_at=uploaded_at,
    )
    db.add(f)
    db.commit()
    return f


def test_list_files_newest_first(client, db_session):
    seed_row(db_session, "a", 7, datetime(2024, 1, 1, tzinfo=timezone.utc))
    seed_row(db_session, "c", 7, datetime(2024, 3, 1, tzinfo=timezone.utc))
    seed_row(db_session, "b", 7, datetime(2024, 2, 1, tzinfo=timezone.utc))
    seed_row(db_session, "z", 8, datetime(2024, 4, 1, tzinfo=timezone.utc))

    resp = client.get("/api/applications/7/files")
    assert resp.status_code == 200
    assert [f["id"] for f in resp.json()] == ["c", "b", "a"]


def test_list_files_omits_hash(client, db_session):
    seed_row(db_session, "a", 7, datetime(2024, 1, 1, tzinfo=timezone.utc))

    resp = client.get("/api/applications/7/files")
    item = resp.json()[0]
    assert set(item) == {"id", "name", "path", "size", "mime_type", "uploaded_at"}


def test_list_files_unknown_application(client):
    resp = client.get("/api/applications/424242/files")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_files_non_numeric_id(client):
    resp = client.get("/api/applications/abc/files")
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_list_files_storage_error(client, db_session):
    Base.metadata.tables["application_files"].drop(bind=db_session.get_bind())

    resp = client.get("/api/applications/7/files")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch uploaded files"}
