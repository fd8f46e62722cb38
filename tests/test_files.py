"""
Test suite for file upload endpoints.

Tests cover:
- Category rules (content type and size)
- Ownership checks for read and delete
- Admin uploads on behalf of another user
- Cleanup when the metadata insert fails
"""

import os
import uuid

from sqlalchemy.exc import OperationalError, SQLAlchemyError, TimeoutError as PoolTimeoutError

from app.core.exceptions import InvalidFile, StorageError, StorageTimeout, classify_storage_error
from app.models.file import File
from app.services import file_service

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
PDF_BYTES = b"%PDF-1.4\n" + b"0" * 64


def upload(client, headers, category="foto", name="me.png", content=PNG_BYTES, content_type="image/png", **params):
    return client.post(
        f"/api/file/{category}",
        files={"file": (name, content, content_type)},
        params=params,
        headers=headers,
    )


class TestUploadValidation:

    def test_upload_photo_success(self, client, db_session, user_headers, regular_user, storage):
        response = upload(client, user_headers)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["category"] == "foto"
        assert data["original_name"] == "me.png"
        assert data["file_size"] == len(PNG_BYTES)
        assert data["file_type"] == "image/png"
        assert data["user_id"] == str(regular_user.id)
        assert data["file_name"] != "me.png"
        assert data["file_name"].endswith(".png")

        assert os.path.exists(data["file_path"])
        assert data["file_path"].startswith(os.path.join(storage.base_dir, "foto"))
        assert db_session.query(File).count() == 1

    def test_upload_certificate_success(self, client, user_headers):
        response = upload(
            client, user_headers, category="sertifikat", name="cert.pdf",
            content=PDF_BYTES, content_type="application/pdf",
        )

        assert response.status_code == 201
        assert response.json()["data"]["category"] == "sertifikat"

    def test_photo_rejects_pdf(self, client, db_session, user_headers):
        response = upload(client, user_headers, name="cert.pdf", content=PDF_BYTES, content_type="application/pdf")

        assert response.status_code == 400
        assert "png" in response.json()["error"]
        assert db_session.query(File).count() == 0

    def test_photo_too_large(self, client, user_headers):
        response = upload(client, user_headers, content=b"\x00" * (1024 * 1024 + 1))

        assert response.status_code == 400
        assert "1MB" in response.json()["error"]

    def test_oversized_upload_read_is_bounded(self, client, user_headers, monkeypatch):
        received = {}

        def capture_upload(self, actor, category, original_name, content_type, data, target_user_id=None):
            received["size"] = len(data)
            raise InvalidFile("Max 1MB allowed")

        monkeypatch.setattr(file_service.FileService, "upload", capture_upload)

        response = upload(client, user_headers, content=b"\x00" * (5 * 1024 * 1024))

        assert response.status_code == 400
        assert received["size"] == file_service.read_limit("foto")

    def test_read_limit(self):
        assert file_service.read_limit("foto") == 1024 * 1024 + 1
        assert file_service.read_limit("sertifikat") == 2 * 1024 * 1024 + 1

    def test_certificate_too_large(self, client, db_session, user_headers, storage):
        response = upload(
            client, user_headers, category="sertifikat", name="big.pdf",
            content=b"0" * (3 * 1024 * 1024), content_type="application/pdf",
        )

        assert response.status_code == 400
        assert "2MB" in response.json()["error"]
        assert not os.path.exists(os.path.join(storage.base_dir, "sertifikat"))

    def test_unknown_category(self, client, user_headers):
        response = upload(client, user_headers, category="ijazah")

        assert response.status_code == 400

    def test_missing_file_part(self, client, user_headers):
        response = client.post("/api/file/foto", headers=user_headers)

        assert response.status_code == 400

    def test_upload_requires_auth(self, client):
        assert upload(client, {}).status_code == 401


class TestUploadOnBehalf:

    def test_admin_sets_owner(self, client, admin_headers, regular_user):
        response = upload(client, admin_headers, target_id=str(regular_user.id))

        assert response.status_code == 201
        assert response.json()["data"]["user_id"] == str(regular_user.id)

    def test_user_cannot_upload_for_someone_else(self, client, db_session, user_headers, admin_user):
        response = upload(client, user_headers, target_id=str(admin_user.id))

        assert response.status_code == 403
        assert db_session.query(File).count() == 0

    def test_user_may_name_themselves(self, client, user_headers, regular_user):
        response = upload(client, user_headers, target_id=str(regular_user.id))

        assert response.status_code == 201

    def test_admin_with_malformed_target(self, client, admin_headers):
        assert upload(client, admin_headers, target_id="nobody").status_code == 400

    def test_admin_with_unknown_target(self, client, db_session, admin_headers, storage):
        response = upload(client, admin_headers, target_id=str(uuid.uuid4()))

        assert response.status_code == 404
        assert db_session.query(File).count() == 0
        assert not os.path.exists(os.path.join(storage.base_dir, "foto"))


class TestFileAccess:

    def test_owner_can_read(self, client, user_headers):
        file_id = upload(client, user_headers).json()["data"]["id"]

        response = client.get(f"/api/file/{file_id}", headers=user_headers)

        assert response.status_code == 200
        assert response.json()["id"] == file_id

    def test_other_user_forbidden(self, client, user_headers, other_headers):
        file_id = upload(client, user_headers).json()["data"]["id"]

        assert client.get(f"/api/file/{file_id}", headers=other_headers).status_code == 403
        assert client.delete(f"/api/file/{file_id}", headers=other_headers).status_code == 403

    def test_admin_can_read_any(self, client, user_headers, admin_headers):
        file_id = upload(client, user_headers).json()["data"]["id"]

        assert client.get(f"/api/file/{file_id}", headers=admin_headers).status_code == 200

    def test_unknown_file(self, client, user_headers):
        assert client.get(f"/api/file/{uuid.uuid4()}", headers=user_headers).status_code == 404
        assert client.delete(f"/api/file/{uuid.uuid4()}", headers=user_headers).status_code == 404

    def test_list_scoped_to_caller(self, client, user_headers, other_headers, admin_headers):
        upload(client, user_headers)
        upload(client, user_headers)
        upload(client, other_headers)

        mine = client.get("/api/file", headers=user_headers).json()
        everything = client.get("/api/file", headers=admin_headers).json()

        assert mine["count"] == 2
        assert len(mine["data"]) == 2
        assert everything["count"] == 3


class TestFileDeletion:

    def test_owner_deletes_file(self, client, db_session, user_headers):
        data = upload(client, user_headers).json()["data"]

        response = client.delete(f"/api/file/{data['id']}", headers=user_headers)

        assert response.status_code == 200
        assert not os.path.exists(data["file_path"])
        assert db_session.query(File).count() == 0

    def test_admin_deletes_any_file(self, client, user_headers, admin_headers):
        data = upload(client, user_headers).json()["data"]

        assert client.delete(f"/api/file/{data['id']}", headers=admin_headers).status_code == 200
        assert not os.path.exists(data["file_path"])

    def test_missing_bytes_still_removes_metadata(self, client, db_session, user_headers):
        data = upload(client, user_headers).json()["data"]
        os.remove(data["file_path"])

        response = client.delete(f"/api/file/{data['id']}", headers=user_headers)

        assert response.status_code == 200
        assert db_session.query(File).count() == 0


class TestMetadataFailure:

    def test_written_file_removed_when_insert_fails(self, client, user_headers, storage, monkeypatch):
        def failing_create(db, record):
            raise SQLAlchemyError("insert failed")

        monkeypatch.setattr(file_service.file_crud, "create", failing_create)

        response = upload(client, user_headers)

        assert response.status_code == 500
        assert "error" in response.json()
        assert os.listdir(os.path.join(storage.base_dir, "foto")) == []


class TestClassifyStorageError:

    def test_pool_timeout(self):
        assert isinstance(classify_storage_error(PoolTimeoutError("pool exhausted")), StorageTimeout)

    def test_statement_timeout(self):
        exc = OperationalError("SELECT 1", {}, Exception("canceling statement due to statement timeout"))
        assert isinstance(classify_storage_error(exc), StorageTimeout)

    def test_other_failure(self):
        error = classify_storage_error(SQLAlchemyError("boom"))
        assert isinstance(error, StorageError)
        assert not isinstance(error, StorageTimeout)
        assert error.status_code == 500
