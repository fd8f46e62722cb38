"""
Tests for the listing query builder and the paginated endpoints.
"""

import math

import pytest

from app.crud import alumni as alumni_crud
from app.crud import job as job_crud
from app.crud.listing import build_meta, normalize_params
from app.models.alumni import Alumni


def seed_alumni(db_session, count: int):
    departments = ["Teknik Informatika", "Sistem Informasi", "Teknik Elektro"]
    for i in range(count):
        db_session.add(Alumni(
            student_number=f"4342210{i:02d}",
            name=f"Alumni {i:02d}",
            department=departments[i % len(departments)],
            cohort_year=2015 + (i % 5),
            graduation_year=2019 + (i % 5),
            email=f"alumni{i:02d}@example.com",
        ))
    db_session.commit()


class TestNormalizeParams:

    def test_defaults(self):
        params = normalize_params(alumni_crud.LISTING)

        assert params.sort_by == "name"
        assert params.order == "asc"
        assert params.page == 1
        assert params.limit == 10
        assert params.search == ""

    @pytest.mark.parametrize("column", ["password", "name; DROP TABLE alumni", "", None, "department"])
    def test_unknown_sort_column_falls_back(self, column):
        assert normalize_params(alumni_crud.LISTING, sort_by=column).sort_by == "name"

    def test_whitelisted_sort_column_kept(self):
        assert normalize_params(alumni_crud.LISTING, sort_by="graduation_year").sort_by == "graduation_year"

    def test_search_term_kept_verbatim(self):
        assert normalize_params(alumni_crud.LISTING, search="  Budi ").search == "  Budi "

    @pytest.mark.parametrize("order,expected", [("desc", "desc"), ("DESC", "desc"), ("asc", "asc"), ("random", "asc"), (None, "asc")])
    def test_order_normalization(self, order, expected):
        assert normalize_params(alumni_crud.LISTING, order=order).order == expected

    def test_offset(self):
        assert normalize_params(alumni_crud.LISTING, page=3, limit=20).offset == 40

    def test_job_listing_defaults_to_start_date(self):
        assert normalize_params(job_crud.LISTING, sort_by="salary_range").sort_by == "start_date"


class TestBuildMeta:

    @pytest.mark.parametrize("total,limit", [(0, 10), (1, 10), (10, 10), (11, 10), (25, 7), (100, 1)])
    def test_pages_is_ceiling(self, total, limit):
        params = normalize_params(alumni_crud.LISTING, limit=limit)

        meta = build_meta(params, total)

        assert meta.pages == math.ceil(total / limit)
        assert meta.total == total

    def test_meta_serializes_sort_by_alias(self):
        meta = build_meta(normalize_params(alumni_crud.LISTING, sort_by="email"), 3)

        assert meta.model_dump(by_alias=True)["sortBy"] == "email"


class TestAlumniPagination:
    """Test GET /api/alumni/pag"""

    def test_last_page_is_partial(self, client, db_session, user_headers):
        seed_alumni(db_session, 25)

        response = client.get("/api/alumni/pag?page=3&limit=10", headers=user_headers)

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 5
        assert body["meta"] == {
            "page": 3, "limit": 10, "total": 25, "pages": 3,
            "sortBy": "name", "order": "asc", "search": "",
        }

    def test_page_size_never_exceeds_limit(self, client, db_session, user_headers):
        seed_alumni(db_session, 12)

        for page in (1, 2, 3):
            body = client.get(f"/api/alumni/pag?page={page}&limit=5", headers=user_headers).json()
            assert len(body["data"]) <= 5
            assert body["meta"]["pages"] == 3

    def test_sort_desc(self, client, db_session, user_headers):
        seed_alumni(db_session, 4)

        body = client.get("/api/alumni/pag?sortBy=name&order=desc", headers=user_headers).json()

        assert [a["name"] for a in body["data"]] == ["Alumni 03", "Alumni 02", "Alumni 01", "Alumni 00"]

    def test_unknown_sort_column_still_succeeds(self, client, db_session, user_headers):
        seed_alumni(db_session, 3)

        response = client.get("/api/alumni/pag?sortBy=password_hash", headers=user_headers)

        assert response.status_code == 200
        assert response.json()["meta"]["sortBy"] == "name"

    def test_search_is_case_insensitive_across_fields(self, client, db_session, user_headers):
        seed_alumni(db_session, 9)

        by_department = client.get("/api/alumni/pag?search=sistem%20INFORMASI", headers=user_headers).json()
        by_email = client.get("/api/alumni/pag?search=ALUMNI04@", headers=user_headers).json()

        assert by_department["meta"]["total"] == 3
        assert all(a["department"] == "Sistem Informasi" for a in by_department["data"])
        assert by_email["meta"]["total"] == 1
        assert by_email["data"][0]["email"] == "alumni04@example.com"

    def test_search_wildcards_are_literal(self, client, db_session, user_headers):
        seed_alumni(db_session, 5)

        body = client.get("/api/alumni/pag?search=%25", headers=user_headers).json()

        assert body["meta"]["total"] == 0
        assert body["data"] == []

    def test_search_term_echoed_unchanged(self, client, db_session, user_headers):
        seed_alumni(db_session, 3)

        body = client.get("/api/alumni/pag?search=%20Alumni", headers=user_headers).json()

        assert body["meta"]["search"] == " Alumni"
        assert body["meta"]["total"] == 0

    def test_invalid_page_rejected(self, client, user_headers):
        response = client.get("/api/alumni/pag?page=0", headers=user_headers)

        assert response.status_code == 400


class TestJobPagination:
    """Test GET /api/pekerjaan/pag"""

    def test_search_and_sort(self, client, admin_headers, sample_job_data):
        for company, start in [("PT Alpha", "2021-01-10"), ("PT Beta", "2022-05-01"), ("CV Gamma", "2020-07-15")]:
            client.post("/api/pekerjaan", json={**sample_job_data, "company": company, "start_date": start}, headers=admin_headers)

        body = client.get("/api/pekerjaan/pag?search=pt&order=desc", headers=admin_headers).json()

        assert body["meta"]["total"] == 2
        assert body["meta"]["sortBy"] == "start_date"
        assert [j["company"] for j in body["data"]] == ["PT Beta", "PT Alpha"]
