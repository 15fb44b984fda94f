"""
Tests for jobboard/validation.py
"""

import pytest
from bson import ObjectId
from unittest.mock import MagicMock

from jobboard.errors import NotFoundError, ValidationError
from jobboard.validation import (
    is_valid_email,
    is_valid_url,
    normalize_categories,
    parse_object_id,
    resolve_job_reference,
    validate_application_payload,
    validate_job_payload,
)


@pytest.fixture
def job_body():
    return {
        "title": " Brand Designer ",
        "company": "Dropbox",
        "location": "Remote",
        "category": "Design",
        "description": "Shape the brand.",
    }


@pytest.fixture
def application_body():
    return {
        "job_id": str(ObjectId()),
        "name": " Grace Hopper ",
        "email": " GRACE@Navy.mil ",
        "resume_link": "https://example.com/grace.pdf",
        "cover_note": "Hello",
    }


class TestEmailAndUrl:

    @pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@sub.example.org", "x@y.z"])
    def test_valid_emails(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "@b.com", "a b@c.com", "a@@b.com", "a@b."])
    def test_invalid_emails(self, email):
        assert not is_valid_email(email)

    @pytest.mark.parametrize("url", ["https://example.com/cv.pdf", "http://localhost:8000/r", "https://drive.google.com/file/d/abc"])
    def test_valid_urls(self, url):
        assert is_valid_url(url)

    @pytest.mark.parametrize("url", ["my resume", "example.com/cv.pdf", "ftp://example.com/cv", "https://"])
    def test_invalid_urls(self, url):
        assert not is_valid_url(url)


class TestParseObjectId:

    def test_valid(self):
        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid

    def test_trims(self):
        oid = ObjectId()
        assert parse_object_id(f" {oid} ") == oid

    @pytest.mark.parametrize("value", ["", "123", "zzzzzzzzzzzzzzzzzzzzzzzz", None])
    def test_invalid(self, value):
        with pytest.raises(ValidationError, match="Invalid job ID"):
            parse_object_id(value)

    def test_label(self):
        with pytest.raises(ValidationError, match="Invalid application ID"):
            parse_object_id("x", label="application")


class TestNormalizeCategories:

    def test_merges_and_dedupes(self):
        assert normalize_categories("Design", ["design", " Product ", "", None]) == ["Design", "Product"]

    def test_empty(self):
        assert normalize_categories(None, None) == []


class TestValidateJobPayload:

    def test_normalized_document(self, job_body):
        document = validate_job_payload(job_body)

        assert document == {
            "title": "Brand Designer",
            "company": "Dropbox",
            "location": "Remote",
            "categories": ["Design"],
            "description": "Shape the brand.",
            "type": "Full Time",
            "featured": False,
            "logo": None,
        }

    def test_optional_fields_kept(self, job_body):
        job_body.update(type=" Contract ", featured=True, logo="https://example.com/logo.png")

        document = validate_job_payload(job_body)

        assert document["type"] == "Contract"
        assert document["featured"] is True
        assert document["logo"] == "https://example.com/logo.png"

    def test_every_missing_field_is_listed(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_job_payload({"title": "x", "location": "   "})

        assert str(exc_info.value) == "Missing required fields: company, location, category, description"

    def test_bad_logo(self, job_body):
        job_body["logo"] = "logo.png"

        with pytest.raises(ValidationError, match="Invalid logo URL"):
            validate_job_payload(job_body)


class TestValidateApplicationPayload:

    def test_normalized_document(self, application_body):
        document = validate_application_payload(application_body)

        assert document["name"] == "Grace Hopper"
        assert document["email"] == "grace@navy.mil"

    def test_missing_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_application_payload({"name": "x"})

        assert str(exc_info.value) == "Missing required fields: job_id, email, resume_link, cover_note"

    def test_bad_email(self, application_body):
        application_body["email"] = "not-an-email"

        with pytest.raises(ValidationError, match="Invalid email address"):
            validate_application_payload(application_body)

    def test_bad_resume_link(self, application_body):
        application_body["resume_link"] = "resume.pdf"

        with pytest.raises(ValidationError, match="Invalid resume link URL"):
            validate_application_payload(application_body)


class TestResolveJobReference:

    def test_found(self):
        oid = ObjectId()
        jobs = MagicMock()
        jobs.find_one_by_id.return_value = {"_id": oid, "title": "x"}

        assert resolve_job_reference(str(oid), jobs)["_id"] == oid
        jobs.find_one_by_id.assert_called_once_with(oid)

    def test_missing(self):
        jobs = MagicMock()
        jobs.find_one_by_id.return_value = None

        with pytest.raises(NotFoundError, match="Job not found"):
            resolve_job_reference(str(ObjectId()), jobs)

    def test_malformed_id_is_not_found_without_lookup(self):
        jobs = MagicMock()

        with pytest.raises(NotFoundError):
            resolve_job_reference("bogus", jobs)
        jobs.find_one_by_id.assert_not_called()
