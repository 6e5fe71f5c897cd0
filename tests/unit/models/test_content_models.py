"""
Tests for entity schemas and the shared request/response models.

Covers coercion of LLM-shaped input (human dates, "5+ years", numeric
amounts) and the pagination helpers.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from content_ingest.models.common import parse_datetime
from content_ingest.models.content import (
    Blog,
    JobDescription,
    News,
    Other,
    Scholarship,
    normalize_job_type,
)
from content_ingest.models.requests import ContentRequest, ListQuery
from content_ingest.models.responses import PaginatedResponse


class TestParseDatetime:
    @pytest.mark.parametrize(
        "value",
        ["2025-03-01", "2025-03-01T00:00:00Z", "March 1, 2025", "Mar 1, 2025", "1 March 2025", "03/01/2025"],
    )
    def test_accepted_formats(self, value):
        assert parse_datetime(value) == datetime(2025, 3, 1, tzinfo=timezone.utc)

    def test_naive_datetime_is_utc(self):
        assert parse_datetime(datetime(2025, 3, 1)).tzinfo == timezone.utc

    def test_non_strings_pass_through(self):
        assert parse_datetime(42) == 42

    def test_rejects_garbage(self):
        with pytest.raises(ValueError, match="Invalid date"):
            parse_datetime("sometime next spring")


class TestJobDescription:
    def test_normalizes_llm_values(self, sample_job):
        job = JobDescription(**sample_job)

        assert job.job_type == "full time"
        assert job.workplace == "remote"
        assert job.professional_experience == 5
        assert job.status == "active"

    @pytest.mark.parametrize("value", ["Full-Time", "full_time", "FULL  TIME"])
    def test_normalize_job_type(self, value):
        assert normalize_job_type(value) == "full time"

    def test_onsite_alias(self, sample_job):
        sample_job["workplace"] = "Onsite"

        assert JobDescription(**sample_job).workplace == "on-site"

    def test_experience_without_number(self, sample_job):
        sample_job["professional_experience"] = "several years"

        with pytest.raises(ValidationError, match="Invalid professional experience format"):
            JobDescription(**sample_job)

    def test_unknown_job_type(self, sample_job):
        sample_job["job_type"] = "internship"

        with pytest.raises(ValidationError):
            JobDescription(**sample_job)

    def test_missing_required_field(self, sample_job):
        del sample_job["company_title"]

        with pytest.raises(ValidationError):
            JobDescription(**sample_job)

    def test_unknown_keys_are_dropped(self, sample_job):
        job = JobDescription(**sample_job, salary="lots")

        assert "salary" not in job.model_dump()


class TestScholarship:
    @pytest.fixture
    def scholarship(self):
        return {
            "title": "Global Excellence Award",
            "organization": "Example Foundation",
            "amount": 5000,
            "deadline": "June 30, 2025",
            "eligibility": ["International students"],
            "requirements": ["Transcript"],
            "field_of_study": ["Computer Science"],
            "degree_level": ["Masters"],
            "country": "Germany",
            "link": "https://example.org/award",
        }

    def test_numeric_amount_is_stringified(self, scholarship):
        assert Scholarship(**scholarship).amount == "5000"

    def test_empty_lists_rejected(self, scholarship):
        scholarship["eligibility"] = []

        with pytest.raises(ValidationError):
            Scholarship(**scholarship)


class TestArticles:
    def test_blog(self, sample_blog):
        blog = Blog(**sample_blog)

        assert blog.publication_date == datetime(2025, 3, 1, tzinfo=timezone.utc)
        assert blog.extra_data == {}

    def test_readability_bounds(self, sample_blog):
        sample_blog["readability_score"] = 140

        with pytest.raises(ValidationError):
            Blog(**sample_blog)

    def test_sentiment_values(self, sample_blog):
        sample_blog["sentiment"] = "ecstatic"

        with pytest.raises(ValidationError):
            Blog(**sample_blog)

    def test_news_requires_category(self, sample_blog):
        with pytest.raises(ValidationError):
            News(**sample_blog)

        news = News(**sample_blog, category="technology")
        assert news.is_breaking is False

    def test_other_requires_content_details(self, sample_blog):
        sample_blog["content_type"] = "guide"

        with pytest.raises(ValidationError):
            Other(**sample_blog)

        other = Other(**sample_blog, content_details={"steps": 3})
        assert other.content_details == {"steps": 3}


class TestRequestModels:
    def test_content_request_text(self):
        assert ContentRequest(content={"text": "  hello  "}).text == "hello"

    @pytest.mark.parametrize("body", [{}, {"content": {}}, {"content": {"text": "   "}}])
    def test_content_request_without_text(self, body):
        assert ContentRequest(**body).text is None

    def test_list_query_defaults(self):
        query = ListQuery()

        assert query.skip == 0
        assert query.sort == [("created_at", -1)]

    def test_list_query_paging(self):
        query = ListQuery(page=3, limit=20, sort_by="title", sort_order="asc")

        assert query.skip == 40
        assert query.sort == [("title", 1)]

    def test_list_query_rejects_operator_sort(self):
        with pytest.raises(ValidationError):
            ListQuery(sort_by="$where")

    def test_list_query_limit_bounds(self):
        with pytest.raises(ValidationError):
            ListQuery(limit=0)


class TestPaginatedResponse:
    def test_build(self):
        page = PaginatedResponse.build([{"id": "a"}], page=2, limit=10, total=21)

        assert page.total_pages == 3
        assert page.total_results == 21
        assert page.results == [{"id": "a"}]

    def test_empty(self):
        page = PaginatedResponse.build([], page=1, limit=10, total=0)

        assert page.total_pages == 0
