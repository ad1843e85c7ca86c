"""Tests for years-of-experience extraction."""

from datetime import datetime

from services.experience_estimator import (
    calculate_work_history_years,
    estimate_experience_from_content,
    extract_experience_years,
    extract_explicit_years,
)


class TestExplicitYears:
    def test_years_of_experience(self):
        assert extract_explicit_years("5+ years of experience in backend work") == 5

    def test_experience_colon(self):
        assert extract_explicit_years("Experience: 3 years") == 3

    def test_years_with(self):
        assert extract_explicit_years("7 years with Python") == 7

    def test_abbreviated(self):
        assert extract_explicit_years("4 yrs exp") == 4

    def test_implausible_claim_skipped(self):
        assert extract_explicit_years("99 years of experience, 4 years with python") == 4

    def test_zero_is_not_a_claim(self):
        assert extract_explicit_years("0 years of experience") is None

    def test_none(self):
        assert extract_explicit_years("Software engineer at Acme") is None


class TestWorkHistory:
    def test_year_range(self):
        assert calculate_work_history_years("acme corp, 2015 - 2020") == 5

    def test_month_year_range(self):
        assert calculate_work_history_years("Mar 2016 – Nov 2021") == 5

    def test_present(self):
        expected = datetime.now().year - 2019
        assert calculate_work_history_years("Jan 2019 - Present") == expected

    def test_longest_span_wins(self):
        # Ranges are not summed: 2 + 6 years reports 6
        assert calculate_work_history_years("2010 - 2012\n2014 - 2020") == 6

    def test_early_start_ignored(self):
        assert calculate_work_history_years("1970 - 1975") == 0

    def test_capped(self):
        assert calculate_work_history_years("1980 - 2020") == 30

    def test_no_ranges(self):
        assert calculate_work_history_years("no dates here") == 0


class TestContentEstimate:
    def test_senior(self):
        assert estimate_experience_from_content("senior developer") == 7

    def test_senior_with_complexity(self):
        assert estimate_experience_from_content("senior engineer, architecture and microservices") == 8

    def test_mid(self):
        assert estimate_experience_from_content("software engineer") == 4

    def test_junior_rounds_half_up(self):
        assert estimate_experience_from_content("junior, mentoring") == 2

    def test_default(self):
        assert estimate_experience_from_content("") == 3


def test_extract_experience_years_prefers_explicit():
    text = "8 years of experience\n2019 - 2021\nsenior engineer"
    assert extract_experience_years(text) == 8


def test_extract_experience_years_falls_back_to_history():
    assert extract_experience_years("software engineer\n2016 - 2020") == 4


def test_extract_experience_years_zero_claim_falls_through():
    assert extract_experience_years("0 years of experience") == 3
