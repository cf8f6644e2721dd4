"""
Tests for the resume data model and its helpers.
"""

import json

import pytest
from pydantic import ValidationError

from resume_builder.models import (
    PRESENT,
    ATSReport,
    Education,
    JobMatchResult,
    PersonalInfo,
    ResumeData,
    Skill,
    WorkExperience,
    description_lines,
    initials,
    join_skills,
    new_entry_id,
)


# ============================================================================
# SERIALIZATION
# ============================================================================


def test_storage_json_uses_camel_case(sample_resume):
    """Test the stored form uses the camelCase keys."""
    data = json.loads(sample_resume.to_storage_json())

    assert set(data) == {"personalInfo", "experience", "education", "skills"}
    assert data["experience"][0]["jobTitle"] == "Senior Software Engineer"
    assert data["experience"][0]["endDate"] == PRESENT
    assert data["education"][0]["fieldOfStudy"] == "Computer Science"


def test_models_accept_both_key_styles():
    """Test entries can be built with snake_case or camelCase keys."""
    a = WorkExperience.model_validate({"id": "e1", "jobTitle": "Dev"})
    b = WorkExperience(id="e1", job_title="Dev")
    assert a == b


def test_missing_fields_default_to_empty():
    """Test a bare resume has empty personal info and empty lists."""
    data = ResumeData()
    assert data.personal_info == PersonalInfo()
    assert data.experience == [] and data.education == [] and data.skills == []


# ============================================================================
# DERIVED VALUES
# ============================================================================


def test_date_range_with_present():
    """Test current positions render Present as the end."""
    exp = WorkExperience(id="e1", start_date="2021-08", end_date=PRESENT)
    assert exp.is_current
    assert exp.date_range == "2021-08 - Present"


def test_date_range_past_position():
    exp = WorkExperience(id="e1", start_date="2018-06", end_date="2021-07")
    assert not exp.is_current
    assert exp.date_range == "2018-06 - 2021-07"


def test_education_date_range():
    edu = Education(id="d1", start_date="2016-09", end_date="2018-05")
    assert edu.date_range == "2016-09 - 2018-05"


def test_contact_line(sample_resume):
    """Test contact line order is location, phone, email, website."""
    assert sample_resume.personal_info.contact_line == (
        "San Francisco, CA | 123-456-7890 | jane.doe@example.com | janedoe.dev"
    )


def test_description_lines_strip_dash_and_blanks():
    """Test one leading dash is removed and blank lines are dropped."""
    text = "- First\n\n   \n-Second\nThird\n- - Nested"
    assert description_lines(text) == ["First", "Second", "Third", "- Nested"]


def test_description_lines_empty():
    assert description_lines("") == []


def test_achievements_property(sample_resume):
    exp = sample_resume.experience[0]
    assert len(exp.achievements) == 3
    assert exp.achievements[0].startswith("Led a team of 5 engineers")


def test_join_skills():
    """Test skills are joined with a spaced pipe."""
    skills = [Skill(id="s1", name="A"), Skill(id="s2", name="B")]
    assert join_skills(skills) == "A | B"
    assert join_skills([]) == ""


@pytest.mark.parametrize(
    "name,expected",
    [("Jane Doe", "JD"), ("jane van der doe", "JD"), ("Cher", "C"), ("", ""), ("   ", "")],
)
def test_initials(name, expected):
    assert initials(name) == expected


def test_new_entry_id_is_unique():
    """Test ids created in the same millisecond do not collide."""
    first = new_entry_id("exp", [], now_ms=1000)
    second = new_entry_id("exp", [first], now_ms=1000)
    assert first == "exp1000"
    assert second == "exp1001"


# ============================================================================
# AI RESPONSE SCHEMAS
# ============================================================================


def test_job_match_requires_three_suggestions():
    """Test job match replies must carry exactly three suggestions."""
    JobMatchResult(score=80, analysis="ok", suggestions=["a", "b", "c"])
    with pytest.raises(ValidationError):
        JobMatchResult(score=80, analysis="ok", suggestions=["a", "b"])
    with pytest.raises(ValidationError):
        JobMatchResult(score=80, analysis="ok", suggestions=["a", "b", "c", "d"])


def test_job_match_score_range():
    with pytest.raises(ValidationError):
        JobMatchResult(score=0, analysis="ok", suggestions=["a", "b", "c"])
    with pytest.raises(ValidationError):
        JobMatchResult(score=101, analysis="ok", suggestions=["a", "b", "c"])


def test_ats_report_suggestion_bounds():
    """Test ATS replies carry three to five suggestions."""
    ATSReport(score=70, analysis="ok", suggestions=["a"] * 5)
    with pytest.raises(ValidationError):
        ATSReport(score=70, analysis="ok", suggestions=["a"] * 2)
    with pytest.raises(ValidationError):
        ATSReport(score=70, analysis="ok", suggestions=["a"] * 6)
