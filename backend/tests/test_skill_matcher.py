"""Tests for the pure skill comparison and scoring."""

from __future__ import annotations

import pytest

from skillmapper.services.skill_matcher import (
    compare_skills,
    compute_match_score,
    dedupe_skills,
    skill_key,
)


def test_case_insensitive_match() -> None:
    result = compare_skills(["Python"], ["python"])
    assert result.matched_skills == ["Python"]
    assert result.missing_skills == []
    assert result.score == 100


def test_whitespace_is_ignored() -> None:
    result = compare_skills([" SQL "], ["sql"])
    assert result.matched_skills == ["SQL"]
    assert result.missing_skills == []


def test_empty_job_list_is_a_full_match() -> None:
    result = compare_skills([], ["Python"])
    assert result.all_job_skills == []
    assert result.matched_skills == []
    assert result.missing_skills == []
    assert result.score == 100


def test_empty_resume_list_misses_everything() -> None:
    result = compare_skills(["Python", "SQL"], [])
    assert result.matched_skills == []
    assert result.missing_skills == ["Python", "SQL"]
    assert result.score == 0


def test_duplicates_keep_first_spelling() -> None:
    result = compare_skills(["python", "Python"], ["python"])
    assert result.all_job_skills == ["python"]
    assert result.matched_skills == ["python"]


def test_score_rounds_to_nearest_integer() -> None:
    assert compare_skills(["A", "B", "C"], ["A"]).score == 33
    assert compare_skills(["A", "B", "C"], ["A", "b"]).score == 67


@pytest.mark.parametrize(
    "matched,total,expected",
    [(0, 0, 100), (0, 5, 0), (5, 5, 100), (1, 8, 13), (3, 8, 38), (1, 200, 1)],
)
def test_compute_match_score_rounds_halves_up(matched: int, total: int, expected: int) -> None:
    assert compute_match_score(matched, total) == expected


def test_partitions_cover_and_do_not_overlap() -> None:
    job = ["Python", "sql", " Docker", "python ", "Kubernetes", "Communication", "SQL"]
    resume = ["PYTHON", "docker", "Excel"]
    result = compare_skills(job, resume)

    assert set(result.matched_skills) | set(result.missing_skills) == set(result.all_job_skills)
    assert not set(result.matched_skills) & set(result.missing_skills)
    keys = [skill_key(s) for s in result.all_job_skills]
    assert len(keys) == len(set(keys))
    assert result.all_job_skills == ["Python", "sql", "Docker", "Kubernetes", "Communication"]
    assert result.matched_skills == ["Python", "Docker"]
    assert result.score == 40


def test_order_of_partitions_follows_job_list() -> None:
    result = compare_skills(["Go", "Rust", "C", "Zig"], ["zig", "go"])
    assert result.matched_skills == ["Go", "Zig"]
    assert result.missing_skills == ["Rust", "C"]


def test_blank_and_non_string_entries_are_ignored() -> None:
    result = compare_skills(["", "  ", None, "Git", 42], [None, "git"])  # type: ignore[list-item]
    assert result.all_job_skills == ["Git"]
    assert result.score == 100


def test_same_input_gives_same_result() -> None:
    job, resume = ["AWS", "Terraform", "aws"], ["terraform"]
    assert compare_skills(job, resume) == compare_skills(job, resume)


def test_result_is_immutable() -> None:
    result = compare_skills(["Python"], [])
    with pytest.raises(Exception):
        result.score = 50  # type: ignore[misc]


def test_serializes_in_camel_case() -> None:
    dumped = compare_skills(["Python"], []).model_dump(by_alias=True)
    assert dumped == {
        "allJobSkills": ["Python"],
        "matchedSkills": [],
        "missingSkills": ["Python"],
        "score": 0,
    }


def test_dedupe_skills_trims_output() -> None:
    assert dedupe_skills(["  React ", "react", "Vue"]) == ["React", "Vue"]
