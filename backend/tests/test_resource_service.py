"""Tests for learning-resource suggestions."""

from __future__ import annotations

import pytest

import skillmapper.services.resource_service as resources
from skillmapper.models.llm_models import LLMSelection
from skillmapper.services.resource_service import suggest_resources


async def test_empty_input_skips_the_model(monkeypatch: pytest.MonkeyPatch, llm: LLMSelection) -> None:
    async def boom(**kwargs):
        raise AssertionError("model must not be called")

    monkeypatch.setattr(resources, "complete_json", boom)
    assert await suggest_resources([], llm=llm) == []
    assert await suggest_resources(["  "], llm=llm) == []


async def test_builds_suggestions_and_skips_malformed(monkeypatch: pytest.MonkeyPatch, llm: LLMSelection) -> None:
    seen: dict = {}

    async def fake(*, llm, messages, prompt_name=None, **kwargs):
        seen["prompt"] = messages[1]["content"]
        return {
            "suggestions": [
                {
                    "skill": "Docker",
                    "websites": ["https://docs.docker.com"],
                    "youtubeChannels": ["TechWorld with Nana"],
                },
                {"skill": "Kubernetes", "websites": "https://kubernetes.io"},
                {"websites": ["https://example.com"]},
                "garbage",
            ]
        }

    monkeypatch.setattr(resources, "complete_json", fake)
    result = await suggest_resources(["Docker", "Kubernetes"], llm=llm)

    assert "- Docker\n- Kubernetes" in seen["prompt"]
    assert [s.skill for s in result] == ["Docker", "Kubernetes"]
    assert result[0].youtube_channels == ["TechWorld with Nana"]
    assert result[1].websites == ["https://kubernetes.io"]
    assert result[1].youtube_channels == []
    assert result[0].model_dump(by_alias=True)["youtubeChannels"] == ["TechWorld with Nana"]


async def test_model_failure_gives_no_suggestions(monkeypatch: pytest.MonkeyPatch, llm: LLMSelection) -> None:
    async def fail(**kwargs):
        raise RuntimeError("rate limited")

    monkeypatch.setattr(resources, "complete_json", fail)
    assert await suggest_resources(["Rust"], llm=llm) == []


async def test_wrong_shape_gives_no_suggestions(monkeypatch: pytest.MonkeyPatch, llm: LLMSelection) -> None:
    async def fake(**kwargs):
        return {"suggestions": None}

    monkeypatch.setattr(resources, "complete_json", fake)
    assert await suggest_resources(["Rust"], llm=llm) == []
