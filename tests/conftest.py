"""Shared fixtures for the test suite."""
from __future__ import annotations

from types import SimpleNamespace
from typing import Callable

import pytest
import tenacity.nap

from pipeline.state import Abstraction, Relationship, RelationshipMap, SharedState

ENV_VARS = {
    "OPENAI_API_KEY",
    "GEMINI_API_KEY",
    "GEMINI_PROJECT_ID",
    "OPENROUTER_API_KEY",
    "LLM_API_BASE_URL",
    "LLM_API_KEY",
    "LLM_MODEL",
}


@pytest.fixture(autouse=True)
def _isolate_llm_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep provider keys, the cache file and call logs out of the real environment."""

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LLM_CACHE_FILE", str(tmp_path / "llm_cache.json"))


@pytest.fixture
def retry_sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record the pauses tenacity takes between attempts instead of sleeping."""

    sleeps: list[float] = []
    monkeypatch.setattr(tenacity.nap, "time", SimpleNamespace(sleep=sleeps.append))
    return sleeps


class FakeLLM:
    """Stand-in for call_llm that answers through a routing function."""

    def __init__(self, respond: Callable[[str], str]) -> None:
        self.respond = respond
        self.calls: list[tuple[str, bool]] = []

    def __call__(self, prompt: str, use_cache: bool = True) -> str:
        self.calls.append((prompt, use_cache))
        return self.respond(prompt)


@pytest.fixture
def fake_llm(monkeypatch: pytest.MonkeyPatch):
    """Patch the gateway used by the steps; call fake_llm(respond) to install one."""

    import nodes

    def install(respond: Callable[[str], str]) -> FakeLLM:
        fake = FakeLLM(respond)
        monkeypatch.setattr(nodes, "call_llm", fake)
        return fake

    return install


@pytest.fixture
def abc_state() -> SharedState:
    """Three files, three abstractions A -> B -> C, ready for ordering."""

    return SharedState(
        local_dir="/src/demo",
        project_name="demo",
        files=[
            ("a.py", "class A: pass"),
            ("b.py", "class B: pass"),
            ("c.py", "class C: pass"),
        ],
        abstractions=[
            Abstraction(name="A", description="First concept", files=(0,)),
            Abstraction(name="B", description="Second concept", files=(1,)),
            Abstraction(name="C", description="Third concept", files=(2,)),
        ],
        relationships=RelationshipMap(
            summary="A demo project.",
            details=(
                Relationship(source=0, target=1, label="Feeds"),
                Relationship(source=1, target=2, label="Configures"),
            ),
        ),
    )
