"""Shared fixtures: fake git, fake model, clean environment."""

import subprocess
from types import SimpleNamespace

import pytest

from aicommit.config import API_KEY_VAR, MODEL_VAR, QUOTING_VAR
from aicommit.llm.base import LLMClient, LLMResponse


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No credential or overrides in the environment, cwd without a .env."""
    for var in (API_KEY_VAR, MODEL_VAR, QUOTING_VAR):
        # setenv first so monkeypatch restores the variable's absence afterwards
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class FakeGit:
    """Stands in for subprocess.run, answering git commands from a table."""

    def __init__(self, outputs=None, fail=None, missing=False, commit_returncode=0):
        self.outputs = outputs or {}
        self.fail = fail or {}
        self.missing = missing
        self.commit_returncode = commit_returncode
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        if self.missing:
            raise FileNotFoundError("git")
        if isinstance(command, str) or command[:2] == ['git', 'commit']:
            return SimpleNamespace(returncode=self.commit_returncode, stdout="", stderr="")

        args = tuple(command[1:])
        if args in self.fail:
            raise subprocess.CalledProcessError(128, command, stderr=self.fail[args])
        return SimpleNamespace(returncode=0, stdout=self.outputs.get(args, ""), stderr="")


@pytest.fixture
def fake_git(monkeypatch):
    """Return a factory that installs a FakeGit for both git modules."""
    def _install(**kwargs):
        git = FakeGit(**kwargs)
        monkeypatch.setattr("aicommit.git.collector.subprocess.run", git)
        monkeypatch.setattr("aicommit.git.executor.subprocess.run", git)
        return git
    return _install


class FakeClient(LLMClient):
    """Model that returns a canned reply or raises a canned error."""

    def __init__(self, content="Add logging statement", error=None):
        self.content = content
        self.error = error
        self.prompts = []

    @property
    def name(self) -> str:
        return "Fake (test)"

    def generate(self, prompt: str) -> LLMResponse:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model="fake-model", tokens_used=42)


@pytest.fixture
def fake_client():
    return FakeClient
