"""Shared test doubles for the upload workflow."""

from typing import List, Optional, Sequence, Tuple

import pytest

from pypublish.upload.executor import CommandExecutor
from pypublish.upload.models import SubprocessResult


class RecordingExecutor(CommandExecutor):
    """In-memory executor that records calls and returns a canned result"""

    def __init__(self, output: bytes = b"", error: Optional[Exception] = None):
        self.output = output
        self.error = error
        self.calls: List[Tuple[str, List[str], Optional[float]]] = []

    def run(self, name: str, args: Sequence[str], timeout: Optional[float] = None) -> SubprocessResult:
        self.calls.append((name, list(args), timeout))
        return SubprocessResult(output=self.output, error=self.error)


@pytest.fixture
def make_executor():
    """Factory for recording executors with a canned result"""
    return RecordingExecutor


@pytest.fixture
def public_resolver():
    """Resolver that maps every host to a public address"""
    return lambda host: ["151.101.0.223"]
