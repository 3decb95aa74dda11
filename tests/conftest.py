"""Pytest configuration and fixtures."""

import pytest

from fakes import InMemoryRepoSource, RecordingObserver


@pytest.fixture
def widgets_source() -> InMemoryRepoSource:
    """The ``acme/widgets`` repository used across the service tests."""
    return InMemoryRepoSource(
        "acme",
        "widgets",
        {
            "src/main.ps1": "Write-Host 'hello'\n",
            "src/logo.png": "\x89PNG",
            "readme.md": "# Widgets\n\nA <small> & simple repo.\n",
        },
    )


@pytest.fixture
def examples_source() -> InMemoryRepoSource:
    """A repository whose ``examples`` directory is lower-case."""
    return InMemoryRepoSource(
        "Acme",
        "Gadgets",
        {
            "examples/basic.ps1": "Get-Gadget\n",
            "examples/nested/advanced.ps1": "Get-Gadget -All\n",
            "examples/notes.txt": "notes\n",
            "src/Gadgets.psm1": "function Get-Gadget {}\n",
        },
    )


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
