#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pytest configuration and shared fixtures for the lex2pages test suite.

This module provides shared fixtures, test configuration, and sample
editor state used across the test suite.
"""

import json
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import divider, editor_state, heading, media_block, paragraph, text

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def article_state() -> dict:
    """Provide an article with a title, two dividers and a media block.

    Returns
    -------
    dict
        Serialized Lexical editor state

    """
    return editor_state(
        heading("h1", text("Title")),
        paragraph(text("Intro with "), text("bold", 1), text(" text.")),
        divider(),
        {
            "type": "list",
            "listType": "number",
            "tag": "ol",
            "children": [
                {"type": "listitem", "children": [text("One")]},
                {"type": "listitem", "children": [text("Two")]},
            ],
        },
        divider(),
        media_block("b1", {"url": "cdn.example.com/a.png", "width": 100, "alt": "A"}),
    )


@pytest.fixture
def article_file(tmp_path: Path, article_state: dict) -> Path:
    """Write the article editor state to a JSON file.

    Returns
    -------
    Path
        Path of the written file

    """
    path = tmp_path / "article.json"
    path.write_text(json.dumps(article_state), encoding="utf-8")
    return path
