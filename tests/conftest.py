"""Pytest configuration and shared fixtures for orgwiki test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import text

from orgwiki.ast import (
    Bold,
    Document,
    Headline,
    Item,
    Paragraph,
    PlainList,
    Section,
    Table,
    TableCell,
    TableRow,
)

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


@pytest.fixture
def sample_document() -> Document:
    """Provide a small document exercising headlines, lists and tables.

    Returns
    -------
    Document
        Two top-level headlines, a nested list and a table with a header.

    """
    table = Table(
        children=[
            TableRow(children=[TableCell(children=[text("Name")]), TableCell(children=[text("Value")])]),
            TableRow(row_type="rule"),
            TableRow(children=[TableCell(children=[text("a")]), TableCell(children=[text("1")])]),
        ]
    )
    nested = PlainList(list_type="unordered", children=[Item(children=[Paragraph(children=[text("inner")])])])
    outer = PlainList(
        list_type="unordered",
        children=[Item(children=[Paragraph(children=[text("outer")]), nested])],
    )
    return Document(
        children=[
            Headline(
                level=1,
                title=[text("Intro")],
                todo_keyword="TODO",
                todo_type="todo",
                tags=["work"],
                children=[Section(children=[Paragraph(children=[text("Hello "), Bold(children=[text("world")])])])],
            ),
            Headline(
                level=1,
                title=[text("Data")],
                children=[
                    Section(children=[outer, table]),
                    Headline(level=2, title=[text("Details")]),
                ],
            ),
        ]
    )
