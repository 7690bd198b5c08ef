"""Shared fixtures for htmltomd tests."""

import pytest
from bs4 import BeautifulSoup


@pytest.fixture
def parse():
    """Parse an HTML string into a BeautifulSoup document."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse
