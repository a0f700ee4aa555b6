# tests/conftest.py
import logging
from dataclasses import dataclass
from typing import Optional

import pytest

from celine.rowfilter.comparators import registry


@dataclass
class Person:
    name: str
    age: int
    city: Optional[str] = None


@pytest.fixture(autouse=True)
def reset_comparator_registry():
    """
    Ensure the shared comparator registry does not leak between tests.
    """
    registry._registry = None
    yield
    registry._registry = None


@pytest.fixture
def people():
    return [
        {"name": "Alice", "age": 30},
        {"name": "Bob", "age": 25},
        {"name": "Albert", "age": 40},
    ]


@pytest.fixture
def person_objects():
    return [
        Person(name="Alice", age=30, city="Trento"),
        Person(name="Bob", age=25, city="Bolzano"),
        Person(name="Albert", age=40),
    ]


@pytest.fixture
def preserved_logging(monkeypatch):
    """setup_logging replaces root handlers, keep pytest's in place."""
    root = logging.getLogger()
    app = logging.getLogger("celine")
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(app, "level", app.level)
    yield
