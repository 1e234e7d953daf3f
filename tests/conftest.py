"""
Pytest configuration and shared fixtures for groupcheck tests.
"""

import sys
import tempfile
import shutil
from dataclasses import dataclass
from pathlib import Path

import pytest

# Add the parent directory to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from groupcheck.assertions import set_path_resolver
from groupcheck.settings import reset_settings


# --- Domain objects for property extraction ---


@dataclass
class Person:
    name: str
    age: int
    father: "Person | None" = None


@pytest.fixture
def people():
    """A small family: two children sharing a father, plus the father."""
    homer = Person("Homer", 39)
    return [
        Person("Bart", 10, father=homer),
        Person("Lisa", 8, father=homer),
        homer,
    ]


@pytest.fixture
def inventory():
    """Mapping elements, as loaded from JSON or YAML."""
    return [
        {"sku": "a-1", "stock": {"count": 3}},
        {"sku": "b-2", "stock": {"count": 0}},
        {"sku": "c-3", "stock": {"count": 7}},
    ]


# --- Global state isolation ---


@pytest.fixture(autouse=True)
def clean_global_state():
    """Settings and the path resolver are process-wide; restore them after each test."""
    yield
    reset_settings()
    set_path_resolver(None)


# --- Files ---


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp, ignore_errors=True)


SAMPLE_SUITE = """\
version: 1
name: Inventory
settings:
  max_value_length: 200
groups:
  skus: [a, b, c]
  weights:
    kind: float_array
    values: [1.0, 2.0]
  readings:
    kind: iterator
    values: [3, 1, 3]
checks:
  - id: unique-skus
    group: skus
    op: does_not_have_duplicates
  - id: skus-start
    group: skus
    op: starts_with
    value: [a, b]
  - id: weights-close
    group: weights
    op: is_equal_to
    value: [1.0001, 2.0]
    delta: 0.001
  - id: readings-size
    group: readings
    op: has_size
    value: 3
"""


FAILING_SUITE = """\
version: 1
name: Broken inventory
groups:
  skus: [a, b, a]
checks:
  - id: unique-skus
    group: skus
    op: does_not_have_duplicates
  - id: has-a
    group: skus
    op: contains
    value: [a]
"""


@pytest.fixture
def suite_file(temp_dir):
    """A valid suite where every check passes."""
    path = temp_dir / "inventory.yaml"
    path.write_text(SAMPLE_SUITE)
    return path


@pytest.fixture
def failing_suite_file(temp_dir):
    """A valid suite with one failing check."""
    path = temp_dir / "broken.yaml"
    path.write_text(FAILING_SUITE)
    return path
