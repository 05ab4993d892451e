"""
Conformance: syntax case registry well-formedness.
Registry: spec/syntax/cases.yaml, schema: spec/syntax/schema.json
"""
import json
import re
from collections import Counter
from pathlib import Path

import jsonschema
import pytest
import yaml

REPO_ROOT = Path(__file__).resolve().parents[3]
REGISTRY_PATH = REPO_ROOT / "spec" / "syntax" / "cases.yaml"
SCHEMA_PATH = REPO_ROOT / "spec" / "syntax" / "schema.json"

VALID_CATEGORIES = {"symbols", "quoting", "groups", "whitespace", "errors"}
ERROR_MESSAGE = re.compile(
    r"^<test>:\d+:\d+: (expected '.' before end-of-input|unexpected terminator '.')$"
)


@pytest.fixture(scope="module")
def registry():
    with open(REGISTRY_PATH, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture(scope="module")
def schema():
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(scope="module")
def cases(registry):
    return registry["cases"]


# ---------------------------------------------------------------------------
# Structure tests
# ---------------------------------------------------------------------------

def test_registry_loads(registry):
    """Registry YAML parses successfully."""
    assert registry is not None
    assert "version" in registry
    assert "cases" in registry


def test_registry_version_format(registry):
    """Version follows MAJOR.MINOR format."""
    assert re.match(r"^\d+\.\d+$", registry["version"])


def test_schema_validation(registry, schema):
    """Registry validates against JSON Schema."""
    jsonschema.validate(registry, schema)


def test_schema_rejects_case_with_both_outcomes(registry, schema):
    bad = dict(registry)
    bad["cases"] = [{"name": "both", "category": "errors", "source": "(", "nodes": "[]", "error": "<test>:1:2: x"}]
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(bad, schema)


# ---------------------------------------------------------------------------
# Per-case structural tests
# ---------------------------------------------------------------------------

def test_case_names_unique(cases):
    duplicates = [name for name, n in Counter(c["name"] for c in cases).items() if n > 1]
    assert not duplicates, f"Duplicate case names: {duplicates}"


def test_all_cases_have_valid_category(cases):
    for case in cases:
        assert case["category"] in VALID_CATEGORIES, \
            f"{case['name']}: invalid category '{case['category']}'"


def test_error_cases_use_canonical_messages(cases):
    for case in cases:
        if "error" in case:
            assert ERROR_MESSAGE.match(case["error"]), \
                f"{case['name']}: non-canonical diagnostic {case['error']!r}"


def test_error_category_matches_outcome(cases):
    """Only cases in the 'errors' category expect a diagnostic."""
    for case in cases:
        assert ("error" in case) == (case["category"] == "errors"), case["name"]


# ---------------------------------------------------------------------------
# Coverage tests
# ---------------------------------------------------------------------------

def test_all_categories_populated(cases):
    """Every defined category has at least one case."""
    used = {case["category"] for case in cases}
    for cat in VALID_CATEGORIES:
        assert cat in used, f"Category '{cat}' has no cases"


def test_every_delimiter_has_error_coverage(cases):
    """Each closer appears in at least one expected diagnostic."""
    messages = " ".join(case["error"] for case in cases if "error" in case)
    for delimiter in (")", "}", '"', "”"):
        assert f"'{delimiter}'" in messages, f"No error case mentions {delimiter!r}"
