"""
Conformance: canonical Paws syntax cases.
Cases: spec/syntax/cases.yaml
"""
from pathlib import Path

import pytest
import yaml

REPO_ROOT = Path(__file__).resolve().parents[3]
CASES_PATH = REPO_ROOT / "spec" / "syntax" / "cases.yaml"

with open(CASES_PATH, encoding="utf-8") as f:
    CASES = yaml.safe_load(f)["cases"]


@pytest.mark.parametrize("case", CASES, ids=[c["name"] for c in CASES])
def test_syntax_case(runner, case):
    """Each registry case produces exactly its expected rendering or diagnostic."""
    result = runner.parse(case["source"])
    if "nodes" in case:
        assert result.ok, f"Expected success but got: {result.output}"
        assert result.output == case["nodes"]
    else:
        assert not result.ok, f"Expected error but got: {result.output}"
        expected = case["error"].replace("<test>", runner.source_name, 1)
        assert result.output == expected
