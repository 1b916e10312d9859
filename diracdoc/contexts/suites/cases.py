"""
Test Suite Cases

Loads the hand-written dirac regression cases from YAML.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from diracdoc.contexts.invocation import DiracInvocation, InvalidCaseError

load_dotenv()
TEST_CASES_PATH = Path(
    os.getenv("DIRAC_TEST_CASES_PATH", Path(__file__).parent / "data" / "tests.yaml")
)


def load_test_cases(cases_path: Path = None) -> List[DiracInvocation]:
    """
    Load test cases as invocations.

    Args:
        cases_path: YAML file with a top-level "cases" list (defaults to
                    DIRAC_TEST_CASES_PATH env variable or the bundled tests.yaml)

    Returns:
        Invocations in file order

    Raises:
        FileNotFoundError: If the cases file doesn't exist
        InvalidCaseError: If the file has no case list or a case is malformed
    """
    if cases_path is None:
        cases_path = TEST_CASES_PATH

    cases_path = Path(cases_path)
    if not cases_path.exists():
        raise FileNotFoundError(f"Test cases not found: {cases_path}")

    data = OmegaConf.to_container(OmegaConf.load(cases_path), resolve=True)
    cases = data.get("cases") if isinstance(data, dict) else None
    if not isinstance(cases, list):
        raise InvalidCaseError(f"No 'cases' list in {cases_path}")

    return [DiracInvocation.from_mapping(case) for case in cases]
