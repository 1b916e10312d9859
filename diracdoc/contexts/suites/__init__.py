"""
Suites Context

Responsibilities:
- Provides the hand-written dirac regression cases
- Generates the sixth-order Fierz identity products
- Runs batches of invocations into a single document

Owns: test case data, combinatorial case generation, batch orchestration
Never: Formats equations itself or runs the typesetter
"""

from diracdoc.contexts.suites.batch import BatchSummary, run_batch
from diracdoc.contexts.suites.cases import load_test_cases
from diracdoc.contexts.suites.fierz import fierz_invocations

__all__ = ["BatchSummary", "fierz_invocations", "load_test_cases", "run_batch"]
