"""
Batch Runner

Runs a sequence of dirac invocations and streams their equations into a
LaTeX document. Cases run strictly one after another; a failed case is
rendered verbatim and the batch moves on.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from diracdoc.contexts.documents import DocumentEntry, write_document
from diracdoc.contexts.invocation import DiracInvocation
from diracdoc.contexts.suites.logger import _log_debug, _log_info, log_batch_summary


@dataclass
class BatchSummary:
    """
    Outcome of a batch run.

    Attributes:
        tex_path: Generated .tex file
        total: Number of invocations run
        succeeded: Invocations where dirac exited with status 0
    """

    tex_path: Path
    total: int = 0
    succeeded: int = 0

    @property
    def failed(self) -> int:
        return self.total - self.succeeded


def run_batch(
    executable: Path,
    invocations: Iterable[DiracInvocation],
    tex_path: Path,
    use_shell: bool = True,
    before_each: Optional[Callable[[DiracInvocation], None]] = None,
    config_path: Path = None,
) -> BatchSummary:
    """
    Run every invocation and write the results as one LaTeX document.

    Each equation is written as soon as its invocation has finished, so an
    error escaping from a case leaves a truncated but closed document.

    Args:
        executable: Path to the dirac executable
        invocations: Invocations in document order (may be lazy)
        tex_path: Output .tex file
        use_shell: Passed to DiracInvocation.run()
        before_each: Optional callback invoked before each case runs
        config_path: Optional preamble config for the document

    Returns:
        BatchSummary with success and failure counts
    """
    summary = BatchSummary(tex_path=Path(tex_path))

    def entries() -> Iterator[DocumentEntry]:
        for invocation in invocations:
            if before_each is not None:
                before_each(invocation)

            result = invocation.run(executable, use_shell=use_shell)
            summary.total += 1
            if result.succeeded:
                summary.succeeded += 1

            yield DocumentEntry(
                equation=result.rendered_equation,
                description=invocation.description,
            )

    _log_info(f"Writing {summary.tex_path}")
    _log_debug(f"dirac: {executable}")
    start_time = time.time()

    write_document(summary.tex_path, entries(), config_path=config_path)

    log_batch_summary(summary, time.time() - start_time)
    return summary
