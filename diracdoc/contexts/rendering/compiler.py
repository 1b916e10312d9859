"""
LaTeX Typesetting Module

Runs the PDF typesetting tool on generated documents.
"""

import os
import re
import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from diracdoc.contexts.rendering.logger import log_compilation_result, log_compilation_start

load_dotenv()

LATEX_COMPILER = os.getenv("LATEX_COMPILER", "pdflatex")
KEEP_LATEX_ARTIFACTS = os.getenv("KEEP_LATEX_ARTIFACTS", "true").lower() == "true"

# LaTeX intermediate files created during compilation
LATEX_ARTIFACTS = [".aux", ".log", ".out"]


@dataclass
class CompilationResult:
    """
    Result of typesetting a document.

    Attributes:
        success: Whether the compiler exited cleanly and produced a PDF
        returncode: Compiler exit status
        pdf_path: Path to generated PDF (None if missing)
        stdout: Standard output from the compiler
        stderr: Standard error from the compiler
        errors: List of parsed LaTeX errors
        warnings: List of parsed LaTeX warnings
    """

    success: bool
    returncode: int
    pdf_path: Optional[Path] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _parse_latex_log(log_content: str) -> tuple[List[str], List[str]]:
    """
    Parse LaTeX log file for errors and warnings.

    Args:
        log_content: Content of the .log file

    Returns:
        Tuple of (errors, warnings)
    """
    errors = []
    warnings = []

    # LaTeX error pattern: "! Error message"
    error_pattern = re.compile(r"^! (.+)$", re.MULTILINE)
    for match in error_pattern.finditer(log_content):
        errors.append(match.group(1).strip())

    warning_patterns = [
        r"LaTeX Warning: (.+)",
        r"Package \w+ Warning: (.+)",
        r"Overfull \\hbox \((.+)\)",
        r"Underfull \\hbox \((.+)\)",
    ]

    for pattern in warning_patterns:
        compiled = re.compile(pattern, re.MULTILINE)
        for match in compiled.finditer(log_content):
            warnings.append(match.group(1).strip())

    return errors, warnings


def _remove_artifacts(tex_path: Path) -> None:
    """Remove intermediate LaTeX files next to tex_path."""
    base_path = tex_path.parent / tex_path.stem

    for ext in LATEX_ARTIFACTS:
        artifact_path = base_path.with_suffix(ext)
        if artifact_path.exists():
            artifact_path.unlink()


def typeset(
    tex_path: Path,
    compiler: str = LATEX_COMPILER,
    halt_on_error: bool = True,
    keep_artifacts: bool = KEEP_LATEX_ARTIFACTS,
) -> CompilationResult:
    """
    Typeset a generated .tex file into a PDF next to it.

    The compiler runs once in the file's directory. Its outcome is reported,
    never raised; a compiler binary that cannot be started raises
    FileNotFoundError.

    Args:
        tex_path: Path to the .tex file
        compiler: Typesetting executable (default: LATEX_COMPILER env, pdflatex)
        halt_on_error: Stop at the first LaTeX error
        keep_artifacts: Keep .aux/.log/.out (default: KEEP_LATEX_ARTIFACTS env)

    Returns:
        CompilationResult with diagnostic information
    """
    tex_path = Path(tex_path).resolve()
    work_dir = tex_path.parent
    short_name = tex_path.stem

    cmd = [compiler, "-interaction=nonstopmode"]
    if halt_on_error:
        cmd.append("-halt-on-error")
    cmd.append(short_name)

    log_compilation_start(tex_path, " ".join(cmd))
    start_time = time.time()

    result = subprocess.run(
        cmd,
        cwd=work_dir,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",  # Replace invalid UTF-8 bytes instead of crashing
    )

    errors = []
    warnings = []
    log_file = work_dir / f"{short_name}.log"
    if log_file.exists():
        # pdflatex writes log files in latin-1 encoding
        errors, warnings = _parse_latex_log(log_file.read_text(encoding="latin-1"))

    pdf_path = work_dir / f"{short_name}.pdf"
    success = result.returncode == 0 and pdf_path.exists()
    if not pdf_path.exists() and not errors:
        errors.append("PDF file was not generated")

    if not keep_artifacts:
        _remove_artifacts(tex_path)

    compilation = CompilationResult(
        success=success,
        returncode=result.returncode,
        pdf_path=pdf_path if pdf_path.exists() else None,
        stdout=result.stdout,
        stderr=result.stderr,
        errors=errors,
        warnings=warnings,
    )

    log_compilation_result(short_name, compilation, time.time() - start_time)
    return compilation
