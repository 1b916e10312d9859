"""Shared fixtures: stand-in executables and script loading."""

import importlib.util
import stat
from pathlib import Path

import pytest
from loguru import logger

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCRIPTS_PATH = PROJECT_ROOT / "scripts"

# Stand-in for dirac: fails on "foo", answers the two-gamma product,
# echoes any other expression followed by the options it received.
FAKE_DIRAC = r"""#!/bin/sh
expr=""
options=""
while [ $# -gt 0 ]; do
  case "$1" in
    -e) expr="$2"; shift 2 ;;
    *) options="$options $1"; shift ;;
  esac
done
case "$expr" in
  foo)
    printf '%s\n' "parse error"
    exit 1
    ;;
  '\gamma^\mu\gamma^\nu')
    printf '%s\n' 'g^{\mu\nu}'
    ;;
  *)
    printf '%s%s\n' "$expr" "$options"
    ;;
esac
"""

# Stand-in for pdflatex: writes <name>.pdf and a log with one error
FAKE_COMPILER = r"""#!/bin/sh
for last; do :; done
printf '%s\n' "This is a fake TeX" "! Undefined control sequence." \
  "LaTeX Warning: Reference undefined." > "$last.log"
printf '%s' "%PDF-1.5" > "$last.pdf"
exit 0
"""


def _write_executable(path: Path, content: str) -> Path:
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def fake_dirac(tmp_path):
    """Path to an executable shell script standing in for dirac."""
    return _write_executable(tmp_path / "dirac", FAKE_DIRAC)


@pytest.fixture
def fake_compiler(tmp_path):
    """Path to an executable shell script standing in for pdflatex."""
    return _write_executable(tmp_path / "fakelatex", FAKE_COMPILER)


@pytest.fixture
def load_script():
    """Import a module from scripts/ by file name (without .py)."""

    def _load(name: str):
        spec = importlib.util.spec_from_file_location(f"_script_{name}", SCRIPTS_PATH / f"{name}.py")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by a test (CLI runs bind sinks to captured streams)."""
    yield
    logger.remove()
