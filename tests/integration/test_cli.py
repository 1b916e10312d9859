"""
Integration tests for the batch driver scripts.
"""

from functools import partial

import pytest
from typer.testing import CliRunner

from diracdoc.contexts.invocation import invocation as invocation_module
from diracdoc.contexts.rendering import CompilationResult, typeset

runner = CliRunner()


@pytest.fixture
def dirac_tests(load_script, tmp_path, monkeypatch):
    module = load_script("dirac_tests")
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.chdir(tmp_path)
    return module


@pytest.fixture
def fierz6(load_script, tmp_path, monkeypatch):
    module = load_script("fierz6")
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.chdir(tmp_path)
    return module


@pytest.mark.integration
def test_tests_driver_requires_executable(dirac_tests, tmp_path):
    result = runner.invoke(dirac_tests.app, [])

    assert result.exit_code == 1
    assert "Usage: dirac_tests.py /path/to/dirac/executable" in result.output
    assert not (tmp_path / "tests.tex").exists()
    assert not (tmp_path / "logs").exists()


@pytest.mark.integration
def test_fierz_driver_requires_executable(fierz6, tmp_path):
    result = runner.invoke(fierz6.app, [])

    assert result.exit_code == 1
    assert "Usage: fierz6.py /path/to/dirac/executable" in result.output
    assert not (tmp_path / "fierz6.tex").exists()


@pytest.mark.integration
def test_tests_driver_default_output(dirac_tests, fake_dirac, tmp_path):
    result = runner.invoke(dirac_tests.app, [str(fake_dirac), "--no-typeset"])

    assert result.exit_code == 0, result.output
    content = (tmp_path / "tests.tex").read_text()
    assert content.startswith("\\documentclass[aps,prd,a4paper]{revtex4-2}")
    assert "Invalid input\n\\begin{equation}\nfoo = \\verb|parse error|" in content
    assert "19/20 cases computed" in result.output
    assert list((tmp_path / "logs").glob("tests_*/batch.log"))


@pytest.mark.integration
@pytest.mark.parametrize("output", ["report", "report.tex"])
def test_tests_driver_output_name(dirac_tests, fake_dirac, tmp_path, output):
    result = runner.invoke(dirac_tests.app, [str(fake_dirac), output, "--no-typeset"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "report.tex").exists()
    assert not (tmp_path / "report.tex.tex").exists()


@pytest.mark.integration
def test_tests_driver_relative_executable(dirac_tests, fake_dirac, tmp_path):
    """The executable path is resolved against the working directory."""
    result = runner.invoke(dirac_tests.app, ["./dirac", "--no-typeset"])

    assert result.exit_code == 0, result.output
    assert "19/20" in result.output


@pytest.mark.integration
def test_tests_driver_global_options(dirac_tests, fake_dirac, tmp_path):
    result = runner.invoke(
        dirac_tests.app,
        [str(fake_dirac), "--mode", "float", "--dummy", "k", "--no-symmetry", "--no-typeset"],
    )

    assert result.exit_code == 0, result.output
    content = (tmp_path / "tests.tex").read_text()
    assert r"\delta_\mu^\mu = \delta_\mu^\mu -m float -d k -s false" in content


@pytest.mark.integration
def test_tests_driver_succeeds_when_typesetting_fails(dirac_tests, fake_dirac, tmp_path, monkeypatch):
    typeset_calls = []

    def failing_typeset(tex_path):
        typeset_calls.append(tex_path)
        return CompilationResult(success=False, returncode=1, errors=["Emergency stop."])

    monkeypatch.setattr(dirac_tests, "typeset", failing_typeset)
    result = runner.invoke(dirac_tests.app, [str(fake_dirac)])

    assert result.exit_code == 0, result.output
    assert [str(path) for path in typeset_calls] == ["tests.tex"]


@pytest.mark.integration
def test_fierz_driver(fierz6, fake_dirac, tmp_path):
    result = runner.invoke(fierz6.app, [str(fake_dirac), "--no-typeset"])

    assert result.exit_code == 0, result.output
    assert result.output.count("Computing ") == 275
    assert "Computing 1*1*1*1*1" in result.output

    content = (tmp_path / "fierz6.tex").read_text()
    assert content.count("\\begin{equation}") == 275
    assert content.count("\\begin{split}") == 275
    assert "1*1*1*\\gamma^5\\gamma_\\gamma*1 = " in content


@pytest.mark.integration
def test_tests_driver_succeeds_when_compiler_missing(dirac_tests, fake_dirac, tmp_path, monkeypatch):
    missing_compiler = tmp_path / "no-such-latex"
    monkeypatch.setattr(dirac_tests, "typeset", partial(typeset, compiler=str(missing_compiler)))

    result = runner.invoke(dirac_tests.app, [str(fake_dirac)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "tests.tex").exists()
    log_text = next((tmp_path / "logs").glob("tests_*/batch.log")).read_text()
    assert "[render] Typesetting skipped, compiler not found" in log_text
    assert "no-such-latex" in log_text


@pytest.mark.integration
def test_fierz_driver_succeeds_when_compiler_missing(fierz6, fake_dirac, tmp_path, monkeypatch):
    missing_compiler = tmp_path / "no-such-latex"
    monkeypatch.setattr(fierz6, "typeset", partial(typeset, compiler=str(missing_compiler)))

    result = runner.invoke(fierz6.app, [str(fake_dirac)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "fierz6.tex").exists()
    log_text = next((tmp_path / "logs").glob("fierz6_*/batch.log")).read_text()
    assert "[render] Typesetting skipped, compiler not found" in log_text


@pytest.mark.integration
def test_fierz_driver_without_shell(fierz6, fake_dirac, tmp_path, monkeypatch):
    shell_flags = []
    real_run = invocation_module.subprocess.run

    def recording_run(args, **kwargs):
        shell_flags.append(kwargs.get("shell", False))
        return real_run(args, **kwargs)

    monkeypatch.setattr(invocation_module.subprocess, "run", recording_run)

    result = runner.invoke(fierz6.app, [str(fake_dirac), "--no-shell", "--no-typeset"])

    assert result.exit_code == 0, result.output
    content = (tmp_path / "fierz6.tex").read_text()
    assert content.count("\\begin{equation}") == 275
    assert "\\verb|" not in content
    assert shell_flags == [False] * 275
