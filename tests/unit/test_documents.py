"""Unit tests for document templating and writing."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from diracdoc.contexts.documents import (
    DocumentEntry,
    DocumentTemplateRegistry,
    load_preamble_config,
    resolve_output_name,
    write_document,
)

EQUATION = "\\begin{equation}\nfoo = \\verb|parse error|\n\\end{equation}"

EXPECTED_PREAMBLE = (
    "\\documentclass[aps,prd,a4paper]{revtex4-2}\n"
    "\\usepackage[T1]{fontenc}\n"
    "\\usepackage{underscore}\n"
    "\\usepackage{amsmath}\n"
    "\\usepackage{amssymb}\n"
    "\n"
    "\\begin{document}\n"
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, expected_path, expected_short",
    [
        ("tests", Path("tests.tex"), "tests"),
        ("report.tex", Path("report.tex"), "report"),
        ("out/run1", Path("out/run1.tex"), "out/run1"),
    ],
)
def test_resolve_output_name(name, expected_path, expected_short):
    assert resolve_output_name(name) == (expected_path, expected_short)


@pytest.mark.unit
def test_load_bundled_preamble():
    config = load_preamble_config()

    assert config["document_class"] == "revtex4-2"
    assert config["class_options"] == ["aps", "prd", "a4paper"]
    assert config["packages"][0] == {"name": "fontenc", "options": "T1"}
    assert {"name": "amssymb", "options": None} in config["packages"]


@pytest.mark.unit
def test_load_preamble_accepts_plain_package_names(tmp_path):
    config_path = tmp_path / "article.yaml"
    config_path.write_text("document_class: article\npackages:\n  - amsmath\n")

    config = load_preamble_config(config_path)

    assert config["class_options"] == []
    assert config["packages"] == [{"name": "amsmath", "options": None}]


@pytest.mark.unit
def test_load_preamble_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_preamble_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_template_registry_caches():
    registry = DocumentTemplateRegistry()

    first = registry.get_template("document")
    assert registry.get_template("document") is first


@pytest.mark.unit
def test_template_registry_missing_template():
    with pytest.raises(TemplateNotFound):
        DocumentTemplateRegistry().get_template("letter")


@pytest.mark.unit
def test_write_document_layout(tmp_path):
    tex_path = tmp_path / "tests.tex"
    entries = [
        DocumentEntry(equation=EQUATION, description="Invalid input"),
        DocumentEntry(equation=EQUATION),
    ]

    write_document(tex_path, entries)

    assert tex_path.read_text() == (
        EXPECTED_PREAMBLE
        + "Invalid input\n"
        + EQUATION
        + "\n\n"
        + EQUATION
        + "\n"
        + "\\end{document}\n"
    )


@pytest.mark.unit
def test_write_document_without_entries(tmp_path):
    tex_path = write_document(tmp_path / "empty.tex", [])
    assert tex_path.read_text() == EXPECTED_PREAMBLE + "\\end{document}\n"


@pytest.mark.unit
def test_write_document_consumes_entries_lazily(tmp_path):
    """Entries are written as they are produced; a failing producer leaves a closed partial file."""
    tex_path = tmp_path / "partial.tex"

    def entries():
        yield DocumentEntry(equation=EQUATION, description="first")
        raise RuntimeError("dirac vanished")

    with pytest.raises(RuntimeError, match="dirac vanished"):
        write_document(tex_path, entries())

    content = tex_path.read_text()
    assert content.startswith(EXPECTED_PREAMBLE)
    assert "first\n" + EQUATION in content
    assert "\\end{document}" not in content
