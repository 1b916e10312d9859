"""
LaTeX Document Module

Assembles dirac results into a LaTeX document. Entries are rendered lazily so
each equation is written to disk as soon as it has been computed.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

from diracdoc.contexts.documents.logger import _log_debug, _log_error, _log_info
from diracdoc.contexts.documents.registries import DocumentTemplateRegistry

load_dotenv()
PREAMBLE_CONFIG_PATH = Path(
    os.getenv("DOCUMENT_PREAMBLE_PATH", Path(__file__).parent / "config" / "revtex.yaml")
)

DOCUMENT_TEMPLATE = "document"
TEX_SUFFIX = ".tex"


@dataclass(frozen=True)
class DocumentEntry:
    """
    One equation of a generated document.

    Attributes:
        equation: Rendered LaTeX equation environment
        description: Text line written before the equation (omitted when empty)
    """

    equation: str
    description: str = ""


def resolve_output_name(name: Union[str, Path]) -> Tuple[Path, str]:
    """
    Resolve an output base name to a .tex path and its short name.

    Args:
        name: Output name with or without the .tex suffix

    Returns:
        Tuple of (tex_path, short_name), e.g. ("tests.tex", "tests")

    Examples:
        resolve_output_name("tests")      # (Path("tests.tex"), "tests")
        resolve_output_name("report.tex") # (Path("report.tex"), "report")
    """
    name = str(name)
    if name.endswith(TEX_SUFFIX):
        return Path(name), name[: -len(TEX_SUFFIX)]
    return Path(name + TEX_SUFFIX), name


def load_preamble_config(config_path: Path = None) -> Dict[str, Any]:
    """
    Load the document preamble description.

    Package entries are normalised so each has "name" and "options" keys.

    Args:
        config_path: YAML config path (defaults to DOCUMENT_PREAMBLE_PATH env variable
                     or the bundled revtex.yaml)

    Returns:
        Dict with document_class, class_options and packages

    Raises:
        FileNotFoundError: If the config file doesn't exist
    """
    if config_path is None:
        config_path = PREAMBLE_CONFIG_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Preamble config not found: {config_path}")

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    packages = []
    for package in config.get("packages", []):
        if isinstance(package, str):
            package = {"name": package}
        packages.append({"name": package["name"], "options": package.get("options")})

    return {
        "document_class": config["document_class"],
        "class_options": list(config.get("class_options", [])),
        "packages": packages,
    }


def write_document(
    tex_path: Path,
    entries: Iterable[DocumentEntry],
    config_path: Path = None,
    registry: DocumentTemplateRegistry = None,
) -> Path:
    """
    Render a LaTeX document and write it to tex_path.

    Entries may be a lazy iterable; each is consumed and written in turn.
    The output file is closed on every exit path. If producing an entry
    raises, the exception propagates and the file keeps what was written
    so far.

    Args:
        tex_path: Output .tex file
        entries: DocumentEntry items in document order
        config_path: Optional preamble config (see load_preamble_config)
        registry: Optional template registry (default: bundled templates)

    Returns:
        Path to the written file
    """
    if registry is None:
        registry = DocumentTemplateRegistry()

    template = registry.get_template(DOCUMENT_TEMPLATE)
    context = {**load_preamble_config(config_path), "entries": entries}

    tex_path = Path(tex_path)
    _log_debug(f"Writing document: {tex_path}")

    with open(tex_path, "w", encoding="utf-8") as output:
        try:
            for chunk in template.generate(**context):
                output.write(chunk)
        except Exception:
            _log_error(f"Document left incomplete: {tex_path}")
            raise

    _log_info(f"Document written: {tex_path}")
    return tex_path
