"""Top-level package for the MCQ Reviewer.

Provides subpackages:
- mcq_reviewer.parsing – text normalization, segmentation and answer-key correlation
- mcq_reviewer.core – immutable records, schema validation, JSON export/import
- mcq_reviewer.extraction – PDF to text extraction (PyMuPDF)
- mcq_reviewer.quiz – explicit quiz state and session persistence
- mcq_reviewer.cli – command-line front end
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text(encoding="utf-8").splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.1"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("mcq-reviewer")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .parsing import parse_mcq_text, parse_document  # noqa: E402

__all__: list[str] = ["__version__", "parse_mcq_text", "parse_document"]
