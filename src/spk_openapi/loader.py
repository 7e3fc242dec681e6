"""Reads OpenAPI documents from files or package resources.

A source is either a filesystem path or a package resource written as
``package:relative/path.yaml``. YAML and JSON are both accepted, JSON being a
subset of YAML.
"""

from importlib import resources
from pathlib import Path

import yaml

from spk_openapi.model import Components, Document


def load(identifier: str) -> Document | None:
    """Load a document, or return None if there is no document at ``identifier``."""
    text = _read_source(identifier)
    if text is None:
        return None

    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        return None
    return parse_document(data)


def parse_document(data: dict) -> Document:
    """Validate a plain mapping into a Document, adding an empty components container if missing."""
    document = Document.model_validate(data)
    if document.components is None:
        document.components = Components()
    return document


def _read_source(identifier: str) -> str | None:
    path = Path(identifier)
    if path.is_file():
        return path.read_text(encoding="utf-8")

    package, sep, resource = identifier.partition(":")
    resource = resource.lstrip("/")
    if not sep or not resource or not all(part.isidentifier() for part in package.split(".")):
        return None
    try:
        target = resources.files(package).joinpath(resource)
    except ModuleNotFoundError:
        return None
    if not target.is_file():
        return None
    return target.read_text(encoding="utf-8")
