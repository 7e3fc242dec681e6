"""Serializes documents back to plain mappings, YAML, or JSON."""

import json

import yaml

from spk_openapi.model import Document


def to_dict(document: Document) -> dict:
    """Plain mapping with OpenAPI field names. Only values present in the source or set in code are written."""
    return document.model_dump(mode="json", by_alias=True, exclude_unset=True)


def dump_yaml(document: Document) -> str:
    return yaml.safe_dump(to_dict(document), sort_keys=False, allow_unicode=True)


def dump_json(document: Document, indent: int = 2) -> str:
    return json.dumps(to_dict(document), indent=indent, ensure_ascii=False) + "\n"
