"""Adds the standard SPK security schemes and headers to an OpenAPI document.

The headers and schemes are normally omitted from a specification because
shared infrastructure libraries add them to every request transparently.
Adding them back lets documentation UIs such as SwaggerUI show the complete
contract a client has to satisfy.

Two security schemes are supported:
1. Token based authentication (``SpkToken``), used in test and production.
2. Basic authentication with the employee's own username and password
   (``BasicAuth``), accepted in test only.

Three headers are required on every operation: ``X-Application-Id``,
``X-Correlation-Id`` and ``X-Request-Origin``.
"""

from typing import Callable

from spk_openapi.config import CustomizerConfig
from spk_openapi.errors import MissingComponentsError, SpecificationNotFoundError
from spk_openapi.loader import load
from spk_openapi.model import (
    Components,
    Document,
    Parameter,
    Reference,
    SecurityScheme,
    security_requirement,
)
from spk_openapi.standards import SECURITY_SCHEMES, STANDARD_HEADERS

Loader = Callable[[str], Document | None]


class OpenApiCustomizer:
    """Customizes OpenAPI documents with the standard SPK schemes and headers.

    Calling ``customize`` twice on the same document appends a second
    security requirement and a second set of header references to every
    operation. Customize each document exactly once.
    """

    def __init__(
        self,
        with_security_schemes: bool = True,
        with_standard_headers: bool = True,
        loader: Loader = load,
    ):
        self.config = CustomizerConfig(
            with_security_schemes=with_security_schemes,
            with_standard_headers=with_standard_headers,
        )
        self.loader = loader

    @classmethod
    def from_config(cls, config: CustomizerConfig, loader: Loader = load) -> "OpenApiCustomizer":
        return cls(config.with_security_schemes, config.with_standard_headers, loader=loader)

    def load_and_customize(self, source: str) -> Document:
        """Load the document at ``source`` and customize it.

        ``source`` is a file path or a ``package:path`` resource. Raises
        SpecificationNotFoundError when the loader finds nothing there.
        """
        document = self.loader(source)
        if document is None:
            raise SpecificationNotFoundError(source)
        return self.customize(document)

    def customize(self, document: Document) -> Document:
        """Apply the enabled steps to ``document`` in place and return it."""
        if self.config.with_security_schemes:
            self._add_security_schemes(document)
        if self.config.with_standard_headers:
            self._add_standard_headers(document)
        return document

    def _add_security_schemes(self, document: Document) -> None:
        components = _components(document)
        document.add_security_item(security_requirement(*SECURITY_SCHEMES))
        for key, definition in SECURITY_SCHEMES.items():
            components.add_security_scheme(key, SecurityScheme(**definition))

    def _add_standard_headers(self, document: Document) -> None:
        components = _components(document)
        for header in STANDARD_HEADERS:
            components.add_parameter(
                header.key,
                Parameter.header(header.name, required=True, example=header.example),
            )

        for path_item in document.paths.values():
            for operation in path_item.read_operations():
                for header in STANDARD_HEADERS:
                    operation.add_parameters_item(Reference.to_component("parameters", header.key))


def _components(document: Document) -> Components:
    if document.components is None:
        raise MissingComponentsError()
    return document.components
