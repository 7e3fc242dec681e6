"""Errors raised while loading and customizing documents."""


class SpecificationNotFoundError(FileNotFoundError):
    """The loader could not resolve an identifier to a document."""

    def __init__(self, identifier: str):
        super().__init__(f"Could not read OpenAPI specification from {identifier}")
        self.identifier = identifier


class MissingComponentsError(ValueError):
    """The document has no components container to register definitions in."""

    def __init__(self):
        super().__init__("OpenAPI document has no components; the loader must always populate them")
