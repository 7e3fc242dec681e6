"""OpenAPI 3.x document model.

Only the parts of the object graph the customizer touches are modelled
explicitly. Every model keeps unknown fields, so anything else in the
document (info, schemas, responses, request bodies) survives a
load -> customize -> render cycle untouched.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

COMPONENTS_PREFIX = "#/components/"

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class OpenApiModel(BaseModel):
    """Base for all document nodes: keeps extra fields, accepts field names or aliases."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class SecuritySchemeType(str, Enum):
    API_KEY = "apiKey"
    HTTP = "http"
    OAUTH2 = "oauth2"
    OPEN_ID_CONNECT = "openIdConnect"
    MUTUAL_TLS = "mutualTLS"


class SecuritySchemeIn(str, Enum):
    HEADER = "header"
    QUERY = "query"
    COOKIE = "cookie"


class Reference(OpenApiModel):
    """A ``$ref`` pointer to a definition stored elsewhere in the document."""

    ref: str = Field(alias="$ref")

    @classmethod
    def to_component(cls, section: str, key: str) -> "Reference":
        return cls(ref=f"{COMPONENTS_PREFIX}{section}/{key}")

    @property
    def component_key(self) -> str | None:
        """Key inside Components, or None for references pointing elsewhere."""
        if not self.ref.startswith(COMPONENTS_PREFIX):
            return None
        return self.ref.rsplit("/", 1)[-1]


class Schema(OpenApiModel):
    type: str | list[str] | None = None
    format: str | None = None


class Parameter(OpenApiModel):
    """A parameter definition (query, path, header, or cookie)."""

    name: str
    location: str = Field(alias="in")
    required: bool | None = None
    description: str | None = None
    schema_: Schema | None = Field(default=None, alias="schema")
    example: Any = None

    @classmethod
    def header(cls, name: str, required: bool = False, example: Any = None) -> "Parameter":
        return cls(name=name, location="header", required=required, schema_=Schema(type="string"), example=example)


class SecurityScheme(OpenApiModel):
    type: SecuritySchemeType
    description: str | None = None
    name: str | None = None
    location: SecuritySchemeIn | None = Field(default=None, alias="in")
    scheme: str | None = None
    bearer_format: str | None = Field(default=None, alias="bearerFormat")


# Scheme name -> required scopes. All entries must be satisfied together.
SecurityRequirement = dict[str, list[str]]


def security_requirement(*names: str) -> SecurityRequirement:
    """Build a requirement demanding every named scheme, in the given order."""
    return {name: [] for name in names}


class Components(OpenApiModel):
    security_schemes: dict[str, Reference | SecurityScheme] | None = Field(default=None, alias="securitySchemes")
    parameters: dict[str, Reference | Parameter] | None = None

    def add_security_scheme(self, key: str, scheme: SecurityScheme) -> "Components":
        if self.security_schemes is None:
            self.security_schemes = {}
        self.security_schemes[key] = scheme
        return self

    def add_parameter(self, key: str, parameter: Parameter) -> "Components":
        if self.parameters is None:
            self.parameters = {}
        self.parameters[key] = parameter
        return self


class Operation(OpenApiModel):
    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str | None = None
    parameters: list[Reference | Parameter] | None = None

    def add_parameters_item(self, item: Reference | Parameter) -> "Operation":
        if self.parameters is None:
            self.parameters = []
        self.parameters.append(item)
        return self


class PathItem(OpenApiModel):
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None

    def read_operations(self) -> list[Operation]:
        """Defined operations, in HTTP_METHODS order."""
        operations = []
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                operations.append(operation)
        return operations


class Document(OpenApiModel):
    """Root of an OpenAPI document."""

    openapi: str = "3.0.1"
    info: dict | None = None
    security: list[SecurityRequirement] | None = None
    paths: dict[str, PathItem] = {}
    components: Components | None = None

    @field_validator("paths", mode="before")
    @classmethod
    def paths_default_to_empty(cls, value):
        return {} if value is None else value

    def add_security_item(self, requirement: SecurityRequirement) -> "Document":
        if self.security is None:
            self.security = []
        self.security.append(requirement)
        return self

    def resolve_parameter(self, item: Reference | Parameter) -> Parameter | None:
        """Follow a parameter reference into Components; definitions pass through."""
        if isinstance(item, Parameter):
            return item
        key = item.component_key
        if key is None or self.components is None or not self.components.parameters:
            return None
        target = self.components.parameters.get(key)
        return target if isinstance(target, Parameter) else None

    def resolve_security_scheme(self, name: str) -> SecurityScheme | None:
        if self.components is None or not self.components.security_schemes:
            return None
        target = self.components.security_schemes.get(name)
        return target if isinstance(target, SecurityScheme) else None
