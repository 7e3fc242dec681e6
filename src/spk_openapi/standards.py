"""Standard SPK security schemes and headers.

These are injected by shared infrastructure libraries at runtime and are
therefore usually left out of hand-written specifications.
"""

from typing import NamedTuple

from spk_openapi.model import SecuritySchemeIn, SecuritySchemeType

SPK_TOKEN = "SpkToken"
BASIC_AUTH = "BasicAuth"

# Order matters: this is the order of the global security requirement.
SECURITY_SCHEMES = {
    SPK_TOKEN: {
        "type": SecuritySchemeType.API_KEY,
        "location": SecuritySchemeIn.HEADER,
        "name": "Authorization",
        "description": (
            "De fleste kall mellom tjenester i SPK bruker et autentiseringstoken "
            "for å autentisere kallet i test og produksjon."
        ),
    },
    BASIC_AUTH: {
        "type": SecuritySchemeType.HTTP,
        "scheme": "basic",
        "description": (
            "Du kan også bruke ditt eget brukernavn og passord for å autentisere kallet i test. "
            "Dette funker ikke i produksjon, der kun tokenbasert autentisering er tillatt."
        ),
    },
}


class StandardHeader(NamedTuple):
    key: str  # key under components.parameters
    name: str  # HTTP header name
    example: str


# Order matters: operations receive references in this order.
STANDARD_HEADERS = (
    StandardHeader("xApplicationId", "X-Application-Id", "SwaggerUI"),
    StandardHeader("xCorrelationId", "X-Correlation-Id", "f8c0d93c-8761-4d35-9b4a-51ac9d12c319"),
    StandardHeader("xRequestOrigin", "X-Request-Origin", "SwaggerUI"),
)
