"""Static metadata for the generated OpenAPI document"""
from typing import Any, Dict, List

DOCS_URL = "/api-docs"
OPENAPI_URL = "/api-docs/openapi.json"

DESCRIPTION = "API for creating, reading, updating, and deleting properties."

CONTACT = {
    "name": "Support",
    "url": "http://example.com",
    "email": "support@example.com",
}

TAGS_METADATA: List[Dict[str, Any]] = [
    {
        "name": "Properties",
        "description": "Real estate records with a server-computed total price.",
    },
    {
        "name": "Health",
        "description": "Liveness and readiness probes.",
    },
]

PROPERTY_EXAMPLE = {
    "id": 1,
    "location": "New York",
    "square_meters": 120,
    "price_per_square_meter": 2000,
    "total_price": 240000,
    "owner": "John Doe",
    "country": "USA",
    "region": "East Coast",
    "province": "New York",
    "district": "Brooklyn",
}


def error_responses(model: Any, *status_codes: int) -> Dict[int, Dict[str, Any]]:
    """Build the `responses` mapping documenting error bodies for a route"""
    descriptions = {
        404: ("The property was not found.", "Property not found"),
        422: ("The request was malformed.", "Invalid request"),
        500: ("The storage operation failed.", "Storage operation failed"),
        504: ("The storage operation timed out.", "Storage operation timed out"),
    }
    responses = {}
    for code in status_codes:
        description, example = descriptions[code]
        responses[code] = {
            "model": model,
            "description": description,
            "content": {"application/json": {"example": {"error": example}}},
        }
    return responses
