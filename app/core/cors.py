"""
Glovebox API - CORS headers
Set by the trigger route itself so preflights get the plain "ok" reply
"""

from typing import Dict, Optional

from app.core.config import settings

CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"


def cors_headers(origin: Optional[str] = None) -> Dict[str, str]:
    """Headers for every trigger response, preflight and envelopes alike."""
    allowed = settings.CORS_ORIGINS
    headers = {"Access-Control-Allow-Headers": CORS_ALLOW_HEADERS}
    if "*" in allowed:
        headers["Access-Control-Allow-Origin"] = "*"
    elif allowed:
        headers["Access-Control-Allow-Origin"] = origin if origin in allowed else allowed[0]
        headers["Vary"] = "Origin"
    return headers
