"""Response hardening headers.

Mirrors the default header set of common HTTP hardening middleware. The mock
is internal-only, but callers sometimes assert on these being present.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping


SECURITY_HEADERS: Mapping[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}

# Never advertise the stack.
DISCLOSURE_HEADERS = ("server", "x-powered-by")


def apply_security_headers(headers: MutableMapping[str, str]) -> None:
    """Set hardening headers in place, keeping values a handler already chose."""

    for name, value in SECURITY_HEADERS.items():
        if name not in headers:
            headers[name] = value
    for name in DISCLOSURE_HEADERS:
        if name in headers:
            del headers[name]
