"""Registry of the HUB endpoints served by the mock.

Every import endpoint is driven by one row of IMPORT_ROUTES; the handler is
generic and only differs by the array it counts and the label it reports.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI

from .handlers.coas import get_coas_search
from .handlers.imports import import_handler


log = logging.getLogger("hub_mock.known_routes")

# Each item: {'path': str, 'array': str, 'label': str}
IMPORT_ROUTES: list[dict[str, Any]] = [
  {
    'path': '/api/v1/business-groups/import',
    'array': 'businessGroups',
    'label': 'Business group'
  },
  {
    'path': '/api/v1/customers/import',
    'array': 'customers',
    'label': 'Customer'
  },
  {
    'path': '/api/v1/suppliers/import',
    'array': 'suppliers',
    'label': 'Supplier'
  },
  {
    'path': '/api/v1/supplier-banks/import',
    'array': 'supplierBanks',
    'label': 'Supplier bank'
  },
  {
    'path': '/api/v1/exchange-rates/import',
    'array': 'exchangeRates',
    'label': 'Exchange rate'
  },
  {
    'path': '/api/v1/trades/import',
    'array': 'trades',
    'label': 'Trade'
  }
]

COA_SEARCH_PATH = "/api/v1/coas/search"


def register_known_routes(app: FastAPI) -> None:
    """Register data search and data import routes."""

    app.add_route(COA_SEARCH_PATH, get_coas_search, methods=["GET"])

    for item in IMPORT_ROUTES:
        path = item["path"]
        app.add_route(path, import_handler(item["array"], item["label"]), methods=["POST"])
        log.debug("registered import route %s -> %s", path, item["array"])
