"""App bootstrap: wires settings, record store and quote provider into Flask."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS

from .config import Settings
from ..api.handlers import bridge_bp
from ..market.base import QuoteProvider
from ..market.remote import RemoteQuoteProvider
from ..market.synthetic import SyntheticQuoteProvider
from ..state.store import RecordStore


def build_quote_provider(settings: Settings) -> QuoteProvider:
    if settings.quote_provider == "remote":
        return RemoteQuoteProvider(
            base_url=settings.quote_base_url,
            api_key=settings.td_api_key,
            timeout=settings.quote_timeout,
        )
    return SyntheticQuoteProvider()


def build_environment(settings: Settings) -> tuple[RecordStore, QuoteProvider]:
    return RecordStore(), build_quote_provider(settings)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    provider: Optional[QuoteProvider] = None,
) -> Flask:
    settings = settings or Settings()
    app = Flask(__name__)
    app.json.sort_keys = False
    CORS(app, origins=settings.cors_origins)

    app.extensions["record_store"] = store if store is not None else RecordStore()
    app.extensions["quote_provider"] = (
        provider if provider is not None else build_quote_provider(settings)
    )
    app.register_blueprint(bridge_bp)
    return app
