from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from socialq.api.endpoints import get_endpoints_router
from socialq.date_recognizers.base import DateRecognizer
from socialq.stores.base import RelationshipStore


def create_app(
    *,
    store: RelationshipStore,
    date_recognizer: DateRecognizer,
) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router=get_endpoints_router(store=store, date_recognizer=date_recognizer))

    return app
