from fastapi import APIRouter, HTTPException
from loguru import logger

from socialq.api.schemas import LogInteractionRequest, SentimentResponse, TextRequest
from socialq.config import settings
from socialq.date_recognizers.base import DateRecognizer
from socialq.domain.graph import GraphData
from socialq.domain.insights import InsightsSummary
from socialq.domain.parsed import ParsedLogEntry
from socialq.domain.people import Interaction, Reminder
from socialq.graph.transform import apply_highlight, build_graph_data
from socialq.ingestion.recorder import LogEntryRecorder
from socialq.insights import compute_insights, due_reminders
from socialq.parsing.log_parser import LogParser
from socialq.parsing.sentiment import compute_sentiment
from socialq.stores.base import RelationshipStore


def _create_graph_endpoint(store: RelationshipStore):
    """Create the relationship graph endpoint handler."""

    async def get_graph(selected_person_id: str | None = None) -> GraphData:
        graph = build_graph_data(store.list_people(), store.list_interactions())
        return apply_highlight(graph.nodes, graph.edges, selected_person_id)

    return get_graph


def _create_parse_endpoint(store: RelationshipStore, parser: LogParser):
    """Create the live log parsing endpoint handler."""

    async def parse_log(request: TextRequest) -> ParsedLogEntry:
        return parser.parse(request.text, store.list_people())

    return parse_log


def _create_log_interaction_endpoint(store: RelationshipStore, parser: LogParser):
    """Create the endpoint that records a log entry as an interaction."""
    recorder = LogEntryRecorder(store=store, parser=parser)

    async def log_interaction(request: LogInteractionRequest) -> Interaction:
        try:
            return recorder.record(
                request.text,
                resolutions=request.resolutions,
                interaction_type=request.type,
                sentiment=request.sentiment,
                create_unmatched=request.create_unmatched,
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        except KeyError as err:
            logger.error(f"Failed to resolve person for log entry: {err}")
            raise HTTPException(status_code=404, detail="Person not found") from err

    return log_interaction


def get_endpoints_router(
    *,
    store: RelationshipStore,
    date_recognizer: DateRecognizer,
) -> APIRouter:
    router = APIRouter()
    parser = LogParser(date_recognizer)

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @router.post("/api/sentiment")
    async def sentiment(request: TextRequest) -> SentimentResponse:
        return SentimentResponse(sentiment=compute_sentiment(request.text))

    @router.get("/api/insights")
    async def insights() -> InsightsSummary:
        return compute_insights(
            store.list_people(),
            store.list_interactions(),
            attention_days=settings.needs_attention_days,
        )

    @router.get("/api/reminders/due")
    async def reminders_due(within_days: int = settings.due_reminder_days) -> list[Reminder]:
        return due_reminders(store.list_reminders(), within_days=within_days)

    router.get("/api/graph")(_create_graph_endpoint(store))
    router.post("/api/parse")(_create_parse_endpoint(store, parser))
    router.post("/api/interactions/log")(_create_log_interaction_endpoint(store, parser))

    return router
