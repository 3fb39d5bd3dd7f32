import logging

from fastapi import FastAPI, Request, HTTPException, BackgroundTasks
from fastapi.responses import JSONResponse

from honeycomb.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("honeycomb")

# Populated at startup, and again whenever dictionary settings change
_trie = None


def _load_dictionary():
    global _trie
    from honeycomb.errors import InvalidCharacterError
    from honeycomb.trie import load_trie

    dict_path = settings.DICTIONARY_PATH
    logger.info("Loading dictionary from %s (min_length=%d strict=%s)",
                dict_path, settings.MIN_WORD_LENGTH, settings.STRICT_DICTIONARY)
    try:
        _trie = load_trie(str(dict_path), settings.MIN_WORD_LENGTH, settings.STRICT_DICTIONARY)
    except (OSError, InvalidCharacterError) as e:
        logger.error("Dictionary not loaded: %s", e)
        _trie = None


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        _load_dictionary()
        yield

    application = FastAPI(title="Honeycomb Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "trie_loaded": _trie is not None}

    @application.post("/solve")
    async def solve(request: Request, background_tasks: BackgroundTasks):
        from honeycomb.errors import MalformedHoneycombError
        from honeycomb.finder import solve as solve_honeycomb
        from honeycomb.grid import parse_honeycomb
        from honeycomb.metrics import StageTimer
        from honeycomb.notifier import send_notification

        data = await request.body()
        logger.info("POST /solve received %d bytes", len(data))
        if not data:
            raise HTTPException(400, "Empty request body: no honeycomb received")
        if len(data) > settings.MAX_UPLOAD_BYTES:
            raise HTTPException(413, f"Honeycomb too large (max {settings.MAX_UPLOAD_BYTES} bytes)")
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            raise HTTPException(400, "Honeycomb must be UTF-8 text")

        if _trie is None:
            raise HTTPException(503, "Dictionary not loaded")

        timer = StageTimer()

        with timer.stage("parse"):
            try:
                grid = parse_honeycomb(text)
            except MalformedHoneycombError as e:
                raise HTTPException(400, str(e))

        if settings.DEBUG:
            logger.info("Columns:\n%s", grid.format_columns())

        with timer.stage("search"):
            all_words, starts = solve_honeycomb(grid, _trie, 0)

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d)", len(all_words), len(words))

        if settings.NOTIFY:
            background_tasks.add_task(
                send_notification, all_words, grid.layers, timer.summary(),
                settings.NTFY_TOPIC, settings.NTFY_URL, settings.NOTIFY_WORDS_PER_GROUP,
            )

        return JSONResponse({
            "layers": grid.layers,
            "columns": list(grid.columns),
            "words": words,
            "word_count": len(words),
            "total_found": len(all_words),
            "starts": {w: list(starts[w]) for w in words},
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from honeycomb.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from honeycomb.settings import update_settings, get_editable_settings
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Expected a JSON object of settings")
        before = (settings.MIN_WORD_LENGTH, settings.STRICT_DICTIONARY)
        errors = update_settings(settings, **body)
        if (settings.MIN_WORD_LENGTH, settings.STRICT_DICTIONARY) != before:
            _load_dictionary()
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
