from __future__ import annotations
import asyncio
from contextlib import asynccontextmanager

import socketio
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from . import config
from .errors import InvalidInput
from .logging_config import configure_logging, get_logger
from .managers.analysis import manager
from .schemas import AnalyzeRequest, AnalyzeResult, WordList

logger = get_logger(__name__)

INVALID_BODY = 'Invalid request body'

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Word list is only touched outside the serving window
    manager.load(config.WORDS_FILE)
    yield
    manager.save(config.WORDS_FILE)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*')
app = FastAPI(title="Wordmatch Server", version="0.1.0", lifespan=lifespan)

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

def _invalid_body_response() -> PlainTextResponse:
    return PlainTextResponse(INVALID_BODY, status_code=400)

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    logger.warning('rejected %s %s: invalid body', request.method, request.url.path)
    return _invalid_body_response()

@app.exception_handler(InvalidInput)
async def invalid_input(request: Request, exc: InvalidInput):
    logger.warning('rejected %s %s: %s', request.method, request.url.path, exc)
    return _invalid_body_response()

# REST Endpoints
# Plain def: FastAPI runs it on the worker threadpool
@app.post('/analyze', response_model=AnalyzeResult)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
    return manager.analyze(req.text)

@app.get('/words', response_model=WordList)
def list_words() -> WordList:
    words = manager.store.snapshot()
    return WordList(count=len(words), words=list(words))

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.emit('pong', to=sid)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

@sio.on('analyze')
async def on_analyze(sid, payload=None):
    text = payload.get('text') if isinstance(payload, dict) else None
    try:
        result = await asyncio.to_thread(manager.analyze, text)
    except InvalidInput as e:
        logger.warning('rejected analyze event from %s: %s', sid, e)
        await sio.emit('analyze:error', { 'error': INVALID_BODY }, to=sid)
        return
    await sio.emit('analyze:result', result.model_dump(), to=sid)

# Export ASGI app for uvicorn
application = asgi_app

def run():
    configure_logging(config.LOG_LEVEL)
    uvicorn.run(application, host=config.HOST, port=config.PORT)

if __name__ == '__main__':
    run()
