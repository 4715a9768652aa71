"""FastAPI web service decoding NMEA 0183 sentences.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

HTTP clients ``POST /sentences`` with ``{"sentence": "$GPGGA,...*5E"}`` and
receive the decoded sentence as JSON. WebSocket clients connect to
``ws://<host>:8000/ws``, send one sentence per text frame and receive one
JSON message per frame: the decoded sentence (``type`` is the lower-cased
sentence ID) or an ``type="error"`` message.
"""

import asyncio
import logging

from fastapi import Body, FastAPI, HTTPException, WebSocket, WebSocketDisconnect

from gnssdecode.formatters import (
    error_to_dict,
    format_error_message,
    format_sentence_message,
    sentence_to_dict,
)
from gnssdecode.nmea import (
    FormatError,
    NMEAError,
    compute_checksum,
    parse,
    resolve_gnss_mode,
)

logger = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 30.0

app = FastAPI(title="gnssdecode")


def _decode_to_message(sentence: str) -> str:
    try:
        return format_sentence_message(parse(sentence))
    except NMEAError as error:
        logger.info("Rejected sentence from websocket client: %s", error)
        return format_error_message(error)


def _binary_frame_message() -> str:
    return format_error_message(
        FormatError("binary frames are not supported, send sentences as text")
    )


async def _decode_messages_until_disconnect(websocket: WebSocket) -> None:
    try:
        while True:
            message = await asyncio.wait_for(
                websocket.receive(), timeout=_TIMEOUT_SECONDS
            )
            if message["type"] == "websocket.disconnect":
                return
            sentence = message.get("text")
            if sentence is None:
                logger.info("Rejected binary frame from websocket client")
                await websocket.send_text(_binary_frame_message())
                continue
            await websocket.send_text(_decode_to_message(sentence))
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.post("/sentences")
async def decode_sentence(
    sentence: str = Body(...),
    verify_checksum: bool = Body(False),
) -> dict:
    """Decode one sentence.

    Responds with ``422`` and ``{"detail": {"error": kind, ...}}`` when the
    sentence cannot be decoded.
    """
    try:
        return sentence_to_dict(parse(sentence, verify_checksum=verify_checksum))
    except NMEAError as error:
        raise HTTPException(status_code=422, detail=error_to_dict(error)) from error


@app.get("/checksum")
async def checksum(text: str) -> dict:
    """Compute the checksum of a sentence or bare sentence body."""
    value = compute_checksum(text)
    return {"checksum": f"{value:02X}", "value": value}


@app.get("/gnss-mode")
async def gnss_mode(sentence: str) -> dict:
    """Resolve the constellation of a sentence from its talker ID."""
    return {"gnss_mode": resolve_gnss_mode(sentence).name}


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Decode sentences sent over a WebSocket connection.

    Every text frame is decoded independently and answered with exactly one
    JSON message. Binary frames are answered with a ``format`` error. The connection closes with code 1001 if the client sends
    nothing for ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    await _decode_messages_until_disconnect(websocket)
