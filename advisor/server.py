"""
FastAPI Server for the Symptom Advisor

Provides REST API endpoints for chat sessions around the symptom engine,
plus the symptom diary, medical terms glossary and emergency information.
"""

import json
import logging
import uuid
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, StreamingResponse
from pydantic import BaseModel, Field

import config
from advisor import reference
from advisor.chatbot import AdvisorChatbot
from advisor.diary import MAX_SEVERITY, MIN_SEVERITY
from advisor.engine import SymptomEngine

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Symptom Advisor API",
    version="1.0.0",
    description="Rule-based symptom-to-condition lookup over a static medical dataset",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Shared engine (built once at startup, read-only afterwards)
engine: Optional[SymptomEngine] = None

# In-memory storage for chat sessions
chat_sessions: Dict[str, AdvisorChatbot] = {}


class MessageRequest(BaseModel):
    """Request model for sending messages."""
    message: str


class MessageResponse(BaseModel):
    """Response model for messages."""
    chat_id: str
    response: str
    turn: int
    is_emergency: bool
    definition: Optional[str] = None


class DiaryEntryRequest(BaseModel):
    symptom: str = Field(min_length=1)
    severity: int = Field(default=MIN_SEVERITY, ge=MIN_SEVERITY, le=MAX_SEVERITY)
    notes: str = ""


class DiaryEntry(BaseModel):
    date: str
    symptom: str
    severity: int
    notes: str


@app.on_event("startup")
async def startup_event():
    """Build the knowledge base on startup."""
    global engine
    if engine is None:
        engine = await SymptomEngine.create()
    if engine.kb.is_empty():
        logger.warning("Knowledge base is empty; every symptom query will report 'not recognized'")
    else:
        logger.info("API ready with %d conditions", len(engine.kb))


def get_session(chat_id: str) -> AdvisorChatbot:
    if chat_id not in chat_sessions:
        raise HTTPException(status_code=404, detail="Chat session not found")
    return chat_sessions[chat_id]


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "message": "Symptom Advisor API",
        "version": app.version,
        "status": "healthy",
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "conditions": len(engine.kb) if engine else 0,
        "active_sessions": len(chat_sessions),
    }


@app.post("/chats")
async def create_chat():
    """
    Create a new chat session.

    Returns:
        {"id": "chat-uuid", "welcome": "..."}
    """
    chat_id = str(uuid.uuid4())
    chatbot = AdvisorChatbot(engine)
    chat_sessions[chat_id] = chatbot

    return {
        "id": chat_id,
        "message": "Chat session created",
        "welcome": chatbot.welcome(),
    }


@app.post("/chats/{chat_id}", response_model=MessageResponse)
async def send_message(chat_id: str, request: MessageRequest):
    """
    Send a message to a chat session.

    Args:
        chat_id: Chat session ID
        request: Message request with 'message' field

    Returns:
        MessageResponse with the bot's response
    """
    chatbot = get_session(chat_id)
    response = chatbot.process_message(request.message)

    return MessageResponse(
        chat_id=chat_id,
        response=response,
        turn=chatbot.state.turn,
        is_emergency=reference.check_for_emergency(request.message),
        definition=reference.define_term(request.message),
    )


@app.post("/chats/{chat_id}/stream")
async def send_message_stream(chat_id: str, request: MessageRequest):
    """
    Send a message and get a streaming response.

    The reply is streamed line by line so its indentation survives.

    Returns:
        Server-Sent Events stream
    """
    chatbot = get_session(chat_id)

    async def generate():
        response = chatbot.process_message(request.message)
        for line in response.split("\n"):
            payload = json.dumps({"content": line + "\n"})
            yield f"data: {payload}\n\n"
        yield "data: [DONE]\n\n"

    return StreamingResponse(generate(), media_type="text/event-stream")


@app.get("/chats/{chat_id}")
async def get_chat_state(chat_id: str):
    """Get current state of a chat session."""
    chatbot = get_session(chat_id)
    state = chatbot.state

    return {
        "chat_id": chat_id,
        "turn": state.turn,
        "history": state.history,
        "diary_entries": len(state.diary),
    }


@app.get("/chats/{chat_id}/transcript", response_class=PlainTextResponse)
async def export_transcript(chat_id: str):
    """Export the conversation as plain text."""
    return get_session(chat_id).transcript()


@app.delete("/chats/{chat_id}")
async def delete_chat(chat_id: str):
    """Delete a chat session."""
    chat_sessions.pop(chat_id, None)
    return {"message": "Chat session deleted"}


@app.post("/chats/{chat_id}/restart")
async def restart_chat(chat_id: str):
    """Restart a chat session (reset state)."""
    chatbot = get_session(chat_id)
    chatbot.state.reset()

    return {
        "message": "Chat session restarted",
        "welcome": chatbot.welcome(),
    }


@app.get("/chats/{chat_id}/diary", response_model=List[DiaryEntry])
async def list_diary(chat_id: str):
    """List symptom diary entries of a chat session."""
    diary = get_session(chat_id).state.diary
    return [log.to_dict() for log in diary.entries()]


@app.post("/chats/{chat_id}/diary", response_model=DiaryEntry, status_code=201)
async def add_diary_entry(chat_id: str, request: DiaryEntryRequest):
    """Record a symptom in the session's diary."""
    diary = get_session(chat_id).state.diary
    log = diary.add(request.symptom, severity=request.severity, notes=request.notes)
    return log.to_dict()


@app.get("/terms")
async def medical_terms(q: str = ""):
    """Search the medical terms glossary."""
    return [{"term": term, "definition": definition} for term, definition in reference.search_terms(q)]


@app.get("/emergency")
async def emergency_info():
    """Emergency warning signs and contacts."""
    return {
        "signs": list(reference.EMERGENCY_SIGNS),
        "contacts": dict(reference.EMERGENCY_CONTACTS),
    }


def run():
    import uvicorn

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")

    print("\n" + "=" * 70)
    print("Starting Symptom Advisor Server")
    print("=" * 70)
    print(f"\nServer will start on: http://{config.API_HOST}:{config.API_PORT}")
    print(f"API docs available at: http://{config.API_HOST}:{config.API_PORT}/docs")
    print("\nPress Ctrl+C to stop")
    print("=" * 70 + "\n")

    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    run()
