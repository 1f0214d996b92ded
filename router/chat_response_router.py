""" Movie Chat Responder Router """
import logging
from fastapi import APIRouter, Depends
from fastapi import HTTPException, status
from movie_chatbot_system.chat_thread.conversation_thread import ConversationThread
from movie_chatbot_system.query_responder.movie_chat_responder import build_movie_chat_responder
from movie_chatbot_system.response_basemodel_validator import chat_message_model
# define basic config
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# logger for this router
logger = logging.getLogger("Movie_Chat_Bot_API")


# initialise the router
router = APIRouter(tags=["CHAT_RESPONDER"])

# one process-wide thread, in memory only
conversationThread = ConversationThread(responder=build_movie_chat_responder())


# dependency - overridable in tests
def get_conversation_thread():
    return conversationThread


# build the quota view
def build_rate_limit_status(thread: ConversationThread):
    limiter = thread.responder.rate_limiter
    return chat_message_model.RateLimitStatus(
        remaining=limiter.remaining(),
        max_requests=limiter.max_requests)


@router.post(
        "/chat/message",
        response_model=chat_message_model.ChatMessageResponse)
def api_chat_message(
        req: chat_message_model.ChatMessageRequest,
        thread: ConversationThread = Depends(get_conversation_thread)):
    """ POST chat message - append to the thread and answer."""
    logger.info("Started to validate the incoming chat message..")
    if not (req.text or "").strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid request: 'text' field is required.")
    try:
        reply = thread.send(req.text)
    except Exception as server_error:
        logger.exception("Unexpected error occurred.")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unexpected error: {str(server_error)}")

    logger.info("Successfully answered the chat message..")
    return chat_message_model.ChatMessageResponse(
        reply=reply,
        rate_limit=build_rate_limit_status(thread))


@router.get(
        "/chat/messages",
        response_model=chat_message_model.ChatThreadResponse)
def api_chat_messages(thread: ConversationThread = Depends(get_conversation_thread)):
    """ GET the whole thread in insertion order."""
    return chat_message_model.ChatThreadResponse(
        messages=thread.messages(),
        is_composing=thread.is_composing)


@router.get(
        "/chat/rate-limit",
        response_model=chat_message_model.RateLimitStatus)
def api_chat_rate_limit(thread: ConversationThread = Depends(get_conversation_thread)):
    """ GET remaining requests, does not consume quota."""
    return build_rate_limit_status(thread)
