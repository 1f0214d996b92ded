""" In-memory chat thread, append-only """
import logging
import threading
from typing import List, Optional
from movie_chatbot_system.query_responder import chat_reply_formatter
from movie_chatbot_system.query_responder.movie_chat_responder import MovieChatResponder
from movie_chatbot_system.response_basemodel_validator.chat_message_model import ChatMessage
# basic log info
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# define single logger for the thread
logger = logging.getLogger("Conversation_Thread")


# conversation class
class ConversationThread:
    """Class to keep the ordered messages and answer one submission at a time.

    Methods:
      - send(): append the user message and the bot reply
      - messages(): copy of the thread in insertion order
      - is_composing: True while a reply is being produced
    """

    def __init__(self, responder: MovieChatResponder):
        self.responder = responder
        self._messages: List[ChatMessage] = [
            ChatMessage(text=chat_reply_formatter.WELCOME_TEXT, is_bot=True)]
        # one submission at a time, later ones wait their turn
        self._submission_lock = threading.Lock()
        self._messages_lock = threading.Lock()
        self._is_composing = False

    @property
    def is_composing(self):
        return self._is_composing

    def _append(self, message: ChatMessage):
        with self._messages_lock:
            self._messages.append(message)

    # read the whole thread
    def messages(self):
        """Function to return a copy of the thread in insertion order."""
        with self._messages_lock:
            return list(self._messages)

    # submit user text
    def send(self, text: str) -> Optional[ChatMessage]:
        """Function to append the user message, answer it and append the reply.

        Args:
            text (str): User input as typed.

        Returns:
            ChatMessage: the bot reply, or None for blank input (nothing appended).
        """
        if not text or not text.strip():
            logger.info("Blank input ignored.")
            return None

        with self._submission_lock:
            self._append(ChatMessage(text=text, is_bot=False))
            self._is_composing = True
            try:
                reply_text = self.responder.respond(text)
            finally:
                self._is_composing = False
            reply = ChatMessage(text=reply_text, is_bot=True)
            self._append(reply)
            return reply
