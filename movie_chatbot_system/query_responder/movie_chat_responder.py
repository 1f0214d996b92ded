""" Movie Chat Responder - text in, reply out, never raises """
import logging
from typing import Optional
from movie_chatbot_system.config.chatbot_settings import ChatBotSettings
from movie_chatbot_system.api_client.movie_api_client import build_movie_api_clients
from movie_chatbot_system.query_processor import rules_based_intent_parser
from movie_chatbot_system.query_processor.query_processor_main import MovieQueryProcessor
from movie_chatbot_system.query_responder import chat_reply_formatter
from movie_chatbot_system.rate_limiter.sliding_window_limiter import SlidingWindowRateLimiter, RateLimitExceeded
from movie_chatbot_system.response_cache.response_cache import MovieResponseCache
# basic log info
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# define single logger for the responder
logger = logging.getLogger("Movie_Chat_Responder")


# responder class
class MovieChatResponder:
    """Class to classify user text, run the plan and always return a reply."""

    def __init__(
            self,
            query_processor: MovieQueryProcessor,
            rate_limiter: SlidingWindowRateLimiter):
        self.query_processor = query_processor
        self.rate_limiter = rate_limiter

    # classify only
    def classify(self, text: str):
        """Function to return the first matching QueryPlan for the text."""
        return rules_based_intent_parser.user_query_parser(text)

    # classify + execute with first-match-wins
    def generate_reply(self, text: str) -> str:
        """Function to run the candidate plans in rule order until one produces a reply.
            - rules that produce no reply (unresolved genre, empty search) hand over to the next one
            - FALLBACK is always last and always answers
        """
        reply: Optional[str] = None
        for plan in rules_based_intent_parser.iterate_query_plans(text):
            reply = self.query_processor.execute_query_plan(plan)
            if reply is not None:
                logger.info(f"Answered with intent: {plan.intent}")
                return reply
        return chat_reply_formatter.FALLBACK_TEXT

    # public entry point
    def respond(self, text: str) -> str:
        """Function to answer the user text.

        Args:
            text (str): Incoming user's query.

        Returns:
            str: reply text. Rate limit failures are surfaced verbatim,
                 any other failure returns the generic apology.
        """
        try:
            return self.generate_reply(text)
        except RateLimitExceeded as rate_limit_error:
            logger.warning(f"Rate limited: {rate_limit_error}")
            return str(rate_limit_error)
        except Exception:
            logger.exception("Failed to answer the user query.")
            return chat_reply_formatter.GENERIC_ERROR_TEXT

    # display only
    def remaining_requests(self):
        return self.rate_limiter.remaining()


# build the full responder from settings
def build_movie_chat_responder(settings: Optional[ChatBotSettings] = None):
    """Function to wire limiter, clients, cache, processor and responder.

    Args:
        settings (ChatBotSettings): Defaults to ChatBotSettings.load().

    Returns:
        MovieChatResponder
    """
    settings = settings or ChatBotSettings.load()
    logger.info("Building the movie chat responder..")
    rate_limiter = SlidingWindowRateLimiter(
        max_requests=settings.rate_limit_max_requests,
        time_window_ms=settings.rate_limit_window_ms)
    response_cache = MovieResponseCache(
        api_clients=build_movie_api_clients(settings),
        rate_limiter=rate_limiter,
        ttl_ms=settings.cache_ttl_ms)
    query_processor = MovieQueryProcessor(response_cache=response_cache)
    return MovieChatResponder(query_processor=query_processor, rate_limiter=rate_limiter)
