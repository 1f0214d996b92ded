""" Movie Chat Bot settings loaded from the environment (.env supported) """
import os
import logging
from dotenv import load_dotenv
from pydantic import BaseModel, Field
# initiate the load_dotenv
load_dotenv()
# basic log info
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# logger for the settings loader
logger = logging.getLogger("Chat_Bot_Settings")


# settings basemodel
class ChatBotSettings(BaseModel):
    """Runtime configuration for the catalog/ratings clients, limiter and cache."""
    # catalog api (TMDB)
    tmdb_api_key: str = Field("", description="Catalog API key sent as 'api_key'.")
    tmdb_base_url: str = Field("https://api.themoviedb.org/3")
    # ratings api (OMDb)
    omdb_api_key: str = Field("", description="Ratings API key sent as 'apikey'.")
    omdb_base_url: str = Field("https://www.omdbapi.com")
    # sliding window rate limiter
    rate_limit_max_requests: int = Field(30, ge=1)
    rate_limit_window_ms: int = Field(10000, ge=1)
    # response cache time-to-live
    cache_ttl_ms: int = Field(5 * 60 * 1000, ge=0)
    # outbound http timeout
    http_timeout_seconds: float = Field(10.0, gt=0)
    # chat service url used by the terminal client
    chat_api_url: str = Field("http://127.0.0.1:8000/api/chat/message")

    @classmethod
    def load(cls) -> "ChatBotSettings":
        """Function to build the settings from environment variables."""
        settings = cls(
            tmdb_api_key=os.getenv("TMDB_API_KEY", ""),
            tmdb_base_url=os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3"),
            omdb_api_key=os.getenv("OMDB_API_KEY", ""),
            omdb_base_url=os.getenv("OMDB_BASE_URL", "https://www.omdbapi.com"),
            rate_limit_max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "30")),
            rate_limit_window_ms=int(os.getenv("RATE_LIMIT_WINDOW_MS", "10000")),
            cache_ttl_ms=int(os.getenv("CACHE_TTL_MS", str(5 * 60 * 1000))),
            http_timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "10")),
            chat_api_url=os.getenv("CHAT_API_URL", "http://127.0.0.1:8000/api/chat/message"),)

        # warn once if keys are missing, calls will fail and degrade to apologies
        if not settings.tmdb_api_key:
            logger.warning("TMDB_API_KEY is not set; catalog calls will be rejected.")
        if not settings.omdb_api_key:
            logger.warning("OMDB_API_KEY is not set; detail enrichment will be skipped.")
        return settings
