""" HTTP clients for the catalog (TMDB) and ratings (OMDb) APIs """
import logging
import requests
from typing import Any, Dict, Optional
from movie_chatbot_system.config.chatbot_settings import ChatBotSettings
# basic log info
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# logger for the api clients
logger = logging.getLogger("Movie_API_Client")


# network or api failure
class MovieApiError(Exception):
    """Raised when a movie API call fails or returns an unusable body."""


# movie api client class
class MovieApiClient:
    """Class to issue authenticated GET calls against one movie API base url."""

    def __init__(
            self,
            base_url: str,
            auth_params: Dict[str, str],
            timeout: float = 10.0,
            http_session: Optional[requests.Session] = None):
        """Initialise the base url, the fixed auth params and the session.

        Args:
            base_url (str): API root such as 'https://api.themoviedb.org/3'.
            auth_params (dict): Query params merged into every call.
            timeout (float): Seconds before a call is abandoned.
            http_session (requests.Session): Optional shared session.
        """
        self.base_url = base_url.rstrip("/")
        self.auth_params = dict(auth_params)
        self.timeout = timeout
        self.http_session = http_session or requests.Session()

    # build full url for an endpoint
    def build_url(self, endpoint: str):
        """Function to join the base url and the endpoint path."""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    # GET request
    def get(
            self,
            endpoint: str,
            params: Optional[Dict[str, Any]] = None):
        """Function to GET an endpoint and return the decoded JSON payload.

        Args:
            endpoint (str): Path relative to the base url.
            params (dict): Call specific query params.

        Returns:
            The JSON body.

        Raises:
            MovieApiError: transport error, non-2xx status or non-JSON body.
        """
        # call params win over nothing, auth params are always merged in
        request_params = {**(params or {}), **self.auth_params}
        url = self.build_url(endpoint)
        logger.info(f"GET {url} params={sorted((params or {}).keys())}")
        try:
            response = self.http_session.get(
                url,
                params=request_params,
                timeout=self.timeout)
            # raise an exception if the request returned an error status code
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as request_error:
            logger.error(f"Request to {url} failed: {request_error}")
            raise MovieApiError(f"Request to {endpoint} failed: {request_error}") from request_error
        except ValueError as decode_error:
            logger.error(f"Invalid JSON from {url}: {decode_error}")
            raise MovieApiError(f"Invalid JSON from {endpoint}") from decode_error

    def close(self):
        self.http_session.close()


# build both clients from settings
def build_movie_api_clients(settings: ChatBotSettings):
    """Function to build the catalog and ratings clients keyed by api selector.

    Returns:
        dict: {"catalog": MovieApiClient, "ratings": MovieApiClient}
    """
    logger.info("Building catalog and ratings API clients..")
    catalog_client = MovieApiClient(
        base_url=settings.tmdb_base_url,
        auth_params={"api_key": settings.tmdb_api_key},
        timeout=settings.http_timeout_seconds)
    ratings_client = MovieApiClient(
        base_url=settings.omdb_base_url,
        auth_params={"apikey": settings.omdb_api_key},
        timeout=settings.http_timeout_seconds)
    return {"catalog": catalog_client, "ratings": ratings_client}
