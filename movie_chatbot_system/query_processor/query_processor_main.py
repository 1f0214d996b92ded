"""Run the API call sequence for each classified query plan.

Catalog endpoints used:
- /discover/movie (with_original_language or with_genres, sort_by=popularity.desc)
- /movie/popular
- /genre/movie/list
- /search/movie (query)
- /movie/{id} (imdb_id cross-reference)
Ratings endpoint used:
- / (i=<imdb id>)

Every call goes through the response cache, so repeated plans inside the ttl
do not spend rate limit quota.
"""
import logging
from typing import Optional
from movie_chatbot_system.response_cache.response_cache import MovieResponseCache
from movie_chatbot_system.query_responder import chat_reply_formatter
from movie_chatbot_system.response_basemodel_validator.query_plan_model import QueryPlan, MovieRecord, MovieDetails, GenreRecord
# define basic config
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# logger as liner
logger = logging.getLogger("Movie_Query_Processor")

# how many movies each reply lists
TOP_MOVIES_LIMIT = 5
SEARCH_RESULTS_LIMIT = 3


# movie query process class
class MovieQueryProcessor:
    """Service to execute the API calls for classified query plans."""

    def __init__(self, response_cache: MovieResponseCache):
        """Initialise with the shared response cache.

        Args:
            response_cache (MovieResponseCache): Read-through cache over both APIs.
        """
        self.response_cache = response_cache

    # convert payload rows to response models
    def convert_results_to_movie_records(
            self,
            payload,
            limit: int):
        """Function to turn the 'results' list of a catalog payload into MovieRecord list.

        Args:
            payload (dict): Decoded catalog response.
            limit (int): How many rows to keep.

        Returns:
            list: MovieRecord rows, at most `limit`.

        Raises:
            KeyError: payload has no 'results', treated as a malformed response upstream.
        """
        rows = payload["results"][:limit]
        logger.info(f"Converting {len(rows)} result rows to MovieRecord")
        return [MovieRecord(**row) for row in rows]

    # 1. fixed texts
    def run_greeting(self, plan: QueryPlan):
        return chat_reply_formatter.GREETING_TEXT

    def run_help(self, plan: QueryPlan):
        return chat_reply_formatter.HELP_TEXT

    def run_fallback(self, plan: QueryPlan):
        return chat_reply_formatter.FALLBACK_TEXT

    # 2. language discovery
    def run_language_discovery(self, plan: QueryPlan):
        """Function to list the most popular movies in the plan's original language."""
        logger.info(f"LANGUAGE_DISCOVERY -> language: {plan.language}, code: {plan.language_code}")
        payload = self.response_cache.get(
            "/discover/movie",
            {"with_original_language": plan.language_code, "sort_by": "popularity.desc"})
        movies = self.convert_results_to_movie_records(payload, TOP_MOVIES_LIMIT)
        return chat_reply_formatter.render_top_movies(
            f"Here are some popular {plan.language} movies:", movies)

    # 3. popular listing
    def run_popular(self, plan: QueryPlan):
        """Function to list the popular movies right now."""
        logger.info("POPULAR -> fetching popular movies")
        payload = self.response_cache.get("/movie/popular")
        movies = self.convert_results_to_movie_records(payload, TOP_MOVIES_LIMIT)
        return chat_reply_formatter.render_top_movies(
            "Here are some popular movies right now:", movies)

    # resolve a genre keyword to the catalog genre id
    def resolve_genre_id(self, genre: str) -> Optional[int]:
        """Function to find the first catalog genre whose name contains the keyword.

        Args:
            genre (str): Genre keyword like 'comedy' or 'sci-fi'.

        Returns:
            int or None when no catalog genre name contains the keyword.
        """
        payload = self.response_cache.get("/genre/movie/list")
        for row in payload.get("genres", []):
            genre_record = GenreRecord(**row)
            if genre in genre_record.name.lower():
                return genre_record.id
        return None

    # 4. genre discovery
    def run_genre_discovery(self, plan: QueryPlan):
        """Function to list the most popular movies of a genre.

        Returns:
            str reply, or None when the keyword does not resolve to a catalog genre.
        """
        logger.info(f"GENRE_DISCOVERY -> genre: {plan.genre}")
        genre_id = self.resolve_genre_id(plan.genre)
        if not genre_id:
            logger.info(f"No catalog genre matches '{plan.genre}', handing over to the next rule")
            return None
        payload = self.response_cache.get(
            "/discover/movie",
            {"with_genres": genre_id, "sort_by": "popularity.desc"})
        movies = self.convert_results_to_movie_records(payload, TOP_MOVIES_LIMIT)
        return chat_reply_formatter.render_top_movies(
            f"Here are some popular {plan.genre} movies:", movies)

    # enrichment for a search hit
    def get_movie_details(self, movie_id) -> Optional[MovieDetails]:
        """Function to fetch director/cast/plot from the ratings API via the imdb cross-reference.
            - any failure (network, rate limit, missing imdb id) returns None

        Args:
            movie_id: Catalog movie id.

        Returns:
            MovieDetails or None.
        """
        try:
            details = self.response_cache.get(f"/movie/{movie_id}")
            imdb_id = details.get("imdb_id")
            if imdb_id:
                ratings_payload = self.response_cache.get("/", {"i": imdb_id}, api_selector="ratings")
                # ratings api answers unknown ids with 200 and Response=False
                if ratings_payload.get("Response") == "False":
                    logger.info(f"Ratings API has no record for {imdb_id}: {ratings_payload.get('Error')}")
                    return None
                return MovieDetails(**ratings_payload)
            logger.info(f"Movie {movie_id} has no imdb_id, skipping enrichment")
        except Exception:
            logger.exception(f"Error fetching movie details for {movie_id}")
        return None

    # 5. title search
    def run_search(self, plan: QueryPlan):
        """Function to search titles and enrich the top hits.

        Returns:
            str reply, or None when the query is empty after removing 'search'.
        """
        search_query = plan.search_query or ""
        if not search_query:
            logger.info("SEARCH -> empty query, handing over to the next rule")
            return None
        logger.info(f"SEARCH -> query: {search_query}")
        payload = self.response_cache.get("/search/movie", {"query": search_query})
        movies = self.convert_results_to_movie_records(payload, SEARCH_RESULTS_LIMIT)
        if not movies:
            return chat_reply_formatter.render_no_matches(search_query)

        enriched_results = []
        for movie in movies:
            enriched_results.append({
                "movie": movie,
                "details": self.get_movie_details(movie.id),})
        return chat_reply_formatter.render_search_results(search_query, enriched_results)

    # main dispatcher
    def execute_query_plan(self, plan: QueryPlan) -> Optional[str]:
        """Function to run the handler for the plan's intent.

        Args:
            plan (QueryPlan): Classified plan.

        Returns:
            str reply, or None when the handler has nothing to say.
        """
        handlers = {
            "GREETING": self.run_greeting,
            "HELP": self.run_help,
            "LANGUAGE_DISCOVERY": self.run_language_discovery,
            "POPULAR": self.run_popular,
            "GENRE_DISCOVERY": self.run_genre_discovery,
            "SEARCH": self.run_search,
            "FALLBACK": self.run_fallback,}
        return handlers[plan.intent](plan)
