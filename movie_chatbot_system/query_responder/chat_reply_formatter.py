""" Script to render the chat replies as plain conversational text. """
import logging
from typing import Any, Dict, List, Optional
from movie_chatbot_system.utilities import query_preprocessing
from movie_chatbot_system.response_basemodel_validator.query_plan_model import MovieRecord, MovieDetails
# basic log info
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# define single logger for the reply formatter
logger = logging.getLogger("Chat_Reply_Formatter")

# first message of every thread
WELCOME_TEXT = (
    "Hi! I'm your movie recommendation bot. How can I help you today? "
    "You can ask about movies in different languages, genres, or search for specific titles!")

GREETING_TEXT = (
    "Hello! I'm here to help you discover great movies! You can ask about:\n"
    "1. Movies in specific languages (e.g., 'Show Hindi movies')\n"
    "2. Movie recommendations by genre\n"
    "3. Search for specific movies\n"
    "4. Get detailed movie information\n"
    "5. Find popular movies")

HELP_TEXT = (
    "I can help you with:\n"
    "1. Language-specific movies (e.g., 'Show Korean movies')\n"
    "2. Genre recommendations (e.g., 'Show action movies')\n"
    "3. Movie search (e.g., 'Search Inception')\n"
    "4. Popular movies (e.g., 'Show popular movies')\n"
    "5. Detailed movie information\n\n"
    "Supported languages: English, Hindi, Spanish, French, German, Italian, Japanese, Korean, Chinese, Russian")

FALLBACK_TEXT = (
    "I'm not sure what you're looking for. Try asking for movie recommendations by language "
    "(e.g., 'Show Hindi movies'), genre, or search for specific movies. Type 'help' to see all options!")

GENERIC_ERROR_TEXT = "Sorry, I encountered an error. Please try again later."


# single movie line for top N lists
def format_movie_line(movie: MovieRecord):
    """Function to render '• Title (Year) - Rating: X/10'."""
    year = query_preprocessing.extract_year_from_release_date(movie.release_date)
    rating = query_preprocessing.format_rating_value(movie.vote_average)
    return f"• {movie.title} ({year}) - Rating: {rating}/10"


# top N reply
def render_top_movies(
        heading: str,
        movies: List[MovieRecord]):
    """Function to render a heading followed by one bullet line per movie.

    Args:
        heading (str): e.g. 'Here are some popular korean movies:'.
        movies (list): Already clipped list of MovieRecord.

    Returns:
        str: reply text.
    """
    logger.info(f"Formatting {len(movies)} movie lines.")
    lines = [format_movie_line(movie) for movie in movies]
    return heading + "\n" + "\n".join(lines)


# one search result block
def format_search_result(
        movie: MovieRecord,
        details: Optional[MovieDetails]):
    """Function to render one search hit, with director/cast/plot when enrichment worked."""
    year = query_preprocessing.extract_year_from_release_date(movie.release_date)
    rating = query_preprocessing.format_rating_value(movie.vote_average)
    block = (
        f"• {movie.title} ({year})\n"
        f"  Rating: {rating}/10\n")
    if details is not None:
        block += (
            f"  Director: {details.Director}\n"
            f"  Cast: {details.Actors}\n"
            f"  Plot: {details.Plot}\n")
    return block + "\n"


# search reply
def render_search_results(
        search_query: str,
        enriched_results: List[Dict[str, Any]]):
    """Function to render the search reply.

    Args:
        search_query (str): Query shown back to the user.
        enriched_results (list): dicts with 'movie' (MovieRecord) and 'details' (MovieDetails or None).

    Returns:
        str: reply text, or the 'no matches' line when there are no results.
    """
    if not enriched_results:
        return render_no_matches(search_query)
    reply = f"Here's what I found for \"{search_query}\":\n\n"
    for item in enriched_results:
        reply += format_search_result(item["movie"], item.get("details"))
    return reply.strip()


def render_no_matches(search_query: str):
    return f"Sorry, I couldn't find any movies matching \"{search_query}\"."
