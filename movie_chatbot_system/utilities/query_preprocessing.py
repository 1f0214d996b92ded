""" Script to preprocess the user chat queries
    1. convert incoming query as lower case
    2. remove the 'search' command word from the query
    3. extract the display year from a release date
    4. build a canonical cache key for request shapes

"""
import re
import json
from typing import Any, Dict, Optional

# pattern for the search command word - case insensitive
SEARCH_WORD_PATTERN = re.compile("search", re.IGNORECASE)


# convert text as lower text
def convert_text_to_lower_case(text: str):
    """Function to convert the text to lower-case.

    Args:
        text (str): Incoming text from user's query.

    Returns:
        text (str): lower case text.
    """
    # guard against None from the payload
    if not text:
        return ""
    # convert to lower case
    return text.lower()


# strip the search command word
def strip_search_word(text: str):
    """Function to remove the first 'search' word (any casing) and trim spaces.

    Args:
        text (str): Incoming text from user's query, original casing.

    Returns:
        query (str): remaining search query, empty when nothing is left.
    """
    # remove only the first occurrence and keep the original casing of the rest
    remaining_text = SEARCH_WORD_PATTERN.sub("", text or "", count=1)
    # trim leading and trailing spaces
    return remaining_text.strip()


# year value from release date text
def extract_year_from_release_date(release_date: Optional[str]):
    """Function to get the display year from a release date like '2010-07-15'.
        - takes the part before the first '-'
        - returns 'N/A' if the date is missing or empty

    Args:
        release_date (str): Release date string from the catalog API.

    Returns:
        str: year text or 'N/A'.
    """
    # missing date -> N/A
    if not release_date:
        return "N/A"
    # take leading segment before the first dash
    year_text = str(release_date).split("-")[0]
    # return N/A when the leading segment is empty
    return year_text or "N/A"


# format rating as provided
def format_rating_value(vote_average: Any):
    """Function to print the vote average as the API number reads.
        - whole floats drop the trailing '.0' (7.0 -> '7'), other values unchanged
    """
    if vote_average is None:
        return "N/A"
    if isinstance(vote_average, float) and vote_average.is_integer():
        return str(int(vote_average))
    return str(vote_average)


# canonical cache key
def build_cache_key(
        endpoint: str,
        params: Optional[Dict[str, Any]] = None):
    """Function to encode (endpoint, params) with stable key ordering.

    Args:
        endpoint (str): API path like '/discover/movie'.
        params (dict): Query parameters for the call.

    Returns:
        str: JSON text usable as a dictionary key.
    """
    return json.dumps(
        {"url": endpoint, "params": params or {}},
        sort_keys=True,
        default=str)
