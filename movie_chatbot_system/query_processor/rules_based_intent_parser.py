"""Script for Rule-based Intent Parser"""
import logging
from movie_chatbot_system.utilities import query_preprocessing
from movie_chatbot_system.response_basemodel_validator.query_plan_model import QueryPlan
# basic log info
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# define single logger for the intent parser
logger = logging.getLogger("Query_Rule_Based_Intent_Parser")

# supported original languages, checked in this order
LANGUAGE_CODES = {
    "hindi": "hi",
    "english": "en",
    "spanish": "es",
    "french": "fr",
    "german": "de",
    "italian": "it",
    "japanese": "ja",
    "korean": "ko",
    "chinese": "zh",
    "russian": "ru",}

# genre keywords, checked in this order
GENRE_KEYWORDS = ["action", "comedy", "drama", "horror", "sci-fi", "romance", "thriller"]


# 1. greeting rule
def match_greeting(text: str, lower_text: str):
    """Function to match 'hi' or 'hello' anywhere in the text."""
    if "hi" in lower_text or "hello" in lower_text:
        return [QueryPlan(intent="GREETING", raw_text=text)]
    return []


# 2. help rule
def match_help(text: str, lower_text: str):
    """Function to match 'help' anywhere in the text."""
    if "help" in lower_text:
        return [QueryPlan(intent="HELP", raw_text=text)]
    return []


# 3. language rule
def match_language(text: str, lower_text: str):
    """Function to match the first supported language name in the text.

    Args:
        text (str): Original user text.
        lower_text (str): Lower-case copy of the text.

    Returns:
        list: one LANGUAGE_DISCOVERY plan, or empty.
    """
    # loop over languages in declared order, first one wins
    for language, code in LANGUAGE_CODES.items():
        if language in lower_text:
            return [QueryPlan(
                intent="LANGUAGE_DISCOVERY",
                raw_text=text,
                language=language,
                language_code=code,)]
    return []


# 4. popular rule
def match_popular(text: str, lower_text: str):
    """Function to match 'popular' anywhere in the text."""
    if "popular" in lower_text:
        return [QueryPlan(intent="POPULAR", raw_text=text)]
    return []


# 5. genre rule
def match_genres(text: str, lower_text: str):
    """Function to match every genre keyword present, in GENRE_KEYWORDS order.
        - each keyword becomes its own plan, since a keyword that
          does not resolve to a catalog genre hands over to the next one.
    """
    return [
        QueryPlan(intent="GENRE_DISCOVERY", raw_text=text, genre=genre)
        for genre in GENRE_KEYWORDS
        if genre in lower_text]


# 6. search rule
def match_search(text: str, lower_text: str):
    """Function to match 'search' and keep the remaining text as the query."""
    if "search" in lower_text:
        return [QueryPlan(
            intent="SEARCH",
            raw_text=text,
            search_query=query_preprocessing.strip_search_word(text),)]
    return []


# ordered rules, earlier rules shadow later ones
INTENT_RULES = [
    ("greeting", match_greeting),
    ("help", match_help),
    ("language", match_language),
    ("popular", match_popular),
    ("genre", match_genres),
    ("search", match_search),]


# every matching plan in rule order
def iterate_query_plans(text: str):
    """Function to yield the plans of every matching rule in order, ending with FALLBACK.

    Args:
        text (str): Incoming user's query text.

    Yields:
        QueryPlan: candidate plans, first-match-wins is applied by the caller.
    """
    raw_text = text or ""
    lower_text = query_preprocessing.convert_text_to_lower_case(raw_text)
    for rule_name, rule in INTENT_RULES:
        for plan in rule(raw_text, lower_text):
            logger.info(f"Rule '{rule_name}' matched -> intent: {plan.intent}")
            yield plan
    # nothing else left
    yield QueryPlan(intent="FALLBACK", raw_text=raw_text)


# parse user text
def user_query_parser(text: str):
    """Function to classify the user text into the first matching QueryPlan.

    Args:
        text (str): Incoming user's query text.

    Steps:
        - GREETING if 'hi' or 'hello' appears
        - HELP if 'help' appears
        - LANGUAGE_DISCOVERY for the first supported language name
        - POPULAR if 'popular' appears
        - GENRE_DISCOVERY for the first genre keyword
        - SEARCH if 'search' appears
        - else FALLBACK
    """
    return next(iterate_query_plans(text))
