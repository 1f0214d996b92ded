"""Pydantic basemodel for the classified query plan and the movie API records."""
from pydantic import BaseModel, Field
from typing import List, Optional, Literal, Union


# query plan Class - using the Pydantic basemodel
class QueryPlan(BaseModel):
    """Class - one classified route for the user text.

    User intents as literal -
        - GREETING → fixed onboarding text (e.g. hello).
        - HELP → fixed capabilities text (e.g. help).
        - LANGUAGE_DISCOVERY → popular movies in a language (e.g. show korean movies).
        - POPULAR → popular movies right now (e.g. show popular movies).
        - GENRE_DISCOVERY → popular movies of a genre (e.g. show comedy movies).
        - SEARCH → title search with details (e.g. search Inception).
        - FALLBACK → nothing matched, guidance text.
    """
    intent: Literal[
        "GREETING",
        "HELP",
        "LANGUAGE_DISCOVERY",
        "POPULAR",
        "GENRE_DISCOVERY",
        "SEARCH",
        "FALLBACK",] = Field(..., description="The type of user intent detected.")

    # raw user text we classified
    raw_text: str = Field(..., description="The original user text.")

    # language slot for LANGUAGE_DISCOVERY
    language: Optional[str] = Field(None, description="Language name as typed, lowercase.")
    language_code: Optional[str] = Field(None, description="Two-letter original language code.")

    # genre slot for GENRE_DISCOVERY
    genre: Optional[str] = Field(None, description="Genre keyword matched in the text.")

    # search slot for SEARCH
    search_query: Optional[str] = Field(None, description="Text left after removing 'search'.")


# catalog movie row
class MovieRecord(BaseModel):
    """One catalog result row, only the fields the replies use."""
    id: Optional[int] = None
    title: str = ""
    release_date: Optional[str] = None
    vote_average: Optional[Union[int, float]] = None


# ratings api details
class MovieDetails(BaseModel):
    """Ratings API record used for search enrichment."""
    Director: Optional[str] = None
    Actors: Optional[str] = None
    Plot: Optional[str] = None


# catalog genre row
class GenreRecord(BaseModel):
    id: int
    name: str


# request parser basemodel
class ParseRequest(BaseModel):
    """Request body for /query/parse - contains user text."""
    text: str = Field(..., description="User text to classify.")


# response parser basemodel
class ParseResponse(BaseModel):
    """Response body from /query/parse - first matching plan plus the full rule order."""
    parsed: QueryPlan
    candidates: List[QueryPlan] = Field(default_factory=list)
