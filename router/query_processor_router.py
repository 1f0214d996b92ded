""" Movie Chat Query Parser Router """
import logging
from fastapi import APIRouter
from movie_chatbot_system.query_processor import rules_based_intent_parser
from movie_chatbot_system.response_basemodel_validator import query_plan_model
# define basic config
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# logger for this router
logger = logging.getLogger("query_processor_api")

# initialise the router
router = APIRouter(tags=["query-processing"])


# parse query - only to inspect which rule a text hits, no API calls
@router.post(
        "/query/parse",
        response_model=query_plan_model.ParseResponse)
def api_parse(req: query_plan_model.ParseRequest):
    """Classify the user text into the first matching plan and list all candidates."""
    logger.info(f"Received /query/parse request -> text: {req.text}")
    candidates = list(rules_based_intent_parser.iterate_query_plans(req.text))
    logger.info(f"Parsed result -> intent: {candidates[0].intent}")
    return query_plan_model.ParseResponse(parsed=candidates[0], candidates=candidates)
