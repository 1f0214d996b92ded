""" Unittest TestSuite -> Movie Chat Rule Based Intent Parser """
import unittest
import logging
from movie_chatbot_system.query_processor import rules_based_intent_parser
# set up logging for this test file
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
# logger- rule based intent parser
logger = logging.getLogger("TestRuleBasedIntentParser")


# TestSuite - Rules Based Intent Parser
class TestRuleBasedIntentParser(unittest.TestCase):
    """Test suite for first-match-wins classification of user text."""

    # test - greeting beats help
    def test_greeting_precedes_help(self):
        """Test 'hello, show me help' routes to greeting."""
        logger.info(f"Running test_greeting_precedes_help")
        plan = rules_based_intent_parser.user_query_parser("hello, show me help")
        self.assertEqual(plan.intent, "GREETING")

    # test - greeting is a plain substring match
    def test_greeting_substring_inside_words(self):
        """Test 'hi' inside another word still counts as a greeting."""
        logger.info(f"Running test_greeting_substring_inside_words")
        plan = rules_based_intent_parser.user_query_parser("Show Hindi movies")
        self.assertEqual(plan.intent, "GREETING")

    # test - help
    def test_help(self):
        logger.info(f"Running test_help")
        plan = rules_based_intent_parser.user_query_parser("HELP")
        self.assertEqual(plan.intent, "HELP")

    # test - language beats genre
    def test_language_precedes_genre(self):
        """Test 'show italian action movies' routes to the italian language plan."""
        logger.info(f"Running test_language_precedes_genre")
        plan = rules_based_intent_parser.user_query_parser("show italian action movies")
        self.assertEqual(plan.intent, "LANGUAGE_DISCOVERY")
        self.assertEqual(plan.language, "italian")
        self.assertEqual(plan.language_code, "it")

    # test - language table order decides between two languages
    def test_language_table_order(self):
        """Test the first language in table order wins, not the first in the text."""
        logger.info(f"Running test_language_table_order")
        plan = rules_based_intent_parser.user_query_parser("russian or english films")
        self.assertEqual(plan.language, "english")
        self.assertEqual(plan.language_code, "en")

    # test - language beats popular, popular beats genre
    def test_popular_ordering(self):
        logger.info(f"Running test_popular_ordering")
        self.assertEqual(
            rules_based_intent_parser.user_query_parser("popular korean films").intent,
            "LANGUAGE_DISCOVERY")
        self.assertEqual(
            rules_based_intent_parser.user_query_parser("popular comedy films").intent,
            "POPULAR")

    # test - every matching genre becomes a candidate in genre order
    def test_genre_candidates_in_order(self):
        """Test genre plans follow GENRE_KEYWORDS order and end with FALLBACK."""
        logger.info(f"Running test_genre_candidates_in_order")
        plans = list(rules_based_intent_parser.iterate_query_plans("drama or comedy please"))
        self.assertEqual(
            [(p.intent, p.genre) for p in plans],
            [("GENRE_DISCOVERY", "comedy"), ("GENRE_DISCOVERY", "drama"), ("FALLBACK", None)])

    # test - search strips the first 'search' only
    def test_search_query_extraction(self):
        """Test the search word is removed case-insensitively, original casing kept."""
        logger.info(f"Running test_search_query_extraction")
        plan = rules_based_intent_parser.user_query_parser("Search  Inception ")
        self.assertEqual(plan.intent, "SEARCH")
        self.assertEqual(plan.search_query, "Inception")
        plan = rules_based_intent_parser.user_query_parser("SEARCH search party")
        self.assertEqual(plan.search_query, "search party")

    # test - empty search query still classifies as search
    def test_search_word_only(self):
        """Test 'search ' produces a SEARCH plan with an empty query, then FALLBACK."""
        logger.info(f"Running test_search_word_only")
        plans = list(rules_based_intent_parser.iterate_query_plans("search "))
        self.assertEqual([p.intent for p in plans], ["SEARCH", "FALLBACK"])
        self.assertEqual(plans[0].search_query, "")

    # test - fallback
    def test_fallback(self):
        logger.info(f"Running test_fallback")
        plan = rules_based_intent_parser.user_query_parser("what to watch tonight")
        self.assertEqual(plan.intent, "FALLBACK")
        self.assertEqual(plan.raw_text, "what to watch tonight")

    # test - empty text
    def test_empty_text(self):
        logger.info(f"Running test_empty_text")
        self.assertEqual(rules_based_intent_parser.user_query_parser("").intent, "FALLBACK")


if __name__ == "__main__":
    unittest.main(verbosity=2)
