""" Unittest TestSuite -> Conversation Thread """
import unittest
import logging
from unittest import mock
from movie_chatbot_system.chat_thread.conversation_thread import ConversationThread
from movie_chatbot_system.query_responder import chat_reply_formatter
# set up logging for this test file
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
# logger- conversation thread
logger = logging.getLogger("TestConversationThread")


# TestSuite - Conversation Thread
class TestConversationThread(unittest.TestCase):
    """Test suite for the append-only message thread."""

    def setUp(self):
        # define a responder that echoes
        self.responder = mock.Mock()
        self.responder.respond.side_effect = lambda text: f"reply to {text}"
        self.thread = ConversationThread(responder=self.responder)

    # test - welcome message
    def test_thread_starts_with_welcome(self):
        logger.info(f"Running test_thread_starts_with_welcome")
        messages = self.thread.messages()
        self.assertEqual(len(messages), 1)
        self.assertTrue(messages[0].is_bot)
        self.assertEqual(messages[0].text, chat_reply_formatter.WELCOME_TEXT)

    # test - send appends user then bot
    def test_send_appends_in_order(self):
        """Test user and bot messages are appended in insertion order."""
        logger.info(f"Running test_send_appends_in_order")
        reply = self.thread.send("help")
        self.thread.send("search Dune")
        self.assertEqual(reply.text, "reply to help")
        self.assertEqual(
            [(m.text, m.is_bot) for m in self.thread.messages()[1:]],
            [
                ("help", False),
                ("reply to help", True),
                ("search Dune", False),
                ("reply to search Dune", True),])
        self.assertFalse(self.thread.is_composing)

    # test - blank input
    def test_blank_input_is_ignored(self):
        """Test blank input appends nothing and skips the responder."""
        logger.info(f"Running test_blank_input_is_ignored")
        self.assertIsNone(self.thread.send("   "))
        self.assertIsNone(self.thread.send(""))
        self.assertEqual(len(self.thread.messages()), 1)
        self.responder.respond.assert_not_called()

    # test - messages returns a copy
    def test_messages_is_a_copy(self):
        logger.info(f"Running test_messages_is_a_copy")
        snapshot = self.thread.messages()
        snapshot.clear()
        self.assertEqual(len(self.thread.messages()), 1)

    # test - composing flag while the responder runs
    def test_is_composing_during_reply(self):
        logger.info(f"Running test_is_composing_during_reply")
        observed = []

        def respond(text):
            observed.append(self.thread.is_composing)
            return "ok"

        self.responder.respond.side_effect = respond
        self.thread.send("show popular movies")
        self.assertEqual(observed, [True])
        self.assertFalse(self.thread.is_composing)


if __name__ == "__main__":
    unittest.main(verbosity=2)
