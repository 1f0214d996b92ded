""" Main Client script """
import time
import logging
import requests
from movie_chatbot_system.config.chatbot_settings import ChatBotSettings
from movie_chatbot_system.query_responder import chat_reply_formatter
# basic logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",)


# send a chat message to the FastAPI server and print the reply
def send_chat_message(
        user_query: str,
        http_session: requests.Session,
        api_url: str):
    """Function to send a chat message to the FastAPI server and display the reply.

    Args:
        user_query (str): Incoming user query typed in the terminal.
        http_session (requests.Session): Persistent HTTP session for sending requests.
        api_url (str): Chat message endpoint.

    Returns:
        str: the reply text, or None when the call failed.
    """
    # build the payload to send in the POST request
    payload = {"text": user_query}

    try:
        response = http_session.post(
            api_url,
            json=payload,
            timeout=20)
        # raise an exception if the request returned an error status code
        response.raise_for_status()
        response_data = response.json()
        reply = (response_data.get("reply") or {}).get("text")
        rate_limit = response_data.get("rate_limit") or {}

        if reply:
            print(f"\nBot: {reply}\n")
            print(f"[Requests: {rate_limit.get('remaining')}/{rate_limit.get('max_requests')}]")
        else:
            logging.warning(f"No reply found in response.")
        return reply
    except requests.exceptions.RequestException as error:
        logging.error(f"Request failed: {error}")
        return None


# Main client
def movie_chatbot_client(max_attempts: int = 50):
    """Movie chat client to send messages repeatedly until user exits.
        - Displays the welcome message of the chat thread.
        - Prompts the user for input in a loop.
        - Sends each message to the FastAPI server using send_chat_message.
        - Exits when the user types - exit, quit, :q or presses Ctrl+C.

    Args:
        max_attempts (int): Maximum number of input attempts allowed.
    """
    settings = ChatBotSettings.load()
    print(f"\nBot: {chat_reply_formatter.WELCOME_TEXT}\n")
    logging.info(f"Movie chat client ready.")
    logging.info(f"Type 'help' to see all available commands, 'exit'/'quit' to leave.\n")
    try:
        with requests.Session() as http_session:
            for attempt_number in range(1, max_attempts + 1):
                user_input = input(f"you [{attempt_number}/{max_attempts}]> ").strip()

                # if input is empty then skip this loop and ask again
                if not user_input:
                    continue

                if user_input.lower() in {"exit", "quit", ":q"}:
                    print("Bye!")
                    break
                send_chat_message(user_input, http_session, settings.chat_api_url)
                # small pause to avoid overwhelming the server
                time.sleep(0.05)

    except KeyboardInterrupt:
        print(f"\nInterrupted. Bye!")


if __name__ == "__main__":
    movie_chatbot_client()
