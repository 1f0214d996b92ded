import logging
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from router.chat_response_router import router as movie_chat_router
from router.query_processor_router import router as query_parser_router

# initiate the load_dotenv
load_dotenv()

# basic logging config
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)


# initiate the app
API_VERSION="1.0.0"
API_TITLE="Movie Recommendation Chat Bot"
app = FastAPI(
    title=API_TITLE,
    version=API_VERSION)

# app webhook validation - OPTION
# Allow all origins
# allow all http methods
# allow all header
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],)


# app health check
@app.get("/status")
async def status():
    return {
        "status": "running",
        "message": "Movie Chat Bot API is up & running!"}


# app version check endpoint
@app.get("/version")
async def version():
    logging.info(f"Version endpoint called")
    return {
        "version": API_VERSION,
        "title": API_TITLE}


# chat thread and query parser routers
app.include_router(movie_chat_router, prefix="/api")
app.include_router(query_parser_router, prefix="/api")


if __name__ == "__main__":
    uvicorn.run("app:app", host="0.0.0.0", port=8000)
