# studyhive/app/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# Base URL of the FastAPI backend
API_URL = os.getenv("STUDYHIVE_API_URL", "http://localhost:3001").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("STUDYHIVE_REQUEST_TIMEOUT", "10"))

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

LLM_MODEL = os.getenv("STUDYHIVE_LLM_MODEL", "gpt-4o-mini")
