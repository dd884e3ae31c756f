"""
Entry point for the Rank Math SEO Advisor.
Delegates to seo_advisor.main and serves the app with uvicorn.
"""
import sys
import os

# Add the current directory to python path
sys.path.append(os.getcwd())

import uvicorn

from seo_advisor.main import create_app

HELP_TEXT = """
Rank Math SEO Advisor - Usage Guide

Commands:
  python main.py           Start the web app (default: http://127.0.0.1:8000)
  python main.py help      Show this help message

Environment Variables (Required):
  GEMINI_API_KEY          Google Gemini API key (API_KEY is accepted too)

Environment Variables (Optional):
  GEMINI_MODEL            Model name (default: gemini-2.5-flash)
  SCHEMA_VARIANT          structured | flat (default: structured)
  HOST / PORT             Bind address (default: 127.0.0.1 / 8000)
"""

if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1].lower() in ["help", "-h", "--help"]:
        print(HELP_TEXT)
    else:
        uvicorn.run(
            create_app(),
            host=os.environ.get("HOST", "127.0.0.1"),
            port=int(os.environ.get("PORT", "8000")),
        )
