"""
Debug script to list the Gemini models available to the configured API key.
"""

import os
import sys
from dotenv import load_dotenv

sys.path.append(os.getcwd())

from seo_advisor.clients.gemini import DEFAULT_MODEL, GeminiClient

load_dotenv()

print("="*70)
print("GEMINI MODELS")
print("="*70)

client = GeminiClient()
if client.is_ready():
    print(f"\nAPI Key configured: {client.api_key[:10]}...{client.api_key[-4:]}")
    try:
        models = client.list_models()
        print(f"\nFound {len(models)} models:\n")
        for model in models:
            marker = "  <- default" if model.name.endswith(DEFAULT_MODEL) else ""
            print(f"Name: {model.name}{marker}")
            print(f"Display Name: {model.display_name}")
            print("-" * 70)
    except Exception as e:
        print(f"Error listing models: {e}")
else:
    print("GEMINI_API_KEY not found in environment")
