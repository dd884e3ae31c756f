import os
from dotenv import load_dotenv

load_dotenv(override=True)

vars_to_check = ["GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "SCHEMA_VARIANT"]

print("--- Config Verification ---")
for var in vars_to_check:
    val = os.environ.get(var)
    if val:
        print(f"{var}: Length={len(val)}, Start={val[:4]}..., End=...{val[-4:]}")
    else:
        print(f"{var}: NOT FOUND")
