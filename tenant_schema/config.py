# tenant_schema/config.py
# Settings for the provisioner. Everything can be overridden by env vars,
# a .env file, or the matching CLI flag in tenant_schema/cli.py.
import os

from dotenv import load_dotenv, find_dotenv

ENV_FILE = os.getenv("ENV_FILE")
load_dotenv(ENV_FILE or find_dotenv(usecwd=True), override=False)


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# ---------- CONFIG ----------
MONGO_URI    = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
DB_NAME      = os.getenv("MONGO_DB", "event_extraction_db")
TENANT_COLL  = os.getenv("TENANT_COLL", "tenant_configurations")
EVENTS_COLL  = os.getenv("EVENTS_COLL", "extracted_events")

SEED_DEMO_TENANT    = env_flag("SEED_DEMO_TENANT", "1")
SEED_SAMPLE_TENANTS = env_flag("SEED_SAMPLE_TENANTS", "0")

# Credentials given to the optional sample tenants (the demo tenant always
# gets the placeholder key so it can never reach a real account)
DEFAULT_API_URL = os.getenv("DEFAULT_API_URL", "https://api.aptrinsic.com")
DEFAULT_API_KEY = os.getenv("DEFAULT_API_KEY", "demo-api-key-replace-with-real")
# ----------------------------
