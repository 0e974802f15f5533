# restolink/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# Snapshot locations
MAITRE_SNAPSHOT = os.getenv("MAITRE_SNAPSHOT", "server/output/maitre.json")
MICHELIN_SNAPSHOT = os.getenv("MICHELIN_SNAPSHOT", "server/output/michelin.json")

# Output files
MATCHES_OUTPUT = os.getenv("MATCHES_OUTPUT", "server/output/matches.json")
UNMATCHED_OUTPUT = os.getenv("UNMATCHED_OUTPUT", "server/output/unmatched.csv")

# Runtime parameters
MATCH_MODE = os.getenv("MATCH_MODE", "chain")
CLAIM_POLICY = os.getenv("CLAIM_POLICY", "exclusive")
DERIVE_REFERENCE = os.getenv("DERIVE_REFERENCE", "false").lower() in {"1", "true", "yes"}
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Matching parameters
REFERENCE_THRESHOLD = 0.7
ADDRESS_THRESHOLD = 0.9
PHONE_DELIMITER = ", "
MATCHER_CHAIN = ("phone", "website", "reference", "address")
