import os
from dotenv import load_dotenv

load_dotenv()

# what to do with licenses missing from the decisions: "report" or "disallow"
UNKNOWN_LICENSE_POLICY = os.getenv("UNKNOWN_LICENSE_POLICY", "report")

# directories
OUTPUT_BASE_DIR = os.getenv("OUTPUT_BASE_DIR", "./output")

# logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
