import os
from dotenv import load_dotenv
load_dotenv()
# ---- NOWNodes (Blockbook) ----
NOWNODES_API_KEY = os.environ.get("NOWNODES_API_KEY")
NOWNODES_BASE_URL = os.environ.get("NOWNODES_BASE_URL", "https://btcbook.nownodes.io/api/v2")
NOWNODES_CREDENTIAL_HEADER = "api-key"

NOWNODES_TIMEOUT_SEC = 15
NOWNODES_REQUESTS_PER_SEC = float(os.environ.get("NOWNODES_REQUESTS_PER_SEC", "0"))   # 0 = no pacing

# ---- Traversal ----
MAX_TXIDS_PER_ADDRESS = 10       # only the first N txids of an address are explored

# ---- Status / console ----
ERROR_DISPLAY_SEC = 3

# ---- Renderer hints ----
NODE_RADIUS = 12
ORIGIN_NODE_RADIUS = 20
LINK_DISTANCE = 75
