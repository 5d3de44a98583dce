from dataclasses import dataclass
from typing import Optional

# --- XPO Endpoints ---
XPO_TOKEN_URL = "https://api.ltl.xpo.com/token"
XPO_TEST_URL = "https://api.ltl.xpo.com/1.0/cust-pickup-requests"
XPO_PRODUCTION_URL = "https://api.ltl.xpo.com/1.0/cust-pickup-requests"

# XPO's published production URL still carries this flag.
TEST_MODE_PARAM = "testMode=Y"

# XPO is sometimes very slow to answer.
DEFAULT_TIMEOUT = 10.0

# Refresh a cached bearer token this many seconds before it expires
TOKEN_REFRESH_MARGIN = 300

# --- Requestor Role Codes ---
ROLE_SHIPPER = "S"
ROLE_CONSIGNEE = "C"
ROLE_THIRD_PARTY = "3"
ROLE_CODES = (ROLE_SHIPPER, ROLE_CONSIGNEE, ROLE_THIRD_PARTY)

# --- Pickup Limits ---
MAX_PICKUP_ITEMS = 50


@dataclass
class XPOConfig:
    """Settings for a single XPOClient. Test mode unless production is set explicitly."""

    username: Optional[str] = None
    password: Optional[str] = None
    access_token: Optional[str] = None
    production: bool = False
    production_test_flag: bool = True
    timeout: float = DEFAULT_TIMEOUT
    bearer_auth: bool = True
    cache_token: bool = False
    token_refresh_margin: int = TOKEN_REFRESH_MARGIN

    @property
    def pickup_url(self) -> str:
        if not self.production:
            return XPO_TEST_URL
        if self.production_test_flag:
            return f"{XPO_PRODUCTION_URL}?{TEST_MODE_PARAM}"
        return XPO_PRODUCTION_URL

    def missing_credentials(self):
        """Returns the names of the credential fields that are still unset."""
        fields = {
            "username": self.username,
            "password": self.password,
            "access_token": self.access_token,
        }
        return [name for name, value in fields.items() if not value]
