from ..core.config import load_scoring_config
from ..server import mcp


@mcp.tool()
def scoring_settings() -> dict:
    """
    Report the scoring weights currently in effect (from FUZZIER_* env vars).
    """
    config = load_scoring_config()
    return {
        "server": "fuzzier",
        "config": config.as_dict(),
        "notes": [
            "Weights are in tenths: 10 counts a matched character once",
            "Search parts are separated by single spaces",
            "Multi-match bonus is only computed when multi_match is true",
        ],
    }
