import json
from pathlib import Path

_constants_path = Path(__file__).with_name("constants.json")
with _constants_path.open(encoding="utf-8") as f:
    _cfg = json.load(f)

DEFAULT_ATTEMPTS: int = int(_cfg["DEFAULT_ATTEMPTS"])
DEFAULT_SEARCH_CELLS: int = int(_cfg["DEFAULT_SEARCH_CELLS"])
DEFAULT_VELVET_DENSITY: float = float(_cfg["DEFAULT_VELVET_DENSITY"])
DEFAULT_CLUMPINESS: float = float(_cfg["DEFAULT_CLUMPINESS"])
MAX_SCATTER_POINTS: int = int(_cfg["MAX_SCATTER_POINTS"])
