# utils/payload_loader.py - logger setup and request payload helpers
import json
import logging
from pathlib import Path


def get_logger(name: str = "frontapp", level=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if level:
        logger.setLevel(level)
    return logger


def redact_headers(headers):
    """Copy of headers safe for logs: the Authorization credential is masked."""
    safe = dict(headers or {})
    for key in list(safe):
        if key.lower() == "authorization":
            scheme = str(safe[key]).split(" ", 1)[0]
            safe[key] = f"{scheme} [REDACTED]"
    return safe


def load_payload(path):
    """Read a JSON payload file. Raises ValueError if it is not an object or array."""
    text = Path(path).read_text(encoding="utf-8")
    payload = json.loads(text)
    if not isinstance(payload, (dict, list)):
        raise ValueError(f"Payload in {path} must be a JSON object or array")
    return payload


def parse_args_pairs(pairs):
    """
    Turn ["limit=10", "q=open"] into {"limit": 10, "q": "open"}.

    Values that parse as JSON keep their JSON type, anything else stays a string.
    """
    out = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ValueError(f"Expected key=value, got: {pair!r}")
        key, raw = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Empty key in: {pair!r}")
        try:
            out[key] = json.loads(raw)
        except ValueError:
            out[key] = raw
    return out
