# frontapp_client.py - minimal wrapper around the Front REST API built on requests
"""
Super-simple, minimum abstraction client for the Front API (api2.frontapp.com).

Every verb funnels into FrontAppClient.send(), which builds one request, sends it
through a short-lived requests.Session and returns an ApiResult. The verb helpers
return just the decoded JSON (or None), and the last result stays on the client
for success() / get_last_error() / get_last_response() / get_last_request().
"""
import copy
import json
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.auth import AuthBase

from frontapp_config import DEFAULT_API_ENDPOINT, DEFAULT_TIMEOUT, load_settings
from utils.payload_loader import get_logger, redact_headers

try:
    import ssl
except ImportError:  # interpreter built without OpenSSL
    ssl = None

__version__ = "0.1.0"

USER_AGENT = f"frontapp-client/{__version__} python-requests/{requests.__version__}"
HTTP_VERBS = ("get", "post", "put", "patch", "delete")

logger = get_logger("frontapp")


class FrontAppError(Exception):
    """Base error for this package. Transport and API failures are not raised."""


class FrontAppEnvironmentError(FrontAppError):
    """The runtime cannot make HTTPS requests."""


class FrontAppConfigError(FrontAppError):
    """Required configuration is missing or invalid."""


class BearerAuth(AuthBase):
    """Authorization: Bearer <token>"""

    def __init__(self, token):
        self.token = token

    def __call__(self, r):
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r


@dataclass(frozen=True)
class ApiResult:
    """Outcome of one request: what was sent, what came back, and what went wrong."""
    request: Dict[str, Any]
    status_code: Optional[int] = None
    headers: Optional[Dict[str, str]] = None
    raw_body: Optional[str] = None
    data: Any = None
    error: Optional[str] = None
    success: bool = False

    def request_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.request)

    def response_dict(self) -> Dict[str, Any]:
        return {"headers": copy.deepcopy(self.headers), "body": self.raw_body}


def build_query_pairs(args, prefix=None) -> List[Tuple[str, str]]:
    """
    Flatten args into (key, value) pairs the way Front expects query strings:
    nested mappings and lists use brackets (q[statuses][0]=open), booleans
    become 1/0 and None values are left out.
    """
    if isinstance(args, dict):
        items = args.items()
    elif isinstance(args, (list, tuple)):
        items = enumerate(args)
    else:
        raise ValueError(f"GET arguments must be a mapping or a list, got {type(args).__name__}")

    pairs = []
    for key, value in items:
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        if value is None:
            continue
        if isinstance(value, (dict, list, tuple)):
            pairs.extend(build_query_pairs(value, name))
        elif isinstance(value, bool):
            pairs.append((name, "1" if value else "0"))
        else:
            pairs.append((name, str(value)))
    return pairs


def _format_api_error(payload) -> Optional[str]:
    """'<status>: <detail>' when the payload is an error document, else None."""
    if not isinstance(payload, dict):
        return None
    status = payload.get("status")
    detail = payload.get("detail")
    if status is None or detail is None:
        return None
    try:
        numeric = float(status)
    except (TypeError, ValueError):
        numeric = None
    if numeric is None:
        if str(status).strip() == "200":
            return None
    elif numeric == 200:
        return None
    elif numeric.is_integer():
        status = int(numeric)
    return f"{status}: {detail}"


class FrontAppClient:
    def __init__(self, api_key, api_endpoint=DEFAULT_API_ENDPOINT, verify_ssl=True,
                 default_timeout=DEFAULT_TIMEOUT):
        if not api_key:
            raise ValueError("A Front API key is required")
        api_endpoint = api_endpoint.rstrip("/")
        if ssl is None and api_endpoint.lower().startswith("https://"):
            raise FrontAppEnvironmentError("HTTPS support (the ssl module) is required, but can't be found.")

        self._api_key = api_key
        self.api_endpoint = api_endpoint
        self.default_timeout = default_timeout
        self._verify_ssl = True
        self.verify_ssl = verify_ssl
        self._last: Optional[ApiResult] = None

    @classmethod
    def from_env(cls, environ=None):
        """Build a client from FRONTAPP_* environment variables."""
        settings = load_settings(environ)
        if not settings.api_key:
            raise FrontAppConfigError("FRONTAPP_API_KEY is not set")
        logger.setLevel(settings.log_level)
        return cls(
            settings.api_key,
            api_endpoint=settings.api_endpoint,
            verify_ssl=settings.verify_ssl,
            default_timeout=settings.timeout,
        )

    def __repr__(self):
        return f"<FrontAppClient endpoint={self.api_endpoint!r} verify_ssl={self.verify_ssl}>"

    @property
    def api_key(self):
        return self._api_key

    @property
    def verify_ssl(self):
        return self._verify_ssl

    @verify_ssl.setter
    def verify_ssl(self, value):
        self._verify_ssl = bool(value)
        if not self._verify_ssl:
            logger.warning("SSL certificate verification DISABLED for %s", self.api_endpoint)

    # ---------- introspection ----------
    def success(self) -> bool:
        """Was the last request successful?"""
        return self._last is not None and self._last.success

    def get_last_error(self):
        """Error from the transport or the API for the last request, or False."""
        if self._last is None or not self._last.error:
            return False
        return self._last.error

    def get_last_response(self) -> Dict[str, Any]:
        """{'headers': ..., 'body': ...} of the last response (raw, undecoded body)."""
        if self._last is None:
            return {"headers": None, "body": None}
        return self._last.response_dict()

    def get_last_request(self) -> Dict[str, Any]:
        """method, path, url, body, timeout and (redacted) headers of the last request."""
        if self._last is None:
            return {}
        return self._last.request_dict()

    # ---------- verbs ----------
    def delete(self, path, args=None, timeout=None):
        return self.send("delete", path, args, timeout).data

    def get(self, path, args=None, timeout=None):
        return self.send("get", path, args, timeout).data

    def patch(self, path, args=None, timeout=None):
        return self.send("patch", path, args, timeout).data

    def post(self, path, args=None, timeout=None):
        return self.send("post", path, args, timeout).data

    def put(self, path, args=None, timeout=None):
        return self.send("put", path, args, timeout).data

    def _headers(self):
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def send(self, verb, path, args=None, timeout=None) -> ApiResult:
        """
        Perform one request and return its ApiResult.

        GET puts args in the query string; every other verb sends them as a JSON
        body. The result is also stored as the client's last result.

        Raises ValueError, before anything is sent or recorded, for an unknown
        verb or for args that cannot be encoded.
        """
        verb = verb.lower()
        if verb not in HTTP_VERBS:
            raise ValueError(f"Unsupported HTTP verb: {verb!r}")
        if timeout is None:
            timeout = self.default_timeout
        args = {} if args is None else args
        url = f"{self.api_endpoint}/{path}"

        params, encoded = None, ""
        if verb == "get":
            params = build_query_pairs(args) or None
        else:
            try:
                encoded = json.dumps(args)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Request arguments are not JSON serializable: {e}") from e

        request_info = {"method": verb, "path": path, "url": url, "body": encoded, "timeout": timeout}
        self._last = ApiResult(request=dict(request_info))

        with requests.Session() as session:
            req = requests.Request(verb.upper(), url, headers=self._headers(), params=params,
                                   data=encoded or None, auth=BearerAuth(self._api_key))
            t0 = time.time()
            try:
                prepared = session.prepare_request(req)
                request_info["url"] = prepared.url
                request_info["headers"] = redact_headers(prepared.headers)

                logger.info("%s %s", prepared.method, prepared.url)
                logger.debug("REQ-HEADERS: %s", request_info["headers"])
                logger.debug("REQ-BODY: %s", request_info["body"])

                settings = session.merge_environment_settings(prepared.url, {}, None, self.verify_ssl, None)
                response = session.send(prepared, timeout=timeout, **settings)
            except requests.exceptions.RequestException as e:
                logger.warning("%s %s failed: %s", verb.upper(), request_info["url"], e)
                self._last = ApiResult(request=request_info, error=str(e) or e.__class__.__name__)
                return self._last
            elapsed = time.time() - t0

        logger.info("-> status %s (elapsed %.3fs)", response.status_code, elapsed)
        self._last = self._format_response(request_info, response)
        return self._last

    def _format_response(self, request_info, response) -> ApiResult:
        """Decode the body and turn Front error documents into an error string."""
        raw = response.text
        headers = dict(response.headers)
        if not raw:
            return ApiResult(request=request_info, status_code=response.status_code,
                             headers=headers, raw_body=raw)

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Response body is not JSON (status %s)", response.status_code)
            data = None

        error = _format_api_error(data)
        if error:
            logger.warning("API error: %s", error)
        return ApiResult(
            request=request_info,
            status_code=response.status_code,
            headers=headers,
            raw_body=raw,
            data=data,
            error=error,
            success=error is None,
        )
