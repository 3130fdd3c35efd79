"""HTTP transport for the server API: headers, URLs, bodies and responses."""

from __future__ import annotations

import json
import platform
import uuid
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar, Union
from urllib.parse import urlencode

import requests

from lootlocker_server.endpoints import Endpoint
from lootlocker_server.logger import LogLevel, ServerLogger

T = TypeVar("T")

QueryParams = Union[Mapping[str, object], Iterable[tuple[str, object]], None]

DEFAULT_BOUNDARY = "lootlockerboundary"

_EMPTY_JSON_FORMS = frozenset({"{}", "{\r\n}", "{\n}", "{ }"})


@dataclass
class ErrorData:
    """Structured error details returned by the server on failure."""

    code: str = ""
    message: str = ""
    doc_url: str = ""
    request_id: str = ""
    trace_id: str = ""

    @classmethod
    def from_json(cls, text: str) -> ErrorData:
        """Read error details from a JSON document; unknown or bad input gives empty details."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError):
            return cls()
        if not isinstance(data, dict):
            return cls()
        lowered = {str(key).lower(): value for key, value in data.items()}

        def text_of(key: str) -> str:
            value = lowered.get(key)
            return "" if value is None else str(value)

        return cls(
            code=text_of("code"),
            message=text_of("message"),
            doc_url=text_of("doc_url"),
            request_id=text_of("request_id"),
            trace_id=text_of("trace_id"),
        )

    @property
    def is_informative(self) -> bool:
        return bool(self.code)


@dataclass
class ServerResponse:
    """The outcome of one call to the server."""

    success: bool = False
    status_code: int = 0
    text: str = ""
    error: str = ""
    error_data: ErrorData = field(default_factory=ErrorData)

    @classmethod
    def failure(cls, message: str) -> ServerResponse:
        """A response for a request that never reached the server."""
        return cls(success=False, error=message, error_data=ErrorData(message=message))

    def json(self) -> Any:
        """The body parsed as JSON, or an empty dict if it is empty or not JSON."""
        if not self.text:
            return {}
        try:
            return json.loads(self.text)
        except ValueError:
            return {}


@dataclass
class ServerState:
    """Session state shared by requests: the server token."""

    token: str = ""

    def clear(self) -> None:
        """Forget the session token."""
        self.token = ""


def is_empty_json(text: str) -> bool:
    """Whether the text is one of the serialised forms of an empty JSON object."""
    return text in _EMPTY_JSON_FORMS


def append_query(url: str, params: QueryParams) -> str:
    """Append query parameters to a URL, keeping repeated keys and their order."""
    if not params:
        return url
    pairs = list(params.items()) if isinstance(params, Mapping) else list(params)
    if not pairs:
        return url
    separator = "&" if "?" in url else "?"
    return url + separator + urlencode([(key, str(value)) for key, value in pairs])


def build_multipart_body(
    raw_data: bytes,
    file_name: str,
    fields: Mapping[str, str] | None = None,
    boundary: str = DEFAULT_BOUNDARY,
) -> bytes:
    """Assemble a multipart/form-data body holding the fields and one file."""
    begin = f"\r\n--{boundary}\r\n".encode()
    end = f"\r\n--{boundary}--\r\n".encode()
    parts: list[bytes] = []
    for key, value in (fields or {}).items():
        parts.append(begin)
        parts.append(
            (
                'Content-Type: text/plain; charset="utf-8"\r\n'
                f'Content-Disposition: form-data; name="{key}"\r\n\r\n'
                f"{value}"
            ).encode()
        )
    parts.append(begin)
    parts.append(
        (
            "Content-Type: application/octet-stream\r\n"
            f'Content-disposition: form-data; name="file"; filename="{file_name}"\r\n\r\n'
        ).encode()
    )
    parts.append(bytes(raw_data))
    parts.append(end)
    return b"".join(parts)


def describe_failed_request(
    response: ServerResponse, method: str, endpoint: str, data: str
) -> str:
    """Build the warning text written when a request fails."""
    lines = [f"{method} request to {endpoint} failed"]
    details = response.error_data
    if details.is_informative:
        lines.append(f"\n   {details.message}")
        lines.append(f"\n    Error Code: {details.code}")
        lines.append(f"\n    Further Information: {details.doc_url}")
        lines.append(f"\n    Request ID: {details.request_id}")
        lines.append(f"\n    Trace ID: {details.trace_id}")
    lines.append(f"\n   HTTP Status code : {response.status_code}")
    if data:
        lines.append(f"\n   Request Data: {data}")
    if not details.is_informative:
        lines.append(f"\n   Response Data: {response.text}")
    lines.append("\n###")
    return "".join(lines)


def _is_ok(status: int) -> bool:
    return 200 <= status <= 206


def _serialise_body(body: Any) -> str:
    if body is None:
        return ""
    if hasattr(body, "to_dict"):
        body = body.to_dict()
    content = json.dumps(body)
    return "" if is_empty_json(content) else content


class HttpClient:
    """Sends requests to the server API and turns replies into responses."""

    def __init__(
        self,
        *,
        domain_key: str = "",
        api_version: str = "",
        sdk_version: str = "",
        user_agent: str | None = None,
        state: ServerState | None = None,
        logger: ServerLogger | None = None,
        session: requests.Session | None = None,
        timeout: float | None = 30.0,
        extra_headers: Mapping[str, str] | None = None,
    ) -> None:
        self.domain_key = domain_key
        self.api_version = api_version
        self.sdk_version = sdk_version
        self.user_agent = user_agent or f"X-PythonServer-Agent/{platform.python_version()}"
        self.instance_id = str(uuid.uuid4())
        self.state = state if state is not None else ServerState()
        self.logger = logger if logger is not None else ServerLogger()
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.extra_headers = dict(extra_headers or {})

    def build_url(self, endpoint: Endpoint, args: Iterable[object] = (), query: QueryParams = None) -> str:
        """The full URL of an endpoint with its arguments and query filled in."""
        return append_query(endpoint.url(*args, domain_key=self.domain_key), query)

    def _identity_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "User-Instance-Identifier": self.instance_id,
            "SDK-Version": self.sdk_version,
        }

    def _custom_headers(self, extra: Mapping[str, str] | None) -> dict[str, str]:
        custom = dict(self.extra_headers)
        custom.update(extra or {})
        if self.state.token:
            custom["x-auth-token"] = self.state.token
        return custom

    def headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        """Headers for a JSON request, with any extra headers and the session token."""
        headers = self._identity_headers()
        headers["Content-Type"] = "application/json"
        headers["Accepts"] = "application/json"
        headers["LL-Version"] = self.api_version
        headers.update(self._custom_headers(extra))
        return headers

    def _upload_headers(self, boundary: str) -> dict[str, str]:
        headers = self._identity_headers()
        headers["Content-Type"] = f"multipart/form-data; boundary={boundary}"
        headers.update(self._custom_headers(None))
        return headers

    def _log_request(self, method: str, url: str, headers: Mapping[str, str], content: str) -> None:
        delimited = "".join(f"    {name}: {value}\n" for name, value in headers.items())
        self.logger.log(
            f"Request {method} to endpoint {url}\n  With headers {delimited}\n  And with content: {content}",
            LogLevel.VERBOSE,
        )

    def _perform(
        self, method: str, url: str, headers: Mapping[str, str], data: bytes, logged_data: str
    ) -> ServerResponse:
        try:
            reply = self.session.request(
                method, url, headers=dict(headers), data=data, timeout=self.timeout
            )
        except requests.RequestException as exc:
            response = ServerResponse.failure(str(exc))
            self.logger.log(describe_failed_request(response, method, url, logged_data), LogLevel.WARNING)
            return response
        response = ServerResponse(
            success=_is_ok(reply.status_code), status_code=reply.status_code, text=reply.text
        )
        if not response.success:
            response.error_data = ErrorData.from_json(response.text)
            if response.error_data.is_informative:
                response.error = response.error_data.message
            else:
                response.error = response.error_data.message = response.text
            self.logger.log(describe_failed_request(response, method, url, logged_data), LogLevel.WARNING)
        return response

    @staticmethod
    def _finish(response: ServerResponse, parse: Callable[[ServerResponse], T] | None) -> Any:
        return response if parse is None else parse(response)

    def send(
        self,
        endpoint: Endpoint,
        args: Iterable[object] = (),
        body: Any = None,
        query: QueryParams = None,
        parse: Callable[[ServerResponse], T] | None = None,
    ) -> Any:
        """Send a JSON request; return the response, or what ``parse`` makes of it."""
        url = self.build_url(endpoint, args, query)
        content = _serialise_body(body)
        all_headers = self.headers()
        method = endpoint.method_name
        self._log_request(method, url, all_headers, content)
        response = self._perform(method, url, all_headers, content.encode("utf-8"), content)
        return self._finish(response, parse)

    def upload_file(
        self,
        path: str | Path,
        fields: Mapping[str, str] | None,
        endpoint: Endpoint,
        args: Iterable[object] = (),
        query: QueryParams = None,
        parse: Callable[[ServerResponse], T] | None = None,
    ) -> Any:
        """Upload the file at ``path`` together with the form fields."""
        path_text = str(path)
        try:
            raw_data = Path(path_text).read_bytes()
        except OSError:
            return self._finish(ServerResponse.failure(f"Could not read file {path_text}"), parse)
        file_name = path_text.rsplit("/", 1)[-1]
        return self.upload_raw_file(raw_data, file_name, fields, endpoint, args, query, parse)

    def upload_raw_file(
        self,
        raw_data: bytes,
        file_name: str,
        fields: Mapping[str, str] | None,
        endpoint: Endpoint,
        args: Iterable[object] = (),
        query: QueryParams = None,
        parse: Callable[[ServerResponse], T] | None = None,
    ) -> Any:
        """Upload bytes as a named file together with the form fields."""
        url = self.build_url(endpoint, args, query)
        all_headers = self._upload_headers(DEFAULT_BOUNDARY)
        body = build_multipart_body(raw_data, file_name, fields, DEFAULT_BOUNDARY)
        method = endpoint.method_name
        self._log_request(method, url, all_headers, "File Content")
        response = self._perform(method, url, all_headers, body, "Data Stream")
        return self._finish(response, parse)