"""Request building and response classification shared by every entity call.

An entity operation is an ``Operation`` declaration: HTTP method, endpoint
template, query parameters, decode shape and the wording used in its error
messages. ``execute`` runs one declaration through the transport:

    build -> send -> classify status -> decode -> (envelope check)

Message templates are formatted with the call arguments, so
``"reading Role {role_id}"`` becomes ``"reading Role 123"``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import json
import logging
from types import MappingProxyType
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from ._exceptions import DecodeError, EncodeError, SemanticError, StatusError, TransportError
from ._http import HTTPClient, RawResponse
from ._types import SUCCESS_CODE, Envelope, EnvelopeOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENDPOINTS: Mapping[str, str] = MappingProxyType(
    {
        "role": "user-management/v1/roles",
        "user": "user-management/v1/users",
    }
)


@dataclass(frozen=True)
class PreparedCall:
    """A fully built request, ready for HTTPClient.send."""

    method: str
    path: str
    params: dict[str, Any]
    data: str | None


@dataclass(frozen=True)
class Operation(Generic[T]):
    """Declaration of one remote call.

    Attributes:
        name: Stable identifier, e.g. ``"get_role"``.
        method: HTTP verb.
        path: Endpoint template relative to the base URL.
        subject: Entity name used when the body fails to serialize.
        action: Completes "... from Incapsula service when {action}".
        parse_error: Prefix of decode failures.
        decode: Builds the result from parsed JSON.
        query: ``(wire_key, argument_name)`` pairs sent in the query string.
        failure_error: Prefix of envelope failures. Set only for calls that
            answer with an ``Envelope``.
    """

    name: str
    method: str
    path: str
    subject: str
    action: str
    parse_error: str
    decode: Callable[[Any], T]
    query: tuple[tuple[str, str], ...] = ()
    failure_error: str | None = None

    def build(self, args: Mapping[str, Any], body: Any = None) -> PreparedCall:
        path = self.path.format(**{k: quote(str(v), safe="") for k, v in args.items()})
        params = {wire: args[arg] for wire, arg in self.query}
        data = None
        if body is not None:
            payload = body.to_dict() if hasattr(body, "to_dict") else body
            try:
                data = json.dumps(payload, allow_nan=False)
            except (TypeError, ValueError) as e:
                raise EncodeError(
                    f"Failed to JSON marshal {self.subject}: {e}", cause=e, operation=self.name
                ) from e
            logger.debug("Incapsula %s JSON request body: %s", self.name, data)
        return PreparedCall(method=self.method, path=path, params=params, data=data)

    def interpret(self, raw: RawResponse, args: Mapping[str, Any]) -> T:
        """Classify a raw response, returning the decoded value or raising."""
        logger.debug("Incapsula %s JSON response: %s", self.name, raw.body)

        if raw.status_code != SUCCESS_CODE:
            raise StatusError(
                f"Error status code {raw.status_code} from Incapsula service when "
                f"{self.action.format(**args)}: {raw.body}",
                operation=self.name,
                status_code=raw.status_code,
                body=raw.body,
            )

        try:
            result = self.decode(json.loads(raw.body))
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise DecodeError(
                f"{self.parse_error.format(**args)}: {e}\nresponse: {raw.body}",
                cause=e,
                operation=self.name,
                status_code=raw.status_code,
                body=raw.body,
            ) from e

        if self.failure_error is not None:
            if not isinstance(result, Envelope):
                raise TypeError(f"{self.name} declares an envelope check but decodes {result!r}")
            if result.outcome is EnvelopeOutcome.FAILURE:
                raise SemanticError(
                    f"{self.failure_error.format(**args)}: code {result.code}, "
                    f"message {result.message}\nresponse: {raw.body}",
                    code=result.code,
                    envelope_message=result.message,
                    operation=self.name,
                    status_code=raw.status_code,
                    body=raw.body,
                )
        return result


def execute(http: HTTPClient, op: Operation[T], *, body: Any = None, **args: Any) -> T:
    """Run one operation: a single request, no retries."""
    action = op.action.format(**args)
    logger.info("Incapsula request: %s", action)

    call = op.build(args, body)
    try:
        raw = http.send(call.method, call.path, params=call.params, data=call.data)
    except TransportError as e:
        raise TransportError(
            f"Error from Incapsula service when {action}: {e.message}",
            cause=e.cause,
            operation=op.name,
        ) from e.cause
    return op.interpret(raw, args)
