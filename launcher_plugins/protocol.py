"""
Line protocol spoken between the launcher and a plugin process.

Every request and every response is one JSON value on its own line.
"""

import json
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, TextIO, Union

from loguru import logger

from launcher_plugins.errors import ProtocolError
from launcher_plugins.result import SearchResult


# Requests


@dataclass(frozen=True)
class Search:
    query: str


@dataclass(frozen=True)
class Activate:
    id: int


@dataclass(frozen=True)
class ActivateContext:
    id: int
    context: int


@dataclass(frozen=True)
class Complete:
    id: int


@dataclass(frozen=True)
class Context:
    id: int


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class Interrupt:
    pass


@dataclass(frozen=True)
class Quit:
    id: int


Request = Union[
    Search, Activate, ActivateContext, Complete, Context, Exit, Interrupt, Quit
]

_UNIT_REQUESTS = {"Exit": Exit, "Interrupt": Interrupt}
_ID_REQUESTS = {"Activate": Activate, "Complete": Complete, "Context": Context, "Quit": Quit}


# Responses


@dataclass(frozen=True)
class Clear:
    def to_wire(self) -> Any:
        return "Clear"


@dataclass(frozen=True)
class Append:
    result: SearchResult

    def to_wire(self) -> Any:
        return {"Append": self.result.to_wire()}


@dataclass(frozen=True)
class Finished:
    def to_wire(self) -> Any:
        return "Finished"


@dataclass(frozen=True)
class Fill:
    text: str

    def to_wire(self) -> Any:
        return {"Fill": self.text}


@dataclass(frozen=True)
class Close:
    def to_wire(self) -> Any:
        return "Close"


Response = Union[Clear, Append, Finished, Fill, Close]


def _as_id(value: Any, field: str) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ProtocolError(f"{field} must be a non-negative integer, got {value!r}")
    return value


def parse_request(value: Any) -> Request:
    """Convert an already-decoded JSON value into a request."""
    if isinstance(value, str):
        if value in _UNIT_REQUESTS:
            return _UNIT_REQUESTS[value]()
        raise ProtocolError(f"Unknown request {value!r}")

    if not isinstance(value, dict) or len(value) != 1:
        raise ProtocolError(f"Request must be a string or a single-key object: {value!r}")

    tag, payload = next(iter(value.items()))

    if tag == "Search":
        if not isinstance(payload, str):
            raise ProtocolError(f"Search query must be a string, got {payload!r}")
        return Search(payload)

    if tag in _ID_REQUESTS:
        return _ID_REQUESTS[tag](_as_id(payload, tag))

    if tag == "ActivateContext":
        if not isinstance(payload, dict):
            raise ProtocolError(f"ActivateContext needs an object, got {payload!r}")
        return ActivateContext(
            _as_id(payload.get("id"), "id"),
            _as_id(payload.get("context"), "context"),
        )

    raise ProtocolError(f"Unknown request {tag!r}")


def decode_request(line: str) -> Request:
    """Decode one request line."""
    try:
        value = json.loads(line)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Request is not valid JSON: {e}") from e
    except RecursionError as e:
        raise ProtocolError("Request is nested too deeply") from e
    return parse_request(value)


def encode_response(response: Response) -> str:
    """Encode a response as a single newline-terminated line."""
    return json.dumps(response.to_wire(), separators=(",", ":")) + "\n"


def json_input_stream(stream: Iterable[Union[str, bytes]]) -> Iterator[Request]:
    """
    Yield the requests read from a line stream until it ends.

    Byte lines are decoded as UTF-8. Lines that cannot be decoded are dropped
    with a warning.
    """
    for line in stream:
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.warning(f"Request is not valid UTF-8: {e}")
                continue

        line = line.strip()
        if not line:
            continue

        try:
            yield decode_request(line)
        except ProtocolError as e:
            logger.warning(f"Error occurred when retrieving requests: {e}")


class Responder:
    """
    Writes responses to the launcher.

    Each response is flushed immediately. Write failures are logged and
    the response is dropped.
    """

    def __init__(self, output: TextIO = None):
        self.output = output if output is not None else sys.stdout

    def respond(self, response: Response) -> None:
        try:
            data = encode_response(response)
        except (TypeError, ValueError) as e:
            logger.warning(f"Could not serialize response as json: {e}")
            return

        try:
            self.output.write(data)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not write output: {e}")
            return

        try:
            self.output.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not flush output: {e}")
