"""An append-only in-memory record log served over HTTP."""

import argparse
import base64
import binascii
import json
import threading
from dataclasses import dataclass, replace
from pathlib import Path

from flask import Flask, Response, jsonify, request


@dataclass(frozen=True)
class Record:
    value: bytes = b""
    offset: int = 0

    def to_json(self) -> dict:
        """Return the wire form, with the value base64-encoded."""
        return {"value": base64.b64encode(self.value).decode("ascii"), "offset": self.offset}

    @classmethod
    def from_json(cls, data) -> "Record":
        """Build a record from its wire form; raise ValueError when malformed."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("record must be a JSON object")
        raw = data.get("value")
        if raw is None:
            value = b""
        elif isinstance(raw, str):
            try:
                value = base64.b64decode(raw, validate=True)
            except binascii.Error as exc:
                raise ValueError(f"invalid base64 value: {exc}") from None
        else:
            raise ValueError("record value must be a base64 string")
        return cls(value=value, offset=_offset(data.get("offset")))


def _offset(raw) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise ValueError("offset must be a non-negative integer")
    return raw


class OffsetNotFoundError(LookupError):
    """Raised when reading past the end of the log."""

    def __init__(self, offset: int) -> None:
        super().__init__("offset not found")
        self.offset = offset


class Log:
    """A thread-safe, append-only sequence of records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[Record] = []

    def append(self, record: Record) -> int:
        """Store ``record`` at the end and return its offset."""
        with self._lock:
            stored = replace(record, offset=len(self._records))
            self._records.append(stored)
            return stored.offset

    def read(self, offset: int) -> Record:
        """Return the record at ``offset`` or raise OffsetNotFoundError."""
        with self._lock:
            if offset < 0 or offset >= len(self._records):
                raise OffsetNotFoundError(offset)
            return self._records[offset]


@dataclass(frozen=True)
class ServerConfiguration:
    host: str = ""
    port: int = 0

    def server_url(self) -> str:
        """Return the listen address as ``host:port``."""
        return f"{self.host}:{self.port}"


def load_server_configuration(data) -> ServerConfiguration:
    """Parse a ``{"server": {"host": ..., "port": ...}}`` document."""
    document = json.loads(data)
    if not isinstance(document, dict):
        raise ValueError("configuration must be a JSON object")
    server = document.get("server") or {}
    if not isinstance(server, dict):
        raise ValueError("'server' must be a JSON object")
    host = server.get("host") or ""
    port = server.get("port") or 0
    if not isinstance(host, str):
        raise ValueError("'host' must be a string")
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValueError("'port' must be an integer")
    return ServerConfiguration(host=host, port=port)


def _error(message: str, status: int) -> Response:
    return Response(message + "\n", status=status, mimetype="text/plain")


def create_http_app(log=None) -> Flask:
    """Build an app that appends records on POST / and reads them on GET /."""
    if log is None:
        log = Log()
    app = Flask(__name__)

    @app.post("/")
    def produce():
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            return _error("request body must be a JSON object", 400)
        try:
            record = Record.from_json(body.get("record"))
        except ValueError as exc:
            return _error(str(exc), 400)
        return jsonify({"offset": log.append(record)})

    @app.get("/")
    def consume():
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            return _error("request body must be a JSON object", 400)
        try:
            offset = _offset(body.get("offset"))
        except ValueError as exc:
            return _error(str(exc), 400)
        try:
            record = log.read(offset)
        except OffsetNotFoundError as exc:
            return _error(str(exc), 404)
        return jsonify({"record": record.to_json()})

    return app


def main(argv=None) -> int:
    """Serve a fresh log at the address named in a configuration file."""
    parser = argparse.ArgumentParser(description="Serve an in-memory record log.")
    parser.add_argument("config", type=Path, help="JSON configuration file")
    args = parser.parse_args(argv)

    config = load_server_configuration(args.config.read_bytes())
    print(config.server_url())
    create_http_app(Log()).run(host=config.host or "0.0.0.0", port=config.port)
    return 0