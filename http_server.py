#!/usr/bin/env python3
import argparse
import os
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

DEFAULT_PORT = 3000
GREETING = "🚀 Hello, World! This is my Node.js app on AWS!\n"

_READ_CHUNK = 64 * 1024

class GreetingHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def __getattr__(self, name):
        # do_GET, do_POST, do_PURGE, ... all resolve to the same responder
        if name.startswith("do_"):
            return self._respond
        raise AttributeError(name)

    def _respond(self):
        self._discard_body()
        body = GREETING.encode("utf-8")

        self.send_response(200)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        if self.close_connection:
            self.send_header("Connection", "close")
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    def _discard_body(self):
        # Unread bytes would be parsed as the next request on a kept-alive connection.
        try:
            if "chunked" in self.headers.get("Transfer-Encoding", "").lower():
                self._discard_chunked()
            else:
                self._discard(int(self.headers.get("Content-Length") or 0))
        except ValueError:
            self.close_connection = True

    def _discard_chunked(self):
        while True:
            size = int(self.rfile.readline(_READ_CHUNK).split(b";", 1)[0].strip() or b"", 16)
            if size == 0:
                break
            self._discard(size + 2)
        # trailers
        while self.rfile.readline(_READ_CHUNK) not in (b"\r\n", b"\n", b""):
            pass

    def _discard(self, remaining):
        while remaining > 0:
            chunk = self.rfile.read(min(remaining, _READ_CHUNK))
            if not chunk:
                break
            remaining -= len(chunk)

    def log_message(self, format, *args):
        return  # silence default logging

def port_number(value):
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port

def resolve_port(environ=None):
    if environ is None:
        environ = os.environ
    value = (environ.get("PORT") or "").strip()
    if not value:
        return DEFAULT_PORT
    return port_number(value)

def build_server(port, host="0.0.0.0"):
    return ThreadingHTTPServer((host, port), GreetingHandler)

def main(argv=None, environ=None):
    parser = argparse.ArgumentParser(description="Plain-text greeting HTTP server.")
    parser.add_argument(
        "--port", "-p", type=port_number, default=None,
        help=f"Port to listen on (default: $PORT or {DEFAULT_PORT})"
    )
    args = parser.parse_args(argv)

    port = args.port
    if port is None:
        try:
            port = resolve_port(environ)
        except argparse.ArgumentTypeError as exc:
            parser.error(f"PORT environment variable: {exc}")

    server = build_server(port)
    print(f"✅ Server running at http://localhost:{server.server_address[1]}", flush=True)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nShutting down.")
    finally:
        server.server_close()

if __name__ == "__main__":
    main()
