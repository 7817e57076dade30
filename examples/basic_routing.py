# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Route calls, module data, and HTTP requests through one session root.

Run: python examples/basic_routing.py
"""

from __future__ import annotations

import logging
from typing import Any

from callroute import CallContext, CallProxy


class InMemoryDispatcher:
    """Signature -> function table with per-module data."""

    def __init__(self):
        self.functions: dict[str, Any] = {}
        self.data: dict[str, Any] = {}

    def method(self, signature: str):
        def register(fn):
            self.functions[signature] = fn
            return fn

        return register

    def resolve(self, signature: str):
        return self.functions[signature]

    def get_data(self, name: str) -> Any:
        return self.data.get(name)

    def set_data(self, name: str, value: Any) -> None:
        self.data[name] = value


class EchoHttpClient:
    def get(self, target, options, session):
        return {"verb": "GET", "target": target, "user": session["user"]}

    def request(self, options, session):
        return {"verb": "REQUEST", "options": options, "user": session["user"]}


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    dispatcher = InMemoryDispatcher()

    @dispatcher.method("greeterModule.hello")
    def hello(args):
        return f"hello {args['name']} from {args['session']['user']}"

    ctx = CallContext(dispatcher=dispatcher, http_client=EchoHttpClient())
    ctx.namespaces.register("service", "Service")

    root = CallProxy({"user": "ada", "module_call_signature": "greeterModule.hello"}, ctx)

    print(root.module.greeter.hello({"name": "world"}))
    root.module.greeter.data = {"greeted": 1}
    print(root.data)
    print(root.http.get("https://example.org", {}))
    print(root.http.request({"method": "HEAD"}))


if __name__ == "__main__":
    main()
