"""
form_echo.client: the form-side caller of the Form Echo service.

Usage:
  python -m form_echo.client --base http://127.0.0.1:8000 get
  python -m form_echo.client --base http://127.0.0.1:8000 post --user-name Alice \
      --email a@x.com --age 30 --password 123456

Transport failures (connection refused, timeout, malformed response) are
logged and reported as None. There is no retry and no backoff.
"""

import argparse
import logging
from typing import Any, Dict, Optional

import httpx

log = logging.getLogger("form_echo.client")

DEFAULT_BASE_URL = "http://localhost:8000"


class FormClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = 10.0,
    ):
        """
        Args:
            base_url (str): Root URL of the service.
            transport (httpx.BaseTransport, optional): Custom transport, e.g.
                httpx.MockTransport in tests.
            timeout (float): Per-request timeout in seconds.
        """
        self._client = httpx.Client(base_url=base_url, transport=transport, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FormClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _call(self, method: str, **kwargs) -> Optional[Any]:
        try:
            response = self._client.request(method, "/", **kwargs)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            log.error("%s / failed: %s", method, exc)
            return None

    def fetch_profile(self) -> Optional[Dict[str, Any]]:
        """GET the profile and log its fields. Returns None on failure."""
        data = self._call("GET")
        if not isinstance(data, dict):
            return None
        log.info("Name  %s", data.get("name"))
        log.info("Age  %s", data.get("age"))
        log.info("Skills  %s", data.get("skills"))
        return data

    def submit(self, user_name: str, email: str, age: str, password: str) -> Optional[Dict[str, Any]]:
        """
        POST the form fields and return the echoed body.

        Returns:
            dict or None: The echoed body, or None if the request was rejected
            (e.g. 401 for a wrong password) or could not be completed.
        """
        body = {"userName": user_name, "email": email, "age": age, "password": password}
        data = self._call("POST", json=body)
        if data is not None:
            log.info("Echoed %s", sorted(data) if isinstance(data, dict) else data)
        return data


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Talk to a Form Echo service")
    parser.add_argument("--base", default=DEFAULT_BASE_URL)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("get", help="fetch the profile")
    post = sub.add_parser("post", help="submit the form")
    post.add_argument("--user-name", default="")
    post.add_argument("--email", default="")
    post.add_argument("--age", default="")
    post.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    with FormClient(args.base) as client:
        if args.command == "get":
            result = client.fetch_profile()
        else:
            result = client.submit(args.user_name, args.email, args.age, args.password)
    return 0 if result is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
