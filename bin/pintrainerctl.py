from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any

import httpx

DEFAULT_BASE_URL = os.getenv("PINTRAINER_BASE_URL", "http://127.0.0.1:8000")


def _print_json(data: Any, pretty: bool = True) -> None:
    if pretty:
        print(json.dumps(data, ensure_ascii=False, indent=2, sort_keys=False))
    else:
        print(json.dumps(data, ensure_ascii=False))


def _request(
    method: str,
    url: str,
    *,
    json_body: dict | None = None,
    timeout: float = 5.0,
) -> Any:
    headers = {"accept": "application/json"}
    if json_body is not None:
        headers["content-type"] = "application/json"

    try:
        with httpx.Client(timeout=timeout) as client:
            resp = client.request(method, url, headers=headers, json=json_body)
    except httpx.RequestError as e:
        raise RuntimeError(f"Request failed: {e}") from e

    content_type = resp.headers.get("content-type", "")
    if "application/json" in content_type:
        payload: Any = resp.json()
    else:
        payload = resp.text

    if resp.status_code >= 400:
        message = payload.get("message") if isinstance(payload, dict) else payload
        raise RuntimeError(f"HTTP {resp.status_code} error: {message}")

    return payload


def _normalize_base_url(base_url: str) -> str:
    return base_url.rstrip("/")


def cmd_sensors(args: argparse.Namespace) -> Any:
    base = _normalize_base_url(args.base_url)
    if args.action == "list":
        return _request("GET", f"{base}/api/sensors/", timeout=args.timeout)
    if args.action == "get":
        return _request("GET", f"{base}/api/sensors/{args.sensor_name}", timeout=args.timeout)
    raise RuntimeError(f"Unknown sensors action: {args.action}")


def cmd_sessions(args: argparse.Namespace) -> Any:
    base = f"{_normalize_base_url(args.base_url)}/api/sessions"
    if args.action == "start":
        body = {"sensor_name": args.sensor_name, "allow_pin_reuse": args.allow_pin_reuse}
        return _request("POST", f"{base}/", json_body=body, timeout=args.timeout)
    if args.action == "show":
        return _request("GET", f"{base}/{args.session_id}", timeout=args.timeout)
    if args.action == "connect":
        body = {"sensor_pin": args.sensor_pin, "mcu_pin": args.mcu_pin}
        return _request("POST", f"{base}/{args.session_id}/connections", json_body=body, timeout=args.timeout)
    if args.action == "toggle":
        return _request("POST", f"{base}/{args.session_id}/groups/{args.group}/toggle", timeout=args.timeout)
    if args.action == "validate":
        return _request("GET", f"{base}/{args.session_id}/validation", timeout=args.timeout)
    if args.action == "lines":
        return _request("GET", f"{base}/{args.session_id}/lines", timeout=args.timeout)
    if args.action == "reset":
        return _request("POST", f"{base}/{args.session_id}/reset", timeout=args.timeout)
    if args.action == "delete":
        return _request("DELETE", f"{base}/{args.session_id}", timeout=args.timeout)
    raise RuntimeError(f"Unknown sessions action: {args.action}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pintrainerctl", description="Pin Trainer API command line client")
    p.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"API base URL (default: {DEFAULT_BASE_URL}, env PINTRAINER_BASE_URL)",
    )
    p.add_argument("--timeout", type=float, default=5.0, help="HTTP timeout seconds (default: 5)")
    p.add_argument("--raw", action="store_true", help="Print raw JSON without pretty formatting")

    sub = p.add_subparsers(dest="cmd", required=True)

    # sensors
    sen = sub.add_parser("sensors", help="Sensor reference data")
    sen_sub = sen.add_subparsers(dest="action", required=True)

    sen_sub.add_parser("list", help="GET /api/sensors/")

    sen_get = sen_sub.add_parser("get", help="GET /api/sensors/{sensor_name}")
    sen_get.add_argument("sensor_name")

    # sessions
    ses = sub.add_parser("sessions", help="Training session APIs")
    ses_sub = ses.add_subparsers(dest="action", required=True)

    ses_start = ses_sub.add_parser("start", help="POST /api/sessions/")
    ses_start.add_argument("sensor_name")
    ses_start.add_argument("--allow-pin-reuse", action="store_true", help="Deprecated: accept reused pins")

    for action, help_text in (
        ("show", "GET /api/sessions/{session_id}"),
        ("validate", "GET /api/sessions/{session_id}/validation"),
        ("lines", "GET /api/sessions/{session_id}/lines"),
        ("reset", "POST /api/sessions/{session_id}/reset"),
        ("delete", "DELETE /api/sessions/{session_id}"),
    ):
        ses_sub.add_parser(action, help=help_text).add_argument("session_id")

    ses_connect = ses_sub.add_parser("connect", help="POST /api/sessions/{session_id}/connections")
    ses_connect.add_argument("session_id")
    ses_connect.add_argument("sensor_pin")
    ses_connect.add_argument("mcu_pin")

    ses_toggle = ses_sub.add_parser("toggle", help="POST /api/sessions/{session_id}/groups/{group}/toggle")
    ses_toggle.add_argument("session_id")
    ses_toggle.add_argument("group")

    return p


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    try:
        if args.cmd == "sensors":
            result = cmd_sensors(args)
        elif args.cmd == "sessions":
            result = cmd_sessions(args)
        else:
            raise RuntimeError(f"Unknown command: {args.cmd}")

        _print_json(result, pretty=not args.raw)
        return 0

    except Exception as e:
        base = _normalize_base_url(getattr(args, "base_url", DEFAULT_BASE_URL))
        print(f"[ERROR] base_url={base} - {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
