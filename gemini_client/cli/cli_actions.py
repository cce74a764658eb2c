"""CLI action handlers.

Errors are printed as single-line JSON objects to stderr.

Exit codes: ``0`` success, ``1`` unsuccessful response, ``2`` usage or
validation failure.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Optional

from ..base.errors import RequestValidationError
from ..base.interfaces import Model
from ..base.logging import configure_logger
from ..base.models import ChatRequest, Content, RequestBody
from ..base.utils.simple import build_simple_request
from ..config import get_client_config
from ..gemini import ChatModel, build_headers


def plan_run(*, model: Optional[str], base_url: Optional[str], prompt: Optional[str]) -> Dict[str, Any]:
    """Describe the request that ``--execute`` would send, without credentials."""
    cfg = get_client_config({"model": model, "base_url": base_url})
    body = RequestBody(contents=(Content.of_text(prompt or "", role="user"),))
    request = ChatRequest.for_model(
        cfg["model"],
        body,
        api_key=cfg.get("api_key"),
        base_url=cfg["base_url"],
    )
    plan = request.to_dict()
    plan["outbound_headers"] = build_headers(request.headers)
    plan["valid"] = request.validate()
    return plan


def execute(args: argparse.Namespace, chat_model: Optional[Model] = None) -> int:
    """Build the request from configuration, call the model, print the result."""
    try:
        request = build_simple_request(args.prompt, model=args.model, base_url=args.base_url)
        response = (chat_model or ChatModel()).call(request)
    except RequestValidationError as e:
        print(json.dumps({"error": e.message, "code": e.code.value}), file=sys.stderr)
        return 2
    if args.json:
        print(json.dumps(response.to_dict(), ensure_ascii=False))
    elif response.successful:
        print(response.text or "")
    else:
        print(
            json.dumps({"error": response.error_message, "status": response.status_code}),
            file=sys.stderr,
        )
    return 0 if response.successful else 1


def handle_run(args: argparse.Namespace, chat_model: Optional[Model] = None) -> int:
    if args.log_level:
        configure_logger(level=args.log_level)
    if not args.execute:
        print(json.dumps(plan_run(model=args.model, base_url=args.base_url, prompt=args.prompt)))
        return 0
    if not args.prompt:
        print(json.dumps({"error": "--prompt is required with --execute"}), file=sys.stderr)
        return 2
    return execute(args, chat_model)


__all__ = ["plan_run", "execute", "handle_run"]
