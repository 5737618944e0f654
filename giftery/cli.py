#!/usr/bin/env python3
"""
Command-line access to the Giftery API:
- balance: print the current balance
- products: list gift cards, optionally filtered by face value or title
- order: place an order for one gift card

Credentials come from GIFTERY_* environment variables (a .env file is
loaded), optionally combined with a YAML file given by --config.
Set GIFTERY_MODE=mock or pass --mock to talk to the in-memory mock service.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from giftery.clients.mocks import MockGifteryService
from giftery.clients.real_http import GifteryClient
from giftery.contracts import OrderData, ProductFilter, filter_products
from giftery.error_handler import ErrorHandler
from giftery.errors import GifteryError
from giftery.utils.config_loader import load_client_settings

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="giftery", description="Giftery API client")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with giftery settings")
    parser.add_argument("--endpoint", default=None, help="Override the API base URL")
    parser.add_argument("--post", action="store_true", help="Send data and signature in a POST body")
    parser.add_argument("--mock", action="store_true", help="Use the in-memory mock service")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.add_parser("balance", help="Show the account balance")

    products = sub.add_parser("products", help="List available gift cards")
    products.add_argument("--face", type=int, default=None, help="Only cards that accept this value")
    products.add_argument("--search", default=None, help="Only cards whose title contains this text")

    order = sub.add_parser("order", help="Order a gift card")
    order.add_argument("--product-id", type=int, required=True)
    order.add_argument("--face", type=int, required=True)
    order.add_argument("--email-to")
    order.add_argument("--email-from")
    order.add_argument("--from", dest="from_name")
    order.add_argument("--to", dest="to_name")
    order.add_argument("--text")
    order.add_argument("--comment")
    order.add_argument("--external-id")
    order.add_argument("--testmode", action="store_true")
    return parser


def build_client(args: argparse.Namespace) -> GifteryClient:
    settings = load_client_settings(args.config)
    transport = None
    if args.mock or os.getenv("GIFTERY_MODE", "").strip().lower() == "mock":
        logger.info("Using mock Giftery service")
        transport = MockGifteryService(settings.client_id, settings.secret).transport()

    client = GifteryClient.from_settings(settings, transport=transport)
    if args.endpoint:
        client = client.set_endpoint(args.endpoint)
    if args.post:
        client = client.use_post()
    return client


def run_command(client: GifteryClient, args: argparse.Namespace) -> Dict[str, Any]:
    if args.command == "balance":
        return {"balance": str(client.get_balance().balance)}

    if args.command == "products":
        products = client.get_products().products
        selected = filter_products(products, ProductFilter(face=args.face, search=args.search))
        return {"products": [p.model_dump(exclude_none=True) for p in selected]}

    if args.command == "order":
        order = OrderData(
            product_id=args.product_id,
            face=args.face,
            email_to=args.email_to,
            email_from=args.email_from,
            from_name=args.from_name,
            to_name=args.to_name,
            text=args.text,
            comment=args.comment,
            external_id=args.external_id,
            testmode=args.testmode,
        )
        return {"order_id": client.make_order(order).order_id}

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 1

    try:
        client = build_client(args)
        result = run_command(client, args)
    except (GifteryError, ValidationError, FileNotFoundError) as exc:
        payload = ErrorHandler().handle_exception(exc, context={"command": args.command})
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
