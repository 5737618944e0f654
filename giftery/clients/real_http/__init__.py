"""
Real HTTP integration clients.

These clients communicate with the Giftery API over HTTP.

Important:
- Must return data shaped according to giftery/contracts/*
- The mock service in clients/mocks answers the same wire protocol, so the
  real client can be pointed at it through an injected httpx transport
"""

from .giftery_client import GifteryClient, PreparedCall, create_signature, transport_error_code

__all__ = ["GifteryClient", "PreparedCall", "create_signature", "transport_error_code"]
