#!/usr/bin/env python3
"""
Example usage of the Lob client.

Verifies a US address with a typed request record, then shows how an API
error still carries the decoded error payload.

    LOB_API_KEY=test_xxxxxxxx python example_usage.py
"""

import sys
from typing import Dict, Optional

from pydantic import BaseModel, Field

from lob_client import APIStatusError, CallMetrics, LobClient, LobRecord
from lob_client.config import bootstrap_logging


class VerifyAddressRequest(LobRecord):
    """Fields accepted by the address verification resource."""
    name: Optional[str] = Field(None, alias='name')
    address_line1: str = Field('', alias='address_line1')
    address_line2: str = Field('', alias='address_line2')
    address_city: str = Field('', alias='address_city')
    address_state: str = Field('', alias='address_state')
    address_zip: str = Field('', alias='address_zip')
    address_country: str = Field('', alias='address_country')
    metadata: Dict[str, str] = Field(default_factory=dict, alias='metadata')


class Address(BaseModel):
    address_line1: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None


class VerifyAddressResponse(BaseModel):
    address: Optional[Address] = None
    message: Optional[str] = None


class ErrorDetail(BaseModel):
    message: str
    status_code: int


class ErrorResponse(BaseModel):
    error: ErrorDetail


def main():
    """Verify one good address and one incomplete address."""
    bootstrap_logging()
    metrics = CallMetrics()

    with LobClient.from_env(metrics=metrics) as client:
        print("📋 Verifying a complete address")
        request = VerifyAddressRequest(
            address_line1='185 Berry St',
            address_city='San Francisco',
            address_state='CA',
            address_zip='94107',
        )
        verified = client.post('verify', request, response_model=VerifyAddressResponse,
                               operation='address_verify')
        print(f"✅ {verified.address}")

        print("\n📋 Verifying an incomplete address")
        try:
            client.post('verify', VerifyAddressRequest(address_line1='185 Berry St'),
                        response_model=ErrorResponse, operation='address_verify')
        except APIStatusError as e:
            detail = e.result.error.message if e.result else e.text
            print(f"❌ {e.status_code}: {detail}")

    bundle = metrics.get('address_verify')
    print(f"\n📊 address_verify: {bundle.calls} calls, {bundle.errors} errors, "
          f"{bundle.mean_seconds:.3f}s mean")
    return 0


if __name__ == "__main__":
    sys.exit(main())
