# app/services/generation_client.py

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx
from dotenv import load_dotenv

from routing.payloads import GenerationPayload

load_dotenv()

logger = logging.getLogger(__name__)


class GenerationClientError(Exception):
    """Simple wrapper for generation backend errors."""


class GenerationClient:
    """
    Thin async client for the inference backend.

    It POSTs an already-built payload and parses the result; all preset
    logic lives in the router.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_url = api_url or os.getenv("GENERATION_API_URL")
        self.api_key = api_key or os.getenv("GENERATION_API_KEY")
        if not self.api_url:
            raise RuntimeError(
                "GENERATION_API_URL is not set. Add it to your .env or environment variables."
            )
        self.timeout = timeout
        self._transport = transport

    async def dispatch(self, payload: GenerationPayload) -> Dict[str, Any]:
        """
        Send one generation request.

        Returns a dict containing:
          - image_url (str or None)
          - raw_response (full JSON)
        """
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        body = payload.to_wire()
        logger.info("[Generation] POST %s model=%s", self.api_url, body.get("model"))

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.post(self.api_url, headers=headers, json=body)
            except httpx.HTTPError as exc:
                raise GenerationClientError(f"Generation backend unreachable: {exc}") from exc
            try:
                data = resp.json()
            except ValueError as exc:
                raise GenerationClientError(
                    f"Non-JSON response from generation backend: {resp.text}"
                ) from exc

        if resp.status_code >= 400:
            raise GenerationClientError(f"Generation backend error {resp.status_code}: {data}")

        # Backends answer either { result: { image_url, ... } } or a flat object
        result = data.get("result", data) if isinstance(data, dict) else {}
        if not isinstance(result, dict):
            result = {}

        return {
            "image_url": result.get("image_url"),
            "raw_response": data,
        }
