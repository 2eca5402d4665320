"""
HTTP client for the Figma REST API.

Only the two endpoints the token pipeline needs are wrapped:

- ``GET /files/{key}/styles``         published style catalog
- ``GET /files/{key}/nodes?ids=...``  the nodes those styles point at

Failures are raised as :class:`TransportFailure`; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from figtokens.core.errors import make_transport_error
from figtokens.core.ir.figma import NodeId, NodeRecord, StyleRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.figma.com/v1"
TOKEN_HEADER = "X-Figma-Token"


class FigmaClient:
    """Blocking Figma API client."""

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.Client(
            base_url=self.base_url,
            headers={TOKEN_HEADER: access_token},
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> FigmaClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_json(self, document_id: str, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        try:
            resp = self.client.get(path, params=params)
        except httpx.HTTPError as e:
            raise make_transport_error(f"Request to {path} failed: {e}", document_id) from e

        if resp.status_code != 200:
            raise make_transport_error(
                f"Figma API returned {resp.status_code} for {path}: {resp.text[:200]}",
                document_id,
                status_code=resp.status_code,
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise make_transport_error(f"Invalid JSON from {path}: {e}", document_id) from e
        if not isinstance(data, dict):
            raise make_transport_error(f"Unexpected payload from {path}", document_id)
        return data

    def fetch_styles(self, document_id: str) -> list[StyleRecord]:
        """
        Fetch a file's published styles.

        Args:
            document_id: Figma file key

        Returns:
            All style records, in catalog order

        Raises:
            TransportFailure: If the request or response parsing fails
        """
        data = self._get_json(document_id, f"/files/{document_id}/styles")
        raw_styles = data.get("meta", {}).get("styles", [])
        logger.debug("Fetched %d styles from file %s", len(raw_styles), document_id)
        try:
            return [StyleRecord.model_validate(s) for s in raw_styles]
        except ValidationError as e:
            raise make_transport_error(f"Malformed style record: {e}", document_id) from e

    def fetch_nodes(self, document_id: str, node_ids: Sequence[NodeId]) -> dict[NodeId, NodeRecord]:
        """
        Fetch document nodes by id.

        Ids the API answers with ``null`` (deleted or inaccessible nodes) and
        nodes that do not validate are left out of the result.

        Args:
            document_id: Figma file key
            node_ids: Node ids to fetch

        Returns:
            Mapping of node id to node

        Raises:
            TransportFailure: If the request or response parsing fails
        """
        if not node_ids:
            return {}
        data = self._get_json(
            document_id,
            f"/files/{document_id}/nodes",
            params={"ids": ",".join(node_ids)},
        )
        nodes: dict[NodeId, NodeRecord] = {}
        for node_id, entry in (data.get("nodes") or {}).items():
            if not entry or "document" not in entry:
                continue
            try:
                nodes[node_id] = NodeRecord.model_validate(entry["document"])
            except ValidationError as e:
                # Left out like a deleted node; the loaders report it as missing
                logger.warning("Skipping malformed node %s in file %s: %s", node_id, document_id, e)
        logger.debug("Fetched %d of %d nodes from file %s", len(nodes), len(node_ids), document_id)
        return nodes
