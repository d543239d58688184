import asyncio
import json
import logging
import os
from typing import Any, Dict, Optional

import httpx

from voter_guide.core import config
from voter_guide.core.voters_tree import VOTERS_DECISION_TREE
from voter_guide.models.decision_tree import DecisionTree, TreeError, TreeOk, TreeResult

logger = logging.getLogger(__name__)


class TreeFetchError(RuntimeError):
    """Raised when a tree document cannot be retrieved."""
    pass


class TreeProvider:
    """Produces the decision tree once per call.

    ``load_tree`` never raises: whatever goes wrong while fetching or
    validating is returned as a ``TreeError``.
    """
    name = "provider"

    async def fetch(self) -> Dict[str, Any]:
        raise NotImplementedError

    async def load_tree(self) -> TreeResult:
        try:
            data = await self.fetch()
            tree = parse_tree_document(data)
        except Exception as e:
            logger.error(f"Error loading decision tree from {self.name}: {e}")
            return TreeError(reason=str(e))

        logger.info(f"Loaded decision tree from {self.name}: {len(tree)} nodes, {len(tree.outcomes())} outcomes")
        return TreeOk(tree=tree)


def parse_tree_document(data: Any) -> DecisionTree:
    """Accepts either a bare ``{id: node}`` mapping or ``{"nodes": {...}}``."""
    if not isinstance(data, dict):
        raise ValueError(f"Decision tree document must be an object, got {type(data).__name__}")
    if "nodes" in data and isinstance(data["nodes"], dict):
        data = data["nodes"]
    return DecisionTree.from_mapping(data)


class StaticTreeProvider(TreeProvider):
    name = "built-in questionnaire"

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = VOTERS_DECISION_TREE if data is None else data

    async def fetch(self) -> Dict[str, Any]:
        return self.data


class FileTreeProvider(TreeProvider):
    def __init__(self, path: str):
        self.path = path
        self.name = f"file {path}"

    async def fetch(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            raise FileNotFoundError(f"File not found: {self.path}")
        return await asyncio.to_thread(self._read)

    def _read(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)


class HttpTreeProvider(TreeProvider):
    def __init__(self, url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.timeout = timeout
        self.transport = transport
        self.name = url

    async def fetch(self) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(self.url)
        if response.status_code != 200:
            raise TreeFetchError(f"Failed to fetch decision tree: {response.status_code}")
        return response.json()


class CachedTreeSource:
    """One-shot, memoized tree fetch shared by every navigator.

    The first ``get()`` starts the provider; callers arriving while it runs
    wait on the same future, later callers get the stored result directly.
    """

    def __init__(self, provider: TreeProvider):
        self.provider = provider
        self._result: Optional[TreeResult] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def result(self) -> Optional[TreeResult]:
        return self._result

    @property
    def is_resolved(self) -> bool:
        return self._result is not None

    async def get(self) -> TreeResult:
        if self._result is not None:
            return self._result
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._resolve())
        # A cancelled caller must not cancel the shared fetch
        return await asyncio.shield(self._pending)

    async def _resolve(self) -> TreeResult:
        try:
            result = await self.provider.load_tree()
        except Exception as e:
            logger.error(f"Tree provider {type(self.provider).__name__} raised: {e}")
            result = TreeError(reason=str(e))
        self._result = result
        return result


def build_tree_provider() -> TreeProvider:
    if config.DECISION_TREE_URL:
        return HttpTreeProvider(config.DECISION_TREE_URL, timeout=config.TREE_FETCH_TIMEOUT)
    if config.DECISION_TREE_FILE:
        return FileTreeProvider(config.DECISION_TREE_FILE)
    return StaticTreeProvider()
