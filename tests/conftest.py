"""Shared fixtures: a fake search worker behind httpx.MockTransport."""

import json

import httpx
import pytest

from core.search import SearchClient
from tools.adapter import ToolAdapter

WORKER_BASE = "https://worker.test"

SAMPLE_RESULTS = [
    {
        "id": "doc-1",
        "score": 0.91234567,
        "content": "Vectorize stores embeddings at the edge.",
        "category": "product",
    },
    {
        "id": "doc-2",
        "score": 0.5,
        "content": "Workers AI generates embeddings with bge-base.",
        "category": "ai",
    },
    {
        "id": "doc-3",
        "score": 0.12,
        "content": "Queries return the nearest vectors by cosine similarity.",
        "category": "search",
    },
]


class FakeWorker:
    """Records every request and replies with whatever is configured."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = None
        self.text = None
        self.error = None

    def reply_with_results(self, results, query=None):
        self.payload = {"resultsCount": len(results), "results": results}
        if query is not None:
            self.payload["query"] = query

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        payload = self.payload
        if payload is None:
            sent = json.loads(request.content)
            payload = {"query": sent["query"], "resultsCount": len(SAMPLE_RESULTS), "results": SAMPLE_RESULTS}
        return httpx.Response(self.status_code, json=payload)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def worker():
    return FakeWorker()


@pytest.fixture
def search_client(worker):
    return SearchClient(base_url=WORKER_BASE, transport=httpx.MockTransport(worker.handler))


@pytest.fixture
def adapter(search_client):
    return ToolAdapter(search_client)
