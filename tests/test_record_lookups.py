from __future__ import annotations

import uuid
from typing import List

import httpx

from mandataire_crm.core.supabase import IN_FILTER_BATCH_SIZE, batched
from mandataire_crm.repositories.catalog_repository import CatalogRepository
from mandataire_crm.repositories.clients_repository import ClientsRepository


MAX_URL_LENGTH = 8192


def _requested_ids(request: httpx.Request) -> List[str]:
    value = request.url.params["id"]
    assert value.startswith("in.(") and value.endswith(")")
    return [item.strip('"') for item in value[len("in.(") : -1].split(",")]


class RecordingTransport:
    def __init__(self, row_factory) -> None:
        self.row_factory = row_factory
        self.urls: List[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.urls.append(str(request.url))
        return httpx.Response(200, json=[self.row_factory(item) for item in _requested_ids(request)])


def _client_row(client_id: str) -> dict:
    return {"id": client_id, "first_name": "Ana", "last_name": client_id[:8], "is_archived": False}


def _service_row(service_id: str) -> dict:
    return {"id": service_id, "name": f"Service {service_id[:4]}", "is_active": True}


def test_list_clients_by_ids_splits_large_lookups():
    ids = [str(uuid.uuid4()) for _ in range(400)]
    transport = RecordingTransport(_client_row)
    repository = ClientsRepository()
    repository.client._client = httpx.Client(transport=httpx.MockTransport(transport))

    clients = repository.list_clients_by_ids(ids + ids[:10])

    assert len(transport.urls) == 4
    assert all(len(url) <= MAX_URL_LENGTH for url in transport.urls)
    assert sorted(client.id for client in clients) == sorted(ids)


def test_list_services_by_ids_splits_large_lookups():
    ids = [str(uuid.uuid4()) for _ in range(IN_FILTER_BATCH_SIZE + 1)]
    transport = RecordingTransport(_service_row)
    repository = CatalogRepository()
    repository.client._client = httpx.Client(transport=httpx.MockTransport(transport))

    services = repository.list_services_by_ids(ids)

    assert len(transport.urls) == 2
    assert all(len(url) <= MAX_URL_LENGTH for url in transport.urls)
    assert {service.id for service in services} == set(ids)


def test_list_by_ids_without_ids_skips_the_request():
    transport = RecordingTransport(_client_row)
    repository = ClientsRepository()
    repository.client._client = httpx.Client(transport=httpx.MockTransport(transport))

    assert repository.list_clients_by_ids([]) == []
    assert transport.urls == []


def test_batched_keeps_order_and_remainder():
    assert list(batched(["a", "b", "c", "d", "e"], size=2)) == [["a", "b"], ["c", "d"], ["e"]]
    assert list(batched([], size=2)) == []


def test_select_normalizes_object_and_empty_bodies():
    responses = iter(
        [
            httpx.Response(200, json={"id": "svc-1", "name": "Assurance vie", "is_active": True}),
            httpx.Response(200, content=b""),
        ]
    )
    repository = CatalogRepository()
    repository.client._client = httpx.Client(
        transport=httpx.MockTransport(lambda request: next(responses))
    )

    service = repository.get_service("svc-1")
    assert service is not None
    assert service.name == "Assurance vie"
    assert repository.get_service("svc-missing") is None
