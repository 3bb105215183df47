"""
Tests for the scrape request/response mapping and the aiohttp client
"""

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer
from conftest import WIKI, article_payload
from wikigraph.extraction import (
    ExtractionClientConfig,
    ExtractionError,
    ExtractionRequest,
    ExtractionResponse,
    FailureKind,
    JigsawStackClient,
    LoadOptions,
    MalformedResponseError,
    WaitCondition,
)

SEED = WIKI + "Machine_learning"


def test_response_takes_first_result_per_prompt():
    payload = {
        'data': [
            {'key': "Article title", 'results': [{'text': "Machine learning"}, {'text': "Other"}]},
            {'key': "Article introduction", 'results': []},
        ],
        'link': []
    }

    response = ExtractionResponse.from_payload(payload)

    assert response.fields == {"Article title": "Machine learning", "Article introduction": None}
    assert response.value("Article title", "Unknown Title") == "Machine learning"
    assert response.value("Article introduction", "No introduction available") == "No introduction available"
    assert response.value("Key concepts") == ""


def test_empty_title_results_fall_back_to_default():
    response = ExtractionResponse.from_payload(article_payload(title=None, introduction="Intro"))

    assert response.value("Article title", "Unknown Title") == "Unknown Title"


def test_links_without_href_are_dropped():
    payload = {
        'data': [],
        'link': [
            {'href': WIKI + "Statistics", 'text': "Statistics"},
            {'text': "no target"},
            {'href': "", 'text': "empty"},
            {'href': WIKI + "Data_mining"},
        ]
    }

    response = ExtractionResponse.from_payload(payload)

    assert [(link.url, link.anchor_text) for link in response.links] == [
        (WIKI + "Statistics", "Statistics"),
        (WIKI + "Data_mining", ""),
    ]


def test_missing_sections_give_empty_response():
    response = ExtractionResponse.from_payload({})

    assert response.fields == {}
    assert response.links == []


def test_numeric_text_is_kept_as_string():
    payload = {'data': [{'key': "Article title", 'results': [{'text': 1984}]}]}

    response = ExtractionResponse.from_payload(payload)

    assert response.value("Article title") == "1984"


def test_non_string_anchor_text_is_ignored():
    payload = {'link': [{'href': WIKI + "Statistics", 'text': ["Statistics"]}]}

    response = ExtractionResponse.from_payload(payload)

    assert response.links[0].anchor_text == ""


@pytest.mark.parametrize("payload", [
    {'data': [{'key': "Article title", 'results': ["Machine learning"]}]},
    {'data': [{'key': "Article title", 'results': [{'text': {'value': "Machine learning"}}]}]},
    {'data': [{'key': "Article title", 'results': "Machine learning"}]},
    {'data': ["Article title"]},
    {'data': {'Article title': "Machine learning"}},
    {'link': ["https://en.wikipedia.org/wiki/Statistics"]},
    {'link': {'href': WIKI + "Statistics"}},
    ["not", "an", "object"],
])
def test_badly_shaped_payload_is_rejected(payload):
    with pytest.raises(MalformedResponseError):
        ExtractionResponse.from_payload(payload)

def test_request_payload_omits_unset_options():
    request = ExtractionRequest(url=SEED, prompts=["Article title"])

    assert request.to_payload() == {'url': SEED, 'element_prompts': ["Article title"]}


def test_request_payload_with_all_options():
    request = ExtractionRequest(
        url=SEED,
        prompts=["Article title", "Article text"],
        wait_for=WaitCondition(mode="selector", value="#content"),
        load_options=LoadOptions(timeout_ms=12000, navigation_mode="domcontentloaded")
    )

    payload = request.to_payload()

    assert payload['wait_for'] == {'mode': "selector", 'value': "#content"}
    assert payload['goto_options'] == {'timeout': 12000, 'wait_until': "domcontentloaded"}


def scrape_app(handler):
    app = web.Application()
    app.router.add_post("/v1/ai/scrape", handler)
    return app


@pytest.mark.asyncio
async def test_client_posts_request_and_maps_response():
    received = {}

    async def handler(request):
        received['api_key'] = request.headers.get('x-api-key')
        received['body'] = await request.json()
        return web.json_response(article_payload(
            title="Machine learning",
            links=[(WIKI + "Statistics", "Statistics")]
        ))

    async with TestServer(scrape_app(handler)) as server:
        config = ExtractionClientConfig(api_key="test-key", endpoint=str(server.make_url("/v1/ai/scrape")))
        async with JigsawStackClient(config) as client:
            response = await client.scrape(ExtractionRequest(url=SEED, prompts=["Article title"]))

    assert received['api_key'] == "test-key"
    assert received['body'] == {'url': SEED, 'element_prompts': ["Article title"]}
    assert response.value("Article title") == "Machine learning"
    assert response.links[0].url == WIKI + "Statistics"


@pytest.mark.asyncio
async def test_client_raises_on_http_error():
    async def handler(request):
        return web.json_response({'message': "boom"}, status=500)

    async with TestServer(scrape_app(handler)) as server:
        config = ExtractionClientConfig(endpoint=str(server.make_url("/v1/ai/scrape")))
        async with JigsawStackClient(config) as client:
            with pytest.raises(ExtractionError) as exc_info:
                await client.scrape(ExtractionRequest(url=SEED, prompts=["Article title"]))

    assert exc_info.value.status == 500
    assert exc_info.value.url == SEED


@pytest.mark.asyncio
async def test_client_raises_when_scrape_reports_failure():
    async def handler(request):
        return web.json_response({'success': False, 'message': "Page did not load"})

    async with TestServer(scrape_app(handler)) as server:
        config = ExtractionClientConfig(endpoint=str(server.make_url("/v1/ai/scrape")))
        async with JigsawStackClient(config) as client:
            with pytest.raises(ExtractionError, match="Page did not load") as exc_info:
                await client.scrape(ExtractionRequest(url=SEED, prompts=["Article title"]))

    assert exc_info.value.kind == FailureKind.NO_CONTENT


@pytest.mark.asyncio
async def test_client_raises_on_invalid_json():
    async def handler(request):
        return web.Response(text="<html>not json</html>")

    async with TestServer(scrape_app(handler)) as server:
        config = ExtractionClientConfig(endpoint=str(server.make_url("/v1/ai/scrape")))
        async with JigsawStackClient(config) as client:
            with pytest.raises(ExtractionError, match="Invalid JSON"):
                await client.scrape(ExtractionRequest(url=SEED, prompts=["Article title"]))


@pytest.mark.asyncio
async def test_client_raises_on_badly_shaped_response():
    async def handler(request):
        return web.json_response({'data': [{'key': "Article title", 'results': ["Machine learning"]}]})

    async with TestServer(scrape_app(handler)) as server:
        config = ExtractionClientConfig(endpoint=str(server.make_url("/v1/ai/scrape")))
        async with JigsawStackClient(config) as client:
            with pytest.raises(ExtractionError, match="Malformed scrape response") as exc_info:
                await client.scrape(ExtractionRequest(url=SEED, prompts=["Article title"]))

    assert exc_info.value.kind == FailureKind.MALFORMED
    assert exc_info.value.url == SEED


@pytest.mark.asyncio
async def test_client_marks_connection_failures():
    config = ExtractionClientConfig(endpoint="http://127.0.0.1:1/v1/ai/scrape", request_timeout=5.0)

    async with JigsawStackClient(config) as client:
        with pytest.raises(ExtractionError) as exc_info:
            await client.scrape(ExtractionRequest(url=SEED, prompts=["Article title"]))

    assert exc_info.value.kind == FailureKind.CONNECTION

@pytest.mark.asyncio
async def test_client_requires_open_session():
    client = JigsawStackClient(ExtractionClientConfig())

    with pytest.raises(RuntimeError):
        await client.scrape(ExtractionRequest(url=SEED, prompts=["Article title"]))


def test_config_reads_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("JIGSAWSTACK_API_KEY", "env-key")

    config = ExtractionClientConfig.from_env(request_timeout=5.0)

    assert config.api_key == "env-key"
    assert config.request_timeout == 5.0
