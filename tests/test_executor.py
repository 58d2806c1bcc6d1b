import asyncio

import httpx
import pytest

from curl_workbench.exceptions import HeaderFormatError, TransportError
from curl_workbench.executor import encode_body
from curl_workbench.models import CorsMode, RawHeaders, RequestDraft, RequestModel


def run(coro):
    return asyncio.run(coro)


def test_standard_mode_returns_normalized_response(recorder, make_executor):
    executor = make_executor(recorder)
    response = run(executor.execute(RequestModel(url='https://api.example.com/items')))
    assert response.status == 200
    assert response.body == {'ok': True}
    assert response.headers['content-type'] == 'application/json'
    assert recorder.last.method == 'GET'
    assert str(recorder.last.url) == 'https://api.example.com/items'


def test_invalid_headers_make_no_call(recorder, make_executor):
    executor = make_executor(recorder)
    draft = RequestDraft(url='https://api.example.com', headers=RawHeaders('not json'))
    with pytest.raises(HeaderFormatError):
        run(executor.execute(draft))
    assert recorder.requests == []


@pytest.mark.parametrize('text', ['[]', '"x"', '{"a": {"b": "c"}}', '{"a": 1}'])
def test_non_flat_headers_are_rejected(recorder, make_executor, text):
    executor = make_executor(recorder)
    with pytest.raises(HeaderFormatError):
        run(executor.execute(RequestDraft(url='https://x.test', headers=RawHeaders(text))))
    assert recorder.requests == []


def test_origin_is_overwritten(recorder, make_executor):
    executor = make_executor(recorder)
    request = RequestModel(url='https://x.test', headers={'origin': 'https://evil.test', 'A': 'b'})
    run(executor.execute(request))
    assert recorder.last.headers.get_list('origin') == ['https://www.smythstoys.com']
    assert recorder.last.headers['a'] == 'b'


def test_origin_injection_can_be_disabled(recorder, make_executor):
    executor = make_executor(recorder, origin=None)
    run(executor.execute(RequestModel(url='https://x.test')))
    assert 'origin' not in recorder.last.headers


def test_json_body_sent_canonicalized(recorder, make_executor):
    executor = make_executor(recorder)
    request = RequestModel(method='POST', url='https://x.test', body='{\n  "a": 1,\n  "b": [1, 2]\n}')
    run(executor.execute(request))
    assert recorder.last.content == b'{"a":1,"b":[1,2]}'


def test_non_json_body_sent_verbatim(recorder, make_executor):
    executor = make_executor(recorder)
    run(executor.execute(RequestModel(method='POST', url='https://x.test', body='not-json-at-all')))
    assert recorder.last.content == b'not-json-at-all'


@pytest.mark.parametrize('method', ['GET', 'DELETE', 'PATCH'])
def test_body_only_sent_for_post_and_put(recorder, make_executor, method):
    executor = make_executor(recorder)
    run(executor.execute(RequestModel(method=method, url='https://x.test', body='{"a": 1}')))
    assert recorder.last.content == b''


def test_put_sends_body(recorder, make_executor):
    executor = make_executor(recorder)
    run(executor.execute(RequestModel(method='PUT', url='https://x.test', body='x')))
    assert recorder.last.method == 'PUT'
    assert recorder.last.content == b'x'


def test_opaque_mode_returns_placeholder(make_executor, make_recorder):
    handler = make_recorder(status=500, headers={'Content-Type': 'application/json'}, content=b'{"real": 1}')
    executor = make_executor(handler)
    response = run(executor.execute(RequestModel(url='https://x.test'), CorsMode.OPAQUE))
    assert len(handler.requests) == 1
    assert response.to_dict() == {
        'status': 'Success',
        'statusText': 'Request completed in no-cors mode',
        'headers': {},
        'body': 'Response content not available in no-cors mode',
    }
    assert response.is_opaque


def test_mode_accepts_plain_string(recorder, make_executor):
    executor = make_executor(recorder)
    response = run(executor.execute(RequestModel(url='https://x.test'), 'no-cors'))
    assert response.status == 'Success'


def test_non_2xx_is_not_a_failure(make_executor, make_recorder):
    executor = make_executor(make_recorder(status=418, content=b'teapot'))
    response = run(executor.execute(RequestModel(url='https://x.test')))
    assert response.status == 418
    assert response.body == 'teapot'


def test_transport_failure_raises_transport_error(make_executor, make_recorder):
    handler = make_recorder(exc=httpx.ConnectError('connection refused'))
    executor = make_executor(handler)
    with pytest.raises(TransportError, match='connection refused'):
        run(executor.execute(RequestModel(url='https://x.test')))
    assert len(handler.requests) == 1


def test_cookies_are_shared_across_executions(make_executor, make_recorder):
    handler = make_recorder(headers={'Set-Cookie': 'session=abc; Path=/'}, content=b'')
    executor = make_executor(handler)
    run(executor.execute(RequestModel(url='https://api.example.com/login')))
    run(executor.execute(RequestModel(url='https://api.example.com/me')))
    assert handler.last.headers['cookie'] == 'session=abc'


def test_omitted_credentials_send_no_cookies(make_executor, make_recorder):
    handler = make_recorder(headers={'Set-Cookie': 'session=abc; Path=/'}, content=b'')
    executor = make_executor(handler, include_credentials=False)
    run(executor.execute(RequestModel(url='https://api.example.com/login')))
    run(executor.execute(RequestModel(url='https://api.example.com/me', headers={'Cookie': 'manual=1'})))
    assert 'cookie' not in handler.last.headers


def test_encode_body():
    assert encode_body('{ "a" : "é" }') == '{"a":"é"}'
    assert encode_body('a=1&b=2') == 'a=1&b=2'


@pytest.mark.parametrize('headers', [{'X-Name': 'café'}, {'Nöme': 'x'}])
def test_non_ascii_headers_make_no_call(recorder, make_executor, headers):
    executor = make_executor(recorder)
    with pytest.raises(HeaderFormatError, match='must be ASCII'):
        run(executor.execute(RequestModel(url='https://x.test', headers=headers)))
    assert recorder.requests == []
