from curl_workbench.command import generate_curl
from curl_workbench.models import RequestModel


def test_generate_full_command():
    request = RequestModel(
        method='POST',
        url='https://example.com/api',
        headers={'Content-Type': 'application/json', 'Accept': '*/*'},
        body='{"a": 1}',
    )
    assert generate_curl(request) == (
        "curl 'https://example.com/api' -X POST"
        " -H 'Content-Type: application/json' -H 'Accept: */*'"
        " -d '{\"a\": 1}'"
    )


def test_data_omitted_when_body_empty():
    assert generate_curl(RequestModel(url='https://example.com')) == "curl 'https://example.com' -X GET"
    assert '-d' not in generate_curl(RequestModel(method='POST', url='x', body=''))


def test_headers_in_insertion_order():
    request = RequestModel(url='x', headers={'Z': '1', 'A': '2', 'M': '3'})
    command = generate_curl(request)
    assert command.index("'Z: 1'") < command.index("'A: 2'") < command.index("'M: 3'")


def test_embedded_single_quote_is_shell_escaped():
    command = generate_curl(RequestModel(method='POST', url='x', body="it's"))
    assert command.endswith("-d 'it'\\''s'")
