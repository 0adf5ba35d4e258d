from api.models import ProxyRequest, ProxyResponse


def test_from_event_defaults():
    request = ProxyRequest.from_event({"httpMethod": "GET", "queryStringParameters": None})

    assert request.method == "GET"
    assert request.action == "videos"
    assert request.filters == {}


def test_from_event_keeps_only_recognized_filters():
    request = ProxyRequest.from_event(
        {
            "httpMethod": "get",
            "queryStringParameters": {
                "action": "videoById",
                "id": "7",
                "quality": "",
                "limit": "10",
            },
        }
    )

    assert request.method == "GET"
    assert request.action == "videoById"
    assert request.filters == {"id": "7"}


def test_empty_action_falls_back_to_videos():
    assert ProxyRequest.from_params("GET", {"action": ""}).action == "videos"


def test_response_to_event_uses_wire_names():
    response = ProxyResponse(status_code=200, headers={"Content-Type": "application/json"}, body="{}")

    assert response.to_event() == {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": "{}",
    }


def test_from_params_coerces_non_string_values():
    request = ProxyRequest.from_params("get", {"action": 123, "id": 42})

    assert request.action == "123"
    assert request.filters == {"id": "42"}
