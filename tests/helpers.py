"""
Test helpers for faking completion endpoint responses.
"""
import json
from unittest.mock import Mock


def make_response(status_code: int, body) -> Mock:
    """Fake requests.Response carrying a JSON body (or raw text if body is a str)."""
    response = Mock()
    response.status_code = status_code
    if isinstance(body, str):
        response.text = body
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.text = json.dumps(body)
        response.json.return_value = body
    return response


def completion_body(content: str) -> dict:
    return {'choices': [{'message': {'role': 'assistant', 'content': content}}]}
