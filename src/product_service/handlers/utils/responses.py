"""API Gateway proxy response helpers shared by the product handlers."""

from typing import Any, Dict, Optional

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET,PUT,DELETE',
}


def create_api_response(status_code: int, body: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response with a JSON body.

    Args:
        status_code: HTTP status code
        body: Already serialized JSON body
        headers: Extra headers, merged over the defaults

    Returns:
        API Gateway proxy response dictionary
    """
    response_headers = {'Content-Type': 'application/json', **CORS_HEADERS}
    if headers:
        response_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': response_headers,
        'body': body,
    }
