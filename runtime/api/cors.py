"""Permissive CORS handling applied to every route.

Preflight (OPTIONS) requests are answered directly with 200 and an empty
body, whatever the path; every other response gets the same headers.
"""

from fastapi import Request, Response


CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


async def cors_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response
