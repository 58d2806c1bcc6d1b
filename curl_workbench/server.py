"""
FastAPI Server for the Request Workbench

Provides API endpoints for:
- Parsing URL-or-cURL input into request fields
- Generating cURL text from request fields
- Executing requests
"""

from typing import Dict, Optional, Union
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from . import config
from .builder import BuilderSession, InputMode
from .command import Parsed, generate_curl
from .exceptions import HeaderFormatError, TransportError
from .executor import RequestExecutor
from .models import CorsMode, ParsedHeaders, RawHeaders, RequestDraft, RequestModel


# FastAPI app
app = FastAPI(title="Request Workbench API")

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

executor = RequestExecutor()


# Request Models
class InputText(BaseModel):
    text: str


class RequestFields(BaseModel):
    method: str = "GET"
    url: str = ""
    headers: Dict[str, str] = {}
    body: Optional[str] = None


class ExecuteInput(BaseModel):
    method: str = "GET"
    url: str
    headers: Union[str, Dict[str, str]] = "{}"
    body: Optional[str] = None
    mode: CorsMode = CorsMode.STANDARD


# API Endpoints
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/parse")
async def parse_input(input: InputText):
    """Interpret URL-or-cURL text the way the builder's input field does."""
    session = BuilderSession(executor=executor)
    mode = session.handle_input(input.text)
    draft = session.draft

    return {
        "success": True,
        "mode": mode.value,
        "changed": mode is InputMode.URL or isinstance(session.last_parse, Parsed),
        "request": {
            "method": draft.method,
            "url": draft.url,
            "headers": draft.headers.resolve(),
            "headers_text": draft.headers_text,
            "body": draft.body,
        },
    }


@app.post("/api/generate")
async def generate(fields: RequestFields):
    """Build cURL text from request fields."""
    request = RequestModel(
        method=fields.method.upper(),
        url=fields.url,
        headers=dict(fields.headers),
        body=fields.body or None,
    )
    return {"success": True, "curl": generate_curl(request)}


@app.post("/api/execute")
async def execute(request: ExecuteInput):
    """Execute a request and return the normalized response."""
    if isinstance(request.headers, str):
        headers = RawHeaders(request.headers)
    else:
        headers = ParsedHeaders(dict(request.headers))

    draft = RequestDraft(
        method=request.method.upper(),
        url=request.url,
        headers=headers,
        body=request.body or "",
    )

    try:
        response = await executor.execute(draft, request.mode)
    except HeaderFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TransportError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {"success": True, "response": response.to_dict()}


def run_server(host: str = config.API_HOST, port: int = config.API_PORT):
    """Run the API server."""
    import uvicorn
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
