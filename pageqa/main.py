from __future__ import annotations

import html
import logging

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Form
from fastapi.responses import HTMLResponse, PlainTextResponse

from pageqa.config import Settings, get_settings
from pageqa.pipeline import Err, Pipeline, build_pipeline
from pageqa.schemas import ProcessRequest

load_dotenv()

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_MESSAGE = "An error occurred while processing your request."

FORM_HTML = """
<form action="/process" method="post">
    <label for="url">Enter the website URL:</label>
    <input type="text" id="url" name="url" required>
    <br>
    <label for="query">Enter your query:</label>
    <input type="text" id="query" name="query" required>
    <br>
    <button type="submit">Submit</button>
</form>
"""

app = FastAPI(title="Page QA", version="0.1.0")


def get_pipeline(settings: Settings = Depends(get_settings)) -> Pipeline:
    return build_pipeline(settings)


@app.get("/", response_class=HTMLResponse)
def form() -> str:
    return FORM_HTML


@app.post("/process", response_class=HTMLResponse)
def process(
    url: str = Form(...),
    query: str = Form(...),
    pipeline: Pipeline = Depends(get_pipeline),
):
    req = ProcessRequest(url=url, query=query)
    try:
        outcome = pipeline.run(req)
    except Exception:
        logger.exception("Unexpected failure while processing %s", req.url)
        return PlainTextResponse(ERROR_MESSAGE, status_code=500)

    if isinstance(outcome, Err):
        # detail stays in the server log, the client only sees the generic message
        logger.error("Processing %s failed at %s: %s", req.url, outcome.stage, outcome.error)
        return PlainTextResponse(ERROR_MESSAGE, status_code=500)

    result = outcome.value
    logger.info("Answered %r from %s (%d chunks)", req.query, req.url, result.chunk_count)
    return HTMLResponse(f"<p>ONNX Response: {html.escape(result.answer)}</p>")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("pageqa.main:app", host="127.0.0.1", port=3000)
