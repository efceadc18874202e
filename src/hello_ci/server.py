"""
Demo HTTP service exercised by the CI workflows.
"""
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

GREETING = "Hello World!"

app = FastAPI(title="Hello CI")


@app.get("/", response_class=PlainTextResponse)
async def hello():
    return GREETING


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
