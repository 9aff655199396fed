"""HTTP API for the phrase splitter.

WHY: Browser front-ends and other services call the splitter over HTTP.

HOW: app.py defines the FastAPI application, models.py the Pydantic
request and response schemas.
"""
