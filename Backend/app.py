from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load environment variables from .env file
BASE_DIR = Path(__file__).resolve().parent.parent
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Add parent directory to path for package imports
sys.path.insert(0, str(BASE_DIR))
from content import fetch_learn_item
from registry.schema import DocItemModel
from runtime import default_loader

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_PORT = int(os.environ.get("PORT", "8800"))

loader = default_loader


class DocsListResponse(BaseModel):
    items: List[DocItemModel]
    generatedAt: str
    fallback: bool = Field(False, description="True when the built-in fallback registry is served.")


class CategorizedDocsResponse(BaseModel):
    categories: List[str]
    categorized: Dict[str, List[DocItemModel]]


class DocPageResponse(BaseModel):
    item: DocItemModel
    markdown: str


app = FastAPI(title="VintLang Docs Registry", version="1.0.0")

# CORS configuration - use environment variable for allowed origins
# For production, set CORS_ORIGINS="https://vintlang.ekilie.com"
cors_origins_str = os.environ.get("CORS_ORIGINS", "*")
if cors_origins_str == "*":
    allowed_origins = ["*"]
    logger.warning("CORS is set to allow all origins. This is not recommended for production!")
else:
    allowed_origins = [origin.strip() for origin in cors_origins_str.split(",") if origin.strip()]
    logger.info(f"CORS allowed origins: {allowed_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _item_model(item) -> DocItemModel:
    return DocItemModel(**item.to_dict())


@app.get("/health")
def health_check() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/api/docs", response_model=DocsListResponse)
def list_docs() -> DocsListResponse:
    """All documentation items in title order."""
    registry = loader.load()
    return DocsListResponse(
        items=[_item_model(item) for item in registry.items],
        generatedAt=registry.generated_at,
        fallback=loader.used_fallback,
    )


@app.get("/api/docs/categories", response_model=CategorizedDocsResponse)
def list_categories() -> CategorizedDocsResponse:
    """Documentation items grouped for the navigation sidebar."""
    categorized = loader.get_categorized_docs()
    return CategorizedDocsResponse(
        categories=list(categorized.keys()),
        categorized={
            name: [_item_model(item) for item in items]
            for name, items in categorized.items()
        },
    )


@app.get("/api/docs/{filename}", response_model=DocPageResponse)
def get_doc(filename: str) -> DocPageResponse:
    """A single learn page: registry metadata plus its markdown source."""
    item = loader.get_item(filename)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Doc '{filename}' not found.")

    logger.info(f"Serving learn page '{item.filename}'")
    return DocPageResponse(item=_item_model(item), markdown=fetch_learn_item(item.filename))


def run_server(host: str = "0.0.0.0", port: int = DEFAULT_PORT, reload: bool = False) -> None:
    import uvicorn

    uvicorn.run(
        "app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


if __name__ == "__main__":
    run_server(port=DEFAULT_PORT, reload=False)
