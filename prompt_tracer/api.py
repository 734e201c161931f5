from fastapi import FastAPI
from pydantic import BaseModel
from fastapi.middleware.cors import CORSMiddleware

# Internal modules
from prompt_tracer.config import EngineConfig
from prompt_tracer.engine import PromptEngine
from prompt_tracer.log import configure_logging
from prompt_tracer.rewrite.templates import STARTER_TEMPLATES
from prompt_tracer.scorer.local_score import Analysis

# -----------------------------
# Initialize shared objects
# -----------------------------

logger = configure_logging()

# Remote optimization needs OPENAI_API_KEY in your environment (or .env);
# without it every /optimize call uses the local rules.
config = EngineConfig.load()
engine = PromptEngine(config)
logger.info("Remote optimization %s", "enabled" if config.remote_allowed else "disabled")

# -----------------------------
# FastAPI app
# -----------------------------
app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# -----------------------------
# Data models
# -----------------------------


class PromptData(BaseModel):
    prompt: str


class OptimizeData(BaseModel):
    prompt: str
    analysis: Analysis | None = None

# -----------------------------
# Endpoints
# -----------------------------


@app.get("/")
def root():
    return {"message": "Prompt Tracer API running"}


@app.post("/analyze")
def analyze_endpoint(data: PromptData):
    """
    Local (no-LLM) analysis for live typing:
    - 12 metrics + overall score and quality level
    - intent and context
    - insights, suggestions, issues, live feedback
    """
    return engine.analyze(data.prompt)


@app.post("/optimize")
async def optimize_endpoint(data: OptimizeData):
    """
    Rewritten prompt; remote model when configured, local rules otherwise.
    """
    analysis = data.analysis or engine.analyze(data.prompt)
    result = await engine.optimize(data.prompt, analysis)
    return {**result.model_dump(), "analysis": analysis}


@app.get("/templates")
def templates_endpoint():
    return STARTER_TEMPLATES
